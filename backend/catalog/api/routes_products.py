import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from sqlalchemy.orm import Session

from catalog.api.errors import INTERNAL_ERROR_DETAIL
from catalog.db import get_db
from catalog.repositories.unit_of_work import UnitOfWork
from catalog.schemas.product_schema import ID_MAX, ID_MIN, CreateProductIn, ProductOut, UpdateProductIn
from catalog.services.mediator import Mediator
from catalog.services.product_handlers import ProductNotFoundError
from catalog.services.product_requests import (
    CreateProductCommand,
    DeleteProductCommand,
    GetActiveProductsQuery,
    GetAllProductsQuery,
    GetProductByIdQuery,
    GetProductsByCategoryQuery,
    SearchProductsQuery,
    UpdateProductCommand,
)

log = logging.getLogger("catalog.api.products")

router = APIRouter()


def get_mediator(db: Session = Depends(get_db)) -> Mediator:
    """Dependency to get a Mediator bound to the request's session"""
    return Mediator(UnitOfWork(db))


def _not_found(product_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Product with ID {product_id} not found",
    )


def _internal_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL
    )


@router.get("", response_model=List[ProductOut], summary="List products")
def get_all_products(mediator: Mediator = Depends(get_mediator)):
    try:
        log.info("Retrieving all products from catalog")
        return mediator.send(GetAllProductsQuery())
    except Exception:
        log.exception("Failed to retrieve products from catalog")
        raise _internal_error()


# static paths are declared before /{product_id} so they are not captured by it


@router.get(
    "/category/{category}",
    response_model=List[ProductOut],
    summary="List products in a category",
)
def get_products_by_category(category: str, mediator: Mediator = Depends(get_mediator)):
    try:
        log.info("Retrieving products by category: %s", category)
        return mediator.send(GetProductsByCategoryQuery(category))
    except Exception:
        log.exception("Failed to retrieve products by category: %s", category)
        raise _internal_error()


@router.get("/search", response_model=List[ProductOut], summary="Search products")
def search_products(
    search_term: Optional[str] = Query(
        None, alias="searchTerm", description="matched against name and description"
    ),
    mediator: Mediator = Depends(get_mediator),
):
    if not search_term or not search_term.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Search term cannot be empty"
        )
    try:
        log.info("Searching products with term: %s", search_term)
        return mediator.send(SearchProductsQuery(search_term))
    except Exception:
        log.exception("Failed to search products with term: %s", search_term)
        raise _internal_error()


@router.get("/active", response_model=List[ProductOut], summary="List active products")
def get_active_products(mediator: Mediator = Depends(get_mediator)):
    try:
        log.info("Retrieving active products from catalog")
        return mediator.send(GetActiveProductsQuery())
    except Exception:
        log.exception("Failed to retrieve active products")
        raise _internal_error()


@router.get("/{product_id}", response_model=ProductOut, summary="Get product by ID")
def get_product(
    product_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    mediator: Mediator = Depends(get_mediator),
):
    try:
        log.info("Retrieving product with ID: %s", product_id)
        product = mediator.send(GetProductByIdQuery(product_id))
    except Exception:
        log.exception("Failed to retrieve product with ID: %s", product_id)
        raise _internal_error()
    if product is None:
        log.warning("Product with ID %s not found", product_id)
        raise _not_found(product_id)
    return product


@router.post(
    "",
    response_model=ProductOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
)
def create_product(
    payload: CreateProductIn,
    response: Response,
    mediator: Mediator = Depends(get_mediator),
):
    """
    Create a new product. ``isActive`` defaults to true; ``id``, ``createdAt``
    and ``updatedAt`` are assigned by the server.
    """
    try:
        log.info("Creating new product: %s", payload.name)
        created = mediator.send(CreateProductCommand(payload))
    except Exception:
        log.exception("Failed to create product: %s", payload.name)
        raise _internal_error()
    response.headers["Location"] = f"/api/products/{created.id}"
    return created


@router.put("/{product_id}", response_model=ProductOut, summary="Update product")
def update_product(
    payload: UpdateProductIn,
    product_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    mediator: Mediator = Depends(get_mediator),
):
    """
    Replace every mutable field of an existing product. ``id`` and
    ``createdAt`` are kept, ``updatedAt`` is refreshed.
    """
    try:
        log.info("Updating product with ID: %s", product_id)
        return mediator.send(UpdateProductCommand(product_id, payload))
    except ProductNotFoundError:
        log.warning("Product with ID %s not found for update", product_id)
        raise _not_found(product_id)
    except Exception:
        log.exception("Failed to update product with ID: %s", product_id)
        raise _internal_error()


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete product",
)
def delete_product(
    product_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    mediator: Mediator = Depends(get_mediator),
):
    try:
        log.info("Deleting product with ID: %s", product_id)
        deleted = mediator.send(DeleteProductCommand(product_id))
    except Exception:
        log.exception("Failed to delete product with ID: %s", product_id)
        raise _internal_error()
    if not deleted:
        log.warning("Product with ID %s not found for deletion", product_id)
        raise _not_found(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
