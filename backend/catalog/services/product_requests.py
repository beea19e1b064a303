"""
Command and query objects sent through the Mediator.
"""
from dataclasses import dataclass

from catalog.schemas.product_schema import CreateProductIn, UpdateProductIn


@dataclass(frozen=True)
class CreateProductCommand:
    product: CreateProductIn


@dataclass(frozen=True)
class UpdateProductCommand:
    id: int
    product: UpdateProductIn


@dataclass(frozen=True)
class DeleteProductCommand:
    id: int


@dataclass(frozen=True)
class GetAllProductsQuery:
    pass


@dataclass(frozen=True)
class GetProductByIdQuery:
    id: int


@dataclass(frozen=True)
class GetProductsByCategoryQuery:
    category: str


@dataclass(frozen=True)
class SearchProductsQuery:
    search_term: str


@dataclass(frozen=True)
class GetActiveProductsQuery:
    pass
