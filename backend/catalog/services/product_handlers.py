from typing import List, Optional

from catalog.schemas.product_schema import ProductOut
from catalog.services.mediator import RequestHandler, handles
from catalog.services.product_mapping import apply_update, new_product_from, to_product_out
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


class ProductNotFoundError(Exception):
    def __init__(self, product_id: int):
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


# --- commands ---


@handles(CreateProductCommand)
class CreateProductHandler(RequestHandler):
    def handle(self, request: CreateProductCommand) -> ProductOut:
        product = self.uow.products.add(new_product_from(request.product))
        self.uow.save_changes()
        return to_product_out(product)


@handles(UpdateProductCommand)
class UpdateProductHandler(RequestHandler):
    def handle(self, request: UpdateProductCommand) -> ProductOut:
        existing = self.uow.products.get_by_id(request.id)
        if existing is None:
            raise ProductNotFoundError(request.id)
        product = self.uow.products.update(apply_update(request.product, existing))
        self.uow.save_changes()
        return to_product_out(product)


@handles(DeleteProductCommand)
class DeleteProductHandler(RequestHandler):
    def handle(self, request: DeleteProductCommand) -> bool:
        """Returns False when there is nothing to delete; the store is left untouched."""
        if not self.uow.products.exists(request.id):
            return False
        deleted = self.uow.products.delete(request.id)
        if deleted:
            self.uow.save_changes()
        return deleted


# --- queries ---


@handles(GetAllProductsQuery)
class GetAllProductsHandler(RequestHandler):
    def handle(self, request: GetAllProductsQuery) -> List[ProductOut]:
        return [to_product_out(p) for p in self.uow.products.get_all()]


@handles(GetProductByIdQuery)
class GetProductByIdHandler(RequestHandler):
    def handle(self, request: GetProductByIdQuery) -> Optional[ProductOut]:
        product = self.uow.products.get_by_id(request.id)
        return to_product_out(product) if product is not None else None


@handles(GetProductsByCategoryQuery)
class GetProductsByCategoryHandler(RequestHandler):
    def handle(self, request: GetProductsByCategoryQuery) -> List[ProductOut]:
        return [to_product_out(p) for p in self.uow.products.get_by_category(request.category)]


@handles(SearchProductsQuery)
class SearchProductsHandler(RequestHandler):
    def handle(self, request: SearchProductsQuery) -> List[ProductOut]:
        return [to_product_out(p) for p in self.uow.products.search(request.search_term)]


@handles(GetActiveProductsQuery)
class GetActiveProductsHandler(RequestHandler):
    def handle(self, request: GetActiveProductsQuery) -> List[ProductOut]:
        return [to_product_out(p) for p in self.uow.products.get_active()]
