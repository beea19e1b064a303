from catalog.models.product import Product
from catalog.schemas.product_schema import CreateProductIn, ProductOut, UpdateProductIn


def to_product_out(p: Product) -> ProductOut:
    return ProductOut(
        id=p.id,
        name=p.name,
        description=p.description,
        price=p.price,
        stock_quantity=p.stock_quantity,
        category=p.category,
        image_url=p.image_url,
        sku=p.sku,
        is_active=p.is_active,
        created_at=p.created_at,
        updated_at=p.updated_at,
    )


def new_product_from(data: CreateProductIn) -> Product:
    """Build an unsaved Product; id and timestamps are assigned by the repository."""
    return Product(
        name=data.name,
        description=data.description,
        price=data.price,
        stock_quantity=data.stock_quantity,
        category=data.category,
        image_url=data.image_url,
        sku=data.sku,
        is_active=True if data.is_active is None else data.is_active,
    )


def apply_update(data: UpdateProductIn, product: Product) -> Product:
    # id and created_at are never touched here
    product.name = data.name
    product.description = data.description
    product.price = data.price
    product.stock_quantity = data.stock_quantity
    product.category = data.category
    product.image_url = data.image_url
    product.sku = data.sku
    product.is_active = data.is_active
    return product
