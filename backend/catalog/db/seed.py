from decimal import Decimal

from sqlalchemy.orm import Session

from catalog.repositories.unit_of_work import UnitOfWork
from catalog.schemas.product_schema import CreateProductIn
from catalog.services.mediator import Mediator
from catalog.services.product_requests import CreateProductCommand

DEMO_PRODUCTS = [
    {
        "name": "Laptop Computer",
        "description": "High-performance laptop for professional use",
        "price": Decimal("999.99"),
        "stockQuantity": 10,
        "category": "Electronics",
        "sku": "LAP001",
    },
    {
        "name": "Wireless Mouse",
        "description": "Ergonomic wireless mouse with long battery life",
        "price": Decimal("29.99"),
        "stockQuantity": 50,
        "category": "Electronics",
        "sku": "MSE001",
    },
    {
        "name": "Office Chair",
        "description": "Comfortable ergonomic office chair",
        "price": Decimal("199.99"),
        "stockQuantity": 25,
        "category": "Furniture",
        "sku": "CHR001",
    },
]


def seed_products(db: Session, entries) -> int:
    """Create every entry through the create command. Entries are validated
    like API payloads, all of them before the first insert, so a bad entry
    raises pydantic.ValidationError and nothing is written."""
    payloads = [CreateProductIn.model_validate(entry) for entry in entries]
    mediator = Mediator(UnitOfWork(db))
    for payload in payloads:
        mediator.send(CreateProductCommand(payload))
    return len(payloads)


def seed_demo_products(db: Session) -> int:
    uow = UnitOfWork(db)
    if uow.products.count():
        return 0
    return seed_products(db, DEMO_PRODUCTS)
