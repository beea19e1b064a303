from dataclasses import dataclass
from decimal import Decimal

import pytest

from catalog.repositories.unit_of_work import UnitOfWork
from catalog.schemas.product_schema import CreateProductIn, UpdateProductIn
from catalog.services.mediator import HandlerNotRegistered, Mediator
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


@pytest.fixture
def mediator(db):
    return Mediator(UnitOfWork(db))


def _create_payload(**overrides):
    data = {"name": "Desk Lamp", "price": "24.50", "stockQuantity": 12}
    data.update(overrides)
    return CreateProductIn.model_validate(data)


def _update_payload(**overrides):
    data = {
        "name": "Laptop Computer",
        "description": "High-performance laptop for professional use",
        "price": "899.99",
        "stockQuantity": 10,
        "category": "Electronics",
        "sku": "LAP001",
        "isActive": True,
    }
    data.update(overrides)
    return UpdateProductIn.model_validate(data)


def test_create_defaults_active_and_assigns_timestamps(mediator):
    created = mediator.send(CreateProductCommand(_create_payload()))
    assert created.id == 4
    assert created.is_active is True
    assert created.created_at == created.updated_at
    assert created.price == Decimal("24.50")


def test_create_respects_explicit_inactive(mediator):
    created = mediator.send(CreateProductCommand(_create_payload(isActive=False)))
    assert created.is_active is False


def test_update_preserves_id_and_created_at(mediator):
    before = mediator.send(GetProductByIdQuery(1))
    after = mediator.send(UpdateProductCommand(1, _update_payload()))
    assert after.id == 1
    assert after.created_at == before.created_at
    assert after.updated_at >= before.updated_at
    assert after.price == Decimal("899.99")
    assert after.stock_quantity == before.stock_quantity


def test_update_overwrites_optional_fields_with_null(mediator):
    after = mediator.send(UpdateProductCommand(1, _update_payload(description=None, sku=None)))
    assert after.description is None
    assert after.sku is None


def test_update_missing_raises_not_found(mediator):
    with pytest.raises(ProductNotFoundError):
        mediator.send(UpdateProductCommand(999, _update_payload()))


def test_delete_missing_returns_false_without_writes(mediator):
    assert mediator.send(DeleteProductCommand(999)) is False
    assert len(mediator.send(GetAllProductsQuery())) == 3


def test_delete_existing_then_get_returns_none(mediator):
    assert mediator.send(DeleteProductCommand(2)) is True
    assert mediator.send(GetProductByIdQuery(2)) is None


def test_queries_map_to_product_out(mediator):
    assert [p.id for p in mediator.send(GetProductsByCategoryQuery("furniture"))] == [3]
    assert [p.id for p in mediator.send(SearchProductsQuery("Mouse"))] == [2]
    assert [p.id for p in mediator.send(GetActiveProductsQuery())] == [1, 2, 3]


def test_search_is_repeatable(mediator):
    first = mediator.send(SearchProductsQuery("office"))
    second = mediator.send(SearchProductsQuery("office"))
    assert first == second


def test_unregistered_request_type(mediator):
    @dataclass(frozen=True)
    class ArchiveProductCommand:
        id: int

    with pytest.raises(HandlerNotRegistered):
        mediator.send(ArchiveProductCommand(1))
