from decimal import Decimal

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from catalog.db.seed import seed_products
from catalog.models.product import Product
from catalog.repositories.product_repo import ProductRepository, utcnow
from catalog.repositories.unit_of_work import UnitOfWork


def _product(**overrides):
    fields = dict(name="Desk Lamp", price=Decimal("24.50"), stock_quantity=12, is_active=True)
    fields.update(overrides)
    return Product(**fields)


def test_get_all_returns_seeded_products_in_id_order(db):
    repo = ProductRepository(db)
    names = [p.name for p in repo.get_all()]
    assert names == ["Laptop Computer", "Wireless Mouse", "Office Chair"]


def test_get_by_id_missing_returns_none(db):
    assert ProductRepository(db).get_by_id(999) is None


def test_add_assigns_id_and_equal_timestamps(db):
    repo = ProductRepository(db)
    p = repo.add(_product())
    assert p.id is not None
    assert p.created_at == p.updated_at


def test_update_refreshes_updated_at_only(db):
    repo = ProductRepository(db)
    p = repo.add(_product())
    db.commit()
    created_at = p.created_at
    p.price = Decimal("19.99")
    repo.update(p)
    db.commit()
    stored = repo.get_by_id(p.id)
    assert stored.created_at == created_at
    assert stored.updated_at >= stored.created_at
    assert stored.price == Decimal("19.99")


def test_category_match_is_case_insensitive(db):
    repo = ProductRepository(db)
    repo.add(_product(name="Shelf", category=None))
    db.commit()
    lower = {p.id for p in repo.get_by_category("electronics")}
    upper = {p.id for p in repo.get_by_category("ELECTRONICS")}
    assert lower == upper == {1, 2}
    assert repo.get_by_category("Garden") == []


def test_search_matches_name_or_description(db):
    repo = ProductRepository(db)
    # "ergonomic" only appears in descriptions
    assert {p.id for p in repo.search("ERGONOMIC")} == {2, 3}
    assert {p.id for p in repo.search("laptop")} == {1}
    assert repo.search("nothing-like-this") == []


def test_search_treats_like_wildcards_literally(db):
    repo = ProductRepository(db)
    repo.add(_product(name="100% Cotton Towel"))
    db.commit()
    assert [p.name for p in repo.search("100%")] == ["100% Cotton Towel"]
    assert repo.search("_") == []


def test_get_active_excludes_inactive(db):
    repo = ProductRepository(db)
    hidden = repo.add(_product(is_active=False))
    db.commit()
    ids = {p.id for p in repo.get_active()}
    assert hidden.id not in ids
    assert {1, 2, 3} <= ids


def test_delete_and_exists(db):
    repo = ProductRepository(db)
    assert repo.exists(1)
    assert repo.delete(1) is True
    db.commit()
    assert not repo.exists(1)
    assert repo.delete(1) is False


def test_unit_of_work_rolls_back_failed_save(db):
    uow = UnitOfWork(db)
    uow.products.add(_product())
    # violates the price CHECK constraint at flush time
    db.add(_product(name="Broken", price=Decimal("-1"), created_at=utcnow(), updated_at=utcnow()))
    with pytest.raises(IntegrityError):
        uow.save_changes()
    assert uow.products.count() == 3


def test_seed_with_a_bad_entry_writes_nothing(db):
    entries = [
        {"name": "Desk Lamp", "price": 24.5, "stockQuantity": 12},
        {"name": "", "price": 1, "stockQuantity": 1},
    ]
    with pytest.raises(ValidationError):
        seed_products(db, entries)
    assert ProductRepository(db).count() == 3
    assert seed_products(db, entries[:1]) == 1
    assert ProductRepository(db).count() == 4
