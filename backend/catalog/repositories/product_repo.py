from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from catalog.models.product import Product


def utcnow() -> datetime:
    # stored naive; SQLite drops tzinfo on the way back anyway
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Product]:
        return self.db.query(Product).order_by(Product.id).all()

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def get_by_category(self, category: str) -> List[Product]:
        """
        Case-insensitive equality on category. Rows without a category never match.
        """
        return (
            self.db.query(Product)
            .filter(Product.category.isnot(None))
            .filter(func.lower(Product.category) == category.lower())
            .order_by(Product.id)
            .all()
        )

    def search(self, term: str) -> List[Product]:
        """
        Case-insensitive substring match on name or description. The term is
        matched literally, LIKE wildcards in it are escaped.
        """
        like = f"%{_escape_like(term)}%"
        return (
            self.db.query(Product)
            .filter(
                or_(
                    Product.name.ilike(like, escape="\\"),
                    Product.description.ilike(like, escape="\\"),
                )
            )
            .order_by(Product.id)
            .all()
        )

    def get_active(self) -> List[Product]:
        return (
            self.db.query(Product)
            .filter(Product.is_active == True)  # noqa: E712
            .order_by(Product.id)
            .all()
        )

    def add(self, product: Product) -> Product:
        now = utcnow()
        product.created_at = now
        product.updated_at = now
        self.db.add(product)
        self.db.flush()  # ensure id assigned
        return product

    def update(self, product: Product) -> Product:
        product.updated_at = utcnow()
        self.db.add(product)
        self.db.flush()
        return product

    def delete(self, product_id: int) -> bool:
        product = self.get_by_id(product_id)
        if not product:
            return False
        self.db.delete(product)
        return True

    def exists(self, product_id: int) -> bool:
        return (
            self.db.query(Product.id).filter(Product.id == product_id).first()
            is not None
        )

    def count(self) -> int:
        return self.db.query(func.count(Product.id)).scalar() or 0
