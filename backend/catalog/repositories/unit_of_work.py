from typing import Optional

from sqlalchemy.orm import Session

from catalog.repositories.product_repo import ProductRepository


class UnitOfWork:
    """
    Save boundary around a single Session. Handlers stage changes through
    ``products`` and call ``save_changes()`` once.
    """

    def __init__(self, db: Session):
        self.db = db
        self._products: Optional[ProductRepository] = None

    @property
    def products(self) -> ProductRepository:
        if self._products is None:
            self._products = ProductRepository(self.db)
        return self._products

    def save_changes(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def close(self) -> None:
        self.db.close()

    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
