from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, Numeric, String
from catalog.db import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(200), nullable=False, index=True)
    description = Column(String(1000), nullable=True)
    price = Column(Numeric(18, 2), nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)
    category = Column(String(100), nullable=True, index=True)
    image_url = Column(String(500), nullable=True)
    sku = Column(String(50), nullable=True, index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_price_non_negative"),
        CheckConstraint("stock_quantity >= 0", name="check_stock_non_negative"),
    )

    def __repr__(self):
        return f"<Product id={self.id} name={self.name} sku={self.sku}>"
