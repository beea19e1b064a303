"""
Pydantic schemas for the product request/response contract.

JSON uses camelCase (``stockQuantity``, ``imageUrl``, ``isActive``...); Python
code uses the snake_case attribute names.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

NAME_MAX = 200
DESCRIPTION_MAX = 1000
CATEGORY_MAX = 100
IMAGE_URL_MAX = 500
SKU_MAX = 50
STOCK_MAX = 2147483647

# ids are 32-bit integers on the wire
ID_MIN = -2147483648
ID_MAX = 2147483647

# Numeric(18, 2)
PRICE_MAX = Decimal("9999999999999999.99")
CENT = Decimal("0.01")

URL_SCHEMES = ("http", "https", "ftp")

# messages for fields that are absent from the payload
REQUIRED_MESSAGES = {
    "name": "Product name is required",
    "price": "Price is required",
    "stockQuantity": "Stock quantity is required",
    "isActive": "Active status is required",
}

Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def is_valid_url(value: str) -> bool:
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme.lower() in URL_SCHEMES and bool(parts.netloc)


def _check_length(value: Optional[str], limit: int, label: str) -> Optional[str]:
    if value is not None and len(value) > limit:
        raise ValueError(f"{label} cannot exceed {limit} characters")
    return value


class ProductIn(BaseModel):
    """Fields shared by the create and update payloads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    description: Optional[str] = None
    price: Decimal
    stock_quantity: int
    category: Optional[str] = None
    image_url: Optional[str] = None
    sku: Optional[str] = None

    @field_validator("description", "category", "image_url", "sku", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Product name is required")
        return _check_length(v, NAME_MAX, "Product name")

    @field_validator("description")
    @classmethod
    def check_description(cls, v):
        return _check_length(v, DESCRIPTION_MAX, "Description")

    @field_validator("price")
    @classmethod
    def check_price(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price must be greater than or equal to 0")
        if v > PRICE_MAX:
            raise ValueError(f"Price cannot exceed {PRICE_MAX}")
        if v != v.quantize(CENT):
            raise ValueError("Price cannot have more than 2 decimal places")
        return v

    @field_validator("stock_quantity")
    @classmethod
    def check_stock_quantity(cls, v: int) -> int:
        if v < 0 or v > STOCK_MAX:
            raise ValueError("Stock quantity must be greater than or equal to 0")
        return v

    @field_validator("category")
    @classmethod
    def check_category(cls, v):
        return _check_length(v, CATEGORY_MAX, "Category")

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, v):
        _check_length(v, IMAGE_URL_MAX, "Image URL")
        if v is not None and not is_valid_url(v):
            raise ValueError("Please provide a valid URL")
        return v

    @field_validator("sku")
    @classmethod
    def check_sku(cls, v):
        return _check_length(v, SKU_MAX, "SKU")


class CreateProductIn(ProductIn):
    is_active: Optional[bool] = None


class UpdateProductIn(ProductIn):
    is_active: bool


class ProductOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    description: Optional[str] = None
    price: Money
    stock_quantity: int
    category: Optional[str] = None
    image_url: Optional[str] = None
    sku: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
