"""
Form and list-view logic for the product UI.

Checks here only give early feedback; the API validates every field again.
"""
import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from catalog.schemas.product_schema import is_valid_url

LIMITS = {
    "name": 50,
    "description": 500,
    "price": 10,
    "stockQuantity": 10,
    "category": 50,
    "sku": 50,
    "imageUrl": 500,
}

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _parse_price(raw: str) -> Optional[float]:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_int(raw: str) -> Optional[int]:
    m = _INT_PREFIX.match(raw)
    return int(m.group(1)) if m else None


def _price_text(price) -> str:
    text = format(float(price), "f")
    return text.rstrip("0").rstrip(".") if "." in text else text


@dataclass
class ProductForm:
    name: str = ""
    description: str = ""
    price: str = ""
    stock_quantity: str = ""
    category: str = ""
    image_url: str = ""
    sku: str = ""
    is_active: bool = True
    errors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_product(cls, product: Dict[str, Any]) -> "ProductForm":
        """Pre-fill the form from an API product for editing."""
        return cls(
            name=product["name"],
            description=product.get("description") or "",
            price=_price_text(product["price"]),
            stock_quantity=str(product["stockQuantity"]),
            category=product.get("category") or "",
            image_url=product.get("imageUrl") or "",
            sku=product.get("sku") or "",
            is_active=product.get("isActive", True),
        )

    def validate(self) -> bool:
        errors: Dict[str, str] = {}

        if not self.name.strip():
            errors["name"] = "Product name is required"
        elif len(self.name) > LIMITS["name"]:
            errors["name"] = f"Product name cannot exceed {LIMITS['name']} characters"

        if len(self.description) > LIMITS["description"]:
            errors["description"] = f"Description cannot exceed {LIMITS['description']} characters"

        price = _parse_price(self.price) if self.price else None
        if price is None or price < 0:
            errors["price"] = "Valid price is required"
        elif len(self.price) > LIMITS["price"]:
            errors["price"] = f"Price cannot exceed {LIMITS['price']} digits"

        stock = _parse_int(self.stock_quantity) if self.stock_quantity else None
        if stock is None or stock < 0:
            errors["stockQuantity"] = "Valid stock quantity is required"
        elif len(self.stock_quantity) > LIMITS["stockQuantity"]:
            errors["stockQuantity"] = (
                f"Stock quantity cannot exceed {LIMITS['stockQuantity']} digits"
            )

        if len(self.category) > LIMITS["category"]:
            errors["category"] = f"Category cannot exceed {LIMITS['category']} characters"

        if len(self.sku) > LIMITS["sku"]:
            errors["sku"] = f"SKU cannot exceed {LIMITS['sku']} characters"

        if len(self.image_url) > LIMITS["imageUrl"]:
            errors["imageUrl"] = f"Image URL cannot exceed {LIMITS['imageUrl']} characters"
        elif self.image_url and not is_valid_url(self.image_url):
            errors["imageUrl"] = "Please provide a valid URL"

        self.errors = errors
        return not errors

    def is_valid(self) -> bool:
        return self.validate()

    def to_payload(self) -> Dict[str, Any]:
        """API body from the form. Call validate() first; blank optionals are omitted."""
        payload: Dict[str, Any] = {
            "name": self.name.strip(),
            "price": _parse_price(self.price),
            "stockQuantity": _parse_int(self.stock_quantity),
            "isActive": self.is_active,
        }
        for key, value in (
            ("description", self.description),
            ("category", self.category),
            ("imageUrl", self.image_url),
            ("sku", self.sku),
        ):
            if value.strip():
                payload[key] = value.strip()
        return payload


def filter_products(products: List[Dict[str, Any]], term: str) -> List[Dict[str, Any]]:
    """Local filter on name, description and category."""
    needle = term.lower()
    return [
        p
        for p in products
        if needle in p["name"].lower()
        or needle in (p.get("description") or "").lower()
        or needle in (p.get("category") or "").lower()
    ]


def format_price(price, currency: str) -> str:
    return f"{currency} {float(price):,.2f}"


def paginate(items: List[Any], page: int, per_page: int) -> Tuple[List[Any], int]:
    """Return the items on ``page`` (1-based) and the total page count."""
    total_pages = max(1, math.ceil(len(items) / per_page)) if per_page > 0 else 1
    page = min(max(page, 1), total_pages)
    start = (page - 1) * per_page
    return items[start:start + per_page], total_pages
