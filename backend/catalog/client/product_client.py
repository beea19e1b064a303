"""
HTTP client for the product catalog API.
"""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from catalog.client.settings import ClientSettings

log = logging.getLogger("catalog.client")


class ProductApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProductClient:
    """
    Thin wrapper over the REST endpoints. Every failure, transport or HTTP,
    surfaces as ProductApiError carrying a user-facing message.

    ``session`` may be any object with the requests.Session call interface
    (FastAPI's TestClient works).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session=None,
        settings: Optional[ClientSettings] = None,
    ):
        self.settings = settings or ClientSettings()
        self.base_url = (base_url or self.settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else self.settings.API_TIMEOUT / 1000.0
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(self, method: str, path: str, failure: str, parse: bool = True, **kwargs):
        url = self._url(path)
        if self.settings.ENABLE_REQUEST_LOGGING:
            log.info("Making %s request to %s", method, url)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            if self.settings.ENABLE_DEBUG_LOGS:
                log.error("API Error: %s", e)
            raise ProductApiError(failure) from e
        if resp.status_code >= 400:
            if self.settings.ENABLE_DEBUG_LOGS:
                log.error("API Error: %s %s", resp.status_code, resp.text)
            raise ProductApiError(failure, status_code=resp.status_code)
        if not parse:
            return None
        try:
            return resp.json()
        except ValueError as e:
            # requests.JSONDecodeError is a ValueError
            if self.settings.ENABLE_DEBUG_LOGS:
                log.error("API Error: unreadable body from %s: %s", url, e)
            raise ProductApiError(failure, status_code=resp.status_code) from e

    def get_all_products(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/products", "Failed to fetch products")

    def get_product_by_id(self, product_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/products/{product_id}", "Failed to fetch product")

    def get_products_by_category(self, category: str) -> List[Dict[str, Any]]:
        path = f"/products/category/{quote(category, safe='')}"
        return self._request("GET", path, "Failed to fetch products by category")

    def search_products(self, search_term: str) -> List[Dict[str, Any]]:
        return self._request(
            "GET",
            "/products/search",
            "Failed to search products",
            params={"searchTerm": search_term},
        )

    def get_active_products(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/products/active", "Failed to fetch active products")

    def create_product(self, product: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/products", "Failed to create product", json=product)

    def update_product(self, product_id: int, product: Dict[str, Any]) -> Dict[str, Any]:
        return self._request(
            "PUT", f"/products/{product_id}", "Failed to update product", json=product
        )

    def delete_product(self, product_id: int) -> None:
        self._request("DELETE", f"/products/{product_id}", "Failed to delete product", parse=False)
