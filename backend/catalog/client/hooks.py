"""
Client-side state containers over ProductClient.

Each one exposes ``loading``/``error`` alongside its data, the way the UI
reads them. Failures never raise out of a hook; they land in ``error``.
"""
from typing import Any, Dict, List, Optional

from catalog.client.product_client import ProductApiError, ProductClient


class ProductsStore:
    """All products, loaded on construction unless ``fetch=False``."""

    def __init__(self, client: ProductClient, fetch: bool = True):
        self.client = client
        self.products: List[Dict[str, Any]] = []
        self.loading = fetch
        self.error: Optional[str] = None
        if fetch:
            self.refetch()

    def refetch(self) -> None:
        self.loading = True
        self.error = None
        try:
            self.products = self.client.get_all_products()
        except ProductApiError as e:
            self.error = str(e) or "Failed to fetch products"
        finally:
            self.loading = False


class ProductStore:
    def __init__(self, client: ProductClient, product_id: int, fetch: bool = True):
        self.client = client
        self.product_id = product_id
        self.product: Optional[Dict[str, Any]] = None
        self.loading = fetch
        self.error: Optional[str] = None
        if fetch:
            self.load()

    def load(self) -> None:
        self.loading = True
        self.error = None
        try:
            self.product = self.client.get_product_by_id(self.product_id)
        except ProductApiError as e:
            self.error = str(e) or "Failed to fetch product"
        finally:
            self.loading = False


class ProductOperations:
    """Create/update/delete. Results are only returned once the API confirms them."""

    def __init__(self, client: ProductClient):
        self.client = client
        self.loading = False
        self.error: Optional[str] = None

    def create_product(self, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.loading = True
        self.error = None
        try:
            return self.client.create_product(data)
        except ProductApiError as e:
            self.error = str(e) or "Failed to create product"
            return None
        finally:
            self.loading = False

    def update_product(self, product_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.loading = True
        self.error = None
        try:
            return self.client.update_product(product_id, data)
        except ProductApiError as e:
            self.error = str(e) or "Failed to update product"
            return None
        finally:
            self.loading = False

    def delete_product(self, product_id: int) -> bool:
        self.loading = True
        self.error = None
        try:
            self.client.delete_product(product_id)
            return True
        except ProductApiError as e:
            self.error = str(e) or "Failed to delete product"
            return False
        finally:
            self.loading = False


class ProductSearch:
    def __init__(self, client: ProductClient):
        self.client = client
        self.search_results: List[Dict[str, Any]] = []
        self.loading = False
        self.error: Optional[str] = None

    def search_products(self, search_term: str) -> None:
        # blank terms never reach the API
        if not search_term.strip():
            self.search_results = []
            return
        self.loading = True
        self.error = None
        try:
            self.search_results = self.client.search_products(search_term)
        except ProductApiError as e:
            self.error = str(e) or "Failed to search products"
            self.search_results = []
        finally:
            self.loading = False

    def clear_search(self) -> None:
        self.search_results = []
        self.error = None
