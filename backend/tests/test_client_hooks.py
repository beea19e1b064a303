import pytest
import requests
from fastapi.testclient import TestClient

from catalog.client.hooks import ProductOperations, ProductSearch, ProductsStore, ProductStore
from catalog.client.product_client import ProductApiError, ProductClient
from catalog.client.settings import ClientSettings
from catalog.main import app

quiet = ClientSettings(ENABLE_REQUEST_LOGGING=False, ENABLE_DEBUG_LOGS=False)


@pytest.fixture
def api():
    return ProductClient(
        base_url="http://testserver/api", session=TestClient(app), settings=quiet
    )


class _Unreachable:
    """Stands in for a requests.Session whose server is down."""

    def request(self, method, url, **kwargs):
        raise requests.ConnectionError(f"cannot reach {url}")


class _HtmlPage:
    """A server that answers 200 with something other than JSON."""

    def request(self, method, url, **kwargs):
        resp = requests.Response()
        resp.status_code = 200
        resp._content = b"<html>maintenance</html>"
        return resp


def test_client_settings_defaults():
    s = ClientSettings()
    assert s.API_BASE_URL == "http://localhost:5073/api"
    assert s.API_TIMEOUT == 10000
    assert s.DEFAULT_CURRENCY == "LKR"
    assert s.ITEMS_PER_PAGE == 10


def test_client_timeout_is_taken_from_settings_in_seconds():
    c = ProductClient(session=_Unreachable(), settings=quiet)
    assert c.timeout == 10.0


def test_client_raises_api_error_with_status(api):
    with pytest.raises(ProductApiError) as exc:
        api.get_product_by_id(999)
    assert exc.value.status_code == 404
    assert str(exc.value) == "Failed to fetch product"


def test_client_wraps_transport_errors():
    c = ProductClient(base_url="http://nowhere/api", session=_Unreachable(), settings=quiet)
    with pytest.raises(ProductApiError) as exc:
        c.get_all_products()
    assert exc.value.status_code is None
    assert str(exc.value) == "Failed to fetch products"


def test_client_category_with_spaces(api):
    api.create_product({"name": "Bean Bag", "price": 49, "stockQuantity": 3, "category": "Home Decor"})
    assert [p["name"] for p in api.get_products_by_category("home decor")] == ["Bean Bag"]


def test_products_store_loads_on_construction(api):
    store = ProductsStore(api)
    assert store.loading is False
    assert store.error is None
    assert [p["name"] for p in store.products] == ["Laptop Computer", "Wireless Mouse", "Office Chair"]


def test_products_store_reports_error():
    c = ProductClient(session=_Unreachable(), settings=quiet)
    store = ProductsStore(c)
    assert store.products == []
    assert store.error == "Failed to fetch products"
    assert store.loading is False


def test_product_store_missing(api):
    store = ProductStore(api, 999)
    assert store.product is None
    assert store.error == "Failed to fetch product"


def test_operations_round_trip(api):
    ops = ProductOperations(api)
    created = ops.create_product({"name": "Desk Lamp", "price": 24.5, "stockQuantity": 12})
    assert created is not None and created["isActive"] is True

    body = {k: created[k] for k in ("name", "description", "category", "imageUrl", "sku", "isActive")}
    updated = ops.update_product(created["id"], {**body, "price": 19.99, "stockQuantity": 12})
    assert updated["price"] == 19.99

    assert ops.delete_product(created["id"]) is True
    assert ops.error is None
    assert ops.delete_product(created["id"]) is False
    assert ops.error == "Failed to delete product"


def test_failed_create_leaves_state_unchanged(api):
    ops = ProductOperations(api)
    store = ProductsStore(api)
    assert ops.create_product({"name": "", "price": 1, "stockQuantity": 1}) is None
    assert ops.error == "Failed to create product"
    assert len(store.products) == 3
    store.refetch()
    assert len(store.products) == 3


def test_search_skips_blank_terms():
    search = ProductSearch(ProductClient(session=_Unreachable(), settings=quiet))
    search.search_products("   ")
    assert search.search_results == []
    assert search.error is None


def test_search_and_clear(api):
    search = ProductSearch(api)
    search.search_products("chair")
    assert [p["id"] for p in search.search_results] == [3]
    search.clear_search()
    assert search.search_results == []


def test_non_json_success_body_lands_in_error():
    c = ProductClient(base_url="http://proxy/api", session=_HtmlPage(), settings=quiet)
    with pytest.raises(ProductApiError) as exc:
        c.get_product_by_id(1)
    assert exc.value.status_code == 200
    store = ProductsStore(c)
    assert store.products == []
    assert store.error == "Failed to fetch products"
    # delete has no body to parse
    assert ProductOperations(c).delete_product(1) is True
