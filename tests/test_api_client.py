"""Tests for CatalogApiClient request building and error conversion."""
from unittest.mock import MagicMock

import pytest
import requests

from src.models.product import Product
from src.services.api_client import CatalogApiClient, CatalogApiError

PRODUCT_JSON = {
    "id": 7,
    "productId": "PRD-7",
    "name": "Desk Lamp",
    "image": "https://images.unsplash.com/photo-1",
    "description": "Warm light for late nights",
    "category": "Home",
    "price": 24.5,
    "quantity": 3,
    "status": "In Stock",
    "createdAt": "2024-01-01T00:00:00Z",
}


def _response(status: int = 200, body=None, json_error: bool = False):
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    if json_error:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def http():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(http):
    return CatalogApiClient(base_url="https://api.example.com/", timeout=5, session=http)


class TestRequests:
    def test_bearer_and_json_headers(self, client, http):
        http.request.return_value = _response(body=[PRODUCT_JSON])

        client.list_products("tok")

        method, url = http.request.call_args[0]
        kwargs = http.request.call_args[1]
        assert method == "GET"
        assert url == "https://api.example.com/api/products"
        assert kwargs["headers"] == {
            "Content-Type": "application/json",
            "Authorization": "Bearer tok",
        }
        assert kwargs["timeout"] == 5

    def test_filter_query_omits_empty_values(self, client, http):
        http.request.return_value = _response(body=[])

        client.filter_products({"minPrice": "10", "maxPrice": "50", "name": ""}, "tok")

        url = http.request.call_args[0][1]
        assert url == "https://api.example.com/api/products/filter?minPrice=10&maxPrice=50"

    def test_search_without_constraints_uses_listing(self, client, http):
        http.request.return_value = _response(body=[])

        client.search_products({"name": "", "status": ""}, "tok")

        assert http.request.call_args[0][1] == "https://api.example.com/api/products"

    def test_search_with_constraints_uses_filter(self, client, http):
        http.request.return_value = _response(body=[])

        client.search_products({"status": "In Stock"}, "tok")

        url = http.request.call_args[0][1]
        assert url == "https://api.example.com/api/products/filter?status=In+Stock"

    def test_products_are_parsed(self, client, http):
        http.request.return_value = _response(body=[PRODUCT_JSON])

        products = client.list_products("tok")

        assert products == [Product.model_validate(PRODUCT_JSON)]
        assert products[0].product_id == "PRD-7"
        assert products[0].status == "In Stock"

    def test_create_posts_body_and_returns_record(self, client, http):
        http.request.return_value = _response(201, PRODUCT_JSON)
        payload = {k: v for k, v in PRODUCT_JSON.items() if k not in ("id", "productId", "createdAt")}

        created = client.create_product(payload, "tok")

        assert http.request.call_args[0] == ("POST", "https://api.example.com/api/products")
        assert http.request.call_args[1]["json"] == payload
        assert created.id == 7

    def test_update_uses_put_with_id(self, client, http):
        http.request.return_value = _response(body=PRODUCT_JSON)

        client.update_product(7, {"name": "New"}, "tok")

        assert http.request.call_args[0] == ("PUT", "https://api.example.com/api/products/7")

    def test_delete_returns_confirmation(self, client, http):
        http.request.return_value = _response(body={"message": "Deleted successfully"})

        result = client.delete_product(3, "tok")

        assert http.request.call_args[0] == ("DELETE", "https://api.example.com/api/products/3")
        assert result == {"message": "Deleted successfully"}


class TestErrors:
    def test_server_message_is_surfaced(self, client, http):
        http.request.return_value = _response(400, {"message": "Price must be positive"})

        with pytest.raises(CatalogApiError) as exc_info:
            client.create_product({}, "tok")

        assert str(exc_info.value) == "Price must be positive"
        assert exc_info.value.status_code == 400

    def test_default_message_without_body_message(self, client, http):
        http.request.return_value = _response(500, {"error": "boom"})

        with pytest.raises(CatalogApiError, match="Failed to fetch filtered products"):
            client.filter_products({"name": "x"}, "tok")

    def test_default_message_for_non_json_error(self, client, http):
        http.request.return_value = _response(502, json_error=True)

        with pytest.raises(CatalogApiError, match="Failed to delete product"):
            client.delete_product(1, "tok")

    def test_transport_error_is_converted(self, client, http):
        http.request.side_effect = requests.ConnectionError("down")

        with pytest.raises(CatalogApiError, match="Failed to fetch products"):
            client.list_products("tok")

    def test_invalid_product_payload(self, client, http):
        http.request.return_value = _response(body=[{"name": "no price"}])

        with pytest.raises(CatalogApiError, match="Unexpected response"):
            client.list_products("tok")


class TestAuth:
    def test_login_returns_token(self, client, http):
        http.request.return_value = _response(body={"token": "jwt"})

        assert client.login("a@b.co", "secret1") == "jwt"
        assert http.request.call_args[0] == ("POST", "https://api.example.com/api/auth/login")
        assert "Authorization" not in http.request.call_args[1]["headers"]

    def test_signup_returns_token(self, client, http):
        http.request.return_value = _response(201, {"token": "jwt2"})

        assert client.signup("a@b.co", "secret1") == "jwt2"
        assert http.request.call_args[0][1] == "https://api.example.com/api/auth/signup"

    def test_login_without_token_fails(self, client, http):
        http.request.return_value = _response(body={})

        with pytest.raises(CatalogApiError, match="Invalid credentials"):
            client.login("a@b.co", "secret1")
