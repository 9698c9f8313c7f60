"""ProductHub REST API client."""
import logging
from typing import Any

import requests
from pydantic import ValidationError

from config import API_BASE_URL, REQUEST_TIMEOUT
from src.models.product import Product
from src.services.filters import build_query, has_constraints

logger = logging.getLogger(__name__)


class CatalogApiError(Exception):
    """Raised when a ProductHub API request fails.

    ``str(exc)`` is the user-facing message: the ``message`` field of the
    error body when the server sent one, otherwise a per-operation default.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CatalogApiClient:
    """Blocking wrapper around the ProductHub endpoints.

    Product endpoints take the bearer token per call, so one client can
    be shared by every page.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    def login(self, email: str, password: str) -> str:
        """Exchange credentials for a bearer token."""
        data = self._request(
            "POST", "/api/auth/login",
            default_error="Invalid credentials",
            json={"email": email, "password": password},
        )
        return self._token_from(data, "Invalid credentials")

    def signup(self, email: str, password: str) -> str:
        """Create an account and return its bearer token."""
        data = self._request(
            "POST", "/api/auth/signup",
            default_error="Signup failed. Try again.",
            json={"email": email, "password": password},
        )
        return self._token_from(data, "Signup failed. Try again.")

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def list_products(self, token: str) -> list[Product]:
        data = self._request(
            "GET", "/api/products", token=token,
            default_error="Failed to fetch products",
        )
        return self._products_from(data)

    def filter_products(self, filters: dict, token: str) -> list[Product]:
        """List products matching *filters*.

        Empty and missing filter values are left out of the query string.
        """
        query = build_query(filters)
        data = self._request(
            "GET", f"/api/products/filter?{query}", token=token,
            default_error="Failed to fetch filtered products",
        )
        return self._products_from(data)

    def search_products(self, filters: dict, token: str) -> list[Product]:
        """Use the plain listing when no filter constrains anything."""
        if has_constraints(filters):
            return self.filter_products(filters, token)
        return self.list_products(token)

    def create_product(self, data: dict, token: str) -> Product:
        """Create a product; the server assigns ``id`` and ``productId``."""
        body = self._request(
            "POST", "/api/products", token=token,
            default_error="Failed to create product",
            json=data,
        )
        return self._product_from(body)

    def update_product(self, product_id: int, data: dict, token: str) -> Any:
        return self._request(
            "PUT", f"/api/products/{product_id}", token=token,
            default_error="Failed to update product",
            json=data,
        )

    def delete_product(self, product_id: int, token: str) -> dict:
        """Delete a product. The server answers ``{"message": ...}``, not a record."""
        return self._request(
            "DELETE", f"/api/products/{product_id}", token=token,
            default_error="Failed to delete product",
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _headers(token: str | None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        token: str | None = None,
        default_error: str = "Request failed",
        **kwargs,
    ) -> Any:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(
                method, url, headers=self._headers(token), timeout=self.timeout, **kwargs
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise CatalogApiError(default_error) from exc

        if not resp.ok:
            message = self._error_message(resp, default_error)
            logger.warning("%s %s -> %s: %s", method, path, resp.status_code, message)
            raise CatalogApiError(message, status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("%s %s returned a non-JSON body", method, path)
            raise CatalogApiError(default_error, status_code=resp.status_code) from exc

    @staticmethod
    def _error_message(resp: requests.Response, default: str) -> str:
        try:
            body = resp.json()
        except ValueError:
            return default
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return default

    @staticmethod
    def _token_from(data: Any, default_error: str) -> str:
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise CatalogApiError(default_error)
        return str(token)

    @staticmethod
    def _product_from(data: Any) -> Product:
        try:
            return Product.model_validate(data)
        except ValidationError as exc:
            logger.warning("Unexpected product payload: %s", exc)
            raise CatalogApiError("Unexpected response from server") from exc

    @classmethod
    def _products_from(cls, data: Any) -> list[Product]:
        if not isinstance(data, list):
            raise CatalogApiError("Unexpected response from server")
        return [cls._product_from(item) for item in data]
