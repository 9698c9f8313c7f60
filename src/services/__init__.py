"""Services package."""
from src.services.api_client import CatalogApiClient, CatalogApiError
from src.services.debounce import Debouncer
from src.services.filters import (
    FILTER_KEYS,
    RANGE_FILTER_FIELDS,
    STATUS_FILTER_FIELD,
    TEXT_FILTER_FIELDS,
    build_query,
    clean_filters,
    dump_filters,
    load_filters,
    range_keys,
)
from src.services.products_controller import ProductsController
from src.services.session import SIGN_IN_PATH, SessionContext
from src.services.storage import BrowserStorage

__all__ = [
    "CatalogApiClient",
    "CatalogApiError",
    "Debouncer",
    "FILTER_KEYS",
    "RANGE_FILTER_FIELDS",
    "STATUS_FILTER_FIELD",
    "TEXT_FILTER_FIELDS",
    "build_query",
    "clean_filters",
    "dump_filters",
    "load_filters",
    "range_keys",
    "ProductsController",
    "SIGN_IN_PATH",
    "SessionContext",
    "BrowserStorage",
]
