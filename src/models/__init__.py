"""Data models package."""
from src.models.credentials import CREDENTIAL_MESSAGES, Credentials
from src.models.product import (
    FIELD_MESSAGES,
    Product,
    ProductInput,
    ProductStatus,
)
from src.models.validation import field_errors

__all__ = [
    "CREDENTIAL_MESSAGES",
    "Credentials",
    "FIELD_MESSAGES",
    "Product",
    "ProductInput",
    "ProductStatus",
    "field_errors",
]
