"""Product models."""
from enum import Enum
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductStatus(str, Enum):
    IN_STOCK = "In Stock"
    OUT_OF_STOCK = "Out of Stock"


class ProductBase(BaseModel):
    """Fields shared by stored products and form input."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    name: str
    image: str
    description: str
    category: str
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)
    status: ProductStatus


class Product(ProductBase):
    """A product record as returned by the ProductHub API."""

    id: int | None = None
    product_id: str | None = Field(default=None, alias="productId")

    def to_payload(self) -> dict:
        """Serialize with wire field names, dropping unset identifiers."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ProductInput(ProductBase):
    """Editable product fields collected by the create/edit form."""

    name: str = Field(min_length=1)
    description: str = Field(min_length=10)
    category: str = Field(min_length=1)

    @field_validator("image")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("not an absolute URL")
        return value


# One message per field, shown inline next to the input
FIELD_MESSAGES = {
    "name": "Product name is required",
    "image": "Valid image URL required",
    "description": "Description required",
    "category": "Category is required",
    "price": "Price is required",
    "quantity": "Quantity must be at least 0",
    "status": "Status is required",
}
