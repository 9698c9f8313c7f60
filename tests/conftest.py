"""Shared test fixtures: in-memory browser storage, fake API, sample products."""
import asyncio
from unittest.mock import MagicMock

import pytest

from src.models.product import Product
from src.services.api_client import CatalogApiClient
from src.services.products_controller import ProductsController
from src.services.session import SessionContext


class MemoryStorage:
    """Stands in for BrowserStorage; records every write."""

    def __init__(self, items: dict | None = None):
        self.items = dict(items or {})
        self.writes: list[tuple[str, str]] = []
        self.reads: list[str] = []

    async def get_item(self, key: str):
        self.reads.append(key)
        return self.items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes.append((key, value))

    async def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


def make_product(pid: int | None, name: str = "Lamp", **overrides) -> Product:
    data = {
        "id": pid,
        "productId": f"PRD-{pid}" if pid is not None else None,
        "name": name,
        "image": "https://images.unsplash.com/photo-1",
        "description": "A perfectly ordinary product",
        "category": "Home",
        "price": 10.0,
        "quantity": 5,
        "status": "In Stock",
    }
    data.update(overrides)
    return Product.model_validate(data)


@pytest.fixture
def storage():
    return MemoryStorage({"token": "tok-123"})


@pytest.fixture
def session(storage):
    ctx = SessionContext(storage)
    asyncio.run(ctx.init())
    return ctx


@pytest.fixture
def api():
    return MagicMock(spec=CatalogApiClient)


@pytest.fixture
def notify():
    return MagicMock()


@pytest.fixture
def controller(api, storage, session, notify):
    return ProductsController(api, storage, session, notify=notify)


@pytest.fixture
def products():
    return [make_product(1, "Alpha"), make_product(3, "Bravo"), make_product(7, "Charlie")]
