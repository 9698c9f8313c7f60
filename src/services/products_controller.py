"""Products dashboard state: filters, product list, fetch and mutations."""
import asyncio
import logging
from typing import Callable

from config import FILTERS_STORAGE_KEY
from src.models.product import Product
from src.services.api_client import CatalogApiClient, CatalogApiError
from src.services.filters import clean_filters, dump_filters, load_filters

logger = logging.getLogger(__name__)


def _ignore_notify(message: str, type: str = "info") -> None:
    pass


class ProductsController:
    """Single source of truth for the products page.

    The list only changes after the server confirmed a request. Fetches are
    tagged with a generation number so a slow response to an older filter
    set can never overwrite the result of a newer one.
    """

    def __init__(
        self,
        api: CatalogApiClient,
        storage,
        session,
        notify: Callable[..., None] = _ignore_notify,
        filters_key: str = FILTERS_STORAGE_KEY,
    ):
        self.api = api
        self._storage = storage
        self.session = session
        self._notify = notify
        self._filters_key = filters_key
        self._listeners: list[Callable[[], None]] = []
        self._generation = 0

        self.filters: dict[str, str] = {}
        self.filters_loaded = False
        self.products: list[Product] = []
        self.fetch_loading = False
        self.action_loading = False

    @property
    def busy(self) -> bool:
        return self.fetch_loading or self.action_loading

    def on_change(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Filters and fetch
    # ------------------------------------------------------------------

    async def restore_filters(self) -> dict[str, str]:
        """Load persisted filters, then allow fetching.

        Marking filters as loaded only after the read keeps an empty initial
        filter set from being fetched and saved over the user's filters. A
        usable stored mapping is left exactly as it was written; only a
        missing or unreadable one is replaced with the empty mapping.
        """
        raw = await self._storage.get_item(self._filters_key)
        self.filters = load_filters(raw)
        self.filters_loaded = True
        if not self.filters and raw != dump_filters({}):
            await self._persist_filters()
        return dict(self.filters)

    async def apply_filters(self, settled: dict) -> None:
        """Take a settled filter mapping from the filter panel."""
        if not self.filters_loaded:
            logger.debug("Filters changed before restore finished; ignored")
            return
        self.filters = dict(settled)
        await self._persist_filters()
        await self.refresh()

    async def refresh(self) -> None:
        token = self.session.token
        if not token or not self.filters_loaded:
            return

        self._generation += 1
        generation = self._generation
        filters = clean_filters(self.filters)
        self.fetch_loading = True
        self._changed()
        try:
            products = await asyncio.get_event_loop().run_in_executor(
                None, self.api.search_products, filters, token,
            )
        except CatalogApiError as exc:
            if generation != self._generation:
                return
            self._notify(str(exc) or "Failed to load filtered products", type="negative")
        else:
            if generation != self._generation:
                logger.debug("Discarding stale product list (generation %d)", generation)
                return
            self.products = products
            self._notify("Products loaded successfully!", type="positive")
        finally:
            if generation == self._generation:
                self.fetch_loading = False
                self._changed()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create(self, data: dict) -> Product | None:
        token = self.session.token
        if not token:
            self._notify("Unauthorized, please login.", type="negative")
            return None

        self.action_loading = True
        self._changed()
        try:
            created = await asyncio.get_event_loop().run_in_executor(
                None, self.api.create_product, data, token,
            )
        except CatalogApiError as exc:
            self._notify(str(exc) or "Failed to add product", type="negative")
            return None
        else:
            rest = [p for p in self.products if created.id is None or p.id != created.id]
            self.products = [created] + rest
            self._notify("Product added successfully!", type="positive")
            return created
        finally:
            self.action_loading = False
            self._changed()

    async def update(self, product: Product) -> bool:
        token = self.session.token
        if not token:
            return False
        if product.id is None:
            self._notify("Invalid product: missing ID", type="negative")
            return False

        self.action_loading = True
        self._changed()
        try:
            await asyncio.get_event_loop().run_in_executor(
                None, self.api.update_product, product.id, product.to_payload(), token,
            )
        except CatalogApiError as exc:
            self._notify(str(exc) or "Failed to update product", type="negative")
            return False
        else:
            self.products = [product if p.id == product.id else p for p in self.products]
            self._notify("Product updated successfully!", type="positive")
            return True
        finally:
            self.action_loading = False
            self._changed()

    async def delete(self, product_id: int) -> bool:
        token = self.session.token
        if not token:
            return False

        self.action_loading = True
        self._changed()
        try:
            await asyncio.get_event_loop().run_in_executor(
                None, self.api.delete_product, product_id, token,
            )
        except CatalogApiError as exc:
            self._notify(str(exc) or "Failed to delete product", type="negative")
            return False
        else:
            self.products = [p for p in self.products if p.id != product_id]
            self._notify("Product deleted successfully!", type="positive")
            return True
        finally:
            self.action_loading = False
            self._changed()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _persist_filters(self) -> None:
        await self._storage.set_item(self._filters_key, dump_filters(self.filters))

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()
