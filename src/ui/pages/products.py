"""Products page -- browse, filter and manage catalog products."""
import logging

from nicegui import ui

from src.models.product import Product
from src.services.api_client import CatalogApiClient
from src.services.products_controller import ProductsController
from src.services.session import SessionContext
from src.services.storage import BrowserStorage
from src.ui.components.filter_panel import FilterPanel
from src.ui.components.helpers import page_header
from src.ui.components.loading_table import loading_rows
from src.ui.components.product_form import ProductFormDialog
from src.ui.components.products_table import ProductsTable
from src.ui.layout import build_layout

logger = logging.getLogger(__name__)


def products_page(api: CatalogApiClient):
    """Render the products dashboard.

    Nothing is fetched until the session check and the filter restore have
    both finished; an unauthenticated viewer is sent to the sign-in page.
    """
    storage = BrowserStorage()
    session = SessionContext(storage)
    controller = ProductsController(api, storage, session, notify=ui.notify)
    _view: dict = {"table": None, "form": None}

    async def _ready():
        target = session.redirect_target()
        if target:
            logger.info("No session credential; redirecting to %s", target)
            ui.navigate.to(target)
            return

        filters = await controller.restore_filters()
        panel = FilterPanel(filters, on_settled=_on_settled)
        table = ProductsTable(
            controller, panel, on_edit=_open_form, on_delete=controller.delete,
        )
        _view["table"] = table

        table_slot.clear()
        with table_slot:
            table.build()
        controller.on_change(_refresh_view)
        session.on_change(_guard)
        ui.context.client.on_disconnect(table.dispose)

        await controller.refresh()

    content = build_layout(session, on_ready=_ready)

    def _guard():
        # Logging out while on the page
        target = session.redirect_target()
        if target:
            ui.navigate.to(target)

    # Entry points that run outside a UI event (debounce timer, background
    # tasks) re-enter the page container so toasts and refreshes find their client.
    async def _on_settled(filters: dict):
        with content:
            await controller.apply_filters(filters)

    async def _add(data: dict):
        with content:
            await controller.create(data)

    async def _update(product: Product):
        with content:
            await controller.update(product)

    def _open_form(product: Product | None = None):
        _view["form"].open(product)

    def _refresh_view():
        try:
            if _view["table"] is not None:
                _view["table"].rows.refresh()
            _view["form"].refresh_busy()
        except RuntimeError:
            pass  # User navigated away mid-request

    with content:
        with ui.row().classes("w-full items-center justify-between px-2"):
            page_header("Products Dashboard", icon="inventory_2")
            ui.button(
                "Add Product", icon="add", on_click=lambda: _open_form(None),
            ).props("color=primary no-caps")

        table_slot = ui.column().classes("w-full")
        with table_slot:
            loading_rows()

        _view["form"] = ProductFormDialog(
            on_add=_add, on_update=_update, is_busy=lambda: controller.busy,
        )
