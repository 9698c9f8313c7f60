"""Product table: sortable header, filter row, product rows and row action menus."""
import logging
from typing import Any, Callable

from nicegui import ui

from src.models.product import Product
from src.ui.components.filter_panel import FilterPanel
from src.ui.components.helpers import (
    HOVER_BG,
    STATUS_COLORS,
    TABLE_GRID_STYLE,
    format_price,
    truncate_description,
)
from src.ui.components.loading_table import loading_rows

logger = logging.getLogger(__name__)

# (filter/sort key, header label); the Action column comes last
COLUMNS = [
    ("productId", "Product ID"),
    ("name", "Name"),
    ("image", "Image"),
    ("description", "Description"),
    ("category", "Category"),
    ("price", "Price"),
    ("quantity", "Quantity"),
    ("status", "Status"),
]

# Column key -> Product attribute used for sorting
SORT_ATTRS = {
    "productId": "product_id",
    "name": "name",
    "description": "description",
    "category": "category",
    "price": "price",
    "quantity": "quantity",
    "status": "status",
}

_MENU_CLASS = "row-action-menu"

_SUBSCRIBE_OUTSIDE_CLICK_JS = f"""
if (!window.__rowMenuOutside) {{
    window.__rowMenuOutside = function (event) {{
        if (!event.target.closest('.{_MENU_CLASS}')) {{
            emitEvent('row_menu_outside_click');
        }}
    }};
    document.addEventListener('mousedown', window.__rowMenuOutside);
}}
"""

_UNSUBSCRIBE_OUTSIDE_CLICK_JS = """
if (window.__rowMenuOutside) {
    document.removeEventListener('mousedown', window.__rowMenuOutside);
    window.__rowMenuOutside = null;
}
"""


def _sort_value(value):
    if isinstance(value, str):
        return value.casefold()
    return value


def sort_products(products: list[Product], key: str | None, descending: bool = False) -> list[Product]:
    """Return *products* ordered by column *key*; missing values always go last."""
    if not key or key not in SORT_ATTRS:
        return list(products)
    attr = SORT_ATTRS[key]
    present = [p for p in products if getattr(p, attr) is not None]
    missing = [p for p in products if getattr(p, attr) is None]
    present.sort(key=lambda p: _sort_value(getattr(p, attr)), reverse=descending)
    return present + missing


def next_sort(current_key: str | None, descending: bool, clicked: str) -> tuple[str | None, bool]:
    """Header click cycle: ascending -> descending -> unsorted."""
    if current_key != clicked:
        return clicked, False
    if not descending:
        return clicked, True
    return None, False


class ActionMenuState:
    """Which row's action menu is open (at most one).

    Opening a menu acquires an outside-click subscription through
    *subscribe*, which returns the function that releases it. Closing the
    menu or disposing the table releases the subscription.
    """

    def __init__(self, subscribe: Callable[[Callable[[], None]], Callable[[], None]]):
        self._subscribe = subscribe
        self._release: Callable[[], None] | None = None
        self.open_id: int | None = None

    def toggle(self, product_id: int) -> None:
        if self.open_id == product_id:
            self.close()
            return
        self.close()
        self.open_id = product_id
        self._release = self._subscribe(self.close)

    def close(self) -> None:
        release, self._release = self._release, None
        self.open_id = None
        if release is not None:
            release()

    def dispose(self) -> None:
        self.close()


class ProductsTable:
    """Renders the controller's product list.

    The header and filter row are built once; only the rows are refreshed,
    so filter inputs keep focus and their local state while data reloads.
    """

    def __init__(
        self,
        controller,
        filter_panel: FilterPanel,
        on_edit: Callable[[Product], Any],
        on_delete: Callable[[int], Any],
    ):
        self.controller = controller
        self.filter_panel = filter_panel
        self._on_edit = on_edit
        self._on_delete = on_delete
        self.sort_key: str | None = None
        self.sort_descending = False
        self._outside_callback: Callable[[], None] | None = None
        self._client = None
        self._card = None
        self.menu = ActionMenuState(self._subscribe_outside_click)

    def build(self) -> None:
        self._client = ui.context.client
        ui.on("row_menu_outside_click", self._handle_outside_click)

        with ui.card().classes("w-full p-4 overflow-x-auto") as self._card:
            self._header()
            with ui.element("div").classes("w-full grid gap-2 py-2 border-b").style(
                TABLE_GRID_STYLE
            ):
                for key, _label in COLUMNS:
                    with ui.element("div"):
                        self.filter_panel.render_cell(key)
                ui.element("div")
            self.rows()

    def dispose(self) -> None:
        self.menu.dispose()
        self.filter_panel.dispose()

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    @ui.refreshable
    def _header(self) -> None:
        with ui.element("div").classes(
            "w-full grid gap-2 py-2 bg-grey-2 text-weight-medium"
        ).style(TABLE_GRID_STYLE):
            for key, label in COLUMNS:
                if key not in SORT_ATTRS:
                    ui.label(label).classes("px-2")
                    continue
                if self.sort_key == key:
                    icon = "arrow_downward" if self.sort_descending else "arrow_upward"
                else:
                    icon = "unfold_more"
                with ui.row().classes(
                    "items-center justify-between px-2 cursor-pointer no-wrap"
                ).on("click", lambda _, k=key: self._sort_by(k)):
                    ui.label(label)
                    ui.icon(icon, size="xs").classes("text-grey-6")
            ui.label("Action").classes("px-2")

    def _sort_by(self, key: str) -> None:
        self.sort_key, self.sort_descending = next_sort(
            self.sort_key, self.sort_descending, key,
        )
        self._header.refresh()
        self.rows.refresh()

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    @ui.refreshable
    def rows(self) -> None:
        if self.controller.busy:
            loading_rows()
            return

        products = sort_products(
            self.controller.products, self.sort_key, self.sort_descending,
        )
        if not products:
            ui.label("No products match your filters.").classes(
                "text-body2 text-secondary p-4"
            )
            return

        for product in products:
            self._render_row(product)

    def _render_row(self, p: Product) -> None:
        with ui.element("div").classes(
            f"w-full grid gap-2 items-center py-2 border-b {HOVER_BG}"
        ).style(TABLE_GRID_STYLE):
            ui.label(p.product_id or "").classes("px-2 font-medium")
            ui.label(p.name).classes("px-2")
            if p.image:
                ui.image(p.image).classes("rounded object-cover").style(
                    "width: 50px; height: 50px"
                )
            else:
                ui.element("div")
            ui.label(truncate_description(p.description)).classes(
                "px-2 text-body2 text-grey-7"
            )
            with ui.element("div").classes("px-2"):
                ui.badge(p.category, color="purple-1", text_color="purple-9").props(
                    "rounded"
                )
            ui.label(format_price(p.price)).classes("px-2")
            ui.label(str(p.quantity)).classes("px-2")
            ui.label(p.status).classes(
                f"px-2 font-bold {STATUS_COLORS.get(p.status, '')}"
            )
            with ui.element("div").classes("relative"):
                if p.id is not None:
                    self._action_menu(p)

    def _action_menu(self, p: Product) -> None:
        ui.button(
            icon="more_vert", on_click=lambda _, pid=p.id: self._toggle_menu(pid),
        ).props("flat round dense").classes(_MENU_CLASS)
        if self.menu.open_id != p.id:
            return
        with ui.card().classes(f"{_MENU_CLASS} absolute right-0 z-10 p-1 gap-0"):
            ui.button(
                "Edit", on_click=lambda _, prod=p: self._edit(prod),
            ).props("flat dense no-caps align=left").classes("w-full")
            ui.button(
                "Delete", on_click=lambda _, prod=p: self._confirm_delete(prod),
            ).props("flat dense no-caps align=left color=negative").classes("w-full")

    def _toggle_menu(self, product_id: int) -> None:
        self.menu.toggle(product_id)
        self.rows.refresh()

    def _edit(self, product: Product) -> None:
        self.menu.close()
        self.rows.refresh()
        self._on_edit(product)

    def _confirm_delete(self, product: Product) -> None:
        self.menu.close()
        self.rows.refresh()

        # The clicked row was just rebuilt; anchor the dialog to the table card
        with self._card, ui.dialog() as dialog, ui.card():
            ui.label(f'Delete "{product.name}"?').classes("text-subtitle1 font-bold")
            ui.label("This permanently removes the product from the catalog.").classes(
                "text-body2 text-secondary"
            )
            with ui.row().classes("justify-end gap-2 mt-4"):
                ui.button("Cancel", on_click=dialog.close).props("flat")

                async def confirm():
                    dialog.close()
                    await self._on_delete(product.id)

                ui.button("Delete", on_click=confirm).props("color=negative")
        dialog.open()

    # ------------------------------------------------------------------
    # Outside-click subscription
    # ------------------------------------------------------------------

    def _subscribe_outside_click(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._outside_callback = callback
        ui.run_javascript(_SUBSCRIBE_OUTSIDE_CLICK_JS)

        def release():
            self._outside_callback = None
            if self._client is not None and self._client.has_socket_connection:
                self._client.run_javascript(_UNSUBSCRIBE_OUTSIDE_CLICK_JS)

        return release

    def _handle_outside_click(self) -> None:
        if self._outside_callback is None:
            return
        self._outside_callback()
        self.rows.refresh()
