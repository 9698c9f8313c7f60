"""Create / edit product dialog."""
import logging
from typing import Any, Callable

from nicegui import background_tasks, ui
from pydantic import ValidationError

from src.models.product import FIELD_MESSAGES, Product, ProductInput, ProductStatus
from src.models.validation import field_errors

logger = logging.getLogger(__name__)

FORM_FIELDS = ("name", "image", "description", "category", "price", "quantity", "status")

DEFAULT_VALUES = {
    "name": "",
    "image": "",
    "description": "",
    "category": "",
    "price": 0,
    "quantity": 0,
    "status": ProductStatus.IN_STOCK.value,
}


def initial_values(product: Product | None) -> dict:
    """Form values for *product*, or the blank create-form defaults."""
    if product is None:
        return dict(DEFAULT_VALUES)
    return {field: getattr(product, field) for field in FORM_FIELDS}


def build_submission(values: dict, initial: Product | None = None):
    """Validate form *values*.

    Returns ``(payload, errors)``. In edit mode the payload is the original
    record with the submitted fields merged in (identifiers preserved);
    otherwise it is a ``ProductInput`` for creation. ``payload`` is None
    whenever ``errors`` is non-empty.
    """
    try:
        data = ProductInput.model_validate(values)
    except ValidationError as exc:
        return None, field_errors(exc, FIELD_MESSAGES)
    if initial is not None:
        return initial.model_copy(update=data.model_dump()), {}
    return data, {}


class ProductFormDialog:
    """Modal form: edit mode when opened with a product, create mode otherwise.

    Submitting hands the record to ``on_add`` / ``on_update`` in the
    background, then clears and closes the form right away; the outcome is
    reported by the controller, not by the form.
    """

    def __init__(
        self,
        on_add: Callable[[dict], Any],
        on_update: Callable[[Product], Any],
        is_busy: Callable[[], bool] = lambda: False,
    ):
        self._on_add = on_add
        self._on_update = on_update
        self._is_busy = is_busy
        self.initial: Product | None = None
        self._inputs: dict[str, ui.element] = {}
        self._errors: dict[str, ui.label] = {}

        with ui.dialog().props("persistent") as self.dialog, ui.card().classes(
            "w-full max-w-2xl p-6"
        ):
            self.title = ui.label("").classes("text-h5 font-bold text-center w-full")
            self.subtitle = ui.label("").classes("text-body2 text-secondary text-center w-full")

            self._field("name", ui.input(
                label="Product Name *", placeholder="e.g., iPhone 15",
            ))
            self._field("image", ui.input(
                label="Image URL *", placeholder="https://example.com/image.jpg",
            ))
            ui.label("Image links must be absolute URLs (Unsplash works well).").classes(
                "text-caption text-secondary"
            )
            self._field("description", ui.textarea(
                label="Description *", placeholder="Brief description of the product",
            ).props("rows=3"))
            self._field("category", ui.input(
                label="Category *", placeholder="e.g., Electronics",
            ))
            self._field("price", ui.number(
                label="Price *", placeholder="e.g., 999.99", min=0,
            ))
            self._field("quantity", ui.number(
                label="Quantity *", placeholder="e.g., 50", min=0, precision=0,
            ))
            self._field("status", ui.select(
                [s.value for s in ProductStatus], label="Status *",
            ))

            with ui.row().classes("w-full justify-between gap-2 mt-4 no-wrap"):
                ui.button("Cancel", on_click=self.cancel).props("outline").classes("w-1/2")
                self.submit_btn = ui.button(
                    "Add Product", on_click=self.submit,
                ).props("color=primary").classes("w-1/2")

    def _field(self, name: str, element: ui.element) -> None:
        element.props("outlined dense").classes("w-full")
        self._inputs[name] = element
        self._errors[name] = ui.label("").classes("text-caption text-negative")
        self._errors[name].set_visibility(False)

    # ------------------------------------------------------------------
    # Open / close
    # ------------------------------------------------------------------

    def open(self, product: Product | None = None) -> None:
        self.initial = product
        editing = product is not None
        self.title.text = "Edit Product" if editing else "Add New Product"
        self.subtitle.text = (
            "Update product details below" if editing else "Enter product details below"
        )
        self.reset(initial_values(product))
        self.refresh_busy()
        self.dialog.open()

    def cancel(self) -> None:
        self.reset()
        self.close()

    def close(self) -> None:
        self.initial = None
        self.dialog.close()

    def reset(self, values: dict | None = None) -> None:
        values = values if values is not None else DEFAULT_VALUES
        for name, element in self._inputs.items():
            element.value = values.get(name)
        self._show_errors({})

    def refresh_busy(self) -> None:
        busy = self._is_busy()
        editing = self.initial is not None
        if busy:
            self.submit_btn.text = "Updating..." if editing else "Adding..."
            self.submit_btn.disable()
        else:
            self.submit_btn.text = "Update Product" if editing else "Add Product"
            self.submit_btn.enable()

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------

    def values(self) -> dict:
        return {name: element.value for name, element in self._inputs.items()}

    def submit(self) -> None:
        payload, errors = build_submission(self.values(), self.initial)
        if errors:
            self._show_errors(errors)
            return

        if self.initial is not None:
            background_tasks.create(self._on_update(payload), name="update-product")
        else:
            background_tasks.create(
                self._on_add(payload.model_dump(mode="json")), name="create-product",
            )
        self.reset()
        self.close()

    def _show_errors(self, errors: dict[str, str]) -> None:
        for name, label in self._errors.items():
            message = errors.get(name, "")
            label.text = message
            label.set_visibility(bool(message))
