"""Filter row of the product table.

Typing updates the local filter mapping immediately; only the debounced
(settled) mapping is handed to ``on_settled``.
"""
from typing import Any, Callable

from nicegui import ui

from config import FILTER_DEBOUNCE_SECONDS
from src.models.product import ProductStatus
from src.services.debounce import Debouncer
from src.services.filters import (
    RANGE_FILTER_FIELDS,
    STATUS_FILTER_FIELD,
    TEXT_FILTER_FIELDS,
    range_keys,
)
from src.ui.components.helpers import ACTIVE_FILTER_CLASSES, INPUT_PROPS

STATUS_OPTIONS = {"": "All Status", **{s.value: s.value for s in ProductStatus}}

_TEXT_LABELS = {
    "productId": "Product ID",
    "name": "name",
    "description": "description",
    "category": "category",
}


class FilterPanel:
    def __init__(
        self,
        filters: dict,
        on_settled: Callable[[dict], Any],
        delay: float = FILTER_DEBOUNCE_SECONDS,
    ):
        self.local: dict[str, str] = dict(filters)
        self._debouncer = Debouncer(delay, on_settled, initial=dict(filters))
        self._inputs: dict[str, ui.element] = {}

    @property
    def settled(self) -> dict:
        return self._debouncer.value

    def set_value(self, key: str, value) -> None:
        """Record one keystroke; the upward propagation waits for a pause."""
        value = "" if value is None else str(value)
        self.local = {**self.local, key: value}
        self._highlight(key)
        self._debouncer.push(dict(self.local))

    def dispose(self) -> None:
        self._debouncer.cancel()

    # ------------------------------------------------------------------
    # Rendering (one grid cell per table column)
    # ------------------------------------------------------------------

    def render_cell(self, column: str) -> None:
        if column in TEXT_FILTER_FIELDS:
            label = _TEXT_LABELS.get(column, column)
            self._text_input(column, f"Filter {label}")
        elif column in RANGE_FILTER_FIELDS:
            low, high = range_keys(column)
            with ui.row().classes("gap-1 no-wrap"):
                self._number_input(low, "Min")
                self._number_input(high, "Max")
        elif column == STATUS_FILTER_FIELD:
            select = ui.select(
                STATUS_OPTIONS, value=self.local.get(column, ""),
            ).props(INPUT_PROPS).classes("w-full")
            select.on_value_change(lambda e: self.set_value(STATUS_FILTER_FIELD, e.value))
            self._register(column, select)
        else:
            ui.element("div")

    def _text_input(self, key: str, placeholder: str) -> None:
        inp = ui.input(
            placeholder=placeholder, value=self.local.get(key, ""),
        ).props(INPUT_PROPS).classes("w-full")
        inp.on_value_change(lambda e, k=key: self.set_value(k, e.value))
        self._register(key, inp)

    def _number_input(self, key: str, placeholder: str) -> None:
        # Plain input with type=number keeps the raw string the user typed
        inp = ui.input(
            placeholder=placeholder, value=self.local.get(key, ""),
        ).props(f"{INPUT_PROPS} type=number").classes("w-20")
        inp.on_value_change(lambda e, k=key: self.set_value(k, e.value))
        self._register(key, inp)

    def _register(self, key: str, element: ui.element) -> None:
        self._inputs[key] = element
        self._highlight(key)

    def _highlight(self, key: str) -> None:
        element = self._inputs.get(key)
        if element is None:
            return
        if self.local.get(key):
            element.classes(add=ACTIVE_FILTER_CLASSES)
        else:
            element.classes(remove=ACTIVE_FILTER_CLASSES)
