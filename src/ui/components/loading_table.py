"""Skeleton rows shown in place of the product rows while a request is in flight."""
from nicegui import ui

from src.ui.components.helpers import TABLE_GRID_STYLE

# Placeholder bar width per column
_CELL_WIDTHS = ["80px", "110px", None, "190px", "80px", "60px", "60px", "90px", "24px"]


def loading_rows(count: int = 4):
    """Render *count* pulsing placeholder rows matching the table grid."""
    for _ in range(count):
        with ui.element("div").classes("w-full grid items-center gap-2 py-3").style(
            TABLE_GRID_STYLE
        ):
            for width in _CELL_WIDTHS:
                if width is None:
                    ui.skeleton("rect", width="48px", height="48px").classes("rounded")
                else:
                    ui.skeleton("text", width=width)
