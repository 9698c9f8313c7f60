"""Shared UI helper functions and design tokens for product display."""

from nicegui import ui


# ─── Design Tokens ────────────────────────────────────────────────────────────

INPUT_PROPS = "outlined dense"
HOVER_BG = "hover:bg-[#F3EEFB]"

# Filter inputs holding a value get the accent treatment
ACTIVE_FILTER_CLASSES = "bg-purple-1"

# Table grid: ID, Name, Image, Description, Category, Price, Quantity, Status, Action
TABLE_GRID_STYLE = (
    "grid-template-columns: 120px 160px 80px minmax(220px, 1fr) 140px 170px 170px 150px 70px"
)


def page_header(title: str, subtitle: str | None = None, icon: str | None = None):
    """Render a consistent page title with optional icon + subtitle."""
    with ui.row().classes("items-center gap-3"):
        if icon:
            ui.icon(icon, size="sm").classes("text-accent")
        ui.label(title).classes("text-h5 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-body2 text-secondary")


# ─── Status Badges ────────────────────────────────────────────────────────────

STATUS_COLORS = {
    "In Stock": "text-positive",
    "Out of Stock": "text-negative",
}


def format_price(price, na_text: str = "-") -> str:
    """Format a product price for the table."""
    if price is None:
        return na_text
    price = float(price)
    if price.is_integer():
        return str(int(price))
    return str(price)


def truncate_description(text: str | None, limit: int = 100, keep: int = 80) -> str:
    """Shorten long descriptions: over *limit* chars shows the first *keep* plus '...'."""
    if not text:
        return ""
    if len(text) > limit:
        return text[:keep] + "..."
    return text
