"""Reusable UI components."""
from src.ui.components.filter_panel import FilterPanel
from src.ui.components.helpers import format_price, page_header, truncate_description
from src.ui.components.loading_table import loading_rows
from src.ui.components.product_form import ProductFormDialog
from src.ui.components.products_table import ActionMenuState, ProductsTable, sort_products

__all__ = [
    "FilterPanel",
    "format_price",
    "page_header",
    "truncate_description",
    "loading_rows",
    "ProductFormDialog",
    "ActionMenuState",
    "ProductsTable",
    "sort_products",
]
