"""Landing page."""
from nicegui import ui

from config import APP_TITLE
from src.services.session import SessionContext
from src.services.storage import BrowserStorage
from src.ui.layout import build_layout


def home_page():
    """Render the landing page."""
    session = SessionContext(BrowserStorage())
    content = build_layout(session)

    with content:
        with ui.column().classes("w-full items-center justify-center gap-4 py-24"):
            with ui.row().classes("items-baseline gap-3"):
                ui.label("Welcome to").classes("text-h3 font-bold")
                ui.label(APP_TITLE).classes("text-h3 font-bold text-primary")
            ui.label(
                "Your all-in-one solution to manage, showcase, and grow your products with ease."
            ).classes("text-h6 text-secondary text-center")
            ui.button(
                "Get Started", on_click=lambda: ui.navigate.to("/sign-up"),
            ).props("color=primary size=lg no-caps")
