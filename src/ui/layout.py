"""Shared layout: header navbar and content area."""
from typing import Awaitable, Callable

from nicegui import ui

from config import APP_TITLE
from src.services.session import SIGN_IN_PATH, SessionContext


def build_layout(
    session: SessionContext,
    on_ready: Callable[[], Awaitable[None]] | None = None,
):
    """Create the shared page layout and start the session check.

    The stored credential is read once the browser is connected; *on_ready*
    runs after that, inside the content container.
    """
    ui.colors(
        primary="#7E22CE",
        secondary="#5f6368",
        accent="#A855F7",
        positive="#16a34a",
        negative="#ef4444",
    )

    with ui.header().classes("items-center justify-between px-8 bg-white shadow-1"):
        with ui.link(target="/").classes("no-underline"):
            ui.label(APP_TITLE).classes("text-h5 font-bold text-primary")

        @ui.refreshable
        def _nav():
            if session.loading:
                return
            with ui.row().classes("items-center gap-6"):
                if not session.is_authenticated:
                    _nav_link("Sign Up", "/sign-up")
                else:
                    _nav_link("Products", "/products")

                    async def _logout():
                        await session.logout()
                        ui.navigate.to(SIGN_IN_PATH)

                    ui.button("Logout", on_click=_logout).props(
                        "flat no-caps color=negative"
                    ).classes("text-subtitle1 font-bold")

        _nav()
        session.on_change(_nav.refresh)

    content = ui.column().classes("w-full p-6 max-w-screen-2xl mx-auto gap-4")

    async def _startup():
        await session.init()
        if on_ready is None:
            return
        with content:
            await on_ready()

    ui.timer(0.1, _startup, once=True)
    return content


def _nav_link(label: str, path: str):
    """Render a navbar link."""
    with ui.link(target=path).classes("no-underline"):
        ui.label(label).classes("text-subtitle1 font-bold text-primary")
