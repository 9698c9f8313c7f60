"""Sign-in and sign-up pages."""
import asyncio
import logging

from nicegui import ui
from pydantic import ValidationError

from src.models.credentials import CREDENTIAL_MESSAGES, Credentials
from src.models.validation import field_errors
from src.services.api_client import CatalogApiClient, CatalogApiError
from src.services.session import SessionContext
from src.services.storage import BrowserStorage
from src.ui.layout import build_layout

logger = logging.getLogger(__name__)

# mode -> page copy and behaviour
_MODES = {
    "sign-in": {
        "title": "Welcome Back",
        "subtitle": "Please enter your credentials to sign in",
        "button": "Sign In",
        "busy": "Signing in...",
        "success": "Login successful!",
        "failure": "Invalid credentials",
        "switch_text": "Don't have an account?",
        "switch_link": ("Sign up", "/sign-up"),
    },
    "sign-up": {
        "title": "Create an Account",
        "subtitle": "Sign up to get started with your account",
        "button": "Sign Up",
        "busy": "Signing up...",
        "success": "Signup successful!",
        "failure": "Signup failed. Try again.",
        "switch_text": "Already have an account?",
        "switch_link": ("Sign in", "/sign-in"),
    },
}


def auth_page(api: CatalogApiClient, mode: str = "sign-in"):
    """Render the sign-in (``mode="sign-in"``) or sign-up page."""
    copy = _MODES[mode]
    session = SessionContext(BrowserStorage())
    content = build_layout(session)

    with content:
        with ui.column().classes("w-full items-center py-16"):
            with ui.card().classes("w-full max-w-md p-8 gap-3"):
                ui.label(copy["title"]).classes("text-h4 font-bold text-center w-full")
                ui.label(copy["subtitle"]).classes(
                    "text-body2 text-secondary text-center w-full mb-4"
                )

                email_input = ui.input(
                    label="Email", placeholder="you@example.com",
                ).props("outlined dense").classes("w-full")
                email_error = ui.label("").classes("text-caption text-negative")
                password_input = ui.input(
                    label="Password", password=True, password_toggle_button=True,
                ).props("outlined dense").classes("w-full")
                password_error = ui.label("").classes("text-caption text-negative")
                error_labels = {"email": email_error, "password": password_error}

                submit_btn = ui.button(copy["button"]).props(
                    "color=primary no-caps"
                ).classes("w-full mt-2")

                with ui.row().classes("w-full justify-center gap-1 mt-4"):
                    ui.label(copy["switch_text"]).classes("text-body2 text-secondary")
                    link_text, link_target = copy["switch_link"]
                    ui.link(link_text, link_target).classes("text-body2 text-primary")

    def _show_errors(errors: dict[str, str]):
        for name, label in error_labels.items():
            label.text = errors.get(name, "")

    async def _submit():
        try:
            creds = Credentials(
                email=email_input.value or "", password=password_input.value or "",
            )
        except ValidationError as exc:
            _show_errors(field_errors(exc, CREDENTIAL_MESSAGES))
            return
        _show_errors({})

        call = api.login if mode == "sign-in" else api.signup
        submit_btn.disable()
        submit_btn.text = copy["busy"]
        try:
            token = await asyncio.get_event_loop().run_in_executor(
                None, call, creds.email, creds.password,
            )
            await session.login(token)
        except CatalogApiError as exc:
            ui.notify(str(exc) or copy["failure"], type="negative")
            return
        finally:
            submit_btn.enable()
            submit_btn.text = copy["button"]

        logger.info("%s succeeded", mode)
        ui.notify(copy["success"], type="positive")
        ui.navigate.to("/")

    submit_btn.on_click(_submit)
    password_input.on("keydown.enter", _submit)
