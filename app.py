"""ProductHub catalog manager - main entry point."""
import logging

from nicegui import app, ui

from config import APP_TITLE, APP_PORT, APP_HOST, LOG_LEVEL
from src.services.api_client import CatalogApiClient
from src.ui.pages.auth import auth_page
from src.ui.pages.home import home_page
from src.ui.pages.products import products_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# One HTTP client for every page; tokens are passed per request
api = CatalogApiClient()


@ui.page("/")
def index():
    home_page()


@ui.page("/sign-in")
def sign_in_view():
    auth_page(api, mode="sign-in")


@ui.page("/sign-up")
def sign_up_view():
    auth_page(api, mode="sign-up")


@ui.page("/products")
def products_view():
    products_page(api)


@app.get("/_health")
async def health_check():
    return {"status": "ok", "app": "producthub"}


ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=False,
)
