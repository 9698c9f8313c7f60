"""Application configuration."""
import os

from dotenv import load_dotenv

load_dotenv()

# ProductHub REST API
API_BASE_URL = os.getenv(
    "PRODUCTHUB_API_URL", "https://producthub-server.onrender.com"
).rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("PRODUCTHUB_REQUEST_TIMEOUT", "15"))

# Filters settle after this many seconds without a keystroke
FILTER_DEBOUNCE_SECONDS = 0.5

# Browser localStorage keys
TOKEN_STORAGE_KEY = "token"
FILTERS_STORAGE_KEY = "productFilters"

# App settings
APP_TITLE = "ProductHub"
APP_PORT = int(os.getenv("APP_PORT", "8080"))
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
