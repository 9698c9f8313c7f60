"""Browser localStorage access for the current NiceGUI client."""
import json

from nicegui import ui


class BrowserStorage:
    """Async get/set/remove on ``window.localStorage``.

    Must be used from inside a page (the calls go to the client that owns
    the current UI context).
    """

    def __init__(self, timeout: float = 5.0):
        self.timeout = timeout

    async def get_item(self, key: str) -> str | None:
        result = await ui.run_javascript(
            f"localStorage.getItem({json.dumps(key)})", timeout=self.timeout
        )
        return result if isinstance(result, str) else None

    async def set_item(self, key: str, value: str) -> None:
        await ui.run_javascript(
            f"localStorage.setItem({json.dumps(key)}, {json.dumps(value)})",
            timeout=self.timeout,
        )

    async def remove_item(self, key: str) -> None:
        await ui.run_javascript(
            f"localStorage.removeItem({json.dumps(key)})", timeout=self.timeout
        )
