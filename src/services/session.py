"""Per-page authentication state backed by the stored bearer token."""
import logging
from typing import Callable

from config import TOKEN_STORAGE_KEY

logger = logging.getLogger(__name__)

SIGN_IN_PATH = "/sign-in"


class SessionContext:
    """Authenticated / unauthenticated flag for one browser page.

    Created by the page and passed to whatever needs it. ``init`` reads the
    stored credential once; until it has run ``loading`` is True and the
    route guard stays quiet.
    """

    def __init__(self, storage, token_key: str = TOKEN_STORAGE_KEY):
        self._storage = storage
        self._token_key = token_key
        self._listeners: list[Callable[[], None]] = []
        self.token: str | None = None
        self.loading = True

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def on_change(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    async def init(self) -> None:
        if not self.loading:
            return
        self.token = await self._storage.get_item(self._token_key) or None
        self.loading = False
        self._notify()

    async def login(self, token: str) -> None:
        await self._storage.set_item(self._token_key, token)
        self.token = token
        self.loading = False
        self._notify()

    async def logout(self) -> None:
        self.token = None
        self.loading = False
        # Listeners may navigate away; the stored credential must be gone first
        await self._storage.remove_item(self._token_key)
        logger.info("Session cleared")
        self._notify()

    def redirect_target(self) -> str | None:
        """Where an unauthenticated viewer of a protected page should go."""
        if self.loading or self.is_authenticated:
            return None
        return SIGN_IN_PATH

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
