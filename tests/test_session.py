"""Tests for SessionContext and the sign-in route guard."""
import asyncio

from conftest import MemoryStorage
from src.services.session import SIGN_IN_PATH, SessionContext


class TestInit:
    def test_loading_until_init(self):
        session = SessionContext(MemoryStorage({"token": "abc"}))
        assert session.loading is True
        assert session.is_authenticated is False
        assert session.redirect_target() is None

    def test_stored_token_means_authenticated(self):
        session = SessionContext(MemoryStorage({"token": "abc"}))
        asyncio.run(session.init())
        assert session.loading is False
        assert session.is_authenticated is True
        assert session.token == "abc"

    def test_no_token_means_unauthenticated(self):
        session = SessionContext(MemoryStorage())
        asyncio.run(session.init())
        assert session.is_authenticated is False
        assert session.redirect_target() == SIGN_IN_PATH

    def test_empty_token_is_not_a_credential(self):
        session = SessionContext(MemoryStorage({"token": ""}))
        asyncio.run(session.init())
        assert session.is_authenticated is False

    def test_storage_read_once(self):
        storage = MemoryStorage({"token": "abc"})
        session = SessionContext(storage)
        asyncio.run(session.init())
        asyncio.run(session.init())
        assert storage.reads == ["token"]


class TestTransitions:
    def test_login_stores_token(self):
        storage = MemoryStorage()
        session = SessionContext(storage)
        asyncio.run(session.init())

        asyncio.run(session.login("fresh"))

        assert storage.items["token"] == "fresh"
        assert session.is_authenticated is True
        assert session.redirect_target() is None

    def test_logout_clears_credential_and_redirects(self):
        storage = MemoryStorage({"token": "abc"})
        session = SessionContext(storage)
        asyncio.run(session.init())

        asyncio.run(session.logout())

        assert "token" not in storage.items
        assert session.is_authenticated is False
        assert session.redirect_target() == SIGN_IN_PATH

    def test_storage_is_cleared_before_listeners_run(self):
        storage = MemoryStorage({"token": "abc"})
        session = SessionContext(storage)
        asyncio.run(session.init())
        seen = []
        session.on_change(lambda: seen.append(
            ("token" in storage.items, session.redirect_target())
        ))

        asyncio.run(session.logout())

        assert seen == [(False, SIGN_IN_PATH)]

    def test_listeners_run_on_every_transition(self):
        session = SessionContext(MemoryStorage())
        calls = []
        session.on_change(lambda: calls.append(session.is_authenticated))

        asyncio.run(session.init())
        asyncio.run(session.login("t"))
        asyncio.run(session.logout())

        assert calls == [False, True, False]
