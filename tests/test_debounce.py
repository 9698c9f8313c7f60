"""Tests for the trailing-edge Debouncer."""
import asyncio

from src.services.debounce import Debouncer


class TestDebouncer:
    def test_emits_last_value_once_after_quiet_period(self):
        received = []

        async def scenario():
            debouncer = Debouncer(0.05, received.append)
            for value in ["l", "la", "lam", "lamp"]:
                debouncer.push(value)
                await asyncio.sleep(0.01)
            await asyncio.sleep(0.15)
            return debouncer

        debouncer = asyncio.run(scenario())

        assert received == ["lamp"]
        assert debouncer.value == "lamp"
        assert debouncer.pending is False

    def test_each_quiet_period_emits_once(self):
        received = []

        async def scenario():
            debouncer = Debouncer(0.03, received.append)
            debouncer.push("a")
            await asyncio.sleep(0.1)
            debouncer.push("b")
            debouncer.push("bc")
            await asyncio.sleep(0.1)

        asyncio.run(scenario())

        assert received == ["a", "bc"]

    def test_nothing_emitted_before_delay(self):
        received = []

        async def scenario():
            debouncer = Debouncer(0.2, received.append)
            debouncer.push("x")
            await asyncio.sleep(0.05)
            assert debouncer.pending is True
            debouncer.cancel()

        asyncio.run(scenario())

        assert received == []

    def test_cancel_drops_pending_value(self):
        received = []

        async def scenario():
            debouncer = Debouncer(0.03, received.append, initial="seed")
            debouncer.push("typed")
            debouncer.cancel()
            await asyncio.sleep(0.1)
            return debouncer

        debouncer = asyncio.run(scenario())

        assert received == []
        assert debouncer.value == "seed"

    def test_coroutine_callback_is_awaited(self):
        received = []

        async def handler(value):
            await asyncio.sleep(0)
            received.append(value)

        async def scenario():
            debouncer = Debouncer(0.02, handler)
            debouncer.push({"name": "lamp"})
            await asyncio.sleep(0.1)

        asyncio.run(scenario())

        assert received == [{"name": "lamp"}]
