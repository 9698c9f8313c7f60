"""Trailing-edge debounce on the running asyncio loop."""
import asyncio
import inspect
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Propagate a changing value only after it has been quiet for *delay* seconds.

    Every ``push`` restarts the timer. When it finally expires the callback
    receives the last pushed value, exactly once. Intermediate values are
    dropped. Coroutine callbacks are scheduled as tasks on the same loop.

    Same cancel-and-restart shape as a one-shot ``ui.timer`` search debounce,
    but on ``loop.call_later`` so it runs without a connected client.
    """

    def __init__(self, delay: float, callback: Callable[[Any], Any], initial: Any = None):
        self.delay = delay
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None
        self._pending: Any = None
        self._tasks: set[asyncio.Task] = set()
        self.value = initial

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: Any) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._pending = value
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        """Drop a pending value without propagating it."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._pending = None

    def _fire(self) -> None:
        self._handle = None
        value, self._pending = self._pending, None
        self.value = value
        result = self._callback(value)
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Debounced callback failed: %s", task.exception())
