"""Debounce a changing value with a cancellable delayed asyncio task."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DebounceTimer(Generic[T]):
    """Hold back a rapidly-changing value until it stops changing.

    Each ``push`` cancels the pending delayed task and schedules a new one,
    so only a value left alone for ``delay`` seconds becomes ``settled``.
    Intermediate values are dropped, never queued.

    Must be used from inside a running event loop.

    Args:
        delay: Seconds the value must stay unchanged.
        initial: Settled value before anything is pushed.
        on_settle: Optional callback (sync or async) called with each newly
            settled value.
    """

    def __init__(
        self,
        delay: float,
        initial: T,
        on_settle: Callable[[T], Awaitable[None] | None] | None = None,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self._delay = delay
        self._settled = initial
        self._pending_value: T = initial
        self._on_settle = on_settle
        self._task: asyncio.Task[None] | None = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def settled(self) -> T:
        """The last value that stayed unchanged for the full delay."""
        return self._settled

    @property
    def pending(self) -> bool:
        """Whether a pushed value is still waiting out the delay."""
        return self._task is not None

    def push(self, value: T) -> None:
        """Record a new input value and restart the delay."""
        self._cancel_task()
        self._pending_value = value
        self._task = asyncio.get_running_loop().create_task(self._settle_after_delay(value))

    def cancel(self) -> None:
        """Drop the pending value without settling it."""
        self._cancel_task()
        self._pending_value = self._settled

    async def flush(self) -> None:
        """Settle the pending value now instead of waiting out the delay."""
        if self._task is None:
            return
        self._cancel_task()
        await self._settle(self._pending_value)

    async def wait(self) -> None:
        """Wait until no value is pending (including values pushed meanwhile)."""
        while self._task is not None:
            await asyncio.wait({self._task})

    async def _settle_after_delay(self, value: T) -> None:
        await asyncio.sleep(self._delay)
        # Detach first so a push from inside the callback cannot cancel it.
        self._task = None
        await self._settle(value)

    async def _settle(self, value: T) -> None:
        self._settled = value
        logger.debug("Debounced value settled: %r", value)
        if self._on_settle is None:
            return
        result = self._on_settle(value)
        if inspect.isawaitable(result):
            await result

    def _cancel_task(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
