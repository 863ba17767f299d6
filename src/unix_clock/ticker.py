"""Ticker — a cancellable once-per-interval timer driving ``ClockEngine.tick``."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import warnings
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from unix_clock.engine import ClockEngine

logger = logging.getLogger("unix_clock.ticker")

DEFAULT_TICK_INTERVAL = 1.0


class Ticker:
    """Runs one asyncio task that ticks *engine* every *interval* seconds.

    ``stop`` cancels the task synchronously: once it returns, no pending
    firing can reach the engine, because the task is resumed with
    ``CancelledError`` instead of completing its sleep.

    Must be started from inside a running event loop.

    Parameters:
        engine:   The engine to tick.  Its clock supplies the tick value.
        interval: Seconds between firings.  Non-positive values fall back
                  to :data:`DEFAULT_TICK_INTERVAL` with a warning.
    """

    def __init__(self, engine: ClockEngine, interval: float = DEFAULT_TICK_INTERVAL) -> None:
        if interval <= 0:
            warnings.warn(
                f"tick interval must be positive, got {interval}; "
                f"using {DEFAULT_TICK_INTERVAL}",
                RuntimeWarning,
                stacklevel=2,
            )
            interval = DEFAULT_TICK_INTERVAL
        self._engine = engine
        self._interval = interval
        self._task: asyncio.Task[None] | None = None
        self._cancelled: set[asyncio.Task[None]] = set()

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start firing.  No-op if already running."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("ticker started (interval=%ss)", self._interval)

    def stop(self) -> None:
        """Stop firing.  No-op if not running."""
        if self._task is None:
            return
        if not self._task.done():
            self._task.cancel()
            self._cancelled.add(self._task)
            self._task.add_done_callback(self._cancelled.discard)
            logger.debug("ticker stopped")
        self._task = None

    async def aclose(self) -> None:
        """Stop firing and wait until every cancelled task has finished."""
        self.stop()
        for task in list(self._cancelled):
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self._engine.tick(self._engine.clock.now())
            except Exception:
                logger.warning("tick failed, will retry next interval", exc_info=True)
