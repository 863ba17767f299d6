"""ClockSession — the lifetime scope that owns an engine and its ticker."""

from __future__ import annotations

from typing import TYPE_CHECKING

from unix_clock.engine import ClockEngine
from unix_clock.ticker import DEFAULT_TICK_INTERVAL, Ticker

if TYPE_CHECKING:
    from datetime import tzinfo

    from unix_clock._internal.clock import WallClock


class ClockSession:
    """Keeps the ticker running exactly while the engine is running.

    Every operation of :class:`ClockEngine` is mirrored here.  Operations that
    freeze the clock stop the ticker; ``resume`` and ``reset`` resynchronize
    first and then restart it.  Use as an async context manager, or call
    :meth:`start` and :meth:`aclose` yourself.

    Example:
        async with ClockSession() as session:
            session.set_period("1h")
            print(session.engine.get_future_seconds())
    """

    def __init__(
        self,
        engine: ClockEngine | None = None,
        *,
        clock: WallClock | None = None,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        self._engine = engine or ClockEngine(clock=clock)
        self._ticker = Ticker(self._engine, tick_interval)
        self._closed = False

    @property
    def engine(self) -> ClockEngine:
        return self._engine

    @property
    def ticker(self) -> Ticker:
        return self._ticker

    @property
    def closed(self) -> bool:
        return self._closed

    # ── lifetime ─────────────────────────────────────────────

    def start(self) -> None:
        if not self._closed and not self._engine.paused:
            self._ticker.start()

    async def aclose(self) -> None:
        self._closed = True
        await self._ticker.aclose()

    async def __aenter__(self) -> ClockSession:
        self.start()
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    # ── operations ───────────────────────────────────────────

    def pause(self) -> None:
        self._ticker.stop()
        self._engine.pause()

    def resume(self) -> None:
        self._engine.resume()
        self._restart()

    def set_period(self, code: str) -> None:
        self._engine.set_period(code)

    def set_base_manually(self, seconds: int) -> None:
        self._ticker.stop()
        self._engine.set_base_manually(seconds)

    def set_base_from_text(self, text: str, tz: tzinfo | None = None) -> bool:
        applied = self._engine.set_base_from_text(text, tz)
        if applied:
            self._ticker.stop()
        return applied

    def set_to_current_frozen(self) -> None:
        self._ticker.stop()
        self._engine.set_to_current_frozen()

    def reset(self) -> None:
        self._engine.reset()
        self._restart()

    def _restart(self) -> None:
        if not self._closed:
            self._ticker.start()
