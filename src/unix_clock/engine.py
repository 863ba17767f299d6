"""ClockEngine — owns the base timestamp, the paused flag and the selected period."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from unix_clock._internal.clock import SystemClock, WallClock
from unix_clock.formatter import ParseFailure, from_editable_local
from unix_clock.periods import DEFAULT_PERIOD, PeriodCode, coerce_period, duration_of

if TYPE_CHECKING:
    from datetime import tzinfo

logger = logging.getLogger("unix_clock.engine")


@dataclass(frozen=True)
class ClockState:
    """Immutable snapshot of the engine state.

    Attributes:
        base_seconds:    The timestamp currently shown as "now".
        paused:          ``True`` while the live clock is frozen.
        selected_period: Period added to ``base_seconds`` to get the future time.
    """

    base_seconds: int
    paused: bool
    selected_period: PeriodCode

    @property
    def future_seconds(self) -> int:
        return self.base_seconds + duration_of(self.selected_period)


Subscriber = Callable[[ClockState], None]


class ClockEngine:
    """State machine with two states, ``Running`` and ``Paused``.

    While running, ``tick`` moves the base timestamp to the wall-clock time
    it is given.  While paused, ticks are ignored and the base only changes
    through explicit operations.  Editing the base always freezes the clock
    so the ticker cannot overwrite a manual value.

    The wall clock is only read through the injected *clock*.  No operation
    raises; unknown period codes resolve to the 24 hour default.

    Parameters:
        clock: Wall clock source.  Defaults to :class:`SystemClock`.
    """

    def __init__(self, clock: WallClock | None = None) -> None:
        self._clock: WallClock = clock or SystemClock()
        self._base_seconds = self._clock.now()
        self._paused = False
        self._period: PeriodCode = DEFAULT_PERIOD
        self._subscribers: list[Subscriber] = []

    # ── state ────────────────────────────────────────────────

    @property
    def state(self) -> ClockState:
        return ClockState(
            base_seconds=self._base_seconds,
            paused=self._paused,
            selected_period=self._period,
        )

    @property
    def base_seconds(self) -> int:
        return self._base_seconds

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def selected_period(self) -> PeriodCode:
        return self._period

    @property
    def clock(self) -> WallClock:
        return self._clock

    def get_future_seconds(self) -> int:
        """Return ``base_seconds + duration_of(selected_period)``, computed fresh."""
        return self._base_seconds + duration_of(self._period)

    # ── operations ───────────────────────────────────────────

    def tick(self, now: int) -> None:
        """Advance the base to *now*.  Ignored while paused."""
        if self._paused:
            return
        if now != self._base_seconds:
            self._base_seconds = now
            self._notify()

    def pause(self) -> None:
        if self._paused:
            return
        self._paused = True
        logger.debug("paused at %d", self._base_seconds)
        self._notify()

    def resume(self) -> None:
        """Unfreeze and resynchronize the base to the wall clock immediately."""
        self._paused = False
        self._base_seconds = self._clock.now()
        logger.debug("resumed at %d", self._base_seconds)
        self._notify()

    def set_period(self, code: str) -> None:
        resolved = coerce_period(code)
        if resolved != code:
            logger.debug("unknown period %r, using %s", code, resolved)
        self._period = resolved
        self._notify()

    def set_base_manually(self, seconds: int) -> None:
        """Set the base to *seconds* and freeze the clock."""
        self._base_seconds = seconds
        self._paused = True
        logger.debug("base set manually to %d", seconds)
        self._notify()

    def set_base_from_text(self, text: str, tz: tzinfo | None = None) -> bool:
        """Parse *text* as an editable local time and apply it as the base.

        Returns ``False`` and leaves the state untouched when *text* does
        not parse.
        """
        result = from_editable_local(text, tz)
        if isinstance(result, ParseFailure):
            logger.debug("ignoring base edit %r: %s", result.text, result.reason)
            return False
        self.set_base_manually(result)
        return True

    def set_to_current_frozen(self) -> None:
        """Set the base to the wall clock and freeze it there."""
        self._base_seconds = self._clock.now()
        self._paused = True
        logger.debug("frozen at current time %d", self._base_seconds)
        self._notify()

    def reset(self) -> None:
        """Return to the initial configuration: 24h period, running, base = now."""
        self._period = DEFAULT_PERIOD
        self._paused = False
        self._base_seconds = self._clock.now()
        logger.debug("reset at %d", self._base_seconds)
        self._notify()

    # ── observers ────────────────────────────────────────────

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call *callback* with a fresh snapshot after every state change.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        if not self._subscribers:
            return
        snapshot = self.state
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                logger.warning("clock subscriber %r failed", callback, exc_info=True)
