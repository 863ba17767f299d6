"""ClockView — the values a display renders for one engine snapshot."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from unix_clock.formatter import format_local, format_thousands, format_utc
from unix_clock.periods import duration_of
from unix_clock.zone import SystemZoneLabel, ZoneLabelSource, zone_label

if TYPE_CHECKING:
    from datetime import tzinfo

    from unix_clock.engine import ClockEngine


@dataclass(frozen=True)
class ClockView:
    """Display read-model.

    Zone labels are looked up per instant, so ``now_zone`` and
    ``future_zone`` differ when a DST change falls in between.
    """

    now_seconds: int
    now_local: str
    now_utc: str
    now_zone: str
    future_seconds: int
    future_local: str
    future_utc: str
    future_zone: str
    adding_seconds: int
    adding_label: str
    period: str
    paused: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def render(
    engine: ClockEngine,
    zone_source: ZoneLabelSource | None = None,
    tz: tzinfo | None = None,
) -> ClockView:
    """Build a :class:`ClockView` from the engine's current state."""
    source = zone_source or SystemZoneLabel(tz)
    state = engine.state
    now = state.base_seconds
    adding = duration_of(state.selected_period)
    future = engine.get_future_seconds()

    return ClockView(
        now_seconds=now,
        now_local=format_local(now, tz),
        now_utc=format_utc(now),
        now_zone=zone_label(source, now),
        future_seconds=future,
        future_local=format_local(future, tz),
        future_utc=format_utc(future),
        future_zone=zone_label(source, future),
        adding_seconds=adding,
        adding_label=f"Currently adding {format_thousands(adding)} seconds.",
        period=state.selected_period,
        paused=state.paused,
    )
