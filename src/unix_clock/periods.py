"""Duration table — maps a period code to the number of seconds it adds."""

from __future__ import annotations

from typing import Literal, get_args

PeriodCode = Literal["5m", "10m", "15m", "30m", "1h", "6h", "12h", "24h", "2d", "7d", "30d"]

DEFAULT_PERIOD: PeriodCode = "24h"

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR

_DURATIONS: dict[str, int] = {
    "5m": 5 * _MINUTE,
    "10m": 10 * _MINUTE,
    "15m": 15 * _MINUTE,
    "30m": 30 * _MINUTE,
    "1h": _HOUR,
    "6h": 6 * _HOUR,
    "12h": 12 * _HOUR,
    "24h": 24 * _HOUR,
    "2d": 2 * _DAY,
    "7d": 7 * _DAY,
    "30d": 30 * _DAY,
}

# Selector entries, in display order.
PERIOD_OPTIONS: tuple[tuple[PeriodCode, str], ...] = (
    ("5m", "5 minutes"),
    ("10m", "10 minutes"),
    ("15m", "15 minutes"),
    ("30m", "30 minutes"),
    ("1h", "1 hour"),
    ("6h", "6 hours"),
    ("12h", "12 hours"),
    ("24h", "24 hours"),
    ("2d", "2 days"),
    ("7d", "7 days"),
    ("30d", "30 days"),
)

PERIOD_CODES: tuple[PeriodCode, ...] = get_args(PeriodCode)

_LABELS: dict[str, str] = dict(PERIOD_OPTIONS)


def is_period_code(value: object) -> bool:
    """Return ``True`` if *value* is one of the known period codes."""
    return isinstance(value, str) and value in _DURATIONS


def coerce_period(value: object) -> PeriodCode:
    """Map *value* onto a known period code, falling back to :data:`DEFAULT_PERIOD`."""
    if is_period_code(value):
        return value  # type: ignore[return-value]
    return DEFAULT_PERIOD


def duration_of(code: object) -> int:
    """Return the duration of *code* in seconds.

    Total over any input: unknown codes resolve to the 24 hour default.
    """
    return _DURATIONS[coerce_period(code)]


def label_of(code: object) -> str:
    """Return the selector label for *code* (``"24 hours"`` for unknown codes)."""
    return _LABELS[coerce_period(code)]
