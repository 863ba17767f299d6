"""Timestamp formatter — epoch seconds to display strings and back.

All functions are pure.  ``tz`` arguments take any :class:`datetime.tzinfo`;
``None`` means the host's local timezone.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo

_EDITABLE_FORMATS = (
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H:%M:%S.%f",
)


@dataclass(frozen=True)
class ParseFailure:
    """Returned by :func:`from_editable_local` when *text* is not a valid date-time.

    Attributes:
        text:   The rejected input, verbatim.
        reason: Human-readable explanation.
    """

    text: str
    reason: str = ""


def is_parse_failure(value: object) -> bool:
    return isinstance(value, ParseFailure)


def _local(sec: int, tz: tzinfo | None) -> datetime:
    if tz is None:
        return datetime.fromtimestamp(sec)
    return datetime.fromtimestamp(sec, tz)


def _render(d: datetime, sep: str) -> str:
    return (
        f"{d.year:04d}-{d.month:02d}-{d.day:02d}"
        f"{sep}{d.hour:02d}:{d.minute:02d}:{d.second:02d}"
    )


def format_local(sec: int, tz: tzinfo | None = None) -> str:
    """Render ``YYYY-MM-DD HH:MM:SS`` in the local timezone."""
    return _render(_local(sec, tz), " ")


def format_utc(sec: int) -> str:
    """Render ``YYYY-MM-DD HH:MM:SS`` in UTC."""
    return _render(datetime.fromtimestamp(sec, UTC), " ")


def to_editable_local(sec: int, tz: tzinfo | None = None) -> str:
    """Render ``YYYY-MM-DDTHH:MM:SS`` for a date-time edit control."""
    return _render(_local(sec, tz), "T")


def from_editable_local(text: str, tz: tzinfo | None = None) -> int | ParseFailure:
    """Parse an edit-control string as local wall-clock time.

    Accepts ``YYYY-MM-DDTHH:MM:SS`` and the minute-granularity
    ``YYYY-MM-DDTHH:MM``.  Fractional seconds are truncated toward zero.

    Returns:
        Whole seconds since epoch, or a :class:`ParseFailure` for malformed
        text.  Never raises.
    """
    if not isinstance(text, str):
        return ParseFailure(repr(text), "not a string")

    candidate = text.strip()
    parsed: datetime | None = None
    for fmt in _EDITABLE_FORMATS:
        try:
            parsed = datetime.strptime(candidate, fmt)
            break
        except ValueError:
            continue

    if parsed is None:
        return ParseFailure(text, "expected YYYY-MM-DDTHH:MM[:SS]")

    if tz is not None:
        parsed = parsed.replace(tzinfo=tz)

    try:
        return int(parsed.timestamp())
    except (OverflowError, OSError, ValueError) as e:
        return ParseFailure(text, f"out of range: {e}")


def format_thousands(n: int) -> str:
    """``86400 -> "86,400"``."""
    return f"{n:,}"
