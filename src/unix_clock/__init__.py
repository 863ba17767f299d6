"""unix_clock — a live UNIX timestamp with a selectable offset into the future.

The engine holds one base timestamp that follows the wall clock while
running and stays put while paused.  The future timestamp is always the
base plus the selected period, never stored.
"""

from unix_clock._internal.clock import FixedClock, SystemClock, WallClock
from unix_clock.clipboard import ClipboardSink, CommandClipboard, CopyFeedback
from unix_clock.engine import ClockEngine, ClockState
from unix_clock.exceptions import ClipboardError, ClockError, RunnerCommandError
from unix_clock.formatter import (
    ParseFailure,
    format_local,
    format_utc,
    from_editable_local,
    is_parse_failure,
    to_editable_local,
)
from unix_clock.periods import DEFAULT_PERIOD, PERIOD_OPTIONS, PeriodCode, duration_of
from unix_clock.session import ClockSession
from unix_clock.ticker import Ticker
from unix_clock.view import ClockView, render
from unix_clock.zone import SystemZoneLabel, ZoneLabelSource, zone_label

__all__ = [
    "DEFAULT_PERIOD",
    "PERIOD_OPTIONS",
    "ClipboardError",
    "ClipboardSink",
    "ClockEngine",
    "ClockError",
    "ClockSession",
    "ClockState",
    "ClockView",
    "CommandClipboard",
    "CopyFeedback",
    "FixedClock",
    "ParseFailure",
    "PeriodCode",
    "RunnerCommandError",
    "SystemClock",
    "SystemZoneLabel",
    "Ticker",
    "WallClock",
    "ZoneLabelSource",
    "duration_of",
    "format_local",
    "format_utc",
    "from_editable_local",
    "is_parse_failure",
    "render",
    "to_editable_local",
    "zone_label",
]
