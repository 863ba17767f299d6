# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of
``python -m unix_clock.runner``.
"""

from __future__ import annotations

import os
from datetime import timedelta, timezone, tzinfo

from pydantic import BaseModel, Field


def _env_offset() -> int | None:
    raw = os.getenv("UNIX_CLOCK_UTC_OFFSET_MINUTES", "").strip()
    return int(raw) if raw else None


class ClockSettingsSchema(BaseModel):
    """Display settings.

    Attributes:
        utc_offset_minutes: Fixed offset used as the "local" timezone.
                            Falls back to the UNIX_CLOCK_UTC_OFFSET_MINUTES
                            env var, then to the host's local timezone.
    """

    utc_offset_minutes: int | None = Field(
        default_factory=_env_offset, gt=-1440, lt=1440, validate_default=True
    )

    def tz(self) -> tzinfo | None:
        if self.utc_offset_minutes is None:
            return None
        return timezone(timedelta(minutes=self.utc_offset_minutes))


class CommandSchema(BaseModel):
    """Single engine operation.

    Attributes:
        op:    One of ``tick``, ``pause``, ``resume``, ``set_period``,
               ``set_base``, ``set_base_text``, ``set_current``, ``reset``.
        value: Operation argument (seconds, period code or edit text).
    """

    op: str
    value: int | str | None = None


class RunnerInput(BaseModel):
    """Complete input read from stdin.

    Attributes:
        now:      Pins the wall clock to this timestamp.  Uses the
                  system clock when omitted.
        settings: Display settings.
        commands: Operations replayed in order on a fresh engine.
    """

    now: int | None = None
    settings: ClockSettingsSchema = Field(default_factory=ClockSettingsSchema)
    commands: list[CommandSchema] = Field(default_factory=list)


class ClockViewSchema(BaseModel):
    """Rendered display after all commands were applied."""

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


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema, even on
    errors.

    Attributes:
        success:    Whether every command was applied.
        view:       Display state (on success).
        rejected:   Indexes of ``set_base_text`` commands whose text did not
                    parse.  Those were ignored; they do not fail the run.
        error:      Error message (on failure).
        error_type: Error class name (on failure).
    """

    success: bool
    view: ClockViewSchema | None = None
    rejected: list[int] = Field(default_factory=list)
    error: str = ""
    error_type: str = ""
