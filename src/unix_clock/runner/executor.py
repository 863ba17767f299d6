# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for replaying clock commands.

Orchestrates the full flow:
1. Pick the wall clock (pinned or system)
2. Build a ClockEngine
3. Apply each command in order
4. Render the resulting view
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import tzinfo

from unix_clock._internal.clock import FixedClock, SystemClock, WallClock
from unix_clock.engine import ClockEngine
from unix_clock.exceptions import RunnerCommandError
from unix_clock.view import render

from .schema import ClockViewSchema, CommandSchema, RunnerInput, RunnerOutput

logger = logging.getLogger("unix_clock.runner")


class Executor:
    """Replays commands on a fresh engine and renders the result.

    The executor is designed for dependency injection to support testing.
    Pass a clock to the constructor to use it when the input does not pin
    ``now``.

    Example:
        executor = Executor()
        output = executor.execute(input_data)
    """

    def __init__(self, clock: WallClock | None = None) -> None:
        self._injected_clock = clock

    def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Run *input_data*, converting every failure into a ``RunnerOutput``."""
        try:
            return self._execute_internal(input_data)
        except RunnerCommandError as e:
            return RunnerOutput(
                success=False,
                error=str(e),
                error_type="RunnerCommandError",
            )
        except Exception as e:
            return RunnerOutput(
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )

    def _execute_internal(self, input_data: RunnerInput) -> RunnerOutput:
        clock = self._create_clock(input_data)
        tz = input_data.settings.tz()
        engine = ClockEngine(clock=clock)

        rejected: list[int] = []
        for index, command in enumerate(input_data.commands):
            if not self._apply(engine, command, tz):
                rejected.append(index)

        view = render(engine, tz=tz)
        return RunnerOutput(
            success=True,
            view=ClockViewSchema(**view.to_dict()),
            rejected=rejected,
        )

    def _create_clock(self, input_data: RunnerInput) -> WallClock:
        if input_data.now is not None:
            return FixedClock(input_data.now)
        return self._injected_clock or SystemClock()

    def _apply(self, engine: ClockEngine, command: CommandSchema, tz: tzinfo | None) -> bool:
        """Apply one command.  Returns ``False`` when edit text was rejected.

        Raises:
            RunnerCommandError: Unknown operation or missing argument.
        """
        op, value = command.op, command.value

        if op == "set_base_text":
            return engine.set_base_from_text("" if value is None else str(value), tz)

        if op == "tick":
            engine.tick(self._int_value(op, value) if value is not None else engine.clock.now())
        elif op == "set_base":
            engine.set_base_manually(self._int_value(op, value))
        elif op == "set_period":
            if value is None:
                raise RunnerCommandError(op, "requires a period code")
            engine.set_period(str(value))
        else:
            action = self._simple_ops(engine).get(op)
            if action is None:
                raise RunnerCommandError(op)
            action()

        logger.debug("applied %s", op)
        return True

    @staticmethod
    def _simple_ops(engine: ClockEngine) -> dict[str, Callable[[], None]]:
        return {
            "pause": engine.pause,
            "resume": engine.resume,
            "reset": engine.reset,
            "set_current": engine.set_to_current_frozen,
        }

    @staticmethod
    def _int_value(op: str, value: int | str | None) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                pass
        raise RunnerCommandError(op, f"requires an integer value, got {value!r}")
