# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for replaying clock commands from JSON.

Usage:
    python -m unix_clock.runner < input.json > output.json

Exports:
    Executor: Replays commands and renders the view
    RunnerInput: Input schema
    RunnerOutput: Output schema
"""

from .executor import Executor
from .schema import (
    ClockSettingsSchema,
    ClockViewSchema,
    CommandSchema,
    RunnerInput,
    RunnerOutput,
)

__all__ = [
    "ClockSettingsSchema",
    "ClockViewSchema",
    "CommandSchema",
    "Executor",
    "RunnerInput",
    "RunnerOutput",
]
