"""Custom exceptions for the unix_clock package."""

from __future__ import annotations


class ClockError(Exception):
    """Base exception for all unix_clock errors."""


class ClipboardError(ClockError):
    """Raised when the host rejects a clipboard write."""

    def __init__(self, command: str, detail: str = "") -> None:
        self.command = command
        msg = f"Clipboard command '{command}' failed"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class RunnerCommandError(ClockError):
    """Raised when the runner receives a command it cannot apply."""

    def __init__(self, op: str, detail: str = "") -> None:
        self.op = op
        msg = f"Cannot apply clock operation '{op}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
