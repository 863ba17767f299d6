"""Clipboard sink and the transient "copied" acknowledgment."""

from __future__ import annotations

import asyncio
import logging
import shutil
import subprocess
from collections.abc import Sequence
from typing import Protocol

from unix_clock.exceptions import ClipboardError

logger = logging.getLogger("unix_clock.clipboard")

DEFAULT_ACK_SECONDS = 1.5

# Tried in order; the first one found on PATH wins.
_CANDIDATE_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class ClipboardSink(Protocol):
    """Protocol for writing text to the system clipboard.

    ``copy`` returns ``True`` on success and ``False`` when the host rejects
    the write.
    """

    def copy(self, text: str) -> bool: ...


class CommandClipboard:
    """Pipes text into a platform clipboard command.

    Parameters:
        command: Explicit argv to run.  When omitted, the first of
                 ``pbcopy``, ``wl-copy``, ``xclip``, ``xsel`` and ``clip``
                 found on ``PATH`` is used.
        timeout: Seconds to wait for the command.
    """

    def __init__(self, command: Sequence[str] | None = None, timeout: float = 5.0) -> None:
        self._command = tuple(command) if command else None
        self._timeout = timeout

    def resolve_command(self) -> tuple[str, ...] | None:
        if self._command:
            return self._command
        for candidate in _CANDIDATE_COMMANDS:
            if shutil.which(candidate[0]):
                return candidate
        return None

    def copy_or_raise(self, text: str) -> None:
        """Copy *text*.

        Raises:
            ClipboardError: No command is available, or the command failed.
        """
        cmd = self.resolve_command()
        if cmd is None:
            raise ClipboardError("<none>", "no clipboard command found on PATH")

        try:
            res = subprocess.run(
                list(cmd),
                input=text,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ClipboardError(cmd[0], str(e)) from e

        if res.returncode != 0:
            raise ClipboardError(cmd[0], res.stderr.strip() or f"exit code {res.returncode}")

    def copy(self, text: str) -> bool:
        try:
            self.copy_or_raise(text)
        except ClipboardError as e:
            logger.info("%s", e)
            return False
        return True


class CopyFeedback:
    """Tracks the "copied" acknowledgment shown next to a copy button.

    A successful copy sets :attr:`copied` for *ack_seconds*; a repeated
    copy restarts the window.  A rejected copy is swallowed and leaves the
    acknowledgment as it was.

    Parameters:
        sink:        Where text is copied to.
        ack_seconds: How long :attr:`copied` stays ``True``.
    """

    def __init__(self, sink: ClipboardSink, ack_seconds: float = DEFAULT_ACK_SECONDS) -> None:
        self._sink = sink
        self._ack_seconds = ack_seconds
        self._copied = False
        self._handle: asyncio.TimerHandle | None = None

    @property
    def copied(self) -> bool:
        return self._copied

    async def copy(self, text: str) -> bool:
        """Copy *text* without blocking the event loop.  Returns success."""
        try:
            ok = await asyncio.to_thread(self._sink.copy, text)
        except ClipboardError as e:
            logger.info("%s", e)
            ok = False
        if not ok:
            return False

        self._cancel_timer()
        self._copied = True
        self._handle = asyncio.get_running_loop().call_later(self._ack_seconds, self._clear)
        return True

    def close(self) -> None:
        self._cancel_timer()
        self._copied = False

    def _clear(self) -> None:
        self._copied = False
        self._handle = None

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
