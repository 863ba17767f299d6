"""Wall clock abstraction for testable time-dependent logic."""

from __future__ import annotations

import time
from typing import Protocol


class WallClock(Protocol):
    """Protocol for getting the current UNIX time.  Inject a fake in tests."""

    def now(self) -> int: ...


class SystemClock:
    """Default clock backed by the real system time, in whole seconds."""

    def now(self) -> int:
        return int(time.time())


class FixedClock:
    """Clock pinned to a single instant.  Used by the runner when ``now`` is given."""

    def __init__(self, seconds: int) -> None:
        self._seconds = seconds

    def now(self) -> int:
        return self._seconds
