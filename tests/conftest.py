"""Shared test fixtures."""

from datetime import timedelta, timezone

import pytest

from unix_clock import ClockEngine


class FakeClock:
    def __init__(self, start: int = 1000):
        self._now = start

    def now(self) -> int:
        return self._now

    def set(self, seconds: int) -> None:
        self._now = seconds

    def advance(self, seconds: int) -> None:
        self._now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(clock):
    return ClockEngine(clock=clock)


@pytest.fixture
def ist():
    return timezone(timedelta(hours=5, minutes=30))


@pytest.fixture
def pst():
    return timezone(timedelta(hours=-8))
