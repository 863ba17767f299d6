"""Tests for the runner executor."""

import pytest
from pydantic import ValidationError

from unix_clock.runner.executor import Executor
from unix_clock.runner.schema import (
    ClockSettingsSchema,
    CommandSchema,
    RunnerInput,
)

UTC_SETTINGS = ClockSettingsSchema(utc_offset_minutes=0)


def run(*commands, now=1000, settings=UTC_SETTINGS):
    input_data = RunnerInput(
        now=now,
        settings=settings,
        commands=[CommandSchema(op=op, value=value) for op, value in commands],
    )
    return Executor().execute(input_data)


class TestScenarios:
    """End-to-end command replays."""

    def test_no_commands(self):
        output = run()
        assert output.success
        assert output.view.now_seconds == 1000
        assert output.view.future_seconds == 1000 + 86400
        assert output.view.paused is False
        assert output.rejected == []

    def test_one_hour_period(self):
        output = run(("set_period", "1h"))
        assert output.view.future_seconds == 4600
        assert output.view.adding_label == "Currently adding 3,600 seconds."

    def test_manual_base_then_tick(self):
        output = run(("set_base", 2000), ("tick", 9999))
        assert output.view.paused is True
        assert output.view.now_seconds == 2000

    def test_tick_without_value_uses_clock(self):
        output = run(("tick", 1234), ("tick", None))
        assert output.view.now_seconds == 1000

    def test_bad_text_is_rejected_not_fatal(self):
        output = run(("set_period", "5m"), ("set_base_text", "not-a-date"))
        assert output.success
        assert output.rejected == [1]
        assert output.view.now_seconds == 1000
        assert output.view.paused is False
        assert output.view.period == "5m"

    def test_text_edit_uses_configured_offset(self):
        settings = ClockSettingsSchema(utc_offset_minutes=60)
        output = run(("set_base_text", "1970-01-01T01:00:00"), settings=settings)
        assert output.view.now_seconds == 0
        assert output.view.now_local == "1970-01-01 01:00:00"
        assert output.view.now_utc == "1970-01-01 00:00:00"

    def test_pause_resume_reset(self):
        output = run(("set_period", "7d"), ("pause", None), ("resume", None), ("reset", None))
        assert output.view.period == "24h"
        assert output.view.paused is False

    def test_set_current(self):
        output = run(("set_base", 5), ("set_current", None), ("tick", 2000))
        assert output.view.now_seconds == 1000
        assert output.view.paused is True

    def test_numeric_string_base(self):
        output = run(("set_base", "2000"))
        assert output.view.now_seconds == 2000


class TestErrors:
    """Failures come back as RunnerOutput, never as exceptions."""

    def test_unknown_op(self):
        output = run(("explode", None))
        assert not output.success
        assert output.error_type == "RunnerCommandError"
        assert "explode" in output.error
        assert output.view is None

    @pytest.mark.parametrize("value", [None, "soon", "12a", "--5", "\u00b2"])
    def test_set_base_requires_integer(self, value):
        output = run(("set_base", value))
        assert not output.success
        assert output.error_type == "RunnerCommandError"

    def test_set_period_requires_value(self):
        output = run(("set_period", None))
        assert output.error_type == "RunnerCommandError"


class TestClockSelection:
    def test_injected_clock_used_when_now_missing(self):
        class Pinned:
            def now(self) -> int:
                return 77

        output = Executor(clock=Pinned()).execute(RunnerInput(settings=UTC_SETTINGS))
        assert output.view.now_seconds == 77

    def test_pinned_now_wins_over_injected_clock(self):
        class Pinned:
            def now(self) -> int:
                return 77

        output = Executor(clock=Pinned()).execute(RunnerInput(now=5, settings=UTC_SETTINGS))
        assert output.view.now_seconds == 5


class TestSettings:
    def test_offset_from_env(self, monkeypatch):
        monkeypatch.setenv("UNIX_CLOCK_UTC_OFFSET_MINUTES", "-480")
        settings = ClockSettingsSchema()
        assert settings.utc_offset_minutes == -480
        assert settings.tz().utcoffset(None).total_seconds() == -8 * 3600

    def test_no_offset_means_host_zone(self, monkeypatch):
        monkeypatch.delenv("UNIX_CLOCK_UTC_OFFSET_MINUTES", raising=False)
        assert ClockSettingsSchema().tz() is None

    @pytest.mark.parametrize("minutes", [1440, -1440, 100000])
    def test_offset_out_of_range_rejected(self, minutes):
        with pytest.raises(ValidationError):
            ClockSettingsSchema(utc_offset_minutes=minutes)

    def test_env_offset_out_of_range_rejected(self, monkeypatch):
        monkeypatch.setenv("UNIX_CLOCK_UTC_OFFSET_MINUTES", "2000")
        with pytest.raises(ValidationError):
            ClockSettingsSchema()

    def test_largest_offsets_accepted(self):
        assert ClockSettingsSchema(utc_offset_minutes=1439).tz() is not None
        assert ClockSettingsSchema(utc_offset_minutes=-1439).tz() is not None
