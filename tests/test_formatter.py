"""Tests for the timestamp formatter."""

from datetime import UTC

import pytest

from unix_clock.formatter import (
    ParseFailure,
    format_local,
    format_thousands,
    format_utc,
    from_editable_local,
    is_parse_failure,
    to_editable_local,
)


def test_format_utc_epoch():
    assert format_utc(0) == "1970-01-01 00:00:00"


def test_format_utc_known_instant():
    assert format_utc(1700000000) == "2023-11-14 22:13:20"


def test_fields_are_zero_padded():
    # 2000-01-01 01:01:01 UTC
    assert format_utc(946684800 + 3661) == "2000-01-01 01:01:01"


def test_format_local_uses_given_zone(ist, pst):
    assert format_local(0, ist) == "1970-01-01 05:30:00"
    assert format_local(0, pst) == "1969-12-31 16:00:00"


def test_format_local_utc_matches_format_utc():
    assert format_local(1700000000, UTC) == format_utc(1700000000)


def test_to_editable_local(ist):
    assert to_editable_local(0, ist) == "1970-01-01T05:30:00"
    assert to_editable_local(1700000000, UTC) == "2023-11-14T22:13:20"


def test_from_editable_local(ist):
    assert from_editable_local("1970-01-01T05:30:00", ist) == 0
    assert from_editable_local("2023-11-14T22:13:20", UTC) == 1700000000


def test_from_editable_local_minute_shape(ist):
    assert from_editable_local("1970-01-01T05:31", ist) == 60


def test_from_editable_local_strips_whitespace():
    assert from_editable_local("  1970-01-01T00:01:00 ", UTC) == 60


def test_fractional_seconds_are_truncated():
    assert from_editable_local("1970-01-01T00:00:01.999", UTC) == 1


@pytest.mark.parametrize(
    "text",
    ["not-a-date", "", "2024-02-30T00:00:00", "2024-01-01 00:00:00", "2024-13-01T00:00", "12:00"],
)
def test_malformed_text_is_a_parse_failure(text):
    result = from_editable_local(text, UTC)
    assert isinstance(result, ParseFailure)
    assert is_parse_failure(result)
    assert result.text == text
    assert result.reason


def test_parse_failure_for_non_string():
    assert is_parse_failure(from_editable_local(None))  # type: ignore[arg-type]


def test_valid_timestamp_is_not_a_failure():
    assert not is_parse_failure(from_editable_local("1970-01-01T00:00:00", UTC))


@pytest.mark.parametrize("seconds", [0, 1, 59, 86399, 951782400, 1700000000, 4102444800])
def test_editable_round_trip(seconds, ist, pst):
    for tz in (ist, pst, UTC):
        assert from_editable_local(to_editable_local(seconds, tz), tz) == seconds


def test_format_thousands():
    assert format_thousands(86400) == "86,400"
    assert format_thousands(2592000) == "2,592,000"
    assert format_thousands(300) == "300"
