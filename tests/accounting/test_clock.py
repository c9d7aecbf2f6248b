import pytest

from src.timesheet.timesheet.accounting.clock import (
    format_hours_to_clock,
    is_valid_clock_time,
    parse_clock_minutes,
    parse_clock_time,
)


@pytest.mark.parametrize(
    "text, hours",
    [
        ("8:30", 8.5),
        ("08:30", 8.5),
        (" 17:45 ", 17.75),
        ("0:00", 0.0),
        ("23:59", 23 + 59 / 60),
    ],
)
def test_parse_valid_times(text, hours):
    assert parse_clock_time(text) == pytest.approx(hours)


@pytest.mark.parametrize("text", [None, "", "   ", "8", "8:30:00", "ab:cd", "24:00", "8:60", "-1:30", "8:3x"])
def test_parse_malformed_is_not_set(text):
    assert parse_clock_time(text) is None
    assert parse_clock_minutes(text) is None
    assert not is_valid_clock_time(text)


def test_format_does_not_pad_hours():
    assert format_hours_to_clock(0) == "0:00"
    assert format_hours_to_clock(1.25) == "1:15"
    assert format_hours_to_clock(176) == "176:00"


def test_format_rounding_carries_into_hour():
    assert format_hours_to_clock(7.999) == "8:00"
    assert format_hours_to_clock(0.75) == "0:45"


def test_parse_then_format_keeps_minutes():
    for hours in range(24):
        for minutes in range(60):
            text = f"{hours}:{minutes:02d}"
            assert format_hours_to_clock(parse_clock_time(text)) == text
