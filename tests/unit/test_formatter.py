"""Tests for format_time."""

import pytest

from hearing_tracker.services.reporting import format_time


@pytest.mark.parametrize(
    ("ms", "expected"),
    [
        (0, "0:00"),
        (999, "0:00"),
        (1000, "0:01"),
        (59_999, "0:59"),
        (60_000, "1:00"),
        (125_000, "2:05"),
        (29 * 60_000, "29:00"),
        (3_599_999, "59:59"),
        (3_600_000, "1:00:00"),
        (3_661_000, "1:01:01"),
        (36_000_000, "10:00:00"),
        (90_061_000, "25:01:01"),  # hours are not capped at a day
        (1500.7, "0:01"),
    ],
)
def test_formats_durations(ms, expected):
    assert format_time(ms) == expected


@pytest.mark.parametrize("bad", [None, "5000", float("nan"), float("inf"), -5, -1000.5, True, [], {}])
def test_invalid_or_negative_input_renders_zero(bad):
    assert format_time(bad) == "0:00"


def test_huge_integer_does_not_overflow():
    assert format_time(10**30).count(":") == 2
