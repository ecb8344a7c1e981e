"""
Tests for controlplane.time — clocks and the zero instant.
"""

from datetime import datetime, timedelta, timezone

import pytest

from controlplane.time import (
    ZERO_TIME,
    FixedClock,
    SystemClock,
    get_default_clock,
    is_zero_time,
)


TRIGGER = datetime(2026, 2, 13, 12, 0, 0, tzinfo=timezone.utc)


# ── Clocks ───────────────────────────────────────────────────

class TestClocks:
    def test_default_clock_is_wall_clock(self):
        clock = get_default_clock()
        assert isinstance(clock, SystemClock)
        assert clock.now_utc().tzinfo == timezone.utc

    def test_fixed_clock_is_pinned(self):
        clock = FixedClock(TRIGGER)
        assert clock.now_utc() == TRIGGER

    def test_fixed_clock_moves_both_ways(self):
        clock = FixedClock(TRIGGER)
        clock.advance(90)
        assert clock.now_utc() == TRIGGER + timedelta(seconds=90)
        clock.advance(-180)
        assert clock.now_utc() == TRIGGER - timedelta(seconds=90)

    def test_fixed_clock_keeps_offset_timezone(self):
        plus_two = timezone(timedelta(hours=2))
        clock = FixedClock(datetime(2026, 2, 13, 14, 0, 0, tzinfo=plus_two))
        assert clock.now_utc() == TRIGGER

    def test_fixed_clock_needs_timezone(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            FixedClock(datetime(2026, 2, 13, 12, 0, 0))


# ── Zero Instant ─────────────────────────────────────────────

@pytest.mark.parametrize(
    "value, expected",
    [
        (None, True),
        (ZERO_TIME, True),
        (datetime(1, 1, 1), True),
        (datetime(1, 1, 1, 0, 0, 1, tzinfo=timezone.utc), False),
        (TRIGGER, False),
    ],
)
def test_is_zero_time(value, expected):
    assert is_zero_time(value) is expected
