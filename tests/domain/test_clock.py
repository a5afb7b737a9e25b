"""Tests for the injectable clocks."""

from datetime import datetime, timedelta, timezone

from orders_kernel.domain.clock import DeterministicClock, SystemClock


def test_system_clock_is_timezone_aware():
    assert SystemClock().now().tzinfo is not None


def test_deterministic_clock_is_stable():
    clock = DeterministicClock()
    assert clock.now() == clock.now() == datetime(2022, 5, 24, 10, 45, tzinfo=timezone.utc)


def test_advance_and_set_time():
    start = datetime(2022, 6, 30, 12, 0, tzinfo=timezone.utc)
    clock = DeterministicClock(start)

    clock.advance(90)
    assert clock.now() == start + timedelta(seconds=90)

    clock.set_time(datetime(2023, 1, 1, tzinfo=timezone.utc))
    assert clock.now() == datetime(2023, 1, 1, tzinfo=timezone.utc)
