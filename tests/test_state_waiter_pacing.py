"""Tests for provider_toolkit/state_waiter/pacing.py"""

from __future__ import annotations

from provider_toolkit.state_waiter import PollSchedule
from tests.assertions import assert_equal


def _intervals(schedule, count, confirming=False):
    return [schedule.next_interval(confirming_target=confirming) for _ in range(count)]


def test_backoff_starts_at_min_interval_and_doubles():
    """Test the exponential schedule."""
    schedule = PollSchedule(min_interval=0.5)

    assert_equal(_intervals(schedule, 7), [0.5, 1.0, 2.0, 4.0, 8.0, 10.0, 10.0])


def test_backoff_cap_never_below_min_interval():
    """Test a minimum interval above the cap wins."""
    schedule = PollSchedule(min_interval=15)

    assert_equal(_intervals(schedule, 3), [15, 15, 15])


def test_backoff_holds_while_confirming_target():
    """Test the interval stays put during a target streak."""
    schedule = PollSchedule(min_interval=1)
    schedule.next_interval()
    schedule.next_interval()

    assert_equal(_intervals(schedule, 3, confirming=True), [2, 2, 2])


def test_zero_min_interval_still_backs_off():
    """Test a zero floor does not produce a busy loop."""
    schedule = PollSchedule(min_interval=0)

    assert_equal(_intervals(schedule, 3), [0.1, 0.2, 0.4])


def test_poll_interval_is_fixed_and_floored():
    """Test a poll interval gives a constant cadence never below min_interval."""
    assert_equal(_intervals(PollSchedule(min_interval=1, poll_interval=4), 3), [4, 4, 4])
    assert_equal(_intervals(PollSchedule(min_interval=3, poll_interval=1), 2), [3, 3])


def test_custom_max_interval():
    """Test the backoff cap can be lowered."""
    schedule = PollSchedule(min_interval=1, max_interval=3)

    assert_equal(_intervals(schedule, 4), [1, 2, 3, 3])
