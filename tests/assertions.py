"""Shared assertion helpers that keep Ruff's PLR2004 quiet while improving error messages."""

from __future__ import annotations


def assert_equal(actual, expected, *, message: str | None = None) -> None:
    """Assert equality with a clearer error message."""
    failure_message = message or f"Expected {expected!r} but received {actual!r}"
    assert actual == expected, failure_message


def assert_probe_spacing(call_times, min_interval: float, deadline: float) -> None:
    """Assert probes never overlap the deadline and are at least min_interval apart."""
    for earlier, later in zip(call_times, call_times[1:]):
        assert later - earlier >= min_interval, f"probes {earlier} and {later} closer than {min_interval}s"
    for call_time in call_times:
        assert call_time < deadline, f"probe at {call_time} after deadline {deadline}"
