"""Interval schedule between two probes of the same wait."""

from __future__ import annotations

from typing import Optional

from provider_toolkit.config import MAX_BACKOFF_INTERVAL

# Starting point of the backoff when no minimum interval is configured
FALLBACK_INITIAL_INTERVAL = 0.1


class PollSchedule:
    """
    Exponential backoff with a floor, or a fixed cadence.

    With a poll interval every sleep is max(min_interval, poll_interval).
    Without one the first sleep is min_interval and each following sleep doubles,
    capped at max(min_interval, max_interval). The interval holds still while a
    run of target observations is being confirmed.
    """

    def __init__(
        self,
        min_interval: float,
        poll_interval: Optional[float] = None,
        max_interval: float = MAX_BACKOFF_INTERVAL,
    ):
        self.min_interval = min_interval
        self.poll_interval = poll_interval
        self.max_interval = max(min_interval, max_interval)
        self._current: Optional[float] = None

    def next_interval(self, confirming_target: bool = False) -> float:
        """Return the sleep before the next probe."""
        if self.poll_interval is not None:
            return max(self.min_interval, self.poll_interval)

        if self._current is None:
            self._current = self.min_interval or min(FALLBACK_INITIAL_INTERVAL, self.max_interval)
        elif not confirming_target:
            self._current = min(self.max_interval, max(self._current * 2, self.min_interval))
        return self._current
