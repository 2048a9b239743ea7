"""
State waiter engine.

Polls a status probe until the resource reaches one of the target states,
disappears, enters an unexpected state, fails to respond, or the deadline
passes. Each call runs on the caller's thread and keeps its counters local, so
independent waits can run concurrently against shared boto3 clients.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .config import WaitConfig
from .pacing import PollSchedule
from .results import Absent, OutcomeKind, Present, ProbeResult, TransportError, WaitOutcome


@dataclass
class _Progress:
    probes: int = 0
    not_found_streak: int = 0
    target_streak: int = 0
    value: Any = None
    state: str = ""
    error: Optional[BaseException] = None


class StateWaiter:
    """
    Drive one WaitConfig to completion.

    Args:
        config: What to wait for
        clock: Monotonic clock in seconds (injectable for tests)
        sleep: Blocking sleep; defaults to time.sleep, or to cancel_event.wait
            when a cancel event is supplied
        cancel_event: Optional threading.Event; setting it ends the wait with
            a CANCELLED outcome at the next suspension point
    """

    def __init__(
        self,
        config: WaitConfig,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Optional[Callable[[float], Any]] = None,
        cancel_event: Optional[threading.Event] = None,
    ):
        self.config = config
        self._clock = clock
        self._sleep = sleep
        self._cancel_event = cancel_event

    def wait(self) -> WaitOutcome:
        """Run the wait and return its outcome. Never raises for wait failures."""
        config = self.config
        start = self._clock()
        deadline = start + config.timeout
        schedule = PollSchedule(config.min_interval, config.poll_interval)
        progress = _Progress()

        logging.info(
            "Waiting for %s (pending: %s, target: %s, timeout: %ss)",
            config.resource,
            _format_states(config.pending),
            _format_states(config.target) if config.target else "<absent>",
            f"{config.timeout:g}",
        )

        if config.delay > 0 and self._pause(min(config.delay, config.timeout)):
            return self._finish(OutcomeKind.CANCELLED, progress, start)

        while True:
            if self._cancelled():
                return self._finish(OutcomeKind.CANCELLED, progress, start)
            if self._clock() >= deadline:
                return self._finish(OutcomeKind.TIMEOUT, progress, start)

            result = config.refresh()
            progress.probes += 1
            kind = self._observe(result, progress)
            if kind is not None:
                return self._finish(kind, progress, start)

            now = self._clock()
            if now >= deadline:
                return self._finish(OutcomeKind.TIMEOUT, progress, start)

            interval = schedule.next_interval(confirming_target=progress.target_streak > 0)
            interval = min(interval, deadline - now)
            logging.debug(
                "%s: probe %d saw %r (not found streak: %d, target streak: %d); next probe in %.2fs",
                config.resource,
                progress.probes,
                _label(result),
                progress.not_found_streak,
                progress.target_streak,
                interval,
            )
            if self._pause(interval):
                return self._finish(OutcomeKind.CANCELLED, progress, start)

    def _observe(self, result: ProbeResult, progress: _Progress) -> Optional[OutcomeKind]:
        """Fold one probe result into progress; return a terminal kind or None to keep polling."""
        config = self.config

        if isinstance(result, TransportError):
            progress.error = result.error
            return OutcomeKind.TRANSPORT

        if isinstance(result, Absent):
            if config.waiting_for_disappearance:
                progress.target_streak += 1
                if progress.target_streak >= config.continuous_target_occurrences:
                    return OutcomeKind.NOT_FOUND
                return None
            progress.target_streak = 0
            progress.not_found_streak += 1
            if progress.not_found_streak >= config.not_found_checks:
                return OutcomeKind.NOT_FOUND
            return None

        if isinstance(result, Present):
            progress.not_found_streak = 0
            progress.value = result.value
            progress.state = result.state
            if result.state in config.target:
                progress.target_streak += 1
                if progress.target_streak >= config.continuous_target_occurrences:
                    return OutcomeKind.REACHED
                return None
            if result.state in config.pending or not config.pending:
                progress.target_streak = 0
                return None
            return OutcomeKind.UNEXPECTED_STATE

        raise TypeError(f"status probe for {config.resource} returned {result!r}, expected a ProbeResult")

    def _cancelled(self) -> bool:
        return self._cancel_event is not None and self._cancel_event.is_set()

    def _pause(self, seconds: float) -> bool:
        """Sleep for seconds; return True when the wait was cancelled meanwhile."""
        if seconds > 0:
            if self._sleep is None and self._cancel_event is not None:
                return self._cancel_event.wait(seconds)
            (self._sleep or time.sleep)(seconds)
        return self._cancelled()

    def _finish(self, kind: OutcomeKind, progress: _Progress, start: float) -> WaitOutcome:
        outcome = WaitOutcome(
            kind=kind,
            value=progress.value,
            state=progress.state,
            error=progress.error,
            probes=progress.probes,
            elapsed=self._clock() - start,
            resource=self.config.resource,
            target=self.config.target,
            timeout=self.config.timeout,
        )
        if outcome.succeeded:
            logging.info("✅ %s (%.1fs)", outcome.describe(), outcome.elapsed)
        else:
            logging.warning("⚠️  %s", outcome.describe())
        return outcome


def wait_for_state(
    config: WaitConfig,
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Optional[Callable[[float], Any]] = None,
    cancel_event: Optional[threading.Event] = None,
) -> WaitOutcome:
    """Run a single wait described by config and return its outcome."""
    return StateWaiter(config, clock=clock, sleep=sleep, cancel_event=cancel_event).wait()


def _label(result: ProbeResult) -> str:
    if isinstance(result, Present):
        return result.state
    return "<absent>"


def _format_states(states) -> str:
    return ", ".join(sorted(states)) or "<any>"
