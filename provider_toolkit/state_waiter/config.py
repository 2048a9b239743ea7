"""Wait configuration for the state waiter engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from provider_toolkit.config import (
    DEFAULT_CONTINUOUS_TARGET_OCCURRENCES,
    load_min_interval,
    load_not_found_checks,
)

from .exceptions import WaitConfigError
from .results import ProbeResult

RefreshFunc = Callable[[], ProbeResult]


@dataclass(frozen=True)
class WaitConfig:
    """
    Immutable description of one wait.

    Attributes:
        refresh: Zero-argument status probe returning a ProbeResult
        timeout: Overall budget in seconds, measured from the start of the wait
        pending: States in which progress is still expected
        target: States that mean success; empty means "wait until the resource is gone"
        delay: Seconds to sleep before the first probe (counts against timeout)
        min_interval: Minimum seconds between two probes
        poll_interval: Fixed seconds between probes; None enables exponential backoff
        not_found_checks: Consecutive absent probes tolerated while a target is set
        continuous_target_occurrences: Consecutive target probes required for success
        resource: Label used in log lines and error messages
    """

    refresh: RefreshFunc
    timeout: float
    pending: Iterable[str] = frozenset()
    target: Iterable[str] = frozenset()
    delay: float = 0.0
    min_interval: float = field(default_factory=load_min_interval)
    poll_interval: Optional[float] = None
    not_found_checks: int = field(default_factory=load_not_found_checks)
    continuous_target_occurrences: int = DEFAULT_CONTINUOUS_TARGET_OCCURRENCES
    resource: str = "resource"

    def __post_init__(self):
        if isinstance(self.pending, str) or isinstance(self.target, str):
            raise WaitConfigError("pending and target must be collections of states, not a string")
        object.__setattr__(self, "pending", frozenset(self.pending))
        object.__setattr__(self, "target", frozenset(self.target))
        self._validate()

    def _validate(self):
        overlap = self.pending & self.target
        if overlap:
            raise WaitConfigError(
                f"states cannot be both pending and target: {', '.join(sorted(overlap))}"
            )
        if not callable(self.refresh):
            raise WaitConfigError("refresh must be callable")
        if self.timeout <= 0:
            raise WaitConfigError(f"timeout must be positive, got {self.timeout}")
        if self.delay < 0:
            raise WaitConfigError(f"delay must not be negative, got {self.delay}")
        if self.min_interval < 0:
            raise WaitConfigError(f"min_interval must not be negative, got {self.min_interval}")
        if self.poll_interval is not None and self.poll_interval <= 0:
            raise WaitConfigError(f"poll_interval must be positive, got {self.poll_interval}")
        if self.not_found_checks < 1:
            raise WaitConfigError(f"not_found_checks must be at least 1, got {self.not_found_checks}")
        if self.continuous_target_occurrences < 1:
            raise WaitConfigError(
                "continuous_target_occurrences must be at least 1, "
                f"got {self.continuous_target_occurrences}"
            )

    @property
    def waiting_for_disappearance(self) -> bool:
        return not self.target
