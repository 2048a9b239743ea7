"""
Probe results and wait outcomes.

A status probe reports one of three shapes (Present, Absent, TransportError) and
a wait finishes with a WaitOutcome whose kind says how it ended.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from provider_toolkit.common.error_utils import NotFoundError

from .exceptions import UnexpectedStateError, WaitCancelledError, WaitTimeoutError


@dataclass(frozen=True)
class Present:
    """The resource exists and is in `state`."""

    value: Any
    state: str


@dataclass(frozen=True)
class Absent:
    """The resource does not (currently) exist."""


@dataclass(frozen=True)
class TransportError:
    """The probe failed for a reason other than the resource being missing."""

    error: BaseException


ProbeResult = Union[Present, Absent, TransportError]


def probe_result_from_tuple(value: Any, state: str, error: Optional[BaseException]) -> ProbeResult:
    """
    Convert a (value, state, error) triple into a ProbeResult.

    An error wins over everything else; a None value with an empty state means
    the resource is absent.
    """
    if error is not None:
        return TransportError(error)
    if value is None and not state:
        return Absent()
    return Present(value, state)


class OutcomeKind(Enum):
    """How a wait finished."""

    REACHED = "reached"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    UNEXPECTED_STATE = "unexpected_state"
    TRANSPORT = "transport"
    CANCELLED = "cancelled"


@dataclass
class WaitOutcome:
    """Result of one wait, including the last value and state observed."""

    kind: OutcomeKind
    value: Any = None
    state: str = ""
    error: Optional[BaseException] = None
    probes: int = 0
    elapsed: float = 0.0
    resource: str = "resource"
    target: frozenset = field(default_factory=frozenset)
    timeout: float = 0.0

    @property
    def waiting_for_disappearance(self) -> bool:
        return not self.target

    @property
    def succeeded(self) -> bool:
        if self.kind is OutcomeKind.REACHED:
            return True
        return self.kind is OutcomeKind.NOT_FOUND and self.waiting_for_disappearance

    def describe(self) -> str:
        """Return a one-line human readable summary of the outcome."""
        expected = ", ".join(sorted(self.target)) or "<absent>"
        context = f"last state: {self.state or '<none>'!r}, timeout: {self.timeout:g}s"
        if self.kind is OutcomeKind.REACHED:
            return f"{self.resource} reached state {self.state!r} after {self.probes} probe(s)"
        if self.kind is OutcomeKind.NOT_FOUND and self.waiting_for_disappearance:
            return f"{self.resource} no longer exists"
        if self.kind is OutcomeKind.NOT_FOUND:
            return f"{self.resource} not found after {self.probes} probe(s), wanted {expected} ({context})"
        if self.kind is OutcomeKind.TIMEOUT:
            return f"timeout while waiting for {self.resource} to become {expected} ({context})"
        if self.kind is OutcomeKind.UNEXPECTED_STATE:
            return (
                f"{self.resource} is in unexpected state {self.state!r}, wanted target {expected} "
                f"(timeout: {self.timeout:g}s)"
            )
        if self.kind is OutcomeKind.CANCELLED:
            return f"wait for {self.resource} cancelled ({context})"
        return f"error while waiting for {self.resource} ({context}): {self.error}"

    def raise_for_outcome(self) -> Any:
        """
        Return the observed value when the wait succeeded, raise otherwise.

        Returns:
            The last value (None for a disappearance wait)

        Raises:
            NotFoundError: The resource never showed up
            WaitTimeoutError: The deadline elapsed
            UnexpectedStateError: The resource entered a state outside pending and target
            WaitCancelledError: The wait was cancelled
            Exception: The original transport error, unchanged
        """
        if self.succeeded:
            return self.value if self.kind is OutcomeKind.REACHED else None
        if self.kind is OutcomeKind.NOT_FOUND:
            raise NotFoundError(self.describe(), retries=self.probes, outcome=self)
        if self.kind is OutcomeKind.TIMEOUT:
            raise WaitTimeoutError(self.describe(), outcome=self)
        if self.kind is OutcomeKind.UNEXPECTED_STATE:
            raise UnexpectedStateError(self.describe(), outcome=self)
        if self.kind is OutcomeKind.CANCELLED:
            raise WaitCancelledError(self.describe(), outcome=self)
        raise self.error
