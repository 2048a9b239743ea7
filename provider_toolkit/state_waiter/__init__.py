"""
State waiter package.

Poll a status probe until a resource reaches a target state, disappears, fails,
or runs out of time.
"""

from .config import WaitConfig
from .engine import StateWaiter, wait_for_state
from .exceptions import (
    UnexpectedStateError,
    WaitCancelledError,
    WaitConfigError,
    WaitError,
    WaitTimeoutError,
)
from .pacing import PollSchedule
from .results import (
    Absent,
    OutcomeKind,
    Present,
    ProbeResult,
    TransportError,
    WaitOutcome,
    probe_result_from_tuple,
)

__all__ = [
    "Absent",
    "OutcomeKind",
    "PollSchedule",
    "Present",
    "ProbeResult",
    "StateWaiter",
    "TransportError",
    "UnexpectedStateError",
    "WaitCancelledError",
    "WaitConfig",
    "WaitConfigError",
    "WaitError",
    "WaitOutcome",
    "WaitTimeoutError",
    "probe_result_from_tuple",
    "wait_for_state",
]
