"""
Exceptions for the state waiter package.
"""


class WaitConfigError(ValueError):
    """Raised when a wait configuration is inconsistent."""


class WaitError(RuntimeError):
    """Base class for waits that ended without reaching their target."""

    def __init__(self, message: str, outcome=None):
        super().__init__(message)
        self.outcome = outcome

    @property
    def last_value(self):
        return None if self.outcome is None else self.outcome.value

    @property
    def last_state(self) -> str:
        return "" if self.outcome is None else self.outcome.state


class WaitTimeoutError(WaitError):
    """Raised when the deadline elapsed before a terminal state was observed."""


class UnexpectedStateError(WaitError):
    """Raised when the resource entered a state outside both pending and target."""


class WaitCancelledError(WaitError):
    """Raised when the caller cancelled the wait."""
