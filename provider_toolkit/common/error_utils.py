"""
Shared AWS error classification utilities.

Finders and status probes use these helpers to tell a "resource does not
exist" response apart from every other failure coming back from botocore.
"""

from __future__ import annotations

from typing import Any, Optional

from botocore.exceptions import ClientError


class NotFoundError(LookupError):
    """Raised when a resource does not exist (now, or for too long)."""

    def __init__(
        self,
        message: str = "",
        *,
        last_error: Optional[BaseException] = None,
        last_request: Any = None,
        retries: int = 0,
        outcome: Any = None,
    ):
        self.message = message
        self.last_error = last_error
        self.last_request = last_request
        self.retries = retries
        self.outcome = outcome
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.message:
            return self.message
        if self.retries:
            return f"couldn't find resource ({self.retries} retries)"
        if self.last_error is not None:
            return str(self.last_error)
        return "couldn't find resource"


def error_code(err: BaseException) -> str:
    """Return the AWS error code carried by a ClientError, or an empty string."""
    if not isinstance(err, ClientError):
        return ""
    return err.response.get("Error", {}).get("Code", "") or ""


def error_message(err: BaseException) -> str:
    """Return the AWS error message carried by a ClientError, or an empty string."""
    if not isinstance(err, ClientError):
        return ""
    return err.response.get("Error", {}).get("Message", "") or ""


def is_aws_error(err: Optional[BaseException], code: str, message: str = "") -> bool:
    """
    Check whether an exception is an AWS error with the given code.

    Args:
        err: Exception to inspect (None is never a match)
        code: AWS error code, e.g. "InvalidRouteTableID.NotFound"
        message: Optional fragment the error message must contain

    Returns:
        bool: True when the code matches and the message contains the fragment
    """
    if err is None or error_code(err) != code:
        return False
    return message in error_message(err)


def is_not_found_error(err: Optional[BaseException], *codes: str) -> bool:
    """Return True when err is a NotFoundError or a ClientError with one of the codes."""
    if isinstance(err, NotFoundError):
        return True
    return any(is_aws_error(err, code) for code in codes)
