"""Tests for provider_toolkit/common/error_utils.py"""

from __future__ import annotations

from provider_toolkit.common.error_utils import (
    NotFoundError,
    error_code,
    error_message,
    is_aws_error,
    is_not_found_error,
)
from tests.assertions import assert_equal
from tests.waiter_test_utils import client_error


def test_error_code_and_message_from_client_error():
    """Test code and message extraction."""
    err = client_error("FileSystemNotFound", message="File system 'fs-1' does not exist.")

    assert_equal(error_code(err), "FileSystemNotFound")
    assert_equal(error_message(err), "File system 'fs-1' does not exist.")


def test_error_code_for_non_client_error_is_empty():
    """Test other exceptions carry no AWS code."""
    assert_equal(error_code(RuntimeError("boom")), "")
    assert_equal(error_message(RuntimeError("boom")), "")


def test_is_aws_error_matches_code_and_message_fragment():
    """Test code matching with an optional message fragment."""
    err = client_error("InvalidParameterValue", message="route table rtb-1 is in use")

    assert is_aws_error(err, "InvalidParameterValue")
    assert is_aws_error(err, "InvalidParameterValue", "in use")
    assert not is_aws_error(err, "InvalidParameterValue", "not found")
    assert not is_aws_error(err, "Throttling")
    assert not is_aws_error(None, "InvalidParameterValue")


def test_is_not_found_error():
    """Test not-found classification for codes and NotFoundError."""
    assert is_not_found_error(client_error("AccessPointNotFound"), "AccessPointNotFound")
    assert is_not_found_error(NotFoundError("Empty result"))
    assert not is_not_found_error(client_error("AccessDenied"), "AccessPointNotFound")
    assert not is_not_found_error(None, "AccessPointNotFound")


def test_not_found_error_messages():
    """Test NotFoundError message variants."""
    cause = client_error("NotFoundException")

    assert_equal(str(NotFoundError("Empty result")), "Empty result")
    assert_equal(str(NotFoundError(retries=21)), "couldn't find resource (21 retries)")
    assert_equal(str(NotFoundError(last_error=cause)), str(cause))
    assert_equal(str(NotFoundError()), "couldn't find resource")


def test_not_found_error_is_lookup_error():
    """Test callers can catch it as LookupError and inspect the request."""
    err = NotFoundError("Empty result", last_request={"ApiId": "abc"})

    assert isinstance(err, LookupError)
    assert_equal(err.last_request, {"ApiId": "abc"})
