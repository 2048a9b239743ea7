"""Tests for provider_toolkit/services/kinesis finder, probe and waiters."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from provider_toolkit.common.error_utils import NotFoundError
from provider_toolkit.services.kinesis import waiter
from provider_toolkit.services.kinesis.finder import stream_consumer_by_arn
from provider_toolkit.services.kinesis.status import stream_consumer_status
from provider_toolkit.state_waiter import Absent, TransportError, UnexpectedStateError
from tests.assertions import assert_equal
from tests.waiter_test_utils import client_error, wait_kwargs

CONSUMER_ARN = "arn:aws:kinesis:us-east-1:123456789012:stream/orders/consumer/reader:1"


def _consumer(status):
    return {"ConsumerDescription": {"ConsumerARN": CONSUMER_ARN, "ConsumerStatus": status}}


def test_stream_consumer_by_arn_unwraps_description():
    """Test the finder returns the ConsumerDescription."""
    kinesis = MagicMock()
    kinesis.describe_stream_consumer.return_value = _consumer("ACTIVE")

    assert_equal(stream_consumer_by_arn(kinesis, CONSUMER_ARN)["ConsumerStatus"], "ACTIVE")
    kinesis.describe_stream_consumer.assert_called_once_with(ConsumerARN=CONSUMER_ARN)


def test_stream_consumer_by_arn_not_found():
    """Test ResourceNotFoundException and empty responses are not found."""
    kinesis = MagicMock()
    kinesis.describe_stream_consumer.side_effect = [client_error("ResourceNotFoundException"), {}]

    with pytest.raises(NotFoundError):
        stream_consumer_by_arn(kinesis, CONSUMER_ARN)
    with pytest.raises(NotFoundError, match="Empty result"):
        stream_consumer_by_arn(kinesis, CONSUMER_ARN)


def test_stream_consumer_by_arn_other_errors_propagate():
    """Test other AWS errors are raised unchanged."""
    kinesis = MagicMock()
    kinesis.describe_stream_consumer.side_effect = client_error("LimitExceededException")

    with pytest.raises(ClientError):
        stream_consumer_by_arn(kinesis, CONSUMER_ARN)


def test_stream_consumer_status_probe():
    """Test the probe maps responses onto probe results."""
    kinesis = MagicMock()
    kinesis.describe_stream_consumer.side_effect = [
        _consumer("CREATING"),
        client_error("ResourceNotFoundException"),
        client_error("LimitExceededException"),
    ]
    probe = stream_consumer_status(kinesis, CONSUMER_ARN)

    assert_equal(probe().state, "CREATING")
    assert_equal(probe(), Absent())
    assert isinstance(probe(), TransportError)


def test_wait_stream_consumer_created(clock):
    """Test waiting from CREATING to ACTIVE returns the consumer."""
    kinesis = MagicMock()
    kinesis.describe_stream_consumer.side_effect = [
        _consumer("CREATING"),
        _consumer("CREATING"),
        _consumer("ACTIVE"),
    ]

    consumer = waiter.wait_stream_consumer_created(kinesis, CONSUMER_ARN, **wait_kwargs(clock))

    assert_equal(consumer["ConsumerStatus"], "ACTIVE")
    assert_equal(clock.sleeps, [0.5, 1.0])


def test_wait_stream_consumer_created_unexpected_status(clock):
    """Test a DELETING consumer fails the create wait."""
    kinesis = MagicMock()
    kinesis.describe_stream_consumer.return_value = _consumer("DELETING")

    with pytest.raises(UnexpectedStateError, match="DELETING"):
        waiter.wait_stream_consumer_created(kinesis, CONSUMER_ARN, **wait_kwargs(clock))


def test_wait_stream_consumer_deleted(clock):
    """Test the delete waiter passes through DELETING to absence."""
    kinesis = MagicMock()
    kinesis.describe_stream_consumer.side_effect = [
        _consumer("ACTIVE"),
        _consumer("DELETING"),
        client_error("ResourceNotFoundException"),
    ]

    assert waiter.wait_stream_consumer_deleted(kinesis, CONSUMER_ARN, **wait_kwargs(clock)) is None
    assert_equal(kinesis.describe_stream_consumer.call_count, 3)


def test_wait_stream_consumer_deleted_transport_error(clock):
    """Test a transport error ends the wait with the original exception."""
    kinesis = MagicMock()
    kinesis.describe_stream_consumer.side_effect = [
        _consumer("DELETING"),
        client_error("AccessDeniedException"),
    ]

    with pytest.raises(ClientError, match="AccessDeniedException"):
        waiter.wait_stream_consumer_deleted(kinesis, CONSUMER_ARN, **wait_kwargs(clock))
