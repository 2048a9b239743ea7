"""Tests for provider_toolkit/services/codestarconnections/finder.py"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from provider_toolkit.services.codestarconnections.finder import connection_by_arn
from tests.assertions import assert_equal
from tests.waiter_test_utils import client_error

CONNECTION_ARN = "arn:aws:codestar-connections:us-east-1:123456789012:connection/abc"


def test_connection_by_arn_returns_connection():
    """Test the connection is unwrapped from the response."""
    client = MagicMock()
    client.get_connection.return_value = {"Connection": {"ConnectionArn": CONNECTION_ARN}}

    assert_equal(connection_by_arn(client, CONNECTION_ARN), {"ConnectionArn": CONNECTION_ARN})
    client.get_connection.assert_called_once_with(ConnectionArn=CONNECTION_ARN)


@pytest.mark.parametrize("response", [None, {}, {"Connection": None}])
def test_connection_by_arn_empty_response_returns_none(response):
    """Test an empty response yields None."""
    client = MagicMock()
    client.get_connection.return_value = response

    assert connection_by_arn(client, CONNECTION_ARN) is None


def test_connection_by_arn_errors_propagate():
    """Test errors, including not found, are raised to the caller."""
    client = MagicMock()
    client.get_connection.side_effect = client_error("ResourceNotFoundException")

    with pytest.raises(ClientError):
        connection_by_arn(client, CONNECTION_ARN)
