"""Kinesis stream consumer waiters."""

from provider_toolkit.state_waiter import WaitConfig, wait_for_state

from .status import stream_consumer_status

CONSUMER_STATUS_CREATING = "CREATING"
CONSUMER_STATUS_ACTIVE = "ACTIVE"
CONSUMER_STATUS_DELETING = "DELETING"

STREAM_CONSUMER_CREATED_TIMEOUT = 5 * 60
STREAM_CONSUMER_DELETED_TIMEOUT = 5 * 60


def wait_stream_consumer_created(kinesis_client, consumer_arn, **wait_kwargs):
    """Wait for a newly registered consumer to become ACTIVE and return its description."""
    config = WaitConfig(
        pending=[CONSUMER_STATUS_CREATING],
        target=[CONSUMER_STATUS_ACTIVE],
        refresh=stream_consumer_status(kinesis_client, consumer_arn),
        timeout=STREAM_CONSUMER_CREATED_TIMEOUT,
        resource=f"Kinesis stream consumer ({consumer_arn})",
    )
    return wait_for_state(config, **wait_kwargs).raise_for_outcome()


def wait_stream_consumer_deleted(kinesis_client, consumer_arn, **wait_kwargs):
    """Wait for a deregistered consumer to disappear. Returns None once it is gone."""
    config = WaitConfig(
        pending=[CONSUMER_STATUS_ACTIVE, CONSUMER_STATUS_DELETING],
        target=[],
        refresh=stream_consumer_status(kinesis_client, consumer_arn),
        timeout=STREAM_CONSUMER_DELETED_TIMEOUT,
        resource=f"Kinesis stream consumer ({consumer_arn})",
    )
    return wait_for_state(config, **wait_kwargs).raise_for_outcome()
