"""
EFS waiters.

Each waiter polls the matching status probe and returns the resource
description once it is available, or None once it is gone.
"""

import logging

from provider_toolkit.state_waiter import WaitConfig, wait_for_state

from .status import access_point_lifecycle_state, file_system_lifecycle_state

LIFECYCLE_STATE_CREATING = "creating"
LIFECYCLE_STATE_AVAILABLE = "available"
LIFECYCLE_STATE_UPDATING = "updating"
LIFECYCLE_STATE_DELETING = "deleting"
LIFECYCLE_STATE_DELETED = "deleted"

# Maximum amount of time to wait for each operation, in seconds
ACCESS_POINT_CREATED_TIMEOUT = 10 * 60
ACCESS_POINT_DELETED_TIMEOUT = 10 * 60
FILE_SYSTEM_AVAILABLE_TIMEOUT = 10 * 60
FILE_SYSTEM_AVAILABLE_DELAY = 2
FILE_SYSTEM_AVAILABLE_MIN_INTERVAL = 3
FILE_SYSTEM_DELETED_TIMEOUT = 10 * 60
FILE_SYSTEM_DELETED_DELAY = 2
FILE_SYSTEM_DELETED_MIN_INTERVAL = 3


def wait_access_point_created(efs_client, access_point_id, **wait_kwargs):
    """
    Wait for an access point to become available.

    Args:
        efs_client: Boto3 EFS client
        access_point_id: Access point ID
        **wait_kwargs: Passed to wait_for_state (clock, sleep, cancel_event)

    Returns:
        dict: The access point description

    Raises:
        NotFoundError, WaitTimeoutError, UnexpectedStateError, ClientError
    """
    config = WaitConfig(
        pending=[LIFECYCLE_STATE_CREATING],
        target=[LIFECYCLE_STATE_AVAILABLE],
        refresh=access_point_lifecycle_state(efs_client, access_point_id),
        timeout=ACCESS_POINT_CREATED_TIMEOUT,
        resource=f"EFS access point ({access_point_id})",
    )
    return wait_for_state(config, **wait_kwargs).raise_for_outcome()


def wait_access_point_deleted(efs_client, access_point_id, **wait_kwargs):
    """Wait for an access point to disappear. Returns None once it is gone."""
    config = WaitConfig(
        pending=[LIFECYCLE_STATE_AVAILABLE, LIFECYCLE_STATE_DELETING, LIFECYCLE_STATE_DELETED],
        target=[],
        refresh=access_point_lifecycle_state(efs_client, access_point_id),
        timeout=ACCESS_POINT_DELETED_TIMEOUT,
        resource=f"EFS access point ({access_point_id})",
    )
    return wait_for_state(config, **wait_kwargs).raise_for_outcome()


def wait_file_system_available(efs_client, file_system_id, **wait_kwargs):
    """Wait for a file system to become available after a create or update."""
    config = WaitConfig(
        pending=[LIFECYCLE_STATE_CREATING, LIFECYCLE_STATE_UPDATING],
        target=[LIFECYCLE_STATE_AVAILABLE],
        refresh=file_system_lifecycle_state(efs_client, file_system_id),
        timeout=FILE_SYSTEM_AVAILABLE_TIMEOUT,
        delay=FILE_SYSTEM_AVAILABLE_DELAY,
        min_interval=FILE_SYSTEM_AVAILABLE_MIN_INTERVAL,
        resource=f"EFS file system ({file_system_id})",
    )
    file_system = wait_for_state(config, **wait_kwargs).raise_for_outcome()
    logging.info("EFS file system %s is available", file_system_id)
    return file_system


def wait_file_system_deleted(efs_client, file_system_id, **wait_kwargs):
    """Wait for a file system to disappear. Returns None once it is gone."""
    config = WaitConfig(
        pending=[LIFECYCLE_STATE_AVAILABLE, LIFECYCLE_STATE_DELETING],
        target=[],
        refresh=file_system_lifecycle_state(efs_client, file_system_id),
        timeout=FILE_SYSTEM_DELETED_TIMEOUT,
        delay=FILE_SYSTEM_DELETED_DELAY,
        min_interval=FILE_SYSTEM_DELETED_MIN_INTERVAL,
        resource=f"EFS file system ({file_system_id})",
    )
    return wait_for_state(config, **wait_kwargs).raise_for_outcome()
