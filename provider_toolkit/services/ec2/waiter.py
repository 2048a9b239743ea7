"""EC2 route table waiters."""

from provider_toolkit.state_waiter import WaitConfig, wait_for_state

from .status import ROUTE_TABLE_STATE_READY, route_table_state

ROUTE_TABLE_STATE_PENDING = "pending"

ROUTE_TABLE_READY_TIMEOUT = 10 * 60
ROUTE_TABLE_READY_NOT_FOUND_CHECKS = 40
ROUTE_TABLE_DELETED_TIMEOUT = 5 * 60


def wait_route_table_ready(ec2_client, route_table_id, **wait_kwargs):
    """Wait for a new route table to become visible and return its description."""
    config = WaitConfig(
        pending=[ROUTE_TABLE_STATE_PENDING],
        target=[ROUTE_TABLE_STATE_READY],
        refresh=route_table_state(ec2_client, route_table_id),
        timeout=ROUTE_TABLE_READY_TIMEOUT,
        not_found_checks=ROUTE_TABLE_READY_NOT_FOUND_CHECKS,
        resource=f"route table ({route_table_id})",
    )
    return wait_for_state(config, **wait_kwargs).raise_for_outcome()


def wait_route_table_deleted(ec2_client, route_table_id, **wait_kwargs):
    """Wait for a route table to disappear. Returns None once it is gone."""
    config = WaitConfig(
        pending=[ROUTE_TABLE_STATE_READY],
        target=[],
        refresh=route_table_state(ec2_client, route_table_id),
        timeout=ROUTE_TABLE_DELETED_TIMEOUT,
        resource=f"route table ({route_table_id})",
    )
    return wait_for_state(config, **wait_kwargs).raise_for_outcome()
