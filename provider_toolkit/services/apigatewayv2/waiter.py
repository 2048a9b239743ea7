"""API Gateway v2 waiters."""

from provider_toolkit.state_waiter import WaitConfig, wait_for_state

from .status import domain_name_status

DOMAIN_NAME_STATUS_AVAILABLE = "AVAILABLE"
DOMAIN_NAME_STATUS_UPDATING = "UPDATING"

DOMAIN_NAME_AVAILABLE_TIMEOUT = 10 * 60


def wait_domain_name_available(
    apigatewayv2_client, name, timeout=DOMAIN_NAME_AVAILABLE_TIMEOUT, **wait_kwargs
):
    """
    Wait for a custom domain name to finish updating.

    Returns:
        dict: get_domain_name response
    """
    config = WaitConfig(
        pending=[DOMAIN_NAME_STATUS_UPDATING],
        target=[DOMAIN_NAME_STATUS_AVAILABLE],
        refresh=domain_name_status(apigatewayv2_client, name),
        timeout=timeout,
        resource=f"API Gateway v2 domain name ({name})",
    )
    return wait_for_state(config, **wait_kwargs).raise_for_outcome()
