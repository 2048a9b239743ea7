"""SNS subscription waiters."""

from provider_toolkit.state_waiter import WaitConfig, wait_for_state

from .status import subscription_pending_confirmation

SUBSCRIPTION_PENDING_CONFIRMATION_TIMEOUT = 2 * 60
SUBSCRIPTION_DELETE_TIMEOUT = 2 * 60


def wait_subscription_confirmed(
    sns_client,
    subscription_arn,
    expected_value,
    timeout=SUBSCRIPTION_PENDING_CONFIRMATION_TIMEOUT,
    **wait_kwargs,
):
    """
    Wait for a subscription's PendingConfirmation attribute to equal expected_value.

    Args:
        sns_client: Boto3 SNS client
        subscription_arn: Subscription ARN
        expected_value: "false" to wait for confirmation, "true" for pending
        timeout: Seconds to wait (default: 2 minutes)

    Returns:
        dict: get_subscription_attributes response
    """
    config = WaitConfig(
        target=[expected_value],
        refresh=subscription_pending_confirmation(sns_client, subscription_arn),
        timeout=timeout,
        resource=f"SNS subscription ({subscription_arn})",
    )
    return wait_for_state(config, **wait_kwargs).raise_for_outcome()


def wait_subscription_deleted(sns_client, subscription_arn, **wait_kwargs):
    """Wait for a subscription to disappear. Returns None once it is gone."""
    config = WaitConfig(
        pending=["false", "true"],
        target=[],
        refresh=subscription_pending_confirmation(sns_client, subscription_arn),
        timeout=SUBSCRIPTION_DELETE_TIMEOUT,
        resource=f"SNS subscription ({subscription_arn})",
    )
    return wait_for_state(config, **wait_kwargs).raise_for_outcome()
