"""Lookup wrappers for SNS subscriptions."""

from botocore.exceptions import ClientError

from provider_toolkit.common.error_utils import NotFoundError, is_aws_error

NOT_FOUND_CODE = "NotFound"


def subscription_by_arn(sns_client, subscription_arn):
    """
    Return the attributes response of a subscription.

    Args:
        sns_client: Boto3 SNS client
        subscription_arn: Subscription ARN

    Returns:
        dict: get_subscription_attributes response with a non-empty Attributes map

    Raises:
        NotFoundError: If the subscription does not exist or has no attributes
        ClientError: For any other AWS error
    """
    request = {"SubscriptionArn": subscription_arn}
    try:
        output = sns_client.get_subscription_attributes(**request)
    except ClientError as e:
        if is_aws_error(e, NOT_FOUND_CODE):
            raise NotFoundError(last_error=e, last_request=request) from e
        raise

    if not output or not output.get("Attributes"):
        raise NotFoundError("Empty result", last_request=request)

    return output
