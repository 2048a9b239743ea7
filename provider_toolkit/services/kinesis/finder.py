"""Lookup wrappers for Kinesis stream consumers."""

from botocore.exceptions import ClientError

from provider_toolkit.common.error_utils import NotFoundError, is_aws_error

RESOURCE_NOT_FOUND_CODE = "ResourceNotFoundException"


def stream_consumer_by_arn(kinesis_client, consumer_arn):
    """
    Return the description of a registered stream consumer.

    Raises:
        NotFoundError: If the consumer does not exist or the response is empty
        ClientError: For any other AWS error
    """
    request = {"ConsumerARN": consumer_arn}
    try:
        output = kinesis_client.describe_stream_consumer(**request)
    except ClientError as e:
        if is_aws_error(e, RESOURCE_NOT_FOUND_CODE):
            raise NotFoundError(last_error=e, last_request=request) from e
        raise

    consumer = (output or {}).get("ConsumerDescription")
    if not consumer:
        raise NotFoundError("Empty result", last_request=request)
    return consumer
