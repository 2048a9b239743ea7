"""Status probes for Kinesis stream consumers."""

from botocore.exceptions import BotoCoreError, ClientError

from provider_toolkit.common.error_utils import NotFoundError
from provider_toolkit.state_waiter import Absent, Present, TransportError

from .finder import stream_consumer_by_arn


def stream_consumer_status(kinesis_client, consumer_arn):
    """Build a probe whose state is the consumer's ConsumerStatus."""

    def refresh():
        try:
            consumer = stream_consumer_by_arn(kinesis_client, consumer_arn)
        except NotFoundError:
            return Absent()
        except (ClientError, BotoCoreError) as e:
            return TransportError(e)
        return Present(consumer, consumer.get("ConsumerStatus", ""))

    return refresh
