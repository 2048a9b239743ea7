"""Status probes for SNS subscriptions."""

from botocore.exceptions import BotoCoreError, ClientError

from provider_toolkit.common.error_utils import NotFoundError
from provider_toolkit.state_waiter import Absent, Present, TransportError

from .finder import subscription_by_arn


def subscription_pending_confirmation(sns_client, subscription_arn):
    """Build a probe whose state is the subscription's PendingConfirmation attribute ("true"/"false")."""

    def refresh():
        try:
            output = subscription_by_arn(sns_client, subscription_arn)
        except NotFoundError:
            return Absent()
        except (ClientError, BotoCoreError) as e:
            return TransportError(e)

        return Present(output, output["Attributes"].get("PendingConfirmation", ""))

    return refresh
