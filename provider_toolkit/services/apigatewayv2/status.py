"""Status probes for API Gateway v2 domain names."""

from botocore.exceptions import BotoCoreError, ClientError

from provider_toolkit.common.error_utils import NotFoundError
from provider_toolkit.state_waiter import Absent, Present, TransportError

from .finder import domain_name_by_name


def domain_name_status(apigatewayv2_client, name):
    """Build a probe whose state is the DomainNameStatus of the first domain name configuration."""

    def refresh():
        try:
            output = domain_name_by_name(apigatewayv2_client, name)
        except NotFoundError:
            return Absent()
        except (ClientError, BotoCoreError) as e:
            return TransportError(e)

        configuration = output["DomainNameConfigurations"][0]
        return Present(output, configuration.get("DomainNameStatus", ""))

    return refresh
