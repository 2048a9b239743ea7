"""Status probes for EC2 route tables."""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from provider_toolkit.common.error_utils import NotFoundError
from provider_toolkit.state_waiter import Absent, Present, TransportError

from .finder import route_table_by_id

ROUTE_TABLE_STATE_READY = "ready"


def route_table_state(ec2_client, route_table_id):
    """
    Build a probe for a route table.

    Route tables have no lifecycle attribute: an existing table reports
    "ready" and a missing one is absent. EC2 is eventually consistent, so a
    table that was just created may briefly be reported as missing.
    """

    def refresh():
        try:
            route_table = route_table_by_id(ec2_client, route_table_id)
        except NotFoundError:
            return Absent()
        except (ClientError, BotoCoreError) as e:
            logging.warning("Error on route table state refresh for %s: %s", route_table_id, e)
            return TransportError(e)
        return Present(route_table, ROUTE_TABLE_STATE_READY)

    return refresh
