"""Lookup wrappers for EC2 route tables."""

from botocore.exceptions import ClientError

from provider_toolkit.common.error_utils import NotFoundError, is_aws_error

ROUTE_TABLE_NOT_FOUND_CODE = "InvalidRouteTableID.NotFound"


def route_table_by_id(ec2_client, route_table_id):
    """
    Return the route table with the specified ID.

    Raises:
        NotFoundError: If EC2 reports InvalidRouteTableID.NotFound or returns no tables
        ClientError: For any other AWS error
    """
    request = {"RouteTableIds": [route_table_id]}
    try:
        output = ec2_client.describe_route_tables(**request)
    except ClientError as e:
        if is_aws_error(e, ROUTE_TABLE_NOT_FOUND_CODE):
            raise NotFoundError(last_error=e, last_request=request) from e
        raise

    route_tables = (output or {}).get("RouteTables") or []
    if not route_tables or route_tables[0] is None:
        raise NotFoundError("Empty result", last_request=request)
    return route_tables[0]
