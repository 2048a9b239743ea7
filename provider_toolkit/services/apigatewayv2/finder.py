"""
Lookup wrappers for API Gateway v2.

Single-item finders raise NotFoundError when the service reports
NotFoundException or returns an empty result; list finders return an empty
list instead.
"""

from botocore.exceptions import ClientError

from provider_toolkit.common.error_utils import NotFoundError, is_aws_error

NOT_FOUND_CODE = "NotFoundException"


def api_by_id(apigatewayv2_client, api_id):
    """Return the API with the specified ID."""
    return api(apigatewayv2_client, {"ApiId": api_id})


def api(apigatewayv2_client, request):
    """Return the API matching a get_api request."""
    try:
        output = apigatewayv2_client.get_api(**request)
    except ClientError as e:
        if is_aws_error(e, NOT_FOUND_CODE):
            raise NotFoundError(last_error=e, last_request=request) from e
        raise

    if not output:
        raise NotFoundError("Empty result", last_request=request)

    return output


def apis(apigatewayv2_client, request=None):
    """
    Return every API matching a get_apis request, following pagination.

    Args:
        apigatewayv2_client: Boto3 API Gateway v2 client
        request: Optional get_apis parameters

    Returns:
        list: API dicts (empty when none exist)
    """
    paginator = apigatewayv2_client.get_paginator("get_apis")
    found = []
    for page in paginator.paginate(**(request or {})):
        if not page:
            continue
        found.extend(item for item in page.get("Items", []) if item)
    return found


def domain_name_by_name(apigatewayv2_client, name):
    """Return the custom domain name with the specified name."""
    return domain_name(apigatewayv2_client, {"DomainName": name})


def domain_name(apigatewayv2_client, request):
    """Return the custom domain name matching a get_domain_name request."""
    try:
        output = apigatewayv2_client.get_domain_name(**request)
    except ClientError as e:
        if is_aws_error(e, NOT_FOUND_CODE):
            raise NotFoundError(last_error=e, last_request=request) from e
        raise

    if not output or not output.get("DomainNameConfigurations"):
        raise NotFoundError("Empty result", last_request=request)

    return output
