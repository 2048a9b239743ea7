"""Lookup wrappers for CodeStar Connections."""


def connection_by_arn(codestar_client, arn):
    """
    Return the connection with the specified ARN.

    Args:
        codestar_client: Boto3 codestar-connections client
        arn: Connection ARN

    Returns:
        dict: Connection description, or None when the response carries no connection

    Raises:
        ClientError: Any AWS error, including ResourceNotFoundException
    """
    output = codestar_client.get_connection(ConnectionArn=arn)
    if not output or not output.get("Connection"):
        return None
    return output["Connection"]
