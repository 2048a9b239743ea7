"""
AWS Client Factory Module
Provides standardized boto3 client creation for the services the waiters poll.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import boto3
from dotenv import load_dotenv


def _resolve_env_path(env_path: Optional[str] = None) -> str:
    """
    Determine which .env file should be used for AWS credentials.

    Priority order:
      1. Explicit parameter
      2. AWS_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return env_path
    aws_env_file = os.environ.get("AWS_ENV_FILE")
    if aws_env_file:
        return aws_env_file
    return str(Path.home() / ".env")


def load_credentials_from_env(env_path: Optional[str] = None) -> tuple[str, str]:
    """
    Load AWS credentials from .env file and return them as a tuple.

    Args:
        env_path: Optional override path (defaults to ~/.env)

    Returns:
        tuple: (aws_access_key_id, aws_secret_access_key)

    Raises:
        ValueError: If credentials are not found in .env file
    """
    resolved_path = _resolve_env_path(env_path)
    load_dotenv(resolved_path)

    aws_access_key_id = os.getenv("AWS_ACCESS_KEY_ID")
    aws_secret_access_key = os.getenv("AWS_SECRET_ACCESS_KEY")
    if aws_access_key_id and aws_secret_access_key:
        logging.info("✅ AWS credentials loaded from %s", resolved_path)
        if os.getenv("AWS_SESSION_TOKEN"):
            logging.info("✅ AWS session token loaded from %s", resolved_path)
        return aws_access_key_id, aws_secret_access_key

    raise ValueError(f"AWS credentials not found in {resolved_path}")


def create_client(
    service_name: str,
    region: Optional[str] = None,
    aws_access_key_id: Optional[str] = None,
    aws_secret_access_key: Optional[str] = None,
    aws_session_token: Optional[str] = None,
):
    """
    Create a boto3 client for any AWS service with credentials.

    Args:
        service_name: AWS service name (e.g., 'efs', 'sns', 'ec2')
        region: AWS region name (optional)
        aws_access_key_id: Optional AWS access key (loads from env if not provided)
        aws_secret_access_key: Optional AWS secret key (loads from env if not provided)
        aws_session_token: Optional session token (falls back to AWS_SESSION_TOKEN)

    Returns:
        boto3.client: Configured AWS service client
    """
    if aws_access_key_id is None or aws_secret_access_key is None:
        aws_access_key_id, aws_secret_access_key = load_credentials_from_env()
    if aws_session_token is None:
        aws_session_token = os.getenv("AWS_SESSION_TOKEN") or None

    client_kwargs = {
        "aws_access_key_id": aws_access_key_id,
        "aws_secret_access_key": aws_secret_access_key,
    }

    if aws_session_token:
        client_kwargs["aws_session_token"] = aws_session_token

    if region is not None:
        client_kwargs["region_name"] = region

    return boto3.client(service_name, **client_kwargs)


def create_default_chain_client(service_name: str, region: Optional[str] = None):
    """Create a boto3 client using boto3's own credential chain (profiles, instance roles)."""
    if region is None:
        return boto3.client(service_name)
    return boto3.client(service_name, region_name=region)


# Service-specific client factory functions


def create_efs_client(region: str, aws_access_key_id=None, aws_secret_access_key=None):
    """Create an EFS boto3 client with credentials."""
    return create_client("efs", region, aws_access_key_id, aws_secret_access_key)


def create_sns_client(region: str, aws_access_key_id=None, aws_secret_access_key=None):
    """Create an SNS boto3 client with credentials."""
    return create_client("sns", region, aws_access_key_id, aws_secret_access_key)


def create_ec2_client(region: str, aws_access_key_id=None, aws_secret_access_key=None):
    """Create an EC2 boto3 client with credentials."""
    return create_client("ec2", region, aws_access_key_id, aws_secret_access_key)


def create_kinesis_client(region: str, aws_access_key_id=None, aws_secret_access_key=None):
    """Create a Kinesis boto3 client with credentials."""
    return create_client("kinesis", region, aws_access_key_id, aws_secret_access_key)


def create_apigatewayv2_client(region: str, aws_access_key_id=None, aws_secret_access_key=None):
    """Create an API Gateway v2 boto3 client with credentials."""
    return create_client("apigatewayv2", region, aws_access_key_id, aws_secret_access_key)


def create_codestar_connections_client(
    region: str, aws_access_key_id=None, aws_secret_access_key=None
):
    """Create a CodeStar Connections boto3 client with credentials."""
    return create_client("codestar-connections", region, aws_access_key_id, aws_secret_access_key)
