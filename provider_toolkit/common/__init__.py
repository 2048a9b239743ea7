"""Shared helpers: boto3 client creation, AWS error classification, stable hashing."""
