"""Amazon API Gateway v2 lookups and waiters."""
