"""Amazon Kinesis stream consumer lookups and waiters."""
