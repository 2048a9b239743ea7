"""Amazon SNS subscription lookups and waiters."""
