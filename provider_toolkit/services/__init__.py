"""Per-service finders, status probes and waiters."""
