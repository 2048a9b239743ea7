"""
Configuration for the provider toolkit waiters.

Defaults for the state waiter engine. Each value can be overridden through an
environment variable so long-running automation can tune pacing without code
changes:

- PROVIDER_TOOLKIT_MIN_INTERVAL: minimum seconds between two probes
- PROVIDER_TOOLKIT_NOT_FOUND_CHECKS: tolerated consecutive "not found" probes
- PROVIDER_TOOLKIT_REGION: region used by the CLI when --region is omitted
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# Minimum spacing between two probes, in seconds
DEFAULT_MIN_INTERVAL: float = 0.5

# Consecutive "absent" observations tolerated before a wait with targets gives up
DEFAULT_NOT_FOUND_CHECKS: int = 20

# Consecutive target observations required before a wait succeeds
DEFAULT_CONTINUOUS_TARGET_OCCURRENCES: int = 1

# Upper bound of the exponential backoff between probes, in seconds
MAX_BACKOFF_INTERVAL: float = 10.0

# Region used by the CLI when neither --region nor PROVIDER_TOOLKIT_REGION is set
DEFAULT_REGION: str = "us-east-1"


class ConfigurationError(RuntimeError):
    """Raised when an environment override cannot be parsed."""


@dataclass(frozen=True)
class WaitDefaults:
    """Engine defaults after environment overrides are applied."""

    min_interval: float = DEFAULT_MIN_INTERVAL
    not_found_checks: int = DEFAULT_NOT_FOUND_CHECKS
    region: str = DEFAULT_REGION


def _read_env(name: str, converter, default):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = converter(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a {converter.__name__}, got {raw!r}") from exc
    if isinstance(value, (int, float)) and value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {raw!r}")
    return value


def load_min_interval() -> float:
    """Return the minimum probe spacing, honouring PROVIDER_TOOLKIT_MIN_INTERVAL."""
    return _read_env("PROVIDER_TOOLKIT_MIN_INTERVAL", float, DEFAULT_MIN_INTERVAL)


def load_not_found_checks() -> int:
    """Return the not-found threshold, honouring PROVIDER_TOOLKIT_NOT_FOUND_CHECKS."""
    not_found_checks = _read_env("PROVIDER_TOOLKIT_NOT_FOUND_CHECKS", int, DEFAULT_NOT_FOUND_CHECKS)
    if not_found_checks == 0:
        raise ConfigurationError("PROVIDER_TOOLKIT_NOT_FOUND_CHECKS must be positive")
    return not_found_checks


def load_region() -> str:
    return os.environ.get("PROVIDER_TOOLKIT_REGION") or DEFAULT_REGION


def load_wait_defaults() -> WaitDefaults:
    """Return engine defaults, honouring PROVIDER_TOOLKIT_* environment overrides.

    Raises:
        ConfigurationError: If an override is not a valid non-negative number.
    """
    return WaitDefaults(
        min_interval=load_min_interval(),
        not_found_checks=load_not_found_checks(),
        region=load_region(),
    )
