"""Tests for provider_toolkit/config.py"""

from __future__ import annotations

import pytest

from provider_toolkit.config import (
    DEFAULT_MIN_INTERVAL,
    DEFAULT_NOT_FOUND_CHECKS,
    DEFAULT_REGION,
    ConfigurationError,
    load_min_interval,
    load_not_found_checks,
    load_region,
    load_wait_defaults,
)
from provider_toolkit.state_waiter import WaitConfig
from tests.assertions import assert_equal


def test_load_wait_defaults_without_overrides():
    """Test the documented defaults."""
    defaults = load_wait_defaults()

    assert_equal(defaults.min_interval, DEFAULT_MIN_INTERVAL)
    assert_equal(defaults.not_found_checks, DEFAULT_NOT_FOUND_CHECKS)
    assert_equal(defaults.region, DEFAULT_REGION)


def test_load_wait_defaults_with_overrides(monkeypatch):
    """Test environment overrides."""
    monkeypatch.setenv("PROVIDER_TOOLKIT_MIN_INTERVAL", "3")
    monkeypatch.setenv("PROVIDER_TOOLKIT_NOT_FOUND_CHECKS", " 40 ")
    monkeypatch.setenv("PROVIDER_TOOLKIT_REGION", "eu-central-1")

    defaults = load_wait_defaults()

    assert_equal(defaults.min_interval, 3.0)
    assert_equal(defaults.not_found_checks, 40)
    assert_equal(defaults.region, "eu-central-1")


def test_blank_override_falls_back_to_default(monkeypatch):
    """Test empty variables are ignored."""
    monkeypatch.setenv("PROVIDER_TOOLKIT_MIN_INTERVAL", "")

    assert_equal(load_wait_defaults().min_interval, DEFAULT_MIN_INTERVAL)


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("PROVIDER_TOOLKIT_MIN_INTERVAL", "fast"),
        ("PROVIDER_TOOLKIT_MIN_INTERVAL", "-1"),
        ("PROVIDER_TOOLKIT_NOT_FOUND_CHECKS", "2.5"),
        ("PROVIDER_TOOLKIT_NOT_FOUND_CHECKS", "0"),
    ],
)
def test_invalid_override_raises(monkeypatch, name, value):
    """Test malformed overrides raise ConfigurationError."""
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError, match=name):
        load_wait_defaults()


def test_each_default_reads_only_its_own_variable(monkeypatch):
    """Test a malformed min interval does not break the not-found threshold or region."""
    monkeypatch.setenv("PROVIDER_TOOLKIT_MIN_INTERVAL", "abc")
    monkeypatch.setenv("PROVIDER_TOOLKIT_NOT_FOUND_CHECKS", "7")

    assert_equal(load_not_found_checks(), 7)
    assert_equal(load_region(), DEFAULT_REGION)
    with pytest.raises(ConfigurationError, match="PROVIDER_TOOLKIT_MIN_INTERVAL"):
        load_min_interval()


def test_wait_config_with_explicit_min_interval_ignores_bad_override(monkeypatch):
    """Test a WaitConfig that sets min_interval is unaffected by a malformed override."""
    monkeypatch.setenv("PROVIDER_TOOLKIT_MIN_INTERVAL", "abc")

    config = WaitConfig(refresh=lambda: None, timeout=60, target=["available"], min_interval=3)

    assert_equal(config.min_interval, 3)
    assert_equal(config.not_found_checks, DEFAULT_NOT_FOUND_CHECKS)
