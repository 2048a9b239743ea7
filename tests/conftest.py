"""Shared pytest fixtures for test files."""

from __future__ import annotations

import pytest

from tests.waiter_test_utils import FakeClock


@pytest.fixture(autouse=True)
def mock_aws_env_file(tmp_path, monkeypatch):
    """Provide a mock .env file with AWS credentials and isolate AWS/toolkit environment variables."""
    env_file = tmp_path / ".env"
    env_file.write_text("AWS_ACCESS_KEY_ID=test_key\nAWS_SECRET_ACCESS_KEY=test_secret\n")
    monkeypatch.setenv("AWS_ENV_FILE", str(env_file))
    for name in (
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_SESSION_TOKEN",
        "PROVIDER_TOOLKIT_MIN_INTERVAL",
        "PROVIDER_TOOLKIT_NOT_FOUND_CHECKS",
        "PROVIDER_TOOLKIT_REGION",
    ):
        monkeypatch.delenv(name, raising=False)
    yield str(env_file)


@pytest.fixture(name="clock")
def fixture_clock():
    """Provide a fake monotonic clock whose sleep advances time instantly."""
    return FakeClock()
