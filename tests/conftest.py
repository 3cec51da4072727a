"""Pytest configuration and shared fixtures."""

import os
from typing import Iterator

import pytest

from fileurl_mcp.config import reset_config
from fileurl_mcp.metrics import reset_metrics_collector


@pytest.fixture(autouse=True)
def reset_singletons_fixture() -> Iterator[None]:
    """Reset config and metrics singletons between tests for isolation."""
    reset_config()
    reset_metrics_collector()
    yield
    reset_config()
    reset_metrics_collector()


@pytest.fixture
def set_env_vars():
    """Fixture to temporarily set environment variables."""

    def _set_env_vars(**kwargs: str) -> None:
        for key, value in kwargs.items():
            os.environ[key] = value

    yield _set_env_vars

    # Cleanup: remove all FILEURL_MCP_ env vars
    keys_to_remove = [key for key in os.environ if key.startswith("FILEURL_MCP_")]
    for key in keys_to_remove:
        del os.environ[key]
