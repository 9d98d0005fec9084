"""Shared pytest fixtures for animasies tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from animasies.core.config.loader import (
    ENV_LOG_LEVEL,
    ENV_MAX_STEPS,
    clear_app_config_cache,
)

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Isolation Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch):
    """Run every test against default configuration."""
    monkeypatch.delenv(ENV_MAX_STEPS, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    clear_app_config_cache()
    yield
    clear_app_config_cache()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after logging reconfiguration."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
