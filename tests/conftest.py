"""Shared pytest fixtures."""

import pytest

from fuzzt import config


@pytest.fixture(autouse=True)
def _reset_features(monkeypatch):
    """Every test starts with all metric families enabled."""
    monkeypatch.delenv(config.ENV_VAR, raising=False)
    config.reset()
    yield
    config.reset()
