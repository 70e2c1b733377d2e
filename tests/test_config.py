"""
Tests for environment-driven configuration.
"""

import importlib
import logging

import pytest

from wordladder import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module under a patched environment, then restore it."""

    def _reload(**env: str):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


class TestLogLevel:
    """Test LOG_LEVEL normalisation."""

    def test_lowercase_level_normalised(self, reload_config):
        """A lowercase level name should be accepted."""
        assert reload_config(LOG_LEVEL="warning").LOG_LEVEL == "WARNING"

    def test_level_usable_by_logging(self, reload_config):
        """The normalised level should be a name logging knows."""
        level = reload_config(LOG_LEVEL="debug").LOG_LEVEL
        assert logging.getLevelName(level) == logging.DEBUG
