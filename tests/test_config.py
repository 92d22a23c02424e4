"""Tests for settings and logging setup."""

import pytest
import structlog

from guildperms.config import Settings
from guildperms.core.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SNAPSHOT_KEY_PREFIX", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        s = Settings(_env_file=None)

        assert s.snapshot_key_prefix == "cache:"
        assert s.is_production is False

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("SNAPSHOT_KEY_PREFIX", "shard0:")
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("REDIS_URL", "redis://cache.internal:6380/2")

        s = Settings(_env_file=None)

        assert s.snapshot_key_prefix == "shard0:"
        assert s.is_production is True
        assert s.redis_url.host == "cache.internal"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_production_renders_json(self, capsys):
        configure_logging(Settings(_env_file=None, environment="production"))

        structlog.get_logger().info("resolver_ready", shard=3)

        out = capsys.readouterr().out
        assert '"event": "resolver_ready"' in out
        assert '"shard": 3' in out

    def test_level_filters_debug(self, capsys):
        configure_logging(Settings(_env_file=None, log_level="INFO"))

        structlog.get_logger().debug("too_chatty")

        assert "too_chatty" not in capsys.readouterr().out

    def test_unknown_level_falls_back_to_info(self, capsys):
        configure_logging(Settings(_env_file=None, log_level="LOUD"))

        logger = structlog.get_logger()
        logger.debug("hidden")
        logger.info("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out
