"""Unit tests for structlog configuration."""

import pytest
import structlog

from infrastructure.logging import build_processors, configure_logging
from infrastructure.settings import LoggingSettings


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestBuildProcessors:
    def test_json_format_ends_with_json_renderer(self):
        processors = build_processors(LoggingSettings(format="json"))

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_format_ends_with_console_renderer(self):
        processors = build_processors(LoggingSettings(format="console"))

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_auto_uses_console_when_color_is_forced(self, monkeypatch):
        monkeypatch.setenv("FORCE_COLOR", "1")

        processors = build_processors(LoggingSettings(format="auto"))

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


class TestConfigureLogging:
    def test_level_filters_lower_events(self, capsys):
        configure_logging(LoggingSettings(level="WARNING", format="json"))
        logger = structlog.get_logger()

        logger.info("tenant_created", tenant_id="t-1")
        logger.warning("tenant_access_denied", tenant_id="t-1")

        out = capsys.readouterr().out
        assert "tenant_created" not in out
        assert '"event": "tenant_access_denied"' in out

    def test_env_settings_are_read(self, monkeypatch):
        monkeypatch.setenv("FIELDBOOK_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FIELDBOOK_LOG_FORMAT", "json")

        settings = LoggingSettings()

        assert settings.level == "DEBUG"
        assert settings.format == "json"
