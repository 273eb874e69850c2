"""Logging configuration tests."""

import structlog
import structlog.testing

from mockup.core import LogContext, configure_logging, get_logger
from mockup.core.config import Settings
from mockup.core.logging_config import configure_from_settings


def test_log_context_binds_and_unbinds():
    with LogContext(screen_id="home", backend="dom"):
        bound = structlog.contextvars.get_contextvars()
        assert bound["screen_id"] == "home"
        assert bound["backend"] == "dom"
    assert "screen_id" not in structlog.contextvars.get_contextvars()


def test_event_style_messages():
    configure_logging("INFO", json_logs=True)
    with structlog.testing.capture_logs() as logs:
        get_logger("mockup.test").info("render_screen", screen_id="home")
    assert logs == [{"event": "render_screen", "screen_id": "home", "log_level": "info"}]


def test_configure_from_settings():
    configure_from_settings(Settings(log_level="WARNING"))
    assert structlog.is_configured()
