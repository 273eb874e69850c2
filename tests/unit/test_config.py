"""Configuration tests."""

import pytest

from mockup.core import get_settings
from mockup.core.config import Settings


def test_settings_defaults():
    """Test default settings load correctly."""
    settings = Settings()

    assert settings.screen_width == 280
    assert settings.screen_height == 600
    assert settings.corner_radius == 12
    assert settings.device_width == 393
    assert settings.device_height == 852
    assert settings.font_family == "Inter"
    assert settings.label_char_width == 7.0


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("MOCKUP_CORNER_RADIUS", "8")
    monkeypatch.setenv("MOCKUP_FONT_FAMILY", "Roboto")
    settings = Settings()
    assert settings.corner_radius == 8
    assert settings.font_family == "Roboto"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_settings_validation():
    """Test settings validation."""
    assert Settings(corner_radius=0).corner_radius == 0

    with pytest.raises(Exception):
        Settings(corner_radius=-1)

    with pytest.raises(Exception):
        Settings(screen_width=0)

    with pytest.raises(Exception):
        Settings(font_family="")
