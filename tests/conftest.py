"""Pytest configuration and fixtures."""

import os

import pytest

from mockup.core import create_container, get_settings
from mockup.core.config import Settings
from mockup.interpreter import Interpreter
from mockup.registry import ComponentRegistry
from mockup.render import Renderer
from mockup.spec import UiSpec


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["MOCKUP_LOG_LEVEL"] = "DEBUG"
    os.environ["MOCKUP_ENABLE_METRICS"] = "false"


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return Settings(enable_metrics=False)


@pytest.fixture
def di_container(settings):
    """Dependency injection container for testing."""
    return create_container(settings)


@pytest.fixture
def registry():
    return ComponentRegistry()


@pytest.fixture
def interpreter():
    return Interpreter()


@pytest.fixture
def renderer(registry, settings):
    return Renderer(registry=registry, settings=settings)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_spec_dict():
    """Two-screen shop mockup with one labelled flow."""
    return {
        "appName": "Shop",
        "screens": [
            {
                "id": "home",
                "name": "Home",
                "position": {"x": 0, "y": 0},
                "elements": [
                    {"type": "header", "title": "Shop", "rightAction": "cart"},
                    {"type": "input", "placeholder": "Search products"},
                    {
                        "type": "card",
                        "title": "Sneakers",
                        "price": "$89",
                        "action": "Add",
                    },
                    {
                        "type": "box",
                        "variant": "row",
                        "children": [
                            {"type": "stat", "value": "12", "label": "Orders"},
                            {"type": "badge", "content": "New", "variant": "success"},
                        ],
                    },
                    {"type": "navbar", "active": 0},
                ],
            },
            {
                "id": "detail",
                "name": "Detail",
                "position": {"x": 420, "y": 0},
                "elements": [
                    {"type": "header", "title": "Sneakers", "showBack": True},
                    {"type": "image", "size": "banner"},
                    {"type": "button", "content": "Buy now"},
                ],
            },
        ],
        "flows": [
            {"from": "home", "to": "detail", "label": "Tap card"},
        ],
    }


@pytest.fixture
def sample_spec(sample_spec_dict):
    return UiSpec.model_validate(sample_spec_dict)


@pytest.fixture
def sample_spec_text(sample_spec_dict):
    """Producer response wrapping the spec in markdown."""
    import json

    return f"Here is your mockup:\n```json\n{json.dumps(sample_spec_dict)}\n```\nEnjoy!"


@pytest.fixture(autouse=True)
def _fresh_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
