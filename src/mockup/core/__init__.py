"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    ValidationResult,
    SpecDocumentValidator,
    validate_json_size,
    validate_json_depth,
    validate_spec_document,
)
from .logging_config import configure_logging, configure_from_settings, get_logger, LogContext
from .json import extract_json, extract_json_text, safe_json_dumps, JSONParseError


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "ValidationResult",
    "SpecDocumentValidator",
    "validate_json_size",
    "validate_json_depth",
    "validate_spec_document",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "extract_json_text",
    "safe_json_dumps",
    "JSONParseError",
    # DI
    "create_container",
]
