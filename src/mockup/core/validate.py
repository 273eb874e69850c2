"""Structural validation of incoming spec documents."""

from dataclasses import dataclass
from typing import Any

from returns.result import Result, Success, Failure


# Validation limits
MAX_SPEC_SIZE = 512 * 1024  # 512KB
MAX_JSON_DEPTH = 20


class ValidationError(Exception):
    """Validation failed."""

    pass


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Validate encoded document size.

    Raises:
        ValidationError: If size exceeds limit
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise ValidationError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = MAX_JSON_DEPTH, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth.

    Raises:
        ValidationError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise ValidationError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)


_LIST_FIELDS = ("screens", "flows")


class SpecDocumentValidator:
    """Validates the outer shape of a spec document before it reaches the renderer.

    Missing ``screens``/``flows``/``elements`` are accepted (they default to
    empty lists downstream); present-but-wrong-typed ones are not.
    """

    @staticmethod
    def validate(
        spec_dict: Any,
        spec_json: str | None = None,
        max_size: int = MAX_SPEC_SIZE,
        max_depth: int = MAX_JSON_DEPTH,
    ) -> None:
        """
        Raises:
            ValidationError: If validation fails
        """
        if spec_json is not None:
            validate_json_size(spec_json, max_size, "Spec document")

        if not isinstance(spec_dict, dict):
            raise ValidationError("Spec document must be a JSON object")

        validate_json_depth(spec_dict, max_depth)

        for key in _LIST_FIELDS:
            if key in spec_dict and spec_dict[key] is not None and not isinstance(spec_dict[key], list):
                raise ValidationError(f"Spec '{key}' must be a list")

        for index, screen in enumerate(spec_dict.get("screens") or []):
            if not isinstance(screen, dict):
                raise ValidationError(f"Screen {index} must be an object")
            elements = screen.get("elements")
            if elements is not None and not isinstance(elements, list):
                raise ValidationError(f"Screen {index} 'elements' must be a list")

        seen: set[str] = set()
        for screen in spec_dict.get("screens") or []:
            screen_id = screen.get("id")
            if screen_id is None:
                continue
            if screen_id in seen:
                raise ValidationError(f"Duplicate screen id: {screen_id}")
            seen.add(screen_id)


def validate_spec_document(
    spec: Any, json_str: str | None = None
) -> Result[None, ValidationResult]:
    """
    Validate a spec document (Result pattern version).

    Returns:
        Result indicating success or validation error
    """
    try:
        SpecDocumentValidator.validate(spec, json_str)
        return Success(None)
    except ValidationError as e:
        return Failure(ValidationResult(str(e)))
