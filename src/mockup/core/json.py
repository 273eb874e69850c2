"""Spec document JSON decoding and encoding with multiple backends."""

import json
import re
from typing import Any

import msgspec
import orjson
from json_repair import repair_json

_FENCE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def extract_json_text(text: str) -> str | None:
    """
    Locate the JSON object inside a producer response.

    A fenced code block wins; otherwise the span from the first ``{`` to the
    last ``}`` is used.

    Returns:
        The candidate JSON text, or None if no object is present
    """
    working = text.strip()

    fenced = _FENCE.search(working)
    if fenced:
        working = fenced.group(1).strip()

    start = working.find("{")
    end = working.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return working[start:end + 1]


def _ensure_object(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        raise JSONParseError(f"Expected object, got {type(result).__name__}")
    return result


def extract_json(text: str, repair: bool = True) -> dict[str, Any]:
    """
    Extract and parse a JSON object from text.

    Args:
        text: Text containing JSON, possibly wrapped in markdown or prose
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Parsed JSON object

    Raises:
        JSONParseError: If no object can be decoded
    """
    json_str = extract_json_text(text)
    if json_str is None:
        raise JSONParseError("No JSON object found in text")

    # msgspec first (fastest)
    try:
        return _ensure_object(msgspec.json.decode(json_str.encode("utf-8")))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e

    try:
        repaired = repair_json(json_str)
        return _ensure_object(json.loads(repaired))
    except JSONParseError:
        raise
    except (ValueError, TypeError) as e:
        raise JSONParseError(f"JSON repair failed: {e}", e) from e


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # e.g. integers outside the 64-bit range
            pass

    if indent == 2:
        try:
            return orjson.dumps(obj, option=orjson.OPT_INDENT_2).decode("utf-8")
        except (TypeError, ValueError):
            pass

    return json.dumps(obj, indent=indent if indent > 0 else None, ensure_ascii=False)
