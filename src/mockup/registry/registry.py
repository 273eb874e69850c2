"""Component Registry - schema lookup, advisory validation and docs."""

import math
from typing import Any, Iterator, Mapping

from returns.result import Failure, Result, Success

from ..core import get_logger
from ..spec.models import Element, UiSpec
from .components import COMPONENT_REGISTRY
from .schema import ComponentIssue, ComponentSchema, ComponentValidation

logger = get_logger(__name__)


def is_present(value: Any) -> bool:
    """Presence test for required props.

    Falsy values count as missing, except numeric zero.
    Collections count as present even when empty.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def _props_of(element: Element | Mapping[str, Any] | None) -> dict[str, Any] | None:
    if element is None:
        return None
    if isinstance(element, Element):
        return element.as_props()
    if isinstance(element, Mapping):
        return dict(element)
    return None


class ComponentRegistry:
    """
    Read-only view over the element type table.
    Validation is advisory: the interpreter never consults it.
    """

    def __init__(self, components: Mapping[str, ComponentSchema] = COMPONENT_REGISTRY):
        self._components = components

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._components

    def __iter__(self) -> Iterator[str]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def types(self) -> list[str]:
        """Registered type tags, in table order."""
        return list(self._components)

    def schema_for(self, type_name: str) -> ComponentSchema | None:
        """Get schema by type tag."""
        return self._components.get(type_name)

    def validate(self, element: Element | Mapping[str, Any] | None) -> ComponentValidation:
        """
        Validate one element against its schema.

        Checks only that ``type`` is present and registered and that every
        required prop is present. Enum domains are not enforced.
        """
        props = _props_of(element)
        if not props or not props.get("type"):
            return ComponentValidation(valid=False, error="Component missing type")

        type_name = props["type"]
        schema = self.schema_for(type_name)
        if schema is None:
            return ComponentValidation(valid=False, error=f"Unknown component type: {type_name}")

        for prop_name in schema.required_props():
            if not is_present(props.get(prop_name)):
                return ComponentValidation(valid=False, error=f"Missing required prop: {prop_name}")

        return ComponentValidation(valid=True)

    def check(self, element: Element | Mapping[str, Any] | None) -> Result[ComponentSchema, str]:
        """Validate (Result pattern version)."""
        outcome = self.validate(element)
        if not outcome.valid:
            return Failure(outcome.error or "invalid")
        props = _props_of(element) or {}
        return Success(self._components[props["type"]])

    def audit(self, spec: UiSpec) -> list[ComponentIssue]:
        """Collect validation failures for every element in ``spec``, nested ones included."""
        issues: list[ComponentIssue] = []

        def walk(elements: list[Element], screen_id: str | None, prefix: str) -> None:
            for idx, element in enumerate(elements):
                path = f"{prefix}[{idx}]"
                outcome = self.validate(element)
                if not outcome.valid:
                    issues.append(ComponentIssue(
                        screen_id=screen_id,
                        path=path,
                        element_type=element.type,
                        error=outcome.error or "invalid",
                    ))
                if element.children:
                    walk(element.children, screen_id, f"{path}.children")

        for screen in spec.screens:
            walk(screen.elements, screen.id, "elements")

        if issues:
            logger.warning("spec_audit_issues", count=len(issues))
        return issues

    def describe(self) -> str:
        """Human-readable dump of every schema for prompt construction."""
        docs = ""
        for type_name, schema in self._components.items():
            docs += f"\n{type_name.upper()}: {schema.description}\n"
            docs += "Props: "
            prop_list = []
            for name, prop in schema.props.items():
                prop_str = f"{name} {prop.summary()}"
                if prop.required:
                    prop_str += " *required*"
                prop_list.append(prop_str)
            docs += ", ".join(prop_list) or "none"
            docs += "\n"
        return docs


default_registry = ComponentRegistry()


def schema_for(type_name: str) -> ComponentSchema | None:
    return default_registry.schema_for(type_name)


def validate_component(element: Element | Mapping[str, Any] | None) -> ComponentValidation:
    return default_registry.validate(element)


def check_component(element: Element | Mapping[str, Any] | None) -> Result[ComponentSchema, str]:
    return default_registry.check(element)


def audit_spec(spec: UiSpec) -> list[ComponentIssue]:
    return default_registry.audit(spec)


def generate_docs() -> str:
    return default_registry.describe()


describe = generate_docs
