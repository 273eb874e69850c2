"""
Component Registry
Static element type table and advisory validator.
"""

from .components import COMPONENT_REGISTRY, ICON_NAMES
from .registry import (
    ComponentRegistry,
    audit_spec,
    check_component,
    default_registry,
    describe,
    generate_docs,
    is_present,
    schema_for,
    validate_component,
)
from .schema import (
    ComponentIssue,
    ComponentSchema,
    ComponentValidation,
    PropKind,
    PropSchema,
)

__all__ = [
    "COMPONENT_REGISTRY",
    "ICON_NAMES",
    "ComponentIssue",
    "ComponentRegistry",
    "ComponentSchema",
    "ComponentValidation",
    "PropKind",
    "PropSchema",
    "audit_spec",
    "check_component",
    "default_registry",
    "describe",
    "generate_docs",
    "is_present",
    "schema_for",
    "validate_component",
]
