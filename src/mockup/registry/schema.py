"""
Component Schema Types
Documented contract for every element type a spec producer may emit.
"""

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class PropKind(str, Enum):
    """Value kinds a prop may document."""
    STRING = "string"
    ENUM = "enum"
    BOOLEAN = "boolean"
    NUMBER = "number"
    ARRAY = "array"


class PropSchema(BaseModel):
    """Single prop definition.

    ``default`` is documentation for prompt construction; the interpreter
    carries its own operative defaults.
    """
    model_config = ConfigDict(frozen=True)

    kind: PropKind
    required: bool = False
    enum_values: tuple[str, ...] | None = None
    default: Any = None
    description: str = ""

    def summary(self) -> str:
        """``(a|b|c)`` for enums, ``(kind)`` otherwise."""
        if self.kind is PropKind.ENUM and self.enum_values:
            return f"({'|'.join(self.enum_values)})"
        return f"({self.kind.value})"


class ComponentSchema(BaseModel):
    """Element type definition."""
    model_config = ConfigDict(frozen=True)

    type_name: str = Field(..., description="Element type tag")
    name: str = Field(..., description="Human-readable name")
    description: str = Field(default="")
    props: Mapping[str, PropSchema] = Field(default_factory=dict)

    def required_props(self) -> list[str]:
        """Names of props that must be present."""
        return [name for name, prop in self.props.items() if prop.required]


class ComponentValidation(BaseModel):
    """Advisory validation outcome for one element."""
    valid: bool
    error: str | None = None


class ComponentIssue(BaseModel):
    """Validation failure located inside a spec document."""
    screen_id: str | None
    path: str
    element_type: str
    error: str


def string(required: bool = False, default: Any = None, description: str = "") -> PropSchema:
    return PropSchema(kind=PropKind.STRING, required=required, default=default, description=description)


def enum(*values: str, required: bool = False, default: Any = None, description: str = "") -> PropSchema:
    return PropSchema(
        kind=PropKind.ENUM,
        required=required,
        enum_values=tuple(values),
        default=default,
        description=description,
    )


def boolean(default: Any = None, description: str = "") -> PropSchema:
    return PropSchema(kind=PropKind.BOOLEAN, default=default, description=description)


def number(default: Any = None, description: str = "") -> PropSchema:
    return PropSchema(kind=PropKind.NUMBER, default=default, description=description)


def array(required: bool = False, description: str = "") -> PropSchema:
    return PropSchema(kind=PropKind.ARRAY, required=required, description=description)
