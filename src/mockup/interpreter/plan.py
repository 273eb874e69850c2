"""Materialization plan: backend-neutral description of one rendered node."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any


class PlanKind(str, Enum):
    """Primitive node kinds every back end must materialize."""
    TEXT = "text"
    BUTTON = "button"
    INPUT = "input"
    IMAGE = "image"
    ICON = "icon"
    DIVIDER = "divider"
    SPACER = "spacer"
    SWITCH = "switch"
    CONTAINER = "container"


class Direction(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Sizing(str, Enum):
    FILL = "fill"
    HUG = "hug"
    FIXED = "fixed"


class Align(str, Enum):
    MIN = "min"
    CENTER = "center"


@dataclass(frozen=True)
class TextStyle:
    style: str
    size: float
    weight: str
    color: str
    align: Align = Align.MIN


@dataclass(frozen=True)
class Paint:
    """Fill/stroke in colour-token terms."""
    fill: str | None = None
    fill_opacity: float = 1.0
    gradient: tuple[str, str] | None = None
    gradient_alpha: tuple[float, float] = (1.0, 1.0)
    stroke: str | None = None
    stroke_weight: float = 0
    corner_radius: float = 0


@dataclass(frozen=True)
class Layout:
    direction: Direction | None = None
    padding: tuple[float, float] = (0, 0)  # (vertical, horizontal)
    gap: float = 0
    align: Align = Align.MIN
    cross_align: Align = Align.MIN
    width_sizing: Sizing = Sizing.FILL
    height_sizing: Sizing = Sizing.HUG
    width: float | None = None
    height: float | None = None


NO_PAINT = Paint()
NO_PROPS: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class MaterializationPlan:
    """Resolved node: effective props, derived style and ordered children."""

    kind: PlanKind
    element_type: str
    role: str
    props: Mapping[str, Any] = field(default_factory=lambda: NO_PROPS)
    element_id: str | None = None
    is_element: bool = False
    text_style: TextStyle | None = None
    paint: Paint = NO_PAINT
    layout: Layout = field(default_factory=Layout)
    children: tuple["MaterializationPlan", ...] = ()
    fallback: bool = False

    @property
    def is_container(self) -> bool:
        return self.kind is PlanKind.CONTAINER

    def prop(self, name: str, default: Any = None) -> Any:
        return self.props.get(name, default)

    def walk(self) -> Iterator["MaterializationPlan"]:
        """Depth-first, pre-order traversal."""
        yield self
        for child in self.children:
            yield from child.walk()

    def shape(self) -> tuple:
        """Nesting signature (kind, role, children) used for cross-backend parity checks."""
        return (self.kind.value, self.role, tuple(child.shape() for child in self.children))

    def as_element(self, element_id: str | None, element_type: str, fallback: bool = False) -> "MaterializationPlan":
        """Mark this plan as the root of a spec element."""
        return replace(
            self,
            element_id=element_id,
            element_type=element_type,
            is_element=True,
            fallback=fallback,
        )
