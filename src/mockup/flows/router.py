"""
Flow Edge Router
Orthogonal, corner-rounded connectors between screen rectangles.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Sequence

from ..core import get_logger
from ..core.config import Settings, get_settings
from ..monitoring import metrics_collector
from ..spec.models import FlowEdge, UiSpec
from ..spec.normalize import grid_position

logger = get_logger(__name__)

START_MARKER = "arrow-start-dot"
END_MARKER = "arrow-head"
LABEL_HEIGHT = 20
LABEL_RADIUS = 4
LABEL_PADDING = 4


class FlowDirection(str, Enum):
    RIGHT = "right"
    LEFT = "left"
    DOWN = "down"
    UP = "up"

    @property
    def is_vertical(self) -> bool:
        return self in (FlowDirection.DOWN, FlowDirection.UP)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class ScreenRect:
    """Axis-aligned screen rectangle on the canvas."""

    id: str
    x: float
    y: float
    width: float = 280
    height: float = 600

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class LabelBox:
    x: float
    y: float
    width: float
    height: float = LABEL_HEIGHT
    rx: float = LABEL_RADIUS


@dataclass(frozen=True)
class FlowLabel:
    x: float
    y: float
    text: str
    box: LabelBox


@dataclass(frozen=True)
class FlowPath:
    """One routed edge: SVG path data plus the geometry it came from."""

    d: str
    source: str
    target: str
    direction: FlowDirection
    points: tuple[Point, ...]
    label: Optional[FlowLabel] = None
    start_marker: str = START_MARKER
    end_marker: str = END_MARKER


def format_number(value: float) -> str:
    """Shortest numeric text: integral values drop the fraction."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


def screen_rects(spec: UiSpec, width: float = 280, height: float = 600) -> list[ScreenRect]:
    """Rectangles for every identified screen; unplaced screens take their grid slot."""
    rects = []
    for index, screen in enumerate(spec.screens):
        if not screen.id:
            continue
        position = screen.position or grid_position(index)
        rects.append(ScreenRect(id=screen.id, x=position.x, y=position.y, width=width, height=height))
    return rects


def anchors(source: ScreenRect, target: ScreenRect) -> tuple[Point, Point, FlowDirection]:
    """Pick attachment points from the dominant centre-to-centre axis."""
    dx = target.center_x - source.center_x
    dy = target.center_y - source.center_y

    if abs(dx) > abs(dy):
        if dx > 0:
            return (
                Point(source.right, source.center_y),
                Point(target.x, target.center_y),
                FlowDirection.RIGHT,
            )
        return (
            Point(source.x, source.center_y),
            Point(target.right, target.center_y),
            FlowDirection.LEFT,
        )

    if dy > 0:
        return (
            Point(source.center_x, source.bottom),
            Point(target.center_x, target.y),
            FlowDirection.DOWN,
        )
    return (
        Point(source.center_x, source.y),
        Point(target.center_x, target.bottom),
        FlowDirection.UP,
    )


def orthogonal_points(start: Point, end: Point, direction: FlowDirection) -> tuple[Point, ...]:
    """Four-point polyline bending at the midpoint of the main axis."""
    if direction.is_vertical:
        mid_y = (start.y + end.y) / 2
        return (start, Point(start.x, mid_y), Point(end.x, mid_y), end)
    mid_x = (start.x + end.x) / 2
    return (start, Point(mid_x, start.y), Point(mid_x, end.y), end)


def rounded_path(points: Sequence[Point], radius: float = 12) -> str:
    """
    SVG path data through ``points`` with rounded interior corners.

    A corner is rounded with a quadratic curve whose control point is the
    corner itself; when either adjoining segment is shorter than twice the
    radius the corner stays sharp.
    """
    if not points:
        return ""
    fmt = format_number
    first = points[0]
    if len(points) < 3:
        last = points[-1]
        return f"M {fmt(first.x)} {fmt(first.y)} L {fmt(last.x)} {fmt(last.y)}"

    d = f"M {fmt(first.x)} {fmt(first.y)}"
    for prev, curr, nxt in zip(points, points[1:], points[2:]):
        v1x, v1y = curr.x - prev.x, curr.y - prev.y
        v2x, v2y = nxt.x - curr.x, nxt.y - curr.y
        len1 = math.hypot(v1x, v1y)
        len2 = math.hypot(v2x, v2y)

        if len1 < radius * 2 or len2 < radius * 2:
            d += f" L {fmt(curr.x)} {fmt(curr.y)}"
            continue

        arc_start = Point(curr.x - v1x / len1 * radius, curr.y - v1y / len1 * radius)
        arc_end = Point(curr.x + v2x / len2 * radius, curr.y + v2y / len2 * radius)
        d += f" L {fmt(arc_start.x)} {fmt(arc_start.y)}"
        d += f" Q {fmt(curr.x)} {fmt(curr.y)} {fmt(arc_end.x)} {fmt(arc_end.y)}"

    last = points[-1]
    d += f" L {fmt(last.x)} {fmt(last.y)}"
    return d


def place_label(
    text: str, start: Point, end: Point, direction: FlowDirection, char_width: float = 7.0
) -> FlowLabel:
    if direction.is_vertical:
        x, y = start.x + 10, (start.y + end.y) / 2
    else:
        x, y = (start.x + end.x) / 2, start.y - 10
    box = LabelBox(
        x=x - LABEL_PADDING,
        y=y - 14,
        width=len(text) * char_width + LABEL_PADDING * 2,
    )
    return FlowLabel(x=x, y=y, text=text, box=box)


def route(
    screens: Sequence[ScreenRect],
    edges: Iterable[FlowEdge],
    radius: float = 12,
    char_width: float = 7.0,
) -> list[FlowPath]:
    """
    Route every edge whose endpoints both name a known screen.

    Edges that reference a missing screen are dropped without error.
    """
    by_id = {rect.id: rect for rect in screens}
    paths: list[FlowPath] = []
    dropped = 0

    for edge in edges:
        source = by_id.get(edge.from_)
        target = by_id.get(edge.to)
        if source is None or target is None:
            dropped += 1
            logger.debug("flow_edge_dropped", source=edge.from_, target=edge.to)
            continue

        start, end, direction = anchors(source, target)
        points = orthogonal_points(start, end, direction)
        label = place_label(edge.label, start, end, direction, char_width) if edge.label else None
        paths.append(
            FlowPath(
                d=rounded_path(points, radius),
                source=source.id,
                target=target.id,
                direction=direction,
                points=points,
                label=label,
            )
        )

    if dropped:
        logger.info("flow_edges_dropped", dropped=dropped, routed=len(paths))
    return paths


@dataclass
class FlowRouter:
    """Routes a spec's flows using canvas geometry from settings."""

    settings: Settings = field(default_factory=get_settings)

    def rects(self, spec: UiSpec) -> list[ScreenRect]:
        return screen_rects(spec, self.settings.screen_width, self.settings.screen_height)

    def route(self, spec: UiSpec) -> list[FlowPath]:
        paths = route(
            self.rects(spec),
            spec.flows,
            radius=self.settings.corner_radius,
            char_width=self.settings.label_char_width,
        )
        if self.settings.enable_metrics:
            metrics_collector.record_edges(routed=len(paths), dropped=len(spec.flows) - len(paths))
        return paths
