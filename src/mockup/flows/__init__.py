"""
Flow Routing
Connector geometry between screens and its SVG overlay.
"""

from .router import (
    END_MARKER,
    START_MARKER,
    FlowDirection,
    FlowLabel,
    FlowPath,
    FlowRouter,
    LabelBox,
    Point,
    ScreenRect,
    anchors,
    format_number,
    orthogonal_points,
    place_label,
    rounded_path,
    route,
    screen_rects,
)
from .svg import render_flow_svg

__all__ = [
    "END_MARKER",
    "START_MARKER",
    "FlowDirection",
    "FlowLabel",
    "FlowPath",
    "FlowRouter",
    "LabelBox",
    "Point",
    "ScreenRect",
    "anchors",
    "format_number",
    "orthogonal_points",
    "place_label",
    "render_flow_svg",
    "rounded_path",
    "route",
    "screen_rects",
]
