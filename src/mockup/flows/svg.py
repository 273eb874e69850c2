"""SVG overlay for routed flow edges."""

from html import escape
from typing import Sequence

from .router import END_MARKER, START_MARKER, FlowPath, format_number

STROKE_COLOR = "#333333"

_DEFS = (
    "<defs>"
    f'<marker id="{START_MARKER}" markerWidth="8" markerHeight="8" refX="4" refY="4" orient="auto">'
    f'<circle cx="4" cy="4" r="3" fill="{STROKE_COLOR}"/>'
    "</marker>"
    f'<marker id="{END_MARKER}" markerWidth="10" markerHeight="10" refX="9" refY="5" '
    'orient="auto" markerUnits="strokeWidth">'
    f'<path d="M 0 0 L 10 5 L 0 10 L 2 5 Z" fill="{STROKE_COLOR}"/>'
    "</marker>"
    "</defs>"
)


def _path_markup(path: FlowPath) -> str:
    fmt = format_number
    parts = [
        f'<g class="flow-arrow" data-from="{escape(path.source)}" data-to="{escape(path.target)}">',
        f'<path d="{path.d}" stroke="{STROKE_COLOR}" stroke-width="2" fill="none" '
        f'marker-start="url(#{path.start_marker})" marker-end="url(#{path.end_marker})" '
        'stroke-linecap="round" stroke-linejoin="round"/>',
    ]
    if path.label is not None:
        box = path.label.box
        parts.append(
            f'<rect x="{fmt(box.x)}" y="{fmt(box.y)}" width="{fmt(box.width)}" '
            f'height="{fmt(box.height)}" rx="{fmt(box.rx)}" fill="{STROKE_COLOR}"/>'
        )
        parts.append(
            f'<text x="{fmt(path.label.x)}" y="{fmt(path.label.y)}" fill="#ffffff" font-size="10" '
            f'font-family="sans-serif" dominant-baseline="middle">{escape(path.label.text)}</text>'
        )
    parts.append("</g>")
    return "".join(parts)


def render_flow_svg(paths: Sequence[FlowPath]) -> str:
    """Overlay markup for ``paths``; empty string when there is nothing to draw."""
    if not paths:
        return ""
    body = "".join(_path_markup(path) for path in paths)
    return (
        '<svg class="flow-arrows" style="position: absolute; top: 0; left: 0; width: 100%; '
        'height: 100%; pointer-events: none; overflow: visible; z-index: 100;">'
        f"{_DEFS}{body}</svg>"
    )
