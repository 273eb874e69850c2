"""
Mockup Renderer
Turns mockup spec documents into wireframe previews and native device frames.
"""

from .backends import DomBackend, DomNode, FontLoadError, FontsNotLoadedError, NativeBackend, NativeDocument
from .core import Settings, ValidationError, create_container, get_settings
from .flows import FlowPath, FlowRouter, render_flow_svg, route, screen_rects
from .interpreter import Interpreter, MaterializationPlan, resolve
from .registry import ComponentRegistry, audit_spec, describe, generate_docs, validate_component
from .render import Renderer
from .spec import Element, FlowEdge, Position, Screen, UiSpec, dump_spec, ensure_ids, load_spec, merge_update

__version__ = "0.1.0"

__all__ = [
    "ComponentRegistry",
    "DomBackend",
    "DomNode",
    "Element",
    "FlowEdge",
    "FlowPath",
    "FlowRouter",
    "FontLoadError",
    "FontsNotLoadedError",
    "Interpreter",
    "MaterializationPlan",
    "NativeBackend",
    "NativeDocument",
    "Position",
    "Renderer",
    "Screen",
    "Settings",
    "UiSpec",
    "ValidationError",
    "audit_spec",
    "create_container",
    "describe",
    "dump_spec",
    "ensure_ids",
    "generate_docs",
    "get_settings",
    "load_spec",
    "merge_update",
    "resolve",
    "route",
    "screen_rects",
    "validate_component",
]
