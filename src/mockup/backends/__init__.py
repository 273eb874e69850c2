"""
Backend Adapters
Materialize interpreter plans as preview markup or as a native frame graph.
"""

from .base import BackendAdapter
from .dom import DomBackend, DomNode, SelectionPredicate, never_selected
from .icons import ICONS, icon_svg
from .native import (
    FontLoadError,
    FontName,
    FontProvider,
    FontsNotLoadedError,
    FrameNode,
    GradientPaint,
    LineNode,
    LocalFontProvider,
    NativeBackend,
    NativeDocument,
    SceneNode,
    SolidPaint,
    TextNode,
)

__all__ = [
    "BackendAdapter",
    "DomBackend",
    "DomNode",
    "FontLoadError",
    "FontName",
    "FontProvider",
    "FontsNotLoadedError",
    "FrameNode",
    "GradientPaint",
    "ICONS",
    "LineNode",
    "LocalFontProvider",
    "NativeBackend",
    "NativeDocument",
    "SceneNode",
    "SelectionPredicate",
    "SolidPaint",
    "TextNode",
    "icon_svg",
    "never_selected",
]
