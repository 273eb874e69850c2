"""
Mockup spec documents: models, normalisation and loading.
"""

from .models import Element, FlowEdge, Position, Screen, UiSpec
from .normalize import dump_spec, ensure_ids, grid_position, load_spec, merge_update

__all__ = [
    "Element",
    "FlowEdge",
    "Position",
    "Screen",
    "UiSpec",
    "dump_spec",
    "ensure_ids",
    "grid_position",
    "load_spec",
    "merge_update",
]
