"""
Element Tree Interpreter
Per-variant defaults, derived styling and composite expansion.
"""

from .interpreter import Interpreter, resolve
from .plan import (
    Align,
    Direction,
    Layout,
    MaterializationPlan,
    Paint,
    PlanKind,
    Sizing,
    TextStyle,
)
from .rules import RULES, Resolution, VariantRule, rule

__all__ = [
    "Align",
    "Direction",
    "Interpreter",
    "Layout",
    "MaterializationPlan",
    "Paint",
    "PlanKind",
    "RULES",
    "Resolution",
    "Sizing",
    "TextStyle",
    "VariantRule",
    "resolve",
    "rule",
]
