"""Element Tree Interpreter - resolves spec elements into materialization plans."""

from collections.abc import Mapping

from ..core import get_logger
from ..spec.models import Element, Screen
from .plan import MaterializationPlan
from .rules import RULES, Resolution, VariantRule, fallback_text

logger = get_logger(__name__)


class Interpreter:
    """
    Walks an element tree depth-first and produces one plan per element.

    Pure: no state is kept between calls, and validation results are never
    consulted. Unknown element types degrade to body text.
    """

    def __init__(self, rules: Mapping[str, VariantRule] = RULES) -> None:
        self.rules = rules

    def resolve(self, element: Element, element_id: str | None = None) -> MaterializationPlan:
        """
        Resolve one element (and, for containers, its subtree).

        Args:
            element: Spec element
            element_id: Id to use when the element carries none

        Returns:
            Plan rooted at this element
        """
        element_id = element.id or element_id
        rule = self.rules.get(element.type)

        if rule is None:
            logger.debug("fallback_element", type=element.type, element_id=element_id)
            return fallback_text(element).as_element(element_id, element.type, fallback=True)

        resolution = Resolution(
            element=element,
            props=rule.effective_props(element),
            element_id=element_id,
            resolve_child=self.resolve,
        )
        return rule.expand(resolution).as_element(element_id, element.type)

    def resolve_screen(self, screen: Screen) -> list[MaterializationPlan]:
        """Resolve every top-level element of a screen, in paint order."""
        plans = []
        for idx, element in enumerate(screen.elements):
            fallback_id = f"{screen.id}-el-{idx + 1}" if screen.id else None
            plans.append(self.resolve(element, fallback_id))
        return plans


def resolve(element: Element, element_id: str | None = None) -> MaterializationPlan:
    """Resolve with the built-in dispatch table."""
    return Interpreter().resolve(element, element_id)
