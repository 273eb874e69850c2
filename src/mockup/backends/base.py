"""
Base Backend Adapter
Shared dispatch contract for every materialization target.
"""

from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

from ..interpreter.plan import MaterializationPlan

N = TypeVar("N")


class BackendAdapter(ABC, Generic[N]):
    """
    Abstract base class for back ends.
    Subclasses turn plans into concrete nodes; the walk itself lives here so
    every back end produces the same nesting and child order.
    """

    name: str = "backend"

    @abstractmethod
    def create_leaf(self, plan: MaterializationPlan) -> N:
        """Build a node for a non-container plan."""
        pass

    @abstractmethod
    def create_container(self, plan: MaterializationPlan, children: Sequence[N]) -> N:
        """Build a container node holding already-built ``children`` in order."""
        pass

    @abstractmethod
    def configure_layout(self, node: N, plan: MaterializationPlan) -> None:
        """Apply sizing/spacing from ``plan.layout`` to ``node``."""
        pass

    def materialize(self, plan: MaterializationPlan) -> N:
        """Build the node tree for ``plan``, children first, in array order."""
        if plan.is_container:
            children = [self.materialize(child) for child in plan.children]
            node = self.create_container(plan, children)
        else:
            node = self.create_leaf(plan)
        self.configure_layout(node, plan)
        return node

    def materialize_all(self, plans: Sequence[MaterializationPlan]) -> list[N]:
        return [self.materialize(plan) for plan in plans]
