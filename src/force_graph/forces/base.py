"""
Base class for simulation forces.

A force is a pluggable rule that, given every node, every edge and the current
bounding box, adds to each node's force accumulator. Forces only add to the
accumulators, so the order in which a simulation applies them does not matter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..types import Bounds, Edge, Node


class Force(ABC):
    """
    Abstract base class for forces.

    Example:
        class Wind(Force):
            def apply(self, nodes, edges, bounds):
                for node in nodes:
                    node.force = node.force + Vector2(0.001, 0.0)
    """

    @abstractmethod
    def apply(self, nodes: Sequence[Node], edges: Sequence[Edge], bounds: Bounds) -> None:
        """
        Add this force's contribution to each node's force accumulator.

        Args:
            nodes: All simulation nodes
            edges: All simulation edges
            bounds: Bounding box of the current node positions
        """
        pass


__all__ = ["Force"]
