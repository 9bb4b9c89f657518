"""
Many-body repulsion between all node pairs.

Every pair of nodes repels with Coulomb's law, F = strength * m_i * m_j / d^2.
The exact pass is O(n^2); the Barnes-Hut option builds a quadtree over the
simulation bounds and approximates distant clusters in O(n log n).
"""

from __future__ import annotations

from typing import Sequence

from ..spatial.quadtree import Body, QuadTree
from ..types import Bounds, Edge, Node
from ..validation import validate_non_negative
from .base import Force

# Pairs closer than this are treated as coincident and skipped
_MIN_DISTANCE_SQ = 1e-10


class ManyBodyForce(Force):
    """
    Pairwise repulsion between all nodes.

    Example:
        simulation.add_force("charge", ManyBodyForce(strength=30.0, barnes_hut=True))
    """

    def __init__(
        self,
        strength: float = 30.0,
        barnes_hut: bool = False,
        theta: float = 0.5,
        barnes_hut_threshold: int = 50,
    ) -> None:
        """
        Initialize many-body force.

        Args:
            strength: Repulsion constant, must be non-negative
            barnes_hut: Use the quadtree approximation
            theta: Barnes-Hut accuracy (0 = exact, 0.5 = balanced)
            barnes_hut_threshold: Minimum node count before the tree is used

        Raises:
            InvalidConfigurationError: If strength or theta is negative
        """
        self._strength: float = validate_non_negative(strength, "strength")
        self._theta: float = validate_non_negative(theta, "theta")
        self.barnes_hut: bool = bool(barnes_hut)
        self.barnes_hut_threshold: int = max(0, int(barnes_hut_threshold))

    @property
    def strength(self) -> float:
        """Get repulsion constant."""
        return self._strength

    @strength.setter
    def strength(self, value: float) -> None:
        self._strength = validate_non_negative(value, "strength")

    @property
    def theta(self) -> float:
        """Get Barnes-Hut accuracy parameter."""
        return self._theta

    @theta.setter
    def theta(self, value: float) -> None:
        self._theta = validate_non_negative(value, "theta")

    def apply(self, nodes: Sequence[Node], edges: Sequence[Edge], bounds: Bounds) -> None:
        if self._strength == 0 or len(nodes) < 2:
            return
        if self.barnes_hut and len(nodes) >= self.barnes_hut_threshold:
            self._apply_barnes_hut(nodes, bounds)
        else:
            self._apply_naive(nodes)

    def _apply_naive(self, nodes: Sequence[Node]) -> None:
        """Exact O(n^2) pairwise pass."""
        n = len(nodes)
        for i in range(n):
            a = nodes[i]
            for j in range(i + 1, n):
                b = nodes[j]
                d = a.position - b.position
                dist_sq = d.magnitude_squared
                if dist_sq < _MIN_DISTANCE_SQ:
                    continue

                magnitude = self._strength * a.mass * b.mass / dist_sq
                force = d.normalized() * magnitude
                a.force = a.force + force
                b.force = b.force - force

    def _apply_barnes_hut(self, nodes: Sequence[Node], bounds: Bounds) -> None:
        """Approximate O(n log n) pass over a quadtree of the current positions."""
        tree = QuadTree.from_nodes(nodes, bounds=bounds, theta=self._theta)

        forces = []
        for i, node in enumerate(nodes):
            idx = node.index if node.index is not None else i
            body = Body(node.x, node.y, mass=node.mass, index=idx)
            forces.append(tree.calculate_force(body, self._strength))

        # Accumulate after the pass so every node sees the same tree
        for node, force in zip(nodes, forces):
            node.force = node.force + force

    def __repr__(self) -> str:
        mode = f", barnes_hut=True, theta={self._theta:g}" if self.barnes_hut else ""
        return f"ManyBodyForce(strength={self._strength:g}{mode})"


__all__ = ["ManyBodyForce"]
