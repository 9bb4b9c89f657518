"""
Hooke's-law spring force along edges.

Each edge behaves as a spring with rest length ``spring_length / weight``.
A stretched spring pulls its endpoints together, a compressed one pushes them
apart. The correction is split evenly between both endpoints.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from ..types import Bounds, Edge, Node
from ..validation import validate_positive
from ..vector import Vector2
from .base import Force

# Jitter length for coincident endpoints, as a fraction of the rest length
JITTER_FRACTION = 0.1


class SpringForce(Force):
    """
    Spring attraction between connected nodes.

    For each edge with displacement d = target - source:
        extension = |d| - spring_length / weight
        f = d * spring_coefficient * extension / |d| * 0.5
    f is added to the source and subtracted from the target.

    Example:
        simulation.add_force("link", SpringForce(spring_length=80))
    """

    def __init__(
        self,
        spring_length: float = 50.0,
        spring_coefficient: float = 0.0002,
        random_seed: Optional[int] = None,
    ) -> None:
        """
        Initialize spring force.

        Args:
            spring_length: Base rest length, divided by each edge's weight
            spring_coefficient: Spring stiffness
            random_seed: Seed for the jitter applied to coincident endpoints

        Raises:
            InvalidConfigurationError: If spring_length is not positive
        """
        self._spring_length: float = validate_positive(spring_length, "spring_length")
        self._spring_coefficient: float = float(spring_coefficient)
        self._rng = random.Random(random_seed)

    @property
    def spring_length(self) -> float:
        """Get base rest length."""
        return self._spring_length

    @spring_length.setter
    def spring_length(self, value: float) -> None:
        """Set base rest length; must be positive."""
        self._spring_length = validate_positive(value, "spring_length")

    @property
    def spring_coefficient(self) -> float:
        """Get spring stiffness."""
        return self._spring_coefficient

    @spring_coefficient.setter
    def spring_coefficient(self, value: float) -> None:
        self._spring_coefficient = float(value)

    def apply(self, nodes: Sequence[Node], edges: Sequence[Edge], bounds: Bounds) -> None:
        for edge in edges:
            force = self.edge_force(edge)
            edge.source.force = edge.source.force + force
            edge.target.force = edge.target.force - force

    def edge_force(self, edge: Edge) -> Vector2:
        """
        Force this spring exerts on the edge's source node.

        The target receives the exact negation.
        """
        rest_length = edge.rest_length(self._spring_length)
        d = edge.target.position - edge.source.position
        if d == Vector2.zero():
            # Coincident endpoints (including self-loops): random direction
            d = Vector2.random_direction(JITTER_FRACTION * rest_length, self._rng)

        distance = d.magnitude
        extension = distance - rest_length
        coefficient = self._spring_coefficient * extension / distance
        return d * coefficient * 0.5

    def __repr__(self) -> str:
        return (
            f"SpringForce(spring_length={self._spring_length:g}, "
            f"spring_coefficient={self._spring_coefficient:g})"
        )


__all__ = ["SpringForce"]
