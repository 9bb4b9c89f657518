"""
Common types for force-directed simulations.

This module provides the simulation's data model:
- Node: Mutable particle with position, velocity, force accumulator and mass
- Edge: Weighted spring connecting two nodes
- Bounds: Axis-aligned bounding box of node positions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from .validation import validate_positive
from .vector import Vector2, VectorLike


class Node:
    """
    Simulation particle.

    Attributes:
        index: Index in the simulation's node list (set by the simulation)
        position: Current position
        velocity: Current velocity
        force: Force accumulator, reset to zero after every step
        mass: Particle mass (always positive)
        fixed: True while the node is pinned
        fixed_position: Position held while pinned
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        *,
        mass: float = 1.0,
        fixed: bool = False,
        index: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize node.

        Args:
            x: Initial x coordinate
            y: Initial y coordinate
            mass: Particle mass, must be positive
            fixed: Start pinned at the initial position
            index: Index in the node list (normally assigned by the simulation)

        Raises:
            InvalidConfigurationError: If mass is not positive
        """
        self.index: Optional[int] = index
        self.position: Vector2 = Vector2(float(x), float(y))
        self.velocity: Vector2 = Vector2.zero()
        self.force: Vector2 = Vector2.zero()
        self._mass: float = validate_positive(mass, "mass")
        self.fixed: bool = False
        self.fixed_position: Optional[Vector2] = None

        if fixed:
            self.fix(self.position)

        # Copy any additional custom properties
        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    @property
    def mass(self) -> float:
        """Get particle mass."""
        return self._mass

    @mass.setter
    def mass(self, value: float) -> None:
        """Set particle mass; must be positive."""
        self._mass = validate_positive(value, "mass")

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def kinetic_energy(self) -> float:
        """0.5 * m * |v|^2, zero while pinned."""
        if self.fixed:
            return 0.0
        return 0.5 * self._mass * self.velocity.magnitude_squared

    def fix(self, position: VectorLike) -> None:
        """Pin the node at a position. Velocity is cleared."""
        point = Vector2.from_sequence(position)
        self.position = point
        self.fixed_position = point
        self.velocity = Vector2.zero()
        self.fixed = True

    def unfix(self) -> None:
        """Release the node so it integrates normally again."""
        self.fixed = False
        self.fixed_position = None

    def __repr__(self) -> str:
        pinned = ", fixed" if self.fixed else ""
        return f"Node(index={self.index}, x={self.x:.2f}, y={self.y:.2f}{pinned})"


class Edge:
    """
    Spring connecting two nodes.

    Attributes:
        source: Source node (shared reference into the simulation's node list)
        target: Target node
        weight: Scales the spring rest length as ``spring_length / weight``;
            heavier edges are shorter
    """

    def __init__(self, source: Node, target: Node, weight: float = 1.0) -> None:
        """
        Initialize edge between two nodes.

        Raises:
            ValueError: If source or target is None
            InvalidConfigurationError: If weight is not positive
        """
        if source is None:
            raise ValueError("Edge source cannot be None")
        if target is None:
            raise ValueError("Edge target cannot be None")

        self.source = source
        self.target = target
        self._weight: float = validate_positive(weight, "weight")

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        self._weight = validate_positive(value, "weight")

    @property
    def length(self) -> float:
        """Current distance between the endpoints."""
        return self.source.position.distance_to(self.target.position)

    def rest_length(self, spring_length: float) -> float:
        """Effective rest length for a given base spring length."""
        return spring_length / self._weight

    def __repr__(self) -> str:
        return f"Edge({self.source.index} -> {self.target.index}, weight={self._weight:g})"


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box (origin at the minimum corner)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vector2:
        return Vector2(self.x + self.width / 2, self.y + self.height / 2)

    def is_empty(self) -> bool:
        return self.width == 0 and self.height == 0

    def as_tuple(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y)"""
        return (self.min_x, self.min_y, self.max_x, self.max_y)


# Type aliases for Pythonic API
NodeLike = Union[Node, dict[str, Any]]
"""Input type for nodes: Node objects or dicts with x, y, mass, fixed."""

EdgeLike = Union[Edge, dict[str, Any], Any]
"""Input type for edges: Edge objects, dicts, or objects with source/target."""


__all__ = [
    "Node",
    "Edge",
    "Bounds",
    "NodeLike",
    "EdgeLike",
]
