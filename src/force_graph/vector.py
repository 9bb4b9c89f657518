"""
Two-dimensional vector value type.

Vector2 is immutable: every operator returns a new vector, so positions and
velocities can be shared between nodes without aliasing side effects.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union


@dataclass(frozen=True)
class Vector2:
    """A 2D vector with arithmetic, magnitude and normalization."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def from_sequence(cls, value: Union[Vector2, Sequence[float]]) -> Vector2:
        """Build a vector from another vector or an (x, y) sequence."""
        if isinstance(value, Vector2):
            return value
        if len(value) != 2:
            raise ValueError(f"Vector2 needs 2 components, got {len(value)}")
        return cls(float(value[0]), float(value[1]))

    @classmethod
    def random_direction(
        cls, magnitude: float = 1.0, rng: Optional[random.Random] = None
    ) -> Vector2:
        """
        Vector pointing in a uniformly random direction.

        Args:
            magnitude: Length of the returned vector
            rng: Random source (defaults to the module-level generator)

        Returns:
            Vector of the requested length
        """
        angle = (rng or random).uniform(0.0, 2.0 * math.pi)
        return cls(math.cos(angle) * magnitude, math.sin(angle) * magnitude)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    @property
    def magnitude(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    @property
    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vector2:
        """Unit vector in the same direction (zero vector stays zero)."""
        length = self.magnitude
        if length == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / length, self.y / length)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __repr__(self) -> str:
        return f"Vector2({self.x:.4g}, {self.y:.4g})"


VectorLike = Union[Vector2, Sequence[float]]
"""Input type for points: Vector2 or an (x, y) tuple/list."""


__all__ = ["Vector2", "VectorLike"]
