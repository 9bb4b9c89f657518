"""Tests for the Vector2 value type."""

import math
import random

import pytest

from force_graph.vector import Vector2


class TestArithmetic:
    """Tests for vector operators."""

    def test_add_sub(self):
        """Addition and subtraction are componentwise."""
        a = Vector2(1, 2)
        b = Vector2(3, -4)
        assert a + b == Vector2(4, -2)
        assert a - b == Vector2(-2, 6)

    def test_scalar_mul_div(self):
        """Scalar multiplication works from both sides."""
        v = Vector2(2, -3)
        assert v * 2 == Vector2(4, -6)
        assert 2 * v == Vector2(4, -6)
        assert v / 2 == Vector2(1, -1.5)
        assert -v == Vector2(-2, 3)

    def test_operators_do_not_alias(self):
        """Operators return new vectors and leave operands untouched."""
        a = Vector2(1, 1)
        b = a + Vector2(1, 0)
        assert a == Vector2(1, 1)
        assert b is not a

    def test_immutable(self):
        """Vectors cannot be mutated in place."""
        v = Vector2(1, 2)
        with pytest.raises(AttributeError):
            v.x = 5  # type: ignore[misc]

    def test_unpacking(self):
        """Vectors unpack to (x, y)."""
        x, y = Vector2(3, 4)
        assert (x, y) == (3, 4)


class TestGeometry:
    """Tests for magnitude and normalization."""

    def test_magnitude(self):
        assert Vector2(3, 4).magnitude == 5
        assert Vector2(3, 4).magnitude_squared == 25

    def test_normalized(self):
        """Normalized vector has unit length and same direction."""
        n = Vector2(3, 4).normalized()
        assert n.magnitude == pytest.approx(1.0)
        assert n == Vector2(0.6, 0.8)

    def test_normalized_zero(self):
        """Zero vector normalizes to zero instead of NaN."""
        assert Vector2.zero().normalized() == Vector2(0, 0)

    def test_distance_and_dot(self):
        assert Vector2(0, 0).distance_to(Vector2(6, 8)) == 10
        assert Vector2(1, 2).dot(Vector2(3, 4)) == 11

    def test_is_finite(self):
        assert Vector2(1, 2).is_finite()
        assert not Vector2(math.inf, 0).is_finite()
        assert not Vector2(0, math.nan).is_finite()


class TestConstruction:
    """Tests for alternate constructors."""

    def test_from_sequence(self):
        assert Vector2.from_sequence((1, 2)) == Vector2(1.0, 2.0)
        assert Vector2.from_sequence([5, 6]) == Vector2(5, 6)

    def test_from_sequence_passthrough(self):
        v = Vector2(1, 2)
        assert Vector2.from_sequence(v) is v

    def test_from_sequence_wrong_length(self):
        with pytest.raises(ValueError, match="2 components"):
            Vector2.from_sequence((1, 2, 3))

    def test_random_direction_magnitude(self):
        """Random direction vectors have the requested length."""
        rng = random.Random(42)
        for _ in range(20):
            v = Vector2.random_direction(5.0, rng)
            assert v.magnitude == pytest.approx(5.0)

    def test_random_direction_seeded(self):
        """Same seed gives the same direction."""
        a = Vector2.random_direction(1.0, random.Random(7))
        b = Vector2.random_direction(1.0, random.Random(7))
        assert a == b
