"""Tests for input validation module."""

import math

import pytest

from force_graph import Edge, Node
from force_graph.validation import (
    InvalidConfigurationError,
    InvalidMemberError,
    ValidationError,
    validate_edge_members,
    validate_index,
    validate_non_negative,
    validate_positive,
)


class TestHierarchy:
    """Tests for the exception hierarchy."""

    def test_subclasses(self):
        assert issubclass(InvalidConfigurationError, ValidationError)
        assert issubclass(InvalidMemberError, ValidationError)
        assert issubclass(ValidationError, ValueError)


class TestNumericValidation:
    """Tests for numeric parameter validation."""

    def test_positive(self):
        assert validate_positive(3, "x") == 3.0
        assert validate_positive("2.5", "x") == 2.5

    @pytest.mark.parametrize("value", [0, -1, math.nan])
    def test_positive_rejects(self, value):
        with pytest.raises(InvalidConfigurationError, match="spring_length must be positive"):
            validate_positive(value, "spring_length")

    def test_positive_rejects_non_number(self):
        with pytest.raises(InvalidConfigurationError, match="must be a number"):
            validate_positive("abc", "mass")

    def test_non_negative(self):
        assert validate_non_negative(0, "strength") == 0.0
        with pytest.raises(InvalidConfigurationError, match="non-negative"):
            validate_non_negative(-0.1, "strength")


class TestMembershipValidation:
    """Tests for edge endpoint and index validation."""

    def test_valid_edges(self):
        a, b = Node(), Node()
        validate_edge_members([Edge(a, b)], {a, b})

    def test_foreign_endpoint_raises(self):
        a, b, stranger = Node(), Node(), Node()
        with pytest.raises(InvalidMemberError, match="Edge 1: target"):
            validate_edge_members([Edge(a, b), Edge(a, stranger)], {a, b})

    def test_index(self):
        assert validate_index(0, 3) == 0
        assert validate_index(2, 3) == 2
        with pytest.raises(InvalidMemberError, match="out of bounds"):
            validate_index(3, 3)
        with pytest.raises(InvalidMemberError, match="out of bounds"):
            validate_index(-1, 3)
