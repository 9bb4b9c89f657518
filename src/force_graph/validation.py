"""
Input validation utilities for force-directed simulations.

Provides the exception taxonomy and the checks that run at construction and
assignment time, so invalid parameters fail fast instead of surfacing later as
NaN or infinite coordinates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Collection, Sequence

if TYPE_CHECKING:
    from .types import Edge, Node


class ValidationError(ValueError):
    """Base exception for simulation validation errors."""

    pass


class InvalidConfigurationError(ValidationError):
    """Raised when a mass, weight, length or force parameter is invalid."""

    pass


class InvalidMemberError(ValidationError):
    """Raised when a node does not belong to the simulation's node set."""

    pass


class SimulationWarning(UserWarning):
    """Warning issued when a simulation call has no meaningful effect."""

    pass


def validate_positive(value: Any, name: str) -> float:
    """
    Validate that a numeric parameter is strictly positive.

    Args:
        value: Value to check (coerced with float())
        name: Parameter name used in the error message

    Returns:
        Validated float value

    Raises:
        InvalidConfigurationError: If the value is not a positive number
    """
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(f"{name} must be a number, got {value!r}") from exc
    # Written so that NaN fails the check too
    if not number > 0:
        raise InvalidConfigurationError(f"{name} must be positive, got {number}")
    return number


def validate_non_negative(value: Any, name: str) -> float:
    """Validate that a numeric parameter is zero or positive."""
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(f"{name} must be a number, got {value!r}") from exc
    if not number >= 0:
        raise InvalidConfigurationError(f"{name} must be non-negative, got {number}")
    return number


def validate_edge_members(edges: Sequence[Edge], members: Collection[Node]) -> None:
    """
    Validate that every edge endpoint belongs to the node set.

    Args:
        edges: Edges to check
        members: Node collection (membership is by identity)

    Raises:
        InvalidMemberError: If any endpoint is foreign to the node set
    """
    issues = []
    for i, edge in enumerate(edges):
        if edge.source not in members:
            issues.append(f"Edge {i}: source {edge.source!r} is not in the node set")
        if edge.target not in members:
            issues.append(f"Edge {i}: target {edge.target!r} is not in the node set")

    if issues:
        raise InvalidMemberError("Invalid edge endpoints:\n" + "\n".join(issues))


def validate_index(index: int, node_count: int) -> int:
    """
    Validate a node index against the node list length.

    Raises:
        InvalidMemberError: If the index is out of bounds
    """
    if index < 0 or index >= node_count:
        raise InvalidMemberError(f"Node index {index} out of bounds [0, {node_count})")
    return index


__all__ = [
    "ValidationError",
    "InvalidConfigurationError",
    "InvalidMemberError",
    "SimulationWarning",
    "validate_positive",
    "validate_non_negative",
    "validate_edge_members",
    "validate_index",
]
