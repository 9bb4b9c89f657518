"""
Layout quality metrics.

Provides quantitative measures of a simulation's state:
- Kinetic energy: How far the layout is from rest
- Edge lengths and their variance: Uniformity of edge lengths
- Edge length error: How closely edges match their spring rest lengths

All metrics read current node positions and never mutate them.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .types import Edge, Node


def kinetic_energy(nodes: Sequence[Node]) -> float:
    """
    Total kinetic energy of a node set.

    Args:
        nodes: Simulation nodes

    Returns:
        Sum of 0.5 * m * |v|^2 over all free nodes
    """
    return sum(node.kinetic_energy for node in nodes)


def edge_lengths(edges: Sequence[Edge]) -> List[float]:
    """Current length of each edge, in edge order."""
    return [edge.length for edge in edges]


def edge_length_variance(edges: Sequence[Edge]) -> float:
    """
    Compute the variance of edge lengths.

    Lower variance indicates more uniform edge lengths.

    Args:
        edges: Simulation edges

    Returns:
        Variance of edge lengths (0.0 for no edges)
    """
    if len(edges) == 0:
        return 0.0
    return float(np.var(edge_lengths(edges)))


def edge_length_error(edges: Sequence[Edge], spring_length: float) -> float:
    """
    Mean absolute deviation of edge lengths from their rest lengths.

    Each edge's rest length is spring_length / weight, matching SpringForce.

    Args:
        edges: Simulation edges
        spring_length: Base spring rest length

    Returns:
        Mean |length - rest length| (0.0 for no edges)
    """
    if len(edges) == 0:
        return 0.0
    lengths = np.array(edge_lengths(edges))
    rest = np.array([edge.rest_length(spring_length) for edge in edges])
    return float(np.mean(np.abs(lengths - rest)))


__all__ = [
    "kinetic_energy",
    "edge_lengths",
    "edge_length_variance",
    "edge_length_error",
]
