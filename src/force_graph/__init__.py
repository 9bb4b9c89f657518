"""
force-graph: Frame-by-frame force-directed graph layout in Python.

This package simulates springs, drag and a centering field to relax node
positions toward a low-energy configuration, one caller-driven tick at a time.

Components:
- vector: Immutable 2D vector math
- types: Node, Edge and Bounds data model
- forces: Pluggable forces (springs along edges, many-body repulsion)
- simulation: Step pipeline, energy-based update policy, pinning
- metrics: Layout quality measures
"""

__version__ = "0.1.0"

# Pluggable forces
from .forces import Force, ManyBodyForce, SpringForce

# Metrics for layout quality evaluation
from .metrics import (
    edge_length_error,
    edge_length_variance,
    edge_lengths,
    kinetic_energy,
)

# Simulation engine
from .simulation import NodesCallback, Simulation

# Spatial data structures
from .spatial import Body, QuadTree, QuadTreeNode
from .types import (
    Bounds,
    Edge,
    EdgeLike,
    Node,
    NodeLike,
)

# Validation utilities
from .validation import (
    InvalidConfigurationError,
    InvalidMemberError,
    SimulationWarning,
    ValidationError,
)
from .vector import Vector2, VectorLike

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Vector2",
    "VectorLike",
    "Node",
    "Edge",
    "Bounds",
    # Type aliases for API
    "NodeLike",
    "EdgeLike",
    "NodesCallback",
    # Simulation
    "Simulation",
    # Forces
    "Force",
    "SpringForce",
    "ManyBodyForce",
    # Metrics
    "kinetic_energy",
    "edge_lengths",
    "edge_length_variance",
    "edge_length_error",
    # Spatial data structures
    "Body",
    "QuadTree",
    "QuadTreeNode",
    # Validation
    "ValidationError",
    "InvalidConfigurationError",
    "InvalidMemberError",
    "SimulationWarning",
]
