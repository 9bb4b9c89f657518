"""
Force-directed simulation.

The Simulation owns a fixed set of nodes and edges, a named collection of
forces, and the global integration parameters. Each step applies every
registered force, recenters the layout, adds drag and centering gravity, and
integrates node motion. The update() entry point wraps step() with an
energy-based termination policy suited to a caller-driven render loop.

Example:
    simulation = Simulation(
        nodes=[{"x": 0, "y": 0}, {"x": 100, "y": 0}],
        edges=[{"source": 0, "target": 1}],
    ).add_force("link", SpringForce())

    def redraw(nodes):
        for node in nodes:
            print(node.index, node.x, node.y)

    # Once per frame
    simulation.update(redraw)
"""

from __future__ import annotations

import warnings
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, Optional, Sequence, Union

import numpy as np

if TYPE_CHECKING:
    from typing_extensions import Self

from .forces.base import Force
from .types import Bounds, Edge, EdgeLike, Node, NodeLike
from .validation import (
    InvalidConfigurationError,
    InvalidMemberError,
    SimulationWarning,
    validate_edge_members,
    validate_index,
)
from .vector import Vector2, VectorLike

NodesCallback = Callable[[Sequence[Node]], None]


class Simulation:
    """
    Force-directed layout simulation.

    Per step:
    1. Apply every registered force
    2. Translate the layout so its centroid sits on center_on
    3. Add drag (velocity * drag) to each node's force
    4. Add centering gravity (normalized position * center_of_gravity * mass)
    5. Integrate: a = F / m, v += a * dt (capped at max_velocity), x += v * dt

    Pinned nodes take part in force accumulation and recentering, and are
    restored to their fixed position during integration.
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        edges: Optional[Sequence[EdgeLike]] = None,
        forces: Optional[Mapping[str, Force]] = None,
        center_of_gravity: float = -1e-4,
        drag: float = -0.02,
        time_step: float = 20.0,
        max_velocity: float = 1.0,
        center_on: VectorLike = (0.0, 0.0),
        energy_threshold: float = 0.001,
    ) -> None:
        """
        Initialize simulation.

        Args:
            nodes: Node objects or dicts with x, y, mass, fixed
            edges: Edge objects, or dicts/objects with source, target
                (Node or node index) and optional weight
            forces: Initial named forces
            center_of_gravity: Gravity coefficient (negative pulls toward origin)
            drag: Drag coefficient (negative opposes motion)
            time_step: Integration time step
            max_velocity: Velocity magnitude cap
            center_on: Point the layout's centroid is held at
            energy_threshold: Kinetic energy below which update() stops stepping

        Raises:
            InvalidConfigurationError: If a node mass or edge weight is invalid
            InvalidMemberError: If an edge references a node outside the node list
        """
        node_list = [self._normalize_node(data) for data in (nodes or [])]
        for i, node in enumerate(node_list):
            node.index = i

        edge_list = [self._normalize_edge(data, node_list) for data in (edges or [])]
        self._members: frozenset[Node] = frozenset(node_list)
        validate_edge_members(edge_list, self._members)

        self._nodes: tuple[Node, ...] = tuple(node_list)
        self._edges: tuple[Edge, ...] = tuple(edge_list)
        self._forces: dict[str, Force] = {}
        self._needs_update: bool = False

        self.center_of_gravity = center_of_gravity
        self.drag = drag
        self.time_step = time_step
        self.max_velocity = max_velocity
        self.center_on = center_on  # type: ignore[assignment]
        self.energy_threshold = energy_threshold

        for name, force in (forces or {}).items():
            self.add_force(name, force)

    # -------------------------------------------------------------------------
    # Input normalization
    # -------------------------------------------------------------------------

    @staticmethod
    def _normalize_node(data: NodeLike) -> Node:
        if isinstance(data, Node):
            return data
        if isinstance(data, dict):
            return Node(**data)
        raise TypeError(f"Expected Node or dict, got {type(data).__name__}")

    @staticmethod
    def _normalize_edge(data: EdgeLike, nodes: Sequence[Node]) -> Edge:
        if isinstance(data, Edge):
            return data

        if isinstance(data, dict):
            source = data.get("source")
            target = data.get("target")
            weight = data.get("weight")
        else:
            # Generic object - extract source/target
            source = getattr(data, "source", None)
            target = getattr(data, "target", None)
            weight = getattr(data, "weight", None)

        def resolve(endpoint: Union[Node, int, None]) -> Node:
            if isinstance(endpoint, Node) or endpoint is None:
                return endpoint  # type: ignore[return-value]
            if isinstance(endpoint, (int, np.integer)) and not isinstance(endpoint, bool):
                return nodes[validate_index(int(endpoint), len(nodes))]
            raise InvalidMemberError(
                f"Edge endpoint must be a Node or node index, got {endpoint!r}"
            )

        return Edge(
            resolve(source),
            resolve(target),
            weight=1.0 if weight is None else weight,
        )

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> tuple[Node, ...]:
        """Get the nodes (fixed for the simulation's lifetime)."""
        return self._nodes

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Get the edges (fixed for the simulation's lifetime)."""
        return self._edges

    @property
    def forces(self) -> Mapping[str, Force]:
        """Read-only view of the registered forces."""
        return MappingProxyType(self._forces)

    @property
    def center_of_gravity(self) -> float:
        """Get gravity coefficient."""
        return self._center_of_gravity

    @center_of_gravity.setter
    def center_of_gravity(self, value: float) -> None:
        self._center_of_gravity = float(value)

    @property
    def drag(self) -> float:
        """Get drag coefficient."""
        return self._drag

    @drag.setter
    def drag(self, value: float) -> None:
        self._drag = float(value)

    @property
    def time_step(self) -> float:
        """Get integration time step."""
        return self._time_step

    @time_step.setter
    def time_step(self, value: float) -> None:
        self._time_step = float(value)

    @property
    def max_velocity(self) -> float:
        """Get velocity magnitude cap."""
        return self._max_velocity

    @max_velocity.setter
    def max_velocity(self, value: float) -> None:
        self._max_velocity = float(value)

    @property
    def center_on(self) -> Vector2:
        """Get the point the layout is recentered on."""
        return self._center_on

    @center_on.setter
    def center_on(self, value: VectorLike) -> None:
        self._center_on = Vector2.from_sequence(value)

    @property
    def energy_threshold(self) -> float:
        """Get the kinetic energy below which the layout counts as settled."""
        return self._energy_threshold

    @energy_threshold.setter
    def energy_threshold(self, value: float) -> None:
        self._energy_threshold = float(value)

    @property
    def needs_update(self) -> bool:
        """True if a node was pinned or released since the last step."""
        return self._needs_update

    # -------------------------------------------------------------------------
    # Force registry
    # -------------------------------------------------------------------------

    def add_force(self, name: str, force: Optional[Force]) -> Self:
        """
        Register a force under a name, replacing any force with that name.

        Passing None removes the named force.

        Returns:
            self (for chaining)

        Raises:
            InvalidConfigurationError: If force is not a Force instance
        """
        if force is None:
            self._forces.pop(name, None)
            return self
        if not isinstance(force, Force):
            raise InvalidConfigurationError(
                f"Force {name!r} must be a Force instance, got {type(force).__name__}"
            )
        self._forces[name] = force
        return self

    def remove_force(self, name: str) -> Optional[Force]:
        """Remove and return the named force, or None if absent."""
        return self._forces.pop(name, None)

    def get_force(self, name: str) -> Optional[Force]:
        return self._forces.get(name)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def positions(self) -> np.ndarray:
        """Node positions as an (n, 2) array, in node order."""
        if not self._nodes:
            return np.zeros((0, 2))
        return np.array([(node.x, node.y) for node in self._nodes], dtype=float)

    @property
    def bounds(self) -> Bounds:
        """
        Axis-aligned bounding box of the current node positions.

        Recomputed on every access. Empty simulations return a zero-size box.
        """
        if not self._nodes:
            return Bounds()
        pos = self.positions()
        min_x, min_y = pos.min(axis=0)
        max_x, max_y = pos.max(axis=0)
        return Bounds(float(min_x), float(min_y), float(max_x - min_x), float(max_y - min_y))

    def centroid(self) -> Vector2:
        """Mean position of all nodes (origin when empty)."""
        if not self._nodes:
            return Vector2.zero()
        cx, cy = self.positions().mean(axis=0)
        return Vector2(float(cx), float(cy))

    def kinetic_energy(self) -> float:
        """Total kinetic energy, sum of 0.5 * m * |v|^2 (pinned nodes count zero)."""
        return sum(node.kinetic_energy for node in self._nodes)

    # -------------------------------------------------------------------------
    # Pinning
    # -------------------------------------------------------------------------

    def fix(self, node: Union[Node, int], position: VectorLike) -> Self:
        """
        Pin a node at a position.

        Args:
            node: Member node or its index
            position: Position to hold the node at

        Returns:
            self (for chaining)

        Raises:
            InvalidMemberError: If the node is not part of this simulation
        """
        self._resolve_member(node).fix(position)
        self._needs_update = True
        return self

    def unfix(self, node: Union[Node, int]) -> Self:
        """
        Release a pinned node.

        Raises:
            InvalidMemberError: If the node is not part of this simulation
        """
        self._resolve_member(node).unfix()
        self._needs_update = True
        return self

    def _resolve_member(self, node: Union[Node, int]) -> Node:
        if isinstance(node, Node):
            if node not in self._members:
                raise InvalidMemberError(f"{node!r} is not part of this simulation")
            return node
        return self._nodes[validate_index(int(node), len(self._nodes))]

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def update(self, callback: Optional[NodesCallback] = None) -> bool:
        """
        Advance the simulation by one step if it has not settled.

        Steps when kinetic energy exceeds energy_threshold, or once after a
        node was pinned or released. Otherwise nothing happens and the
        callback is not invoked.

        Args:
            callback: Called with the node list after a step

        Returns:
            True if a step was taken
        """
        if self.kinetic_energy() <= self._energy_threshold and not self._needs_update:
            return False

        self.step()
        self._needs_update = False
        if callback is not None:
            callback(self._nodes)
        return True

    def settle(self, max_steps: int = 300, callback: Optional[NodesCallback] = None) -> int:
        """
        Call update() until the layout settles or max_steps is reached.

        Returns:
            Number of steps taken
        """
        steps = 0
        while steps < max_steps:
            if not self.update(callback):
                return steps
            steps += 1

        if self.kinetic_energy() > self._energy_threshold:
            warnings.warn(
                f"Simulation did not settle within {max_steps} steps "
                f"(kinetic energy {self.kinetic_energy():.4g}).",
                SimulationWarning,
                stacklevel=2,
            )
        return steps

    def step(self) -> None:
        """Run one step of the force pipeline and integrate all nodes."""
        if not self._nodes:
            warnings.warn(
                "step() called on a simulation with no nodes.",
                SimulationWarning,
                stacklevel=2,
            )
            return

        bounds = self.bounds
        for force in self._forces.values():
            force.apply(self._nodes, self._edges, bounds)

        self._recenter()
        self._apply_drag()
        self._apply_gravity()
        self._integrate()

    def _recenter(self) -> None:
        offset = self.centroid() - self._center_on
        for node in self._nodes:
            node.position = node.position - offset

    def _apply_drag(self) -> None:
        for node in self._nodes:
            node.force = node.force + node.velocity * self._drag

    def _apply_gravity(self) -> None:
        for node in self._nodes:
            pull = node.position.normalized() * self._center_of_gravity * node.mass
            node.force = node.force + pull

    def _integrate(self) -> None:
        dt = self._time_step
        for node in self._nodes:
            acceleration = node.force / node.mass
            node.force = Vector2.zero()

            if node.fixed:
                node.velocity = Vector2.zero()
                if node.fixed_position is not None:
                    node.position = node.fixed_position
                continue

            velocity = node.velocity + acceleration * dt
            if velocity.magnitude > self._max_velocity:
                velocity = velocity.normalized() * self._max_velocity
            node.velocity = velocity
            node.position = node.position + velocity * dt

    def __repr__(self) -> str:
        return (
            f"Simulation(nodes={len(self._nodes)}, edges={len(self._edges)}, "
            f"forces={list(self._forces)})"
        )


__all__ = ["Simulation", "NodesCallback"]
