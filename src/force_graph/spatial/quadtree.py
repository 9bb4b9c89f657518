"""
Quadtree for Barnes-Hut many-body force approximation.

The quadtree recursively subdivides 2D space into quadrants so that distant
clusters of nodes can be treated as a single mass at their center of mass,
reducing repulsion from O(n^2) to O(n log n).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..types import Bounds, Node
from ..vector import Vector2

# Bodies closer than this are treated as coincident and skipped
_MIN_DISTANCE_SQ = 1e-10

# Insertion stops subdividing below this cell size; coincident bodies share a leaf
_MIN_HALF_SIZE = 1e-6


@dataclass
class Body:
    """A node's position and mass as seen by the tree."""

    x: float
    y: float
    mass: float = 1.0
    index: int = -1  # Original node index


@dataclass
class QuadTreeNode:
    """
    A cell in the quadtree.

    Attributes:
        x, y: Center of this region
        half_size: Half the width/height of this region
        center_of_mass_x/y: Center of mass of bodies in this subtree
        total_mass: Total mass of bodies in this subtree
        bodies: Bodies stored here if this is a leaf
        children: Four child quadrants [NW, NE, SW, SE] if internal
    """

    x: float
    y: float
    half_size: float

    center_of_mass_x: float = 0.0
    center_of_mass_y: float = 0.0
    total_mass: float = 0.0

    bodies: Optional[List[Body]] = None
    children: Optional[List[Optional[QuadTreeNode]]] = None

    def is_leaf(self) -> bool:
        return self.children is None

    def is_empty(self) -> bool:
        return not self.bodies and self.children is None

    def get_quadrant(self, x: float, y: float) -> int:
        """
        Get quadrant index for a point.

        Returns:
            0=NW, 1=NE, 2=SW, 3=SE
        """
        east = x >= self.x
        south = y >= self.y
        return (2 if south else 0) + (1 if east else 0)


class QuadTree:
    """
    Barnes-Hut quadtree.

    Usage:
        tree = QuadTree.from_nodes(nodes, bounds=simulation.bounds, theta=0.5)
        force = tree.calculate_force(Body(node.x, node.y, node.mass, node.index), 30.0)

    The theta parameter controls the accuracy/speed tradeoff:
    - theta = 0: Exact calculation (no approximation)
    - theta = 0.5: Good balance (recommended)
    - theta = 1.0+: Fast but less accurate
    """

    def __init__(self, bounds: Bounds, theta: float = 0.5, padding: float = 1.0):
        """
        Initialize quadtree.

        Args:
            bounds: Region covered by the tree
            theta: Barnes-Hut threshold (0 = exact, higher = more approximation)
            padding: Margin added around the bounds
        """
        center = bounds.center
        # Square region covering the larger dimension
        half_size = max(bounds.width, bounds.height) / 2 + padding

        self.root = QuadTreeNode(center.x, center.y, half_size)
        self.theta = theta
        self.body_count = 0

    def insert(self, body: Body) -> None:
        """Insert a body into the quadtree."""
        self._insert_into(self.root, body)
        self.body_count += 1

    def _insert_into(self, node: QuadTreeNode, body: Body) -> None:
        if node.is_empty():
            node.bodies = [body]
            return

        if node.children is None:
            existing = node.bodies or []
            if node.half_size < _MIN_HALF_SIZE:
                node.bodies = existing + [body]
                return

            # Leaf with existing bodies - subdivide
            node.bodies = None
            children: List[Optional[QuadTreeNode]] = [None, None, None, None]
            node.children = children
            for other in existing:
                self._insert_into_child(node, children, other)
            self._insert_into_child(node, children, body)
            return

        self._insert_into_child(node, node.children, body)

    def _insert_into_child(
        self, node: QuadTreeNode, children: List[Optional[QuadTreeNode]], body: Body
    ) -> None:
        quadrant = node.get_quadrant(body.x, body.y)
        child = children[quadrant]

        if child is None:
            hs = node.half_size / 2
            cx = node.x + hs * (1 if quadrant & 1 else -1)
            cy = node.y + hs * (1 if quadrant & 2 else -1)
            child = QuadTreeNode(cx, cy, hs)
            children[quadrant] = child

        self._insert_into(child, body)

    def compute_mass_distribution(self) -> None:
        """Compute center of mass for all cells (post-order traversal)."""
        self._compute_mass(self.root)

    def _compute_mass(self, node: QuadTreeNode) -> None:
        if node.is_leaf():
            bodies = node.bodies or []
            node.total_mass = sum(b.mass for b in bodies)
            if node.total_mass > 0:
                node.center_of_mass_x = sum(b.x * b.mass for b in bodies) / node.total_mass
                node.center_of_mass_y = sum(b.y * b.mass for b in bodies) / node.total_mass
            return

        total_mass = 0.0
        weighted_x = 0.0
        weighted_y = 0.0

        for child in node.children or []:
            if child is not None:
                self._compute_mass(child)
                total_mass += child.total_mass
                weighted_x += child.center_of_mass_x * child.total_mass
                weighted_y += child.center_of_mass_y * child.total_mass

        node.total_mass = total_mass
        if total_mass > 0:
            node.center_of_mass_x = weighted_x / total_mass
            node.center_of_mass_y = weighted_y / total_mass

    def calculate_force(self, body: Body, strength: float = 1.0) -> Vector2:
        """
        Calculate approximate repulsive force on a body.

        Uses Coulomb's law, F = strength * m_body * m_cell / d^2, treating a
        cell as a single mass when size/distance < theta.

        Args:
            body: The body to calculate force on
            strength: Repulsion constant

        Returns:
            Force vector pointing away from the other bodies
        """
        fx, fy = self._calculate_force(self.root, body, strength)
        return Vector2(fx, fy)

    def _calculate_force(
        self, node: QuadTreeNode, body: Body, strength: float
    ) -> tuple[float, float]:
        if node.is_empty():
            return 0.0, 0.0

        if node.is_leaf():
            # Exact interaction with every body in the leaf except itself
            fx, fy = 0.0, 0.0
            for other in node.bodies or []:
                if other.index == body.index:
                    continue
                cfx, cfy = _coulomb(body, other.x, other.y, other.mass, strength)
                fx += cfx
                fy += cfy
            return fx, fy

        dx = body.x - node.center_of_mass_x
        dy = body.y - node.center_of_mass_y
        dist = math.sqrt(dx * dx + dy * dy)

        # Barnes-Hut criterion: s/d < theta
        if dist > 0 and (node.half_size * 2 / dist) < self.theta:
            return _coulomb(
                body, node.center_of_mass_x, node.center_of_mass_y, node.total_mass, strength
            )

        fx, fy = 0.0, 0.0
        for child in node.children or []:
            if child is not None:
                cfx, cfy = self._calculate_force(child, body, strength)
                fx += cfx
                fy += cfy
        return fx, fy

    @classmethod
    def from_nodes(
        cls,
        nodes: Sequence[Node],
        bounds: Optional[Bounds] = None,
        theta: float = 0.5,
        padding: float = 1.0,
    ) -> QuadTree:
        """
        Build a quadtree from simulation nodes.

        Args:
            nodes: Nodes to insert
            bounds: Region to cover; computed from the nodes when omitted
            theta: Barnes-Hut threshold
            padding: Margin around the bounds

        Returns:
            QuadTree with all nodes inserted and mass computed
        """
        if bounds is None:
            if nodes:
                min_x = min(n.x for n in nodes)
                min_y = min(n.y for n in nodes)
                bounds = Bounds(
                    min_x,
                    min_y,
                    max(n.x for n in nodes) - min_x,
                    max(n.y for n in nodes) - min_y,
                )
            else:
                bounds = Bounds()

        tree = cls(bounds, theta=theta, padding=padding)
        for i, node in enumerate(nodes):
            idx = node.index if node.index is not None else i
            tree.insert(Body(node.x, node.y, mass=node.mass, index=idx))

        tree.compute_mass_distribution()
        return tree


def _coulomb(
    body: Body, x: float, y: float, mass: float, strength: float
) -> tuple[float, float]:
    dx = body.x - x
    dy = body.y - y
    dist_sq = dx * dx + dy * dy
    if dist_sq < _MIN_DISTANCE_SQ:
        return 0.0, 0.0
    dist = math.sqrt(dist_sq)
    force = strength * body.mass * mass / dist_sq
    return (dx / dist) * force, (dy / dist) * force


__all__ = ["Body", "QuadTree", "QuadTreeNode"]
