"""Tests for layout quality metrics."""

import pytest

from force_graph import Edge, Node, Simulation, SpringForce, Vector2
from force_graph.metrics import (
    edge_length_error,
    edge_length_variance,
    edge_lengths,
    kinetic_energy,
)


def create_path():
    """Three nodes in a line with edges of length 30 and 40."""
    nodes = [Node(0, 0), Node(30, 0), Node(30, 40)]
    edges = [Edge(nodes[0], nodes[1]), Edge(nodes[1], nodes[2], weight=2)]
    return nodes, edges


class TestKineticEnergy:
    """Tests for kinetic energy."""

    def test_at_rest(self):
        nodes, _ = create_path()
        assert kinetic_energy(nodes) == 0.0

    def test_moving_nodes(self):
        nodes, _ = create_path()
        nodes[0].velocity = Vector2(1, 0)
        nodes[1].mass = 4
        nodes[1].velocity = Vector2(0, 0.5)
        assert kinetic_energy(nodes) == pytest.approx(0.5 + 0.5)

    def test_pinned_nodes_excluded(self):
        nodes, _ = create_path()
        nodes[0].velocity = Vector2(1, 0)
        nodes[0].fix((0, 0))
        assert kinetic_energy(nodes) == 0.0

    def test_matches_simulation(self):
        nodes, edges = create_path()
        simulation = Simulation(nodes=nodes, edges=edges).add_force("link", SpringForce())
        for _ in range(3):
            simulation.step()
        assert kinetic_energy(simulation.nodes) == pytest.approx(simulation.kinetic_energy())


class TestEdgeLengths:
    """Tests for edge length measures."""

    def test_edge_lengths(self):
        _, edges = create_path()
        assert edge_lengths(edges) == [30.0, 40.0]

    def test_variance(self):
        _, edges = create_path()
        assert edge_length_variance(edges) == pytest.approx(25.0)

    def test_uniform_variance_is_zero(self):
        a, b, c = Node(0, 0), Node(10, 0), Node(10, 10)
        assert edge_length_variance([Edge(a, b), Edge(b, c)]) == pytest.approx(0.0)

    def test_error_uses_weighted_rest_length(self):
        """Rest lengths are 50 and 25: |30 - 50| and |40 - 25| average to 17.5."""
        _, edges = create_path()
        assert edge_length_error(edges, spring_length=50) == pytest.approx(17.5)

    def test_empty(self):
        assert edge_lengths([]) == []
        assert edge_length_variance([]) == 0.0
        assert edge_length_error([], spring_length=50) == 0.0

    def test_error_shrinks_as_layout_relaxes(self):
        nodes, edges = create_path()
        simulation = Simulation(nodes=nodes, edges=edges, center_of_gravity=0)
        simulation.add_force("link", SpringForce())
        before = edge_length_error(simulation.edges, 50)
        # At rest nothing updates until a pin change wakes the layout
        simulation.unfix(0)
        simulation.settle(max_steps=2000)
        assert edge_length_error(simulation.edges, 50) < before
