"""Tests for the Node, Edge and Bounds data model."""

import pytest

from force_graph import Bounds, Edge, InvalidConfigurationError, Node, Vector2


class TestNode:
    """Tests for Node."""

    def test_defaults(self):
        node = Node(3, 4)
        assert node.position == Vector2(3, 4)
        assert node.velocity == Vector2(0, 0)
        assert node.force == Vector2(0, 0)
        assert node.mass == 1.0
        assert not node.fixed
        assert node.fixed_position is None
        assert node.index is None

    def test_xy_shortcuts(self):
        node = Node(1.5, -2.5)
        assert node.x == 1.5
        assert node.y == -2.5

    def test_zero_mass_raises(self):
        """Mass must be positive."""
        with pytest.raises(InvalidConfigurationError, match="mass must be positive"):
            Node(mass=0)

    def test_negative_mass_setter_raises(self):
        node = Node()
        with pytest.raises(InvalidConfigurationError, match="mass must be positive"):
            node.mass = -1
        assert node.mass == 1.0

    def test_fix_and_unfix(self):
        """Pinning holds the node and clears its velocity."""
        node = Node(0, 0)
        node.velocity = Vector2(1, 1)
        node.fix((10, 20))
        assert node.fixed
        assert node.position == Vector2(10, 20)
        assert node.fixed_position == Vector2(10, 20)
        assert node.velocity == Vector2(0, 0)

        node.unfix()
        assert not node.fixed
        assert node.fixed_position is None
        assert node.position == Vector2(10, 20)

    def test_fixed_on_construction(self):
        node = Node(5, 6, fixed=True)
        assert node.fixed
        assert node.fixed_position == Vector2(5, 6)

    def test_kinetic_energy(self):
        node = Node(mass=2)
        node.velocity = Vector2(3, 4)
        assert node.kinetic_energy == pytest.approx(25.0)

    def test_pinned_kinetic_energy_is_zero(self):
        node = Node(mass=2, fixed=True)
        node.velocity = Vector2(3, 4)
        assert node.kinetic_energy == 0.0

    def test_custom_properties(self):
        """Extra keyword arguments become attributes."""
        node = Node(label="hub")
        assert node.label == "hub"

    def test_identity_semantics(self):
        """Nodes at the same position are still distinct members."""
        a = Node(0, 0)
        b = Node(0, 0)
        assert a != b
        assert len({a, b}) == 2


class TestEdge:
    """Tests for Edge."""

    def test_basic_edge(self):
        a, b = Node(0, 0), Node(3, 4)
        edge = Edge(a, b)
        assert edge.source is a
        assert edge.target is b
        assert edge.weight == 1.0
        assert edge.length == 5.0

    def test_rest_length_scales_with_weight(self):
        """Heavier edges have shorter rest lengths."""
        edge = Edge(Node(), Node(), weight=2)
        assert edge.rest_length(50) == 25

    def test_none_endpoint_raises(self):
        with pytest.raises(ValueError, match="source cannot be None"):
            Edge(None, Node())  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="target cannot be None"):
            Edge(Node(), None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("weight", [0, -1.5])
    def test_non_positive_weight_raises(self, weight):
        with pytest.raises(InvalidConfigurationError, match="weight must be positive"):
            Edge(Node(), Node(), weight=weight)

    def test_weight_setter_validates(self):
        edge = Edge(Node(), Node())
        with pytest.raises(InvalidConfigurationError):
            edge.weight = 0
        edge.weight = 4
        assert edge.weight == 4.0


class TestBounds:
    """Tests for Bounds."""

    def test_extents(self):
        bounds = Bounds(-5, 10, 20, 4)
        assert bounds.min_x == -5
        assert bounds.max_x == 15
        assert bounds.min_y == 10
        assert bounds.max_y == 14
        assert bounds.center == Vector2(5, 12)
        assert bounds.as_tuple() == (-5, 10, 15, 14)

    def test_empty(self):
        assert Bounds().is_empty()
        assert not Bounds(0, 0, 1, 0).is_empty()
