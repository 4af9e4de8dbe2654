"""Tests for coordinate placement and vertical adjustment."""

import numpy as np
import pytest

from layered_layout import barycenter_preferences, build_adjacency, locate, vertical_adjust

# =============================================================================
# Test Fixtures
# =============================================================================


def create_star():
    """Star with center 0, laid out sinks-first."""
    adj = build_adjacency(4, [(0, 1), (0, 2), (0, 3)])
    layers = [[1, 2, 3], [0]]
    levels = [1, 0, 0, 0]
    return adj, layers, levels


def create_crossed_pair():
    """Two parallel edges drawn crossed: 0 -> 3 and 1 -> 2."""
    adj = build_adjacency(4, [(0, 3), (1, 2)])
    layers = [[0, 1], [2, 3]]
    levels = [0, 0, 1, 1]
    return adj, layers, levels


# =============================================================================
# Initial Placement
# =============================================================================


class TestLocate:
    """Tests for locate()."""

    def test_x_from_level(self):
        """x is level times layer width."""
        xs, _ = locate([2, 1, 0], [[2], [1], [0]], 100.0, 50.0)
        assert xs.tolist() == [200.0, 100.0, 0.0]

    def test_singleton_layers_centred(self):
        """A node alone in its layer sits at y = 0."""
        _, ys = locate([2, 1, 0], [[2], [1], [0]], 100.0, 50.0)
        assert ys.tolist() == [0.0, 0.0, 0.0]

    def test_layer_centred_first_on_top(self):
        """Layer is centred on 0 with the first node highest."""
        _, ys = locate([0, 0, 0, 0], [[0, 1, 2, 3]], 100.0, 50.0)
        assert ys.tolist() == [75.0, 25.0, -25.0, -75.0]

    def test_order_not_index(self):
        """y follows layer order, not node index."""
        _, ys = locate([0, 0, 0], [[2, 0, 1]], 100.0, 10.0)
        assert ys.tolist() == [0.0, -10.0, 10.0]

    def test_star(self):
        """Star leaves are spread one row apart around 0."""
        _, layers, levels = create_star()
        xs, ys = locate(levels, layers, 100.0, 50.0)
        assert xs.tolist() == [100.0, 0.0, 0.0, 0.0]
        assert ys.tolist() == [0.0, 50.0, 0.0, -50.0]

    def test_idempotent(self):
        """Placing twice with the same order gives the same coordinates."""
        _, layers, levels = create_star()
        first = locate(levels, layers, 100.0, 50.0)
        second = locate(levels, layers, 100.0, 50.0)
        np.testing.assert_array_equal(first[0], second[0])
        np.testing.assert_array_equal(first[1], second[1])

    def test_empty(self):
        """No nodes gives empty arrays."""
        xs, ys = locate([], [], 100.0, 50.0)
        assert xs.shape == (0,)
        assert ys.shape == (0,)


# =============================================================================
# Vertical Adjustment
# =============================================================================


class TestBarycenterPreferences:
    """Tests for barycenter_preferences()."""

    def test_mean_of_neighbors(self):
        """Preference is the mean neighbor height."""
        adj, _, _ = create_star()
        ys = np.array([0.0, 50.0, 0.0, -50.0])
        prefs = barycenter_preferences(ys, adj.neighbors)
        assert prefs.tolist() == [0.0, 0.0, 0.0, 0.0]

    def test_parallel_edges_weighted(self):
        """Duplicate neighbors count once per edge."""
        ys = np.array([0.0, 30.0, 60.0])
        prefs = barycenter_preferences(ys, [[1, 1, 2], [0, 0], [0]])
        assert prefs[0] == pytest.approx(40.0)

    def test_isolated_node_keeps_height(self):
        """Node without neighbors prefers its own height."""
        ys = np.array([10.0, -20.0, 5.0])
        prefs = barycenter_preferences(ys, [[1], [0], []])
        assert prefs.tolist() == [-20.0, 10.0, 5.0]


class TestVerticalAdjust:
    """Tests for vertical_adjust()."""

    def test_star_pulls_leaves_toward_center(self):
        """Leaves move halfway toward their shared neighbor."""
        adj, layers, levels = create_star()
        _, ys = locate(levels, layers, 100.0, 50.0)

        changed = vertical_adjust(ys, adj.neighbors, layers)

        assert changed is False
        assert layers == [[1, 2, 3], [0]]
        assert ys.tolist() == [0.0, 25.0, 0.0, -25.0]

    def test_reorders_crossed_layers(self):
        """Layers are re-sorted by descending preference."""
        adj, layers, levels = create_crossed_pair()
        _, ys = locate(levels, layers, 100.0, 50.0)

        changed = vertical_adjust(ys, adj.neighbors, layers)

        assert changed is True
        assert layers == [[1, 0], [3, 2]]
        assert ys.tolist() == [0.0, 0.0, 0.0, 0.0]

    def test_converges_on_second_pass(self):
        """A pass with equal preferences keeps the order (stable sort)."""
        adj, layers, levels = create_crossed_pair()
        _, ys = locate(levels, layers, 100.0, 50.0)

        vertical_adjust(ys, adj.neighbors, layers)
        assert vertical_adjust(ys, adj.neighbors, layers) is False
        assert layers == [[1, 0], [3, 2]]

    def test_isolated_nodes_unchanged(self):
        """Nodes without neighbors keep their height and order."""
        layers = [[0, 1, 2]]
        _, ys = locate([0, 0, 0], layers, 100.0, 50.0)
        before = ys.copy()

        changed = vertical_adjust(ys, [[], [], []], layers)

        assert changed is False
        assert layers == [[0, 1, 2]]
        np.testing.assert_array_equal(ys, before)

    def test_does_not_touch_x(self):
        """Adjustment only moves heights."""
        adj, layers, levels = create_crossed_pair()
        xs, ys = locate(levels, layers, 100.0, 50.0)
        xs_before = xs.copy()

        vertical_adjust(ys, adj.neighbors, layers)

        np.testing.assert_array_equal(xs, xs_before)
