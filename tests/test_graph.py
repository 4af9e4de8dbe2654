"""Tests for adjacency construction and cycle extraction."""

import pytest

from layered_layout import Edge, InvalidEdgeIndexError, build_adjacency, find_cycle


class TestBuildAdjacency:
    """Tests for build_adjacency()."""

    def test_chain(self):
        """Chain produces neighbor, predecessor and successor lists."""
        adj = build_adjacency(3, [{"source": 0, "target": 1}, {"source": 1, "target": 2}])

        assert adj.neighbors == [[1], [0, 2], [1]]
        assert adj.predecessors == [[], [0], [1]]
        assert adj.successors == [[1], [2], []]

    def test_neighbors_from_both_endpoints(self):
        """Undirected neighbors include incoming and outgoing edges."""
        adj = build_adjacency(3, [(0, 2), (1, 2)])

        assert adj.neighbors[2] == [0, 1]
        assert adj.predecessors[2] == [0, 1]
        assert adj.successors[2] == []

    def test_parallel_edges_kept(self):
        """Parallel edges appear once per edge."""
        adj = build_adjacency(2, [(0, 1), (0, 1)])

        assert adj.neighbors[0] == [1, 1]
        assert adj.neighbors[1] == [0, 0]
        assert adj.predecessors[1] == [0, 0]

    def test_edge_forms(self):
        """Edge objects, dicts, pairs and attribute objects are accepted."""

        class Wire:
            def __init__(self, source, target):
                self.source = source
                self.target = target

        edges = [Edge(0, 1), {"source": 1, "target": 2}, (2, 3), Wire(3, 4)]
        adj = build_adjacency(5, edges)

        assert adj.successors == [[1], [2], [3], [4], []]

    def test_isolated_nodes(self):
        """Nodes without edges get empty lists."""
        adj = build_adjacency(3, [])

        assert adj.neighbors == [[], [], []]
        assert adj.predecessors == [[], [], []]

    def test_empty_graph(self):
        """Zero nodes produce empty relations."""
        adj = build_adjacency(0, [])

        assert adj.neighbors == []
        assert adj.predecessors == []
        assert adj.successors == []

    def test_source_out_of_range(self):
        """Source index equal to node count is rejected."""
        with pytest.raises(InvalidEdgeIndexError, match="source index 3 out of bounds"):
            build_adjacency(3, [(3, 0)])

    def test_negative_target(self):
        """Negative target index is rejected."""
        with pytest.raises(InvalidEdgeIndexError, match="target index -1 out of bounds"):
            build_adjacency(3, [(0, -1)])

    def test_non_integer_index(self):
        """Non-integer endpoints are rejected."""
        with pytest.raises(InvalidEdgeIndexError, match="not an integer index"):
            build_adjacency(3, [(0, 1.5)])


class TestFindCycle:
    """Tests for find_cycle()."""

    def test_triangle(self):
        """Three-node cycle is returned closed."""
        assert find_cycle([[1], [2], [0]]) == [0, 1, 2, 0]

    def test_self_loop(self):
        """Self-loop is a cycle of one node."""
        assert find_cycle([[0]]) == [0, 0]

    def test_cycle_behind_tail(self):
        """Cycle reached through a tail excludes the tail."""
        cycle = find_cycle([[1], [2], [1]])
        assert cycle == [1, 2, 1]

    def test_acyclic(self):
        """DAG has no cycle."""
        assert find_cycle([[1, 2], [3], [3], []]) is None

    def test_empty(self):
        """Empty graph has no cycle."""
        assert find_cycle([]) is None

    def test_long_chain_no_recursion_limit(self):
        """Deep chains are handled without recursion."""
        n = 5000
        successors = [[i + 1] for i in range(n - 1)] + [[0]]
        cycle = find_cycle(successors)
        assert cycle is not None
        assert len(cycle) == n + 1
