"""
Adjacency construction for the layered layout.

Derives, from a node count and an edge list:
- the undirected neighbor relation used by vertical adjustment,
- the predecessor relation used to find source nodes,
- the successor relation walked by longest-path propagation.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

from .types import AdjacencyList, EdgeLike
from .validation import get_endpoint, validate_edge_indices


class GraphAdjacency(NamedTuple):
    """Per-node relations derived from an edge list."""

    neighbors: AdjacencyList
    predecessors: AdjacencyList
    successors: AdjacencyList


def build_adjacency(n: int, edges: Sequence[EdgeLike]) -> GraphAdjacency:
    """
    Build neighbor, predecessor and successor lists.

    Lists preserve edge order; parallel edges appear once per edge.

    Args:
        n: Number of nodes
        edges: Directed edges (Edge objects, dicts, pairs or objects)

    Returns:
        GraphAdjacency with one list per node index.

    Raises:
        InvalidEdgeIndexError: If any endpoint is not an index in [0, n).

    Example:
        >>> adj = build_adjacency(3, [(0, 1), (1, 2)])
        >>> adj.neighbors[1]
        [0, 2]
        >>> adj.predecessors[2]
        [1]
    """
    validate_edge_indices(edges, n, strict=True)

    neighbors: AdjacencyList = [[] for _ in range(n)]
    predecessors: AdjacencyList = [[] for _ in range(n)]
    successors: AdjacencyList = [[] for _ in range(n)]

    for edge in edges:
        src = get_endpoint(edge, "source")
        tgt = get_endpoint(edge, "target")
        neighbors[src].append(tgt)
        neighbors[tgt].append(src)
        predecessors[tgt].append(src)
        successors[src].append(tgt)

    return GraphAdjacency(neighbors, predecessors, successors)


def find_cycle(successors: AdjacencyList) -> Optional[list[int]]:
    """
    Find a directed cycle.

    Uses an iterative DFS with three node states. Returns the first cycle
    found with its starting node repeated at the end, or None if the graph
    is acyclic.

    Example:
        >>> find_cycle([[1], [2], [0]])
        [0, 1, 2, 0]
    """
    n = len(successors)
    # DFS states: 0=unvisited, 1=visiting, 2=visited
    state = [0] * n

    for start in range(n):
        if state[start]:
            continue

        path: list[int] = [start]
        cursors: list[int] = [0]
        state[start] = 1

        while path:
            node = path[-1]
            children = successors[node]
            if cursors[-1] < len(children):
                child = children[cursors[-1]]
                cursors[-1] += 1
                if state[child] == 1:
                    return path[path.index(child) :] + [child]
                if state[child] == 0:
                    state[child] = 1
                    path.append(child)
                    cursors.append(0)
            else:
                state[node] = 2
                path.pop()
                cursors.pop()

    return None


__all__ = [
    "GraphAdjacency",
    "build_adjacency",
    "find_cycle",
]
