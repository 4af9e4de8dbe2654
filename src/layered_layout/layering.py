"""
Layer assignment by longest-path propagation.

Distances are measured from source nodes (nodes without predecessors) with a
round-synchronous breadth-first sweep: every round pushes the frontier one
edge forward and overwrites the distance of each node it reaches. In a DAG
the last round that reaches a node is its longest path length, and no
frontier survives more than n rounds.
"""

from __future__ import annotations

from typing import Optional

from .graph import find_cycle
from .types import AdjacencyList, Layering
from .validation import CyclicGraphError, ValidationError

SINKS_FIRST = "sinks-first"
SOURCES_FIRST = "sources-first"
ORIENTATIONS = (SINKS_FIRST, SOURCES_FIRST)


def find_sources(predecessors: AdjacencyList) -> list[int]:
    """Return the indices of nodes with no incoming edges."""
    return [i for i, preds in enumerate(predecessors) if not preds]


def longest_path_distances(
    sources: list[int], successors: AdjacencyList
) -> list[Optional[int]]:
    """
    Compute the longest path length from any source to every node.

    Args:
        sources: Indices seeded at distance 0
        successors: Forward adjacency per node

    Returns:
        Distance per node index, None for nodes no source reaches.

    Raises:
        CyclicGraphError: If the frontier is still non-empty after n rounds.
    """
    n = len(successors)
    distances: list[Optional[int]] = [None] * n
    for src in sources:
        distances[src] = 0

    # dict keeps the frontier de-duplicated and in encounter order
    frontier = dict.fromkeys(sources)
    rounds = 0
    while frontier:
        if rounds >= n:
            raise _cycle_error(successors)
        rounds += 1
        next_frontier: dict[int, None] = {}
        for node in frontier:
            for child in successors[node]:
                distances[child] = rounds
                next_frontier[child] = None
        frontier = next_frontier

    return distances


def assign_layers(
    predecessors: AdjacencyList,
    successors: AdjacencyList,
    orientation: str = SINKS_FIRST,
) -> Layering:
    """
    Assign every node to a layer.

    With the default "sinks-first" orientation a node's layer is
    ``max_distance - distance``, so sources land on the highest layer index
    and the deepest nodes on layer 0. "sources-first" uses the distance
    directly. Within a layer nodes keep index order.

    Args:
        predecessors: Incoming adjacency per node
        successors: Outgoing adjacency per node
        orientation: "sinks-first" or "sources-first"

    Returns:
        List of layers, each a list of node indices.

    Raises:
        CyclicGraphError: If the graph contains a directed cycle.
        ValidationError: If orientation is unknown.

    Example:
        >>> assign_layers([[], [0], [1]], [[1], [2], []])
        [[2], [1], [0]]
        >>> assign_layers([[], [0], [1]], [[1], [2], []], "sources-first")
        [[0], [1], [2]]
    """
    if orientation not in ORIENTATIONS:
        raise ValidationError(f"orientation must be one of {ORIENTATIONS}, got {orientation!r}")

    n = len(predecessors)
    if n == 0:
        return []

    sources = find_sources(predecessors)
    if not sources:
        raise _cycle_error(successors)

    distances = longest_path_distances(sources, successors)
    if any(d is None for d in distances):
        # Only nodes downstream of a source-less cycle stay unreached
        raise _cycle_error(successors)

    max_distance = max(d for d in distances if d is not None)
    layers: Layering = [[] for _ in range(max_distance + 1)]
    for i, distance in enumerate(distances):
        assert distance is not None
        if orientation == SINKS_FIRST:
            layers[max_distance - distance].append(i)
        else:
            layers[distance].append(i)

    return layers


def levels_from_layers(layers: Layering, n: int) -> list[int]:
    """Invert a layering into a per-node level list."""
    levels = [0] * n
    for level, layer in enumerate(layers):
        for node in layer:
            levels[node] = level
    return levels


def _cycle_error(successors: AdjacencyList) -> CyclicGraphError:
    cycle = find_cycle(successors)
    if cycle is None:
        return CyclicGraphError("Graph contains a directed cycle")
    path = " -> ".join(str(i) for i in cycle)
    return CyclicGraphError(f"Graph contains a directed cycle: {path}", cycle=cycle)


__all__ = [
    "SINKS_FIRST",
    "SOURCES_FIRST",
    "ORIENTATIONS",
    "find_sources",
    "longest_path_distances",
    "assign_layers",
    "levels_from_layers",
]
