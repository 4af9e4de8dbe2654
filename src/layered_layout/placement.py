"""
Coordinate placement and barycenter vertical adjustment.

Positions are held in numpy arrays indexed by node index. ``locate`` is a
pure function of the layer order; ``vertical_adjust`` pulls every node
halfway toward the mean height of its neighbors and re-sorts each layer by
that mean.
"""

from __future__ import annotations

from itertools import chain

import numpy as np

from .types import AdjacencyList, Layering


def locate(
    levels: list[int],
    layers: Layering,
    layer_width: float,
    row_height: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Place nodes from their level and intra-layer position.

    ``x = level * layer_width``. Each layer is centred on ``y = 0`` with
    ``row_height`` between neighbors, the first node in layer order on top.

    Args:
        levels: Layer index per node
        layers: Ordered node indices per layer
        layer_width: Horizontal separation between layers
        row_height: Vertical separation between nodes in a layer

    Returns:
        (x, y) float arrays indexed by node.
    """
    n = len(levels)
    xs = np.asarray(levels, dtype=np.float64) * layer_width
    ys = np.zeros(n, dtype=np.float64)

    for layer in layers:
        center = (len(layer) - 1) / 2
        for pos, node in enumerate(layer):
            ys[node] = (center - pos) * row_height

    return xs, ys


def barycenter_preferences(ys: np.ndarray, neighbors: AdjacencyList) -> np.ndarray:
    """
    Mean neighbor height per node.

    Parallel edges weight a neighbor once per edge. Nodes without neighbors
    prefer their own height.
    """
    n = len(neighbors)
    degree = np.fromiter((len(adj) for adj in neighbors), dtype=np.int64, count=n)
    owners = np.repeat(np.arange(n), degree)
    flat = np.fromiter(
        chain.from_iterable(neighbors), dtype=np.int64, count=int(degree.sum())
    )
    sums = np.bincount(owners, weights=ys[flat], minlength=n)

    prefs = ys.astype(np.float64, copy=True)
    connected = degree > 0
    prefs[connected] = sums[connected] / degree[connected]
    return prefs


def vertical_adjust(ys: np.ndarray, neighbors: AdjacencyList, layers: Layering) -> bool:
    """
    Run one barycenter adjustment pass.

    Re-sorts every layer in place by descending preference (stable, so ties
    keep their order) and moves each ``ys[i]`` to the midpoint between its
    old value and its preference.

    Args:
        ys: Heights per node, updated in place
        neighbors: Undirected adjacency per node
        layers: Layer orders, updated in place

    Returns:
        True if any layer changed order.
    """
    prefs = barycenter_preferences(ys, neighbors)

    changed = False
    for layer in layers:
        new_order = sorted(layer, key=lambda i: prefs[i], reverse=True)
        if new_order != layer:
            layer[:] = new_order
            changed = True

    ys[:] = (ys + prefs) / 2
    return changed


__all__ = [
    "locate",
    "barycenter_preferences",
    "vertical_adjust",
]
