"""
Layered graph layout.

Places a directed acyclic graph in vertical columns ("layers") with the
following phases:
1. Layer assignment (longest path from source nodes)
2. Initial placement from layer order
3. Barycenter vertical adjustment, repeated until layer orders settle
4. Final placement from the settled layer order
"""

from __future__ import annotations

import warnings
from collections.abc import MutableMapping
from typing import Any, Callable, Optional, Sequence

from .base import BaseLayout
from .graph import build_adjacency
from .layering import ORIENTATIONS, SINKS_FIRST, assign_layers, levels_from_layers
from .placement import locate, vertical_adjust
from .types import (
    EdgeLike,
    Event,
    EventType,
    Layering,
    Node,
    NodeLike,
    Placement,
    SpacingType,
)
from .validation import ValidationError, validate_iterations, validate_spacing


class LayoutConvergenceWarning(UserWarning):
    """Warning issued when vertical adjustment stops before layer orders settle."""

    pass


class LayeredLayout(BaseLayout):
    """
    Layered DAG layout.

    Layers are laid out left to right, ``layer_width`` apart. Nodes in a layer
    are stacked ``row_height`` apart and centred on ``y = 0``.

    Example:
        layout = LayeredLayout(
            nodes=[{}, {}, {}, {}],
            edges=[
                {'source': 0, 'target': 1},
                {'source': 0, 'target': 2},
                {'source': 1, 'target': 3},
            ],
        )
        layout.run()
        layout.placements[0].level
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        edges: Optional[Sequence[EdgeLike]] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        # Layered-specific parameters
        layer_width: SpacingType = 100,
        row_height: SpacingType = 50,
        max_iterations: int = 10,
        orientation: str = SINKS_FIRST,
    ) -> None:
        """
        Initialize layered layout.

        Args:
            nodes: List of nodes
            edges: List of directed edges
            on_start: Callback for start event
            on_tick: Callback fired after every adjustment pass
            on_end: Callback for end event
            layer_width: Horizontal separation between layers.
            row_height: Vertical separation between nodes in the same layer.
            max_iterations: Maximum number of vertical adjustment passes.
            orientation: 'sinks-first' puts source nodes on the last layer,
                'sources-first' puts them on layer 0.

        Raises:
            InvalidSpacingError: If a spacing is not a positive finite number.
            ValidationError: If max_iterations or orientation is invalid.
        """
        super().__init__(
            nodes=nodes,
            edges=edges,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )

        self._layer_width: float = validate_spacing(layer_width, "layer_width")
        self._row_height: float = validate_spacing(row_height, "row_height")
        self._max_iterations: int = validate_iterations(max_iterations)
        self._orientation: str = _validate_orientation(orientation)

        # Results
        self._layers: Layering = []
        self._placements: list[Placement] = []
        self._iterations_run: int = 0
        self._converged: bool = False

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def layer_width(self) -> float:
        """Get horizontal separation between layers."""
        return self._layer_width

    @layer_width.setter
    def layer_width(self, value: SpacingType) -> None:
        """Set horizontal separation between layers."""
        self._layer_width = validate_spacing(value, "layer_width")

    @property
    def row_height(self) -> float:
        """Get vertical separation between nodes in a layer."""
        return self._row_height

    @row_height.setter
    def row_height(self, value: SpacingType) -> None:
        """Set vertical separation between nodes in a layer."""
        self._row_height = validate_spacing(value, "row_height")

    @property
    def max_iterations(self) -> int:
        """Get maximum number of vertical adjustment passes."""
        return self._max_iterations

    @max_iterations.setter
    def max_iterations(self, value: int) -> None:
        """Set maximum number of vertical adjustment passes (minimum 1)."""
        self._max_iterations = validate_iterations(value)

    @property
    def orientation(self) -> str:
        """Get layer orientation."""
        return self._orientation

    @orientation.setter
    def orientation(self, value: str) -> None:
        """Set layer orientation."""
        self._orientation = _validate_orientation(value)

    @property
    def layers(self) -> Layering:
        """Settled layer orders from the last run."""
        return self._layers

    @property
    def placements(self) -> list[Placement]:
        """Per-node results from the last run, indexed like nodes."""
        return self._placements

    @property
    def iterations_run(self) -> int:
        """Number of adjustment passes performed by the last run."""
        return self._iterations_run

    @property
    def converged(self) -> bool:
        """Whether the last run ended on a pass without reordering."""
        return self._converged

    # -------------------------------------------------------------------------
    # Layout Computation
    # -------------------------------------------------------------------------

    def _compute(self, **kwargs: Any) -> None:
        """
        Compute layered layout.

        Args:
            stacklevel: Stack depth of the caller the convergence warning is
                attributed to, counted from this method (default: caller of run()).
        """
        self._layers = []
        self._placements = []
        self._iterations_run = 0
        self._converged = True

        n = len(self._nodes)
        if n == 0:
            return

        adjacency = build_adjacency(n, self._edges)
        layers = assign_layers(adjacency.predecessors, adjacency.successors, self._orientation)
        levels = levels_from_layers(layers, n)

        # Initial positions
        xs, ys = locate(levels, layers, self._layer_width, self._row_height)

        # Adjust
        converged = False
        for iteration in range(self._max_iterations):
            changed = vertical_adjust(ys, adjacency.neighbors, layers)
            self._iterations_run = iteration + 1
            self.trigger({"type": EventType.tick, "iteration": iteration, "changed": changed})
            if not changed:
                converged = True
                break

        if not converged:
            warnings.warn(
                f"Layer orders still changing after {self._max_iterations} adjustment "
                "pass(es); using the last order.",
                LayoutConvergenceWarning,
                stacklevel=kwargs.get("stacklevel", 3),
            )
        self._converged = converged

        # Settle on final positions
        xs, ys = locate(levels, layers, self._layer_width, self._row_height)

        self._layers = layers
        self._placements = [
            Placement(level=levels[i], x=float(xs[i]), y=float(ys[i])) for i in range(n)
        ]
        for node, placement in zip(self._nodes, self._placements):
            node.level = placement.level
            node.x = placement.x
            node.y = placement.y


def layout_graph(
    nodes: Sequence[Any],
    edges: Sequence[EdgeLike],
    layer_width: SpacingType = 100,
    row_height: SpacingType = 50,
    **options: Any,
) -> list[Placement]:
    """
    Lay out a DAG and write the result into the caller's node records.

    Each record gets ``level``, ``x`` and ``y``: as keys for mappings, as
    attributes otherwise. Nothing else on a record is touched, and no record
    is touched at all if the input is rejected.

    Args:
        nodes: Node records, identified by position
        edges: Directed edges between node positions
        layer_width: Horizontal separation between layers
        row_height: Vertical separation between nodes in a layer
        **options: Further LayeredLayout options (max_iterations, orientation, callbacks)

    Returns:
        Placement per node, indexed like nodes.

    Raises:
        InvalidEdgeIndexError: If an edge references a missing node.
        CyclicGraphError: If the graph contains a directed cycle.
        InvalidSpacingError: If a spacing is not a positive finite number.

    Example:
        >>> nodes = [{"name": "a"}, {"name": "b"}]
        >>> _ = layout_graph(nodes, [{"source": 0, "target": 1}])
        >>> nodes[0]
        {'name': 'a', 'level': 1, 'x': 100.0, 'y': 0.0}
    """
    layout = LayeredLayout(
        nodes=[Node(index=i) for i in range(len(nodes))],
        edges=edges,
        layer_width=layer_width,
        row_height=row_height,
        **options,
    )
    # warning is attributed to the caller of layout_graph()
    layout.run(stacklevel=4)

    for record, placement in zip(nodes, layout.placements):
        _write_placement(record, placement)

    return layout.placements


def _write_placement(record: Any, placement: Placement) -> None:
    if isinstance(record, MutableMapping):
        record["level"] = placement.level
        record["x"] = placement.x
        record["y"] = placement.y
    else:
        record.level = placement.level
        record.x = placement.x
        record.y = placement.y


def _validate_orientation(value: str) -> str:
    if value not in ORIENTATIONS:
        raise ValidationError(f"orientation must be one of {ORIENTATIONS}, got {value!r}")
    return value


__all__ = ["LayeredLayout", "LayoutConvergenceWarning", "layout_graph"]
