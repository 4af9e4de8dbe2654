"""
layered-layout: Layered (Sugiyama-style) placement for directed acyclic graphs.

Assigns every node a layer by longest-path propagation from source nodes,
places layers left to right, and orders nodes within a layer with a damped
barycenter heuristic.

Quick start:
    from layered_layout import layout_graph

    nodes = [{"label": "a"}, {"label": "b"}, {"label": "c"}]
    layout_graph(nodes, [{"source": 0, "target": 1}, {"source": 1, "target": 2}])
"""

__version__ = "0.1.0"

from .base import BaseLayout

# Pipeline stages
from .graph import GraphAdjacency, build_adjacency, find_cycle
from .layered import LayeredLayout, LayoutConvergenceWarning, layout_graph
from .layering import (
    ORIENTATIONS,
    SINKS_FIRST,
    SOURCES_FIRST,
    assign_layers,
    find_sources,
    levels_from_layers,
    longest_path_distances,
)
from .placement import barycenter_preferences, locate, vertical_adjust
from .types import (
    Edge,
    EdgeLike,
    Event,
    EventType,
    Layering,
    Node,
    NodeLike,
    Placement,
)

# Validation utilities
from .validation import (
    CyclicGraphError,
    InvalidEdgeIndexError,
    InvalidSpacingError,
    ValidationError,
    validate_edge_indices,
    validate_spacing,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Node",
    "Edge",
    "Placement",
    "EventType",
    "Event",
    "Layering",
    "NodeLike",
    "EdgeLike",
    # Layouts
    "BaseLayout",
    "LayeredLayout",
    "LayoutConvergenceWarning",
    "layout_graph",
    # Pipeline stages
    "GraphAdjacency",
    "build_adjacency",
    "find_cycle",
    "ORIENTATIONS",
    "SINKS_FIRST",
    "SOURCES_FIRST",
    "find_sources",
    "longest_path_distances",
    "assign_layers",
    "levels_from_layers",
    "locate",
    "barycenter_preferences",
    "vertical_adjust",
    # Validation
    "ValidationError",
    "InvalidEdgeIndexError",
    "InvalidSpacingError",
    "CyclicGraphError",
    "validate_edge_indices",
    "validate_spacing",
]
