"""
Common types for the layered layout.

This module provides the fundamental types used across the pipeline:
- Node: Graph vertex carrying its layer and position
- Edge: Directed edge between two node indices
- Placement: Immutable per-node layout result
- EventType: Layout lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, TypedDict, Union


class EventType(IntEnum):
    """
    Layout lifecycle events.

    - start: Layout has begun (before layer assignment)
    - tick: Fired once per vertical adjustment pass
    - end: Final positions have been assigned
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    iteration: int
    changed: bool


class Node:
    """
    Graph node with layer and position.

    Attributes:
        index: Index in nodes array (set by layout)
        level: Layer index (set by layout)
        x: X coordinate, always level * layer_width after layout
        y: Y coordinate within the layer
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize node with optional properties."""
        self.index: Optional[int] = kwargs.get("index")
        self.level: Optional[int] = kwargs.get("level")
        self.x: float = kwargs.get("x", 0.0)
        self.y: float = kwargs.get("y", 0.0)

        # Copy any additional custom properties
        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    def __repr__(self) -> str:
        return f"Node(index={self.index}, level={self.level}, x={self.x:.2f}, y={self.y:.2f})"


class Edge:
    """
    Directed edge between two nodes.

    Attributes:
        source: Source node index
        target: Target node index
    """

    def __init__(self, source: int, target: int, **kwargs: Any) -> None:
        """
        Initialize edge between two nodes.

        Args:
            source: Source node index (required)
            target: Target node index (required)

        Raises:
            ValueError: If source or target is None
        """
        if source is None:
            raise ValueError("Edge source cannot be None")
        if target is None:
            raise ValueError("Edge target cannot be None")

        self.source = source
        self.target = target

        # Copy any additional custom properties
        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    def __repr__(self) -> str:
        return f"Edge({self.source} -> {self.target})"


@dataclass(frozen=True)
class Placement:
    """Layout result for a single node."""

    level: int
    x: float
    y: float


# Type aliases for Pythonic API
NodeLike = Union[Node, dict[str, Any], Any]
"""Input type for nodes: Node objects, dicts, or arbitrary records."""

EdgeLike = Union[Edge, dict[str, Any], tuple[int, int], Any]
"""Input type for edges: Edge objects, dicts, pairs, or objects with source/target."""

Layering = list[list[int]]
"""Ordered layers, each an ordered list of node indices."""

AdjacencyList = list[list[int]]
"""Per-node list of node indices."""

SpacingType = Union[int, float]


__all__ = [
    "EventType",
    "Event",
    "Node",
    "Edge",
    "Placement",
    "NodeLike",
    "EdgeLike",
    "Layering",
    "AdjacencyList",
    "SpacingType",
]
