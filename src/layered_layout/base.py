"""
Base class for the layered layout.

Provides the shared infrastructure the layout builds on:
- Event system (start/tick/end events)
- Node/edge normalization via properties
- Fail-fast validation
- The run() lifecycle
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import (
    Edge,
    EdgeLike,
    Event,
    EventType,
    Node,
    NodeLike,
)
from .validation import InvalidEdgeIndexError, get_endpoint, validate_edge_indices


class BaseLayout(ABC):
    """
    Abstract base class for single-pass layouts.

    Example:
        layout = SomeLayout(nodes=nodes, edges=edges)
        layout.run()

        for node in layout.nodes:
            print(f"Node {node.index}: ({node.x}, {node.y})")
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        edges: Optional[Sequence[EdgeLike]] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize layout with configuration.

        Args:
            nodes: List of nodes (Node objects, dicts, or objects with attributes)
            edges: List of edges (Edge objects, dicts, pairs, or objects with source/target)
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
        """
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}

        if nodes is not None:
            self.nodes = nodes
        if edges is not None:
            self.edges = edges

        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        """Get the list of nodes."""
        return self._nodes

    @nodes.setter
    def nodes(self, value: Sequence[NodeLike]) -> None:
        """Set nodes from a sequence of Node objects, dicts, or objects."""
        self._nodes = []
        for node_data in value:
            if isinstance(node_data, Node):
                self._nodes.append(node_data)
            elif isinstance(node_data, dict):
                self._nodes.append(Node(**node_data))
            else:
                node = Node()
                for attr in ["index", "level", "x", "y"]:
                    if hasattr(node_data, attr):
                        setattr(node, attr, getattr(node_data, attr))
                self._nodes.append(node)

    @property
    def edges(self) -> list[Edge]:
        """Get the list of edges."""
        return self._edges

    @edges.setter
    def edges(self, value: Sequence[EdgeLike]) -> None:
        """
        Set edges from a sequence of Edge objects, dicts, pairs, or objects.

        Raises:
            InvalidEdgeIndexError: If an edge has no source or target.
        """
        self._edges = []
        for i, edge_data in enumerate(value):
            if isinstance(edge_data, Edge):
                self._edges.append(edge_data)
                continue

            source = get_endpoint(edge_data, "source")
            target = get_endpoint(edge_data, "target")
            if source is None or target is None:
                raise InvalidEdgeIndexError(f"Edge {i}: source and target are required")

            if isinstance(edge_data, dict):
                self._edges.append(Edge(**edge_data))
            else:
                self._edges.append(Edge(source, target))

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to a layout event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> Self:
        """
        Validate current configuration.

        Checks that all edge endpoints are valid node indices. Called
        automatically by run() but can be called early for fail-fast
        behavior.

        Returns:
            self (for chaining)

        Raises:
            InvalidEdgeIndexError: If any edge references an invalid node index.
        """
        if self._edges:
            validate_edge_indices(self._edges, len(self._nodes), strict=True)
        return self

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    def run(self, **kwargs: Any) -> Self:
        """
        Run the layout algorithm.

        Validates input, fires the start event, computes the layout and
        fires the end event. Nothing on the nodes changes if validation or
        computation raises.

        Args:
            **kwargs: Additional arguments passed to _compute()

        Returns:
            self (for chaining)
        """
        self.validate()
        self._initialize_indices()
        self.trigger({"type": EventType.start})

        self._compute(**kwargs)

        self.trigger({"type": EventType.end})
        return self

    @abstractmethod
    def _compute(self, **kwargs: Any) -> None:
        """
        Compute node positions.

        Subclasses must implement this to perform the actual layout computation.
        """
        pass

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _initialize_indices(self) -> None:
        """Assign indices to nodes that don't have them."""
        for i, node in enumerate(self._nodes):
            if node.index is None:
                node.index = i


__all__ = [
    "BaseLayout",
]
