"""
Input validation utilities for the layered layout.

Provides centralized validation functions for edges, spacing and iteration
parameters. Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

import math
from numbers import Integral
from typing import Any, Optional, Sequence


class ValidationError(ValueError):
    """Base exception for layout validation errors."""

    pass


class InvalidSpacingError(ValidationError):
    """Raised when layer width or row height is invalid."""

    pass


class InvalidEdgeIndexError(ValidationError):
    """Raised when an edge references a node index outside the graph."""

    pass


class CyclicGraphError(ValidationError):
    """Raised when the directed graph contains a cycle."""

    def __init__(self, message: str, cycle: Optional[list[int]] = None) -> None:
        super().__init__(message)
        self.cycle = cycle


def validate_spacing(value: Any, name: str) -> float:
    """
    Validate a spacing parameter.

    Args:
        value: Spacing value
        name: Parameter name used in the error message

    Returns:
        Validated spacing as float

    Raises:
        InvalidSpacingError: If value is not a positive finite number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidSpacingError(f"{name} must be a number, got {type(value).__name__}")

    spacing = float(value)
    if not math.isfinite(spacing) or spacing <= 0:
        raise InvalidSpacingError(f"{name} must be positive and finite, got {value}")

    return spacing


def validate_edge_indices(
    edges: Sequence[Any],
    node_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that all edge source/target indices are within bounds.

    Args:
        edges: Sequence of Edge objects, dicts, pairs or objects with source/target
        node_count: Number of nodes in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (edge_index, issue_description) tuples

    Raises:
        InvalidEdgeIndexError: If strict=True and invalid edges found
    """
    issues: list[tuple[int, str]] = []

    for i, edge in enumerate(edges):
        for attr in ("source", "target"):
            idx = get_endpoint(edge, attr)
            if idx is None:
                issues.append((i, f"Edge {i}: {attr} is missing"))
            elif not _is_index(idx):
                issues.append((i, f"Edge {i}: {attr} {idx!r} is not an integer index"))
            elif idx < 0 or idx >= node_count:
                issues.append(
                    (i, f"Edge {i}: {attr} index {idx} out of bounds [0, {node_count})")
                )

    if strict and issues:
        msg = "Invalid edge indices:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidEdgeIndexError(msg)

    return issues


def validate_iterations(iterations: Any) -> int:
    """
    Validate iteration count is a positive integer.

    Args:
        iterations: Number of iterations

    Returns:
        Validated iteration count as int

    Raises:
        ValidationError: If iterations is not an integer or is < 1
    """
    if not _is_index(iterations):
        raise ValidationError(
            f"iterations must be an integer, got {type(iterations).__name__}"
        )
    if iterations < 1:
        raise ValidationError(f"iterations must be >= 1, got {iterations}")
    return int(iterations)


def get_endpoint(obj: Any, attr: str) -> Any:
    """Extract an edge endpoint from a pair, dict, or object attribute."""
    if isinstance(obj, (tuple, list)) and len(obj) == 2:
        return obj[0] if attr == "source" else obj[1]
    if isinstance(obj, dict):
        return obj.get(attr)
    return getattr(obj, attr, None)


def _is_index(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


__all__ = [
    "ValidationError",
    "InvalidSpacingError",
    "InvalidEdgeIndexError",
    "CyclicGraphError",
    "validate_spacing",
    "validate_edge_indices",
    "validate_iterations",
    "get_endpoint",
]
