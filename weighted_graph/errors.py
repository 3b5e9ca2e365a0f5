"""
Error types raised by the weighted graph.

Every error is a precondition violation detected at the call that
violates it. They all derive from GraphError, which is a ValueError,
so callers can catch the whole family or a single case.
"""

from __future__ import annotations

from typing import Any


class GraphError(ValueError):
    """Base class for all weighted graph errors."""


class DuplicateVertexError(GraphError):
    """Raised when adding a vertex that is already in the graph."""

    def __init__(self, vertex: Any) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} is already in the graph")


class UnknownVertexError(GraphError):
    """Raised when an operation names a vertex that is not in the graph."""

    def __init__(self, vertex: Any) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} is not in the graph")


class InvalidWeightError(GraphError):
    """Raised when an edge weight is negative or not an integer."""

    def __init__(self, weight: Any) -> None:
        self.weight = weight
        super().__init__(f"Edge weight must be a non-negative integer, got {weight!r}")


class UnreachableError(GraphError):
    """Raised when no path leads from the start vertex to the end vertex."""

    def __init__(self, start: Any, end: Any) -> None:
        self.start = start
        self.end = end
        super().__init__(f"No path from {start!r} to {end!r}")
