"""
Result dataclasses returned by the graph algorithms.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

V = TypeVar("V", bound=Hashable)


@dataclass
class SearchResult(Generic[V]):
    """
    Outcome of a breadth-first or depth-first search.

    Attributes:
        algorithm: "bfs" or "dfs"
        start: Vertex the search began at
        end: Vertex the search was looking for
        visited: Vertices in the order they were visited
        found: Whether end was visited
    """

    algorithm: str
    start: V
    end: V
    visited: list[V] = field(default_factory=list)
    found: bool = False

    @property
    def visit_count(self) -> int:
        """Number of distinct vertices visited."""
        return len(self.visited)


@dataclass
class ShortestPathResult(Generic[V]):
    """
    Outcome of Dijkstra's algorithm.

    Attributes:
        start: Source vertex
        end: Vertex the path leads to
        costs: Shortest distance from start to every vertex
            (math.inf for unreachable vertices)
        finish_order: Vertices in the order they were finalized
        path: Shortest path from start to end, both inclusive
    """

    start: V
    end: V
    costs: dict[V, int | float]
    finish_order: list[V]
    path: list[V]

    @property
    def total_cost(self) -> int | float:
        """Total weight of the shortest path."""
        return self.costs[self.end]

    @property
    def hops(self) -> int:
        """Number of edges on the shortest path."""
        return len(self.path) - 1
