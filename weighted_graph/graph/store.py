"""
Directed, edge-weighted graph with observer notifications.

Usage:
    from weighted_graph import WeightedGraph, LoggingObserver

    graph = WeightedGraph()
    for v in "ABC":
        graph.add_vertex(v)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_observer(LoggingObserver())
    graph.do_dijkstra("A", "C")
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Hashable, Iterator
from typing import Any, Generic, TypeVar

from weighted_graph.algorithms.dijkstra import dijkstra
from weighted_graph.algorithms.results import SearchResult, ShortestPathResult
from weighted_graph.algorithms.traversal import breadth_first_search, depth_first_search
from weighted_graph.errors import (
    DuplicateVertexError,
    InvalidWeightError,
    UnknownVertexError,
)
from weighted_graph.observers.base import GraphAlgorithmObserver

V = TypeVar("V", bound=Hashable)

logger = logging.getLogger(__name__)

# Notifications observers may leave out
OPTIONAL_EVENTS = frozenset({"search_exhausted"})


class WeightedGraph(Generic[V]):
    """
    A directed graph whose edges carry non-negative integer weights.

    Vertices are any hashable values and are never duplicated. Each
    ordered pair of vertices has at most one edge; adding it again
    replaces the weight.

    Iteration order is insertion order everywhere: ``vertices()`` lists
    vertices in the order they were added and ``neighbors()`` lists
    edges in the order they were first added. The algorithms inherit
    that order, so their output is reproducible.

    The graph does no locking. Do not add vertices or edges while one
    of the algorithms is running (for instance from an observer).

    Attributes:
        _adjacency: Maps each vertex to a dict of neighbor -> edge weight
        _observers: Registered observers, in registration order
    """

    def __init__(self) -> None:
        self._adjacency: dict[V, dict[V, int]] = {}
        self._observers: list[GraphAlgorithmObserver[V]] = []

    # =========================================================================
    # Observers
    # =========================================================================

    def add_observer(self, observer: GraphAlgorithmObserver[V]) -> None:
        """Register an observer. The same observer may be added twice."""
        self._observers.append(observer)
        logger.debug(f"Registered observer {observer!r}")

    @property
    def observers(self) -> tuple[GraphAlgorithmObserver[V], ...]:
        """Registered observers, in registration order."""
        return tuple(self._observers)

    def notify(self, event: str, *args: Any) -> None:
        """
        Send one notification to every observer, in registration order.

        Observers that do not define an optional notification such as
        ``search_exhausted`` are skipped for that notification.

        Args:
            event: Observer method name without the ``notify_`` prefix
                (e.g. "visit", "dijkstra_is_over")
            *args: Payload passed to the observer method
        """
        method = f"notify_{event}"
        for observer in self._observers:
            if event in OPTIONAL_EVENTS and not hasattr(observer, method):
                continue
            getattr(observer, method)(*args)

    # =========================================================================
    # Vertices and edges
    # =========================================================================

    def add_vertex(self, vertex: V) -> None:
        """
        Add a vertex with no outgoing edges.

        Raises:
            DuplicateVertexError: If the vertex is already in the graph
        """
        if vertex in self._adjacency:
            raise DuplicateVertexError(vertex)
        self._adjacency[vertex] = {}

    def contains_vertex(self, vertex: V) -> bool:
        """Whether the vertex is in the graph."""
        return vertex in self._adjacency

    def add_edge(self, from_vertex: V, to_vertex: V, weight: int) -> None:
        """
        Add an edge, or replace the weight of an existing one.

        Args:
            from_vertex: Vertex the edge leads from
            to_vertex: Vertex the edge leads to
            weight: Non-negative integer weight (any numbers.Integral, e.g. numpy.int64)

        Raises:
            UnknownVertexError: If either vertex is not in the graph
            InvalidWeightError: If the weight is negative or not an integer
        """
        self._require(from_vertex)
        self._require(to_vertex)
        if isinstance(weight, bool) or not isinstance(weight, numbers.Integral) or weight < 0:
            raise InvalidWeightError(weight)
        self._adjacency[from_vertex][to_vertex] = int(weight)

    def get_weight(self, from_vertex: V, to_vertex: V) -> int | None:
        """
        Weight of the edge from one vertex to another.

        Returns:
            The edge weight, or None if there is no such edge

        Raises:
            UnknownVertexError: If either vertex is not in the graph
        """
        self._require(from_vertex)
        self._require(to_vertex)
        return self._adjacency[from_vertex].get(to_vertex)

    def vertices(self) -> list[V]:
        """All vertices, in insertion order."""
        return list(self._adjacency)

    def neighbors(self, vertex: V) -> list[tuple[V, int]]:
        """
        Outgoing edges of a vertex as (neighbor, weight) pairs.

        Raises:
            UnknownVertexError: If the vertex is not in the graph
        """
        self._require(vertex)
        return list(self._adjacency[vertex].items())

    def edges(self) -> list[tuple[V, V, int]]:
        """All edges as (from, to, weight) triples."""
        return [
            (source, target, weight)
            for source, targets in self._adjacency.items()
            for target, weight in targets.items()
        ]

    def edge_count(self) -> int:
        """Number of edges in the graph."""
        return sum(len(targets) for targets in self._adjacency.values())

    def _require(self, vertex: V) -> None:
        if vertex not in self._adjacency:
            raise UnknownVertexError(vertex)

    # =========================================================================
    # Algorithms
    # =========================================================================

    def do_bfs(self, start: V, end: V) -> SearchResult[V]:
        """
        Breadth-first search from start, stopping as soon as end is visited.

        Observers get ``notify_bfs_has_begun`` first, ``notify_visit`` for
        each visited vertex and ``notify_search_is_over`` right after end
        is visited. If end cannot be reached, ``notify_search_exhausted``
        is sent instead of ``notify_search_is_over``.

        Raises:
            UnknownVertexError: If start or end is not in the graph
        """
        return breadth_first_search(self, start, end)

    def do_dfs(self, start: V, end: V) -> SearchResult[V]:
        """
        Depth-first search from start, stopping as soon as end is visited.

        Same notifications as ``do_bfs``, except that the search begins
        with ``notify_dfs_has_begun``.

        Raises:
            UnknownVertexError: If start or end is not in the graph
        """
        return depth_first_search(self, start, end)

    def do_dijkstra(self, start: V, end: V) -> ShortestPathResult[V]:
        """
        Dijkstra's algorithm from start over the whole graph.

        Does not stop when end is reached: every vertex is finalized and
        reported through ``notify_dijkstra_vertex_finished``. The
        shortest path from start to end is then sent to
        ``notify_dijkstra_is_over``.

        Raises:
            UnknownVertexError: If start or end is not in the graph
            UnreachableError: If end cannot be reached from start
        """
        return dijkstra(self, start, end)

    # =========================================================================
    # Python protocol
    # =========================================================================

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[V]:
        return iter(self._adjacency)

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(vertices={len(self)}, edges={self.edge_count()}, "
            f"observers={len(self._observers)})"
        )
