"""
Breadth-first and depth-first search over a WeightedGraph.

Both searches stop as soon as the end vertex is visited. They share
one loop and differ only in which end of the frontier they take the
next vertex from.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from weighted_graph.algorithms.results import SearchResult, V
from weighted_graph.errors import UnknownVertexError

if TYPE_CHECKING:
    from weighted_graph.graph.store import WeightedGraph

logger = logging.getLogger(__name__)


def breadth_first_search(graph: WeightedGraph[V], start: V, end: V) -> SearchResult[V]:
    """
    Visit vertices in FIFO order from start until end is visited.

    Args:
        graph: Graph to search; its observers are notified
        start: Vertex to begin at
        end: Vertex that terminates the search

    Returns:
        SearchResult with the visit order and whether end was found

    Raises:
        UnknownVertexError: If start or end is not in the graph
    """
    return _search(graph, start, end, algorithm="bfs")


def depth_first_search(graph: WeightedGraph[V], start: V, end: V) -> SearchResult[V]:
    """
    Visit vertices in LIFO order from start until end is visited.

    Args:
        graph: Graph to search; its observers are notified
        start: Vertex to begin at
        end: Vertex that terminates the search

    Returns:
        SearchResult with the visit order and whether end was found

    Raises:
        UnknownVertexError: If start or end is not in the graph
    """
    return _search(graph, start, end, algorithm="dfs")


def _search(graph: WeightedGraph[V], start: V, end: V, algorithm: str) -> SearchResult[V]:
    for vertex in (start, end):
        if not graph.contains_vertex(vertex):
            raise UnknownVertexError(vertex)

    logger.info(f"{algorithm.upper()} from {start!r} to {end!r}")
    graph.notify(f"{algorithm}_has_begun")

    result = SearchResult(algorithm=algorithm, start=start, end=end)
    visited: set[V] = set()
    frontier: deque[V] = deque([start])
    take = frontier.popleft if algorithm == "bfs" else frontier.pop

    while frontier:
        vertex = take()
        # A vertex can be in the frontier more than once
        if vertex in visited:
            continue

        graph.notify("visit", vertex)
        result.visited.append(vertex)
        logger.debug(f"{algorithm.upper()} visited {vertex!r}")

        if vertex == end:
            result.found = True
            graph.notify("search_is_over")
            logger.info(
                f"{algorithm.upper()} reached {end!r} after {result.visit_count} visits"
            )
            return result

        visited.add(vertex)
        for neighbor, _ in graph.neighbors(vertex):
            if neighbor not in visited:
                frontier.append(neighbor)

    graph.notify("search_exhausted")
    logger.info(
        f"{algorithm.upper()} exhausted after {result.visit_count} visits "
        f"without reaching {end!r}"
    )
    return result
