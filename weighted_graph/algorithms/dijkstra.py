"""
Dijkstra's single-source shortest path over a WeightedGraph.

The minimum is found with a linear scan over the unfinished vertices
in insertion order, so among equal costs the vertex added to the graph
first is finalized first.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weighted_graph.algorithms.results import ShortestPathResult, V
from weighted_graph.config import UNREACHABLE_COST
from weighted_graph.errors import UnknownVertexError, UnreachableError

if TYPE_CHECKING:
    from weighted_graph.graph.store import WeightedGraph

logger = logging.getLogger(__name__)


def dijkstra(graph: WeightedGraph[V], start: V, end: V) -> ShortestPathResult[V]:
    """
    Compute shortest distances from start to every vertex, then the path to end.

    Every vertex is finalized, including those after end and those that
    cannot be reached (reported with cost math.inf, after all reachable
    ones).

    Args:
        graph: Graph to run on; its observers are notified
        start: Source vertex
        end: Vertex whose shortest path is reported

    Returns:
        ShortestPathResult with all costs and the path from start to end

    Raises:
        UnknownVertexError: If start or end is not in the graph
        UnreachableError: If end cannot be reached from start
    """
    for vertex in (start, end):
        if not graph.contains_vertex(vertex):
            raise UnknownVertexError(vertex)

    logger.info(f"Dijkstra from {start!r} over {len(graph)} vertices")
    graph.notify("dijkstra_has_begun")

    costs: dict[V, int | float] = {vertex: UNREACHABLE_COST for vertex in graph.vertices()}
    costs[start] = 0
    predecessors: dict[V, V] = {}
    finished: set[V] = set()
    finish_order: list[V] = []

    while len(finished) < len(costs):
        current = _closest_unfinished(costs, finished)
        finished.add(current)
        finish_order.append(current)
        graph.notify("dijkstra_vertex_finished", current, costs[current])
        logger.debug(f"Dijkstra finished {current!r} at cost {costs[current]}")

        if costs[current] == UNREACHABLE_COST:
            continue

        for neighbor, weight in graph.neighbors(current):
            if neighbor in finished:
                continue
            new_cost = costs[current] + weight
            if new_cost < costs[neighbor]:
                costs[neighbor] = new_cost
                predecessors[neighbor] = current

    path = _reconstruct_path(predecessors, start, end)
    graph.notify("dijkstra_is_over", path)
    logger.info(
        f"Dijkstra path ({costs[end]} cost, {len(path) - 1} edges): "
        f"{' -> '.join(repr(v) for v in path)}"
    )

    return ShortestPathResult(
        start=start,
        end=end,
        costs=costs,
        finish_order=finish_order,
        path=path,
    )


def _closest_unfinished(costs: dict[V, int | float], finished: set[V]) -> V:
    """Unfinished vertex with the lowest cost; the earliest inserted wins ties."""
    best: V | None = None
    best_cost: int | float = UNREACHABLE_COST
    for vertex, cost in costs.items():
        if vertex in finished:
            continue
        if best is None or cost < best_cost:
            best = vertex
            best_cost = cost
    return best


def _reconstruct_path(predecessors: dict[V, V], start: V, end: V) -> list[V]:
    """Walk predecessor links back from end to start."""
    path = [end]
    vertex = end
    while vertex != start:
        if vertex not in predecessors:
            logger.warning(f"Dijkstra: No path found from {start!r} to {end!r}")
            raise UnreachableError(start, end)
        vertex = predecessors[vertex]
        path.append(vertex)
    return list(reversed(path))
