"""
Dense numpy view of a WeightedGraph.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from weighted_graph.config import UNREACHABLE_COST

if TYPE_CHECKING:
    from weighted_graph.graph.store import V, WeightedGraph


def adjacency_matrix(graph: WeightedGraph[V]) -> tuple[np.ndarray, list[V]]:
    """
    Build a square matrix of edge weights.

    Row i, column j holds the weight of the edge from vertex i to vertex j,
    with vertices numbered in insertion order. Missing edges are inf and
    the diagonal is 0 unless a self-loop weight is stored.

    Args:
        graph: Graph to convert

    Returns:
        (matrix, vertices) where vertices[i] is the vertex of row/column i
    """
    vertices = graph.vertices()
    index = {vertex: i for i, vertex in enumerate(vertices)}

    matrix = np.full((len(vertices), len(vertices)), UNREACHABLE_COST, dtype=np.float64)
    np.fill_diagonal(matrix, 0.0)
    for source, target, weight in graph.edges():
        matrix[index[source], index[target]] = weight

    return matrix, vertices
