"""
Weighted Graph.

A generic directed, edge-weighted graph with breadth-first search,
depth-first search and Dijkstra's shortest path, reporting progress
to registered observers.
"""

from weighted_graph.errors import (
    DuplicateVertexError,
    GraphError,
    InvalidWeightError,
    UnknownVertexError,
    UnreachableError,
)
from weighted_graph.algorithms import SearchResult, ShortestPathResult
from weighted_graph.graph import WeightedGraph, adjacency_matrix
from weighted_graph.observers import (
    GraphAlgorithmObserver,
    LoggingObserver,
    RecordingObserver,
    get_observer,
)

__version__ = "0.1.0"

__all__ = [
    "DuplicateVertexError",
    "GraphAlgorithmObserver",
    "GraphError",
    "InvalidWeightError",
    "LoggingObserver",
    "RecordingObserver",
    "SearchResult",
    "ShortestPathResult",
    "UnknownVertexError",
    "UnreachableError",
    "WeightedGraph",
    "adjacency_matrix",
    "get_observer",
]
