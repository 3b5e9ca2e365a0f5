"""
Graph storage module.

Provides the directed, edge-weighted graph and a numpy view of it:
- WeightedGraph: Vertices, weighted edges, observers, algorithm entry points
- adjacency_matrix: Dense weight matrix in vertex insertion order
"""

from weighted_graph.graph.matrix import adjacency_matrix
from weighted_graph.graph.store import WeightedGraph

__all__ = ["WeightedGraph", "adjacency_matrix"]
