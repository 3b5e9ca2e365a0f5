"""
Graph algorithms module.

Provides the algorithms run by WeightedGraph:
- BFS: Breadth-first search, stops at the end vertex
- DFS: Depth-first search, stops at the end vertex
- Dijkstra: Shortest distances to every vertex plus one shortest path
"""

from weighted_graph.algorithms.dijkstra import dijkstra
from weighted_graph.algorithms.results import SearchResult, ShortestPathResult
from weighted_graph.algorithms.traversal import breadth_first_search, depth_first_search

__all__ = [
    "SearchResult",
    "ShortestPathResult",
    "breadth_first_search",
    "depth_first_search",
    "dijkstra",
]
