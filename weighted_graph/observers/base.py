"""
Observer base class for weighted graph algorithms.

Observers registered on a WeightedGraph are called synchronously, in
registration order, as BFS, DFS and Dijkstra progress.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Generic, TypeVar

V = TypeVar("V", bound=Hashable)


class GraphAlgorithmObserver(ABC, Generic[V]):
    """
    Abstract base class for listeners on graph algorithm progress.

    Subclasses implement one method per notification. The graph calls
    them in a fixed order:

    - BFS/DFS: ``notify_bfs_has_begun`` or ``notify_dfs_has_begun``, then
      ``notify_visit`` once per visited vertex, then ``notify_search_is_over``
      if the end vertex was visited (``notify_search_exhausted`` otherwise).
    - Dijkstra: ``notify_dijkstra_has_begun``, then
      ``notify_dijkstra_vertex_finished`` once per vertex, then
      ``notify_dijkstra_is_over`` with the shortest path.
    """

    @abstractmethod
    def notify_bfs_has_begun(self) -> None:
        """Called before a breadth-first search processes any vertex."""
        ...

    @abstractmethod
    def notify_dfs_has_begun(self) -> None:
        """Called before a depth-first search processes any vertex."""
        ...

    @abstractmethod
    def notify_visit(self, vertex: V) -> None:
        """
        Called the first time BFS or DFS removes a vertex from its frontier.

        Args:
            vertex: The vertex being visited
        """
        ...

    @abstractmethod
    def notify_search_is_over(self) -> None:
        """Called right after BFS or DFS visits the end vertex."""
        ...

    @abstractmethod
    def notify_dijkstra_has_begun(self) -> None:
        """Called before Dijkstra's algorithm finalizes any vertex."""
        ...

    @abstractmethod
    def notify_dijkstra_vertex_finished(self, vertex: V, cost: int | float) -> None:
        """
        Called each time Dijkstra adds a vertex to its finished set.

        Args:
            vertex: The vertex just finalized
            cost: Its shortest distance from start (math.inf if unreachable)
        """
        ...

    @abstractmethod
    def notify_dijkstra_is_over(self, path: list[V]) -> None:
        """
        Called once Dijkstra has reconstructed the shortest path.

        Args:
            path: Vertices from start to end, both inclusive
        """
        ...

    def notify_search_exhausted(self) -> None:
        """Called when BFS or DFS runs out of vertices without reaching end."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
