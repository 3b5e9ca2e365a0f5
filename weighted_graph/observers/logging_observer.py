"""
Observer that reports algorithm progress through the logging module.
"""

from __future__ import annotations

import logging

from weighted_graph.config import OBSERVER_LOG_LEVEL, resolve_log_level
from weighted_graph.observers.base import GraphAlgorithmObserver, V

logger = logging.getLogger(__name__)


class LoggingObserver(GraphAlgorithmObserver[V]):
    """
    Logs one line per notification.

    The logger and level can be swapped so an embedding application can
    route algorithm progress wherever its own logs go.
    """

    def __init__(
        self,
        level: int | str = OBSERVER_LOG_LEVEL,
        log: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the observer.

        Args:
            level: Logging level number or name (e.g. "DEBUG")
            log: Logger to write to (default: this module's logger)
        """
        self._level = resolve_log_level(level) if isinstance(level, str) else level
        self._log = log or logger

    def notify_bfs_has_begun(self) -> None:
        self._log.log(self._level, "BFS has begun")

    def notify_dfs_has_begun(self) -> None:
        self._log.log(self._level, "DFS has begun")

    def notify_visit(self, vertex: V) -> None:
        self._log.log(self._level, f"Visiting {vertex!r}")

    def notify_search_is_over(self) -> None:
        self._log.log(self._level, "Search is over: end vertex reached")

    def notify_search_exhausted(self) -> None:
        self._log.log(self._level, "Search exhausted without reaching end vertex")

    def notify_dijkstra_has_begun(self) -> None:
        self._log.log(self._level, "Dijkstra has begun")

    def notify_dijkstra_vertex_finished(self, vertex: V, cost: int | float) -> None:
        self._log.log(self._level, f"Finished {vertex!r} at cost {cost}")

    def notify_dijkstra_is_over(self, path: list[V]) -> None:
        self._log.log(
            self._level,
            f"Dijkstra is over, path: {' -> '.join(repr(v) for v in path)}",
        )

    def __repr__(self) -> str:
        return f"LoggingObserver(level={logging.getLevelName(self._level)!r})"
