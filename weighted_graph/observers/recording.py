"""
Observer that records every notification it receives.

Useful in tests and for replaying an algorithm run after the fact.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from weighted_graph.observers.base import GraphAlgorithmObserver, V


@dataclass
class Notification:
    """
    A single recorded notification.

    Attributes:
        event: Observer method name without the ``notify_`` prefix
        args: Positional payload passed with the notification
    """

    event: str
    args: tuple[Any, ...] = ()


@dataclass(eq=False)
class RecordingObserver(GraphAlgorithmObserver[V]):
    """
    Keeps an ordered log of notifications.

    Attributes:
        notifications: Every notification received, oldest first
    """

    notifications: list[Notification] = field(default_factory=list)

    def _record(self, event: str, *args: Any) -> None:
        self.notifications.append(Notification(event=event, args=args))

    def notify_bfs_has_begun(self) -> None:
        self._record("bfs_has_begun")

    def notify_dfs_has_begun(self) -> None:
        self._record("dfs_has_begun")

    def notify_visit(self, vertex: V) -> None:
        self._record("visit", vertex)

    def notify_search_is_over(self) -> None:
        self._record("search_is_over")

    def notify_search_exhausted(self) -> None:
        self._record("search_exhausted")

    def notify_dijkstra_has_begun(self) -> None:
        self._record("dijkstra_has_begun")

    def notify_dijkstra_vertex_finished(self, vertex: V, cost: int | float) -> None:
        self._record("dijkstra_vertex_finished", vertex, cost)

    def notify_dijkstra_is_over(self, path: list[V]) -> None:
        self._record("dijkstra_is_over", list(path))

    @property
    def events(self) -> list[str]:
        """Event names in the order they were received."""
        return [n.event for n in self.notifications]

    @property
    def visited(self) -> list[V]:
        """Vertices reported through ``notify_visit``, in order."""
        return [n.args[0] for n in self.notifications if n.event == "visit"]

    @property
    def finished(self) -> list[tuple[V, int | float]]:
        """(vertex, cost) pairs reported by Dijkstra, in order."""
        return [
            (n.args[0], n.args[1])
            for n in self.notifications
            if n.event == "dijkstra_vertex_finished"
        ]

    @property
    def path(self) -> list[V] | None:
        """Path from the most recent ``notify_dijkstra_is_over``, if any."""
        for n in reversed(self.notifications):
            if n.event == "dijkstra_is_over":
                return n.args[0]
        return None

    def clear(self) -> None:
        """Forget everything recorded so far."""
        self.notifications.clear()
