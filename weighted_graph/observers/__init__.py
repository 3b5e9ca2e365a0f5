"""
Observers module.

Provides the observer contract and the observers shipped with the library:
- GraphAlgorithmObserver: Abstract listener on algorithm progress
- LoggingObserver: Writes each notification to the logging module
- RecordingObserver: Keeps an ordered list of notifications
"""

from weighted_graph.observers.base import GraphAlgorithmObserver
from weighted_graph.observers.logging_observer import LoggingObserver
from weighted_graph.observers.recording import Notification, RecordingObserver

__all__ = [
    "GraphAlgorithmObserver",
    "LoggingObserver",
    "Notification",
    "RecordingObserver",
    "get_observer",
]


def get_observer(name: str, **kwargs) -> GraphAlgorithmObserver:
    """
    Get an observer by name.

    Args:
        name: Observer identifier (logging, recording)
        **kwargs: Additional arguments passed to the observer constructor

    Returns:
        Instantiated observer

    Raises:
        ValueError: If observer name is unknown
    """
    observers = {
        "logging": LoggingObserver,
        "recording": RecordingObserver,
    }

    if name not in observers:
        available = ", ".join(observers.keys())
        raise ValueError(f"Unknown observer '{name}'. Available: {available}")

    return observers[name](**kwargs)
