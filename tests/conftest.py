"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from weighted_graph import RecordingObserver, WeightedGraph


def make_graph(vertices, edges) -> WeightedGraph:
    """Build a graph from an iterable of vertices and (from, to, weight) edges."""
    graph = WeightedGraph()
    for vertex in vertices:
        graph.add_vertex(vertex)
    for source, target, weight in edges:
        graph.add_edge(source, target, weight)
    return graph


@pytest.fixture
def empty_graph() -> WeightedGraph:
    """Return a graph with no vertices."""
    return WeightedGraph()


@pytest.fixture
def recorder() -> RecordingObserver:
    """Return a fresh recording observer."""
    return RecordingObserver()


@pytest.fixture
def triangle_graph(recorder: RecordingObserver) -> WeightedGraph:
    """A->B(1), B->C(2), A->C(5), with the recorder attached."""
    graph = make_graph("ABC", [("A", "B", 1), ("B", "C", 2), ("A", "C", 5)])
    graph.add_observer(recorder)
    return graph


@pytest.fixture
def tree_graph(recorder: RecordingObserver) -> WeightedGraph:
    """A->B, A->C, B->D, C->E, all weight 1, with the recorder attached."""
    graph = make_graph(
        "ABCDE",
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "E", 1)],
    )
    graph.add_observer(recorder)
    return graph


@pytest.fixture
def diamond_graph(recorder: RecordingObserver) -> WeightedGraph:
    """A->B, A->C, B->D, C->D plus an isolated E, with the recorder attached."""
    graph = make_graph(
        "ABCDE",
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)],
    )
    graph.add_observer(recorder)
    return graph


@pytest.fixture
def road_graph(recorder: RecordingObserver) -> WeightedGraph:
    """Seven-vertex graph with one isolated vertex (G), recorder attached."""
    graph = make_graph(
        "ABCDEFG",
        [
            ("A", "B", 4),
            ("A", "C", 2),
            ("B", "D", 5),
            ("C", "B", 1),
            ("C", "D", 8),
            ("C", "E", 10),
            ("D", "E", 2),
            ("D", "F", 6),
            ("E", "F", 2),
        ],
    )
    graph.add_observer(recorder)
    return graph


@pytest.fixture
def graph_factory():
    """Return the make_graph helper for tests that build their own graphs."""
    return make_graph
