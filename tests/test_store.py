"""
Unit tests for WeightedGraph storage: vertices, edges and weights.
"""

import numpy as np
import pytest

from weighted_graph import (
    DuplicateVertexError,
    GraphError,
    InvalidWeightError,
    UnknownVertexError,
    WeightedGraph,
)


class TestVertices:
    """Test vertex insertion and lookup."""

    def test_new_graph_is_empty(self, empty_graph):
        """A new graph has no vertices or edges."""
        assert len(empty_graph) == 0
        assert empty_graph.vertices() == []
        assert empty_graph.edge_count() == 0

    def test_contains_after_add(self, empty_graph):
        """A vertex is contained right after it is added."""
        empty_graph.add_vertex("A")
        assert empty_graph.contains_vertex("A") is True
        assert "A" in empty_graph

    def test_contains_missing(self, empty_graph):
        """A vertex never added is not contained."""
        assert empty_graph.contains_vertex("Z") is False
        assert "Z" not in empty_graph

    def test_contains_survives_later_inserts(self, empty_graph):
        """Adding more vertices and edges never removes a vertex."""
        empty_graph.add_vertex("A")
        empty_graph.add_vertex("B")
        empty_graph.add_edge("A", "B", 3)
        assert empty_graph.contains_vertex("A")
        assert empty_graph.contains_vertex("B")

    def test_duplicate_vertex_raises(self, empty_graph):
        """Adding the same vertex twice raises DuplicateVertexError."""
        empty_graph.add_vertex("A")
        empty_graph.add_vertex("B")
        empty_graph.add_edge("A", "B", 7)

        with pytest.raises(DuplicateVertexError) as exc_info:
            empty_graph.add_vertex("A")

        assert exc_info.value.vertex == "A"
        assert empty_graph.vertices() == ["A", "B"]
        assert empty_graph.get_weight("A", "B") == 7

    def test_equal_vertices_are_duplicates(self, empty_graph):
        """Equality, not identity, decides whether a vertex is a duplicate."""
        empty_graph.add_vertex((1, 2))
        with pytest.raises(DuplicateVertexError):
            empty_graph.add_vertex((1, 2))

    def test_vertices_in_insertion_order(self, empty_graph):
        """vertices() and iteration follow insertion order."""
        for vertex in ["C", "A", "B"]:
            empty_graph.add_vertex(vertex)
        assert empty_graph.vertices() == ["C", "A", "B"]
        assert list(empty_graph) == ["C", "A", "B"]

    def test_any_hashable_vertex(self, empty_graph):
        """Vertices can be any hashable value."""
        empty_graph.add_vertex(1)
        empty_graph.add_vertex(frozenset({"x"}))
        empty_graph.add_edge(1, frozenset({"x"}), 2)
        assert empty_graph.get_weight(1, frozenset({"x"})) == 2


class TestEdges:
    """Test edge insertion and weight lookup."""

    @pytest.fixture
    def graph(self, empty_graph):
        for vertex in "ABC":
            empty_graph.add_vertex(vertex)
        return empty_graph

    def test_add_and_get_weight(self, graph):
        """get_weight returns the inserted weight."""
        graph.add_edge("A", "B", 4)
        assert graph.get_weight("A", "B") == 4

    def test_missing_edge_returns_none(self, graph):
        """get_weight returns None when no edge exists."""
        assert graph.get_weight("A", "B") is None

    def test_edges_are_directed(self, graph):
        """An edge A->B says nothing about B->A."""
        graph.add_edge("A", "B", 4)
        assert graph.get_weight("B", "A") is None

    def test_numpy_integer_weight(self, graph):
        """Integer types other than int, such as numpy.int64, are accepted."""
        weight = np.array([[0, 3], [0, 0]])[0, 1]
        graph.add_edge("A", "B", weight)
        assert graph.get_weight("A", "B") == 3
        assert type(graph.get_weight("A", "B")) is int

    def test_negative_numpy_weight_raises(self, graph):
        """A negative numpy integer is still rejected."""
        with pytest.raises(InvalidWeightError):
            graph.add_edge("A", "B", np.int64(-2))

    def test_zero_weight_allowed(self, graph):
        """Zero is a valid weight."""
        graph.add_edge("A", "B", 0)
        assert graph.get_weight("A", "B") == 0

    def test_self_loop_allowed(self, graph):
        """A vertex may have an edge to itself."""
        graph.add_edge("A", "A", 3)
        assert graph.get_weight("A", "A") == 3

    def test_re_adding_overwrites_weight(self, graph):
        """Adding an existing edge replaces its weight."""
        graph.add_edge("A", "B", 4)
        graph.add_edge("A", "B", 9)
        assert graph.get_weight("A", "B") == 9
        assert graph.edge_count() == 1

    def test_overwrite_keeps_neighbor_position(self, graph):
        """Replacing a weight keeps the edge's original neighbor order."""
        graph.add_edge("A", "B", 1)
        graph.add_edge("A", "C", 2)
        graph.add_edge("A", "B", 5)
        assert graph.neighbors("A") == [("B", 5), ("C", 2)]

    @pytest.mark.parametrize("source,target", [("Z", "A"), ("A", "Z"), ("Y", "Z")])
    def test_add_edge_unknown_vertex_raises(self, graph, source, target):
        """add_edge raises UnknownVertexError if either endpoint is missing."""
        with pytest.raises(UnknownVertexError):
            graph.add_edge(source, target, 1)
        assert graph.edge_count() == 0
        assert "Z" not in graph

    @pytest.mark.parametrize("weight", [-1, -100])
    def test_negative_weight_raises(self, graph, weight):
        """add_edge raises InvalidWeightError for negative weights."""
        with pytest.raises(InvalidWeightError) as exc_info:
            graph.add_edge("A", "B", weight)
        assert exc_info.value.weight == weight
        assert graph.get_weight("A", "B") is None

    @pytest.mark.parametrize("weight", [1.5, "3", None, True])
    def test_non_int_weight_raises(self, graph, weight):
        """add_edge raises InvalidWeightError for weights that are not ints."""
        with pytest.raises(InvalidWeightError):
            graph.add_edge("A", "B", weight)

    def test_failed_overwrite_keeps_old_weight(self, graph):
        """A rejected weight leaves the existing edge untouched."""
        graph.add_edge("A", "B", 4)
        with pytest.raises(InvalidWeightError):
            graph.add_edge("A", "B", -4)
        assert graph.get_weight("A", "B") == 4

    @pytest.mark.parametrize("source,target", [("Z", "A"), ("A", "Z")])
    def test_get_weight_unknown_vertex_raises(self, graph, source, target):
        """get_weight raises UnknownVertexError if either endpoint is missing."""
        with pytest.raises(UnknownVertexError):
            graph.get_weight(source, target)

    def test_neighbors_unknown_vertex_raises(self, graph):
        """neighbors raises UnknownVertexError for a missing vertex."""
        with pytest.raises(UnknownVertexError):
            graph.neighbors("Z")

    def test_edges_listing(self, graph):
        """edges() lists (from, to, weight) triples grouped by source."""
        graph.add_edge("B", "C", 2)
        graph.add_edge("A", "C", 5)
        graph.add_edge("A", "B", 1)
        assert graph.edges() == [("A", "C", 5), ("A", "B", 1), ("B", "C", 2)]


class TestErrors:
    """Test the error hierarchy."""

    def test_errors_share_base(self):
        """Every graph error is a GraphError and a ValueError."""
        graph = WeightedGraph()
        graph.add_vertex("A")
        for call in (
            lambda: graph.add_vertex("A"),
            lambda: graph.add_edge("A", "Z", 1),
            lambda: graph.add_edge("A", "A", -1),
        ):
            with pytest.raises(GraphError):
                call()
            with pytest.raises(ValueError):
                call()

    def test_error_messages_name_the_vertex(self):
        """Error messages mention the offending vertex."""
        graph = WeightedGraph()
        with pytest.raises(UnknownVertexError, match="'Z'"):
            graph.get_weight("Z", "Z")


class TestRepr:
    """Test the string representation."""

    def test_repr_counts(self, triangle_graph):
        """repr shows vertex, edge and observer counts."""
        assert repr(triangle_graph) == "WeightedGraph(vertices=3, edges=3, observers=1)"
