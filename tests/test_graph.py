"""Tests for the fort graph model."""

from __future__ import annotations

import pytest

from fortraid.exceptions import (
    DuplicateEdgeError,
    DuplicateVertexError,
    GraphError,
    SelfLoopError,
    UnknownVertexError,
)
from fortraid.graph.model import FortGraph
from fortraid.graph.models import SELF_ALERT, SHIELD, Fort, FortFlags


class TestFortGraphConstruction:
    def test_add_vertex(self):
        graph = FortGraph()
        graph.add_vertex("a", 5)
        assert "a" in graph
        assert graph.value("a") == 5
        assert graph.flags("a") == FortFlags()
        assert len(graph) == 1

    def test_add_vertex_with_flags(self):
        graph = FortGraph()
        graph.add_vertex("s", 3, SHIELD)
        assert graph.flags("s").shield is True
        assert graph.fort("s") == Fort(label="s", value=3, flags=SHIELD)

    def test_duplicate_vertex(self):
        graph = FortGraph()
        graph.add_vertex("a", 5)
        with pytest.raises(DuplicateVertexError):
            graph.add_vertex("a", 7)
        assert graph.value("a") == 5

    def test_negative_value_rejected(self):
        graph = FortGraph()
        with pytest.raises(GraphError):
            graph.add_vertex("a", -1)
        assert "a" not in graph

    @pytest.mark.parametrize("value", [2.5, "7", True])
    def test_non_integer_value_rejected(self, value):
        graph = FortGraph()
        with pytest.raises(GraphError):
            graph.add_vertex("a", value)
        assert "a" not in graph

    def test_add_edge_is_symmetric(self, path_graph: FortGraph):
        assert path_graph.has_edge("A", "B")
        assert path_graph.has_edge("B", "A")
        assert path_graph.neighbors("B") == ["A", "C"]
        assert path_graph.neighbors("A") == ["B"]

    def test_duplicate_edge(self, path_graph: FortGraph):
        with pytest.raises(DuplicateEdgeError):
            path_graph.add_edge("B", "A")
        assert path_graph.number_of_edges() == 2

    def test_edge_to_unknown_vertex(self, path_graph: FortGraph):
        before = path_graph.copy()
        with pytest.raises(UnknownVertexError):
            path_graph.add_edge("A", "Z")
        assert path_graph == before

    def test_self_loop(self, path_graph: FortGraph):
        with pytest.raises(SelfLoopError):
            path_graph.add_edge("A", "A")
        assert path_graph.neighbors("A") == ["B"]


class TestFortGraphLookup:
    def test_all_labels_insertion_order(self):
        graph = FortGraph()
        for label in ("zeta", "alpha", "mid"):
            graph.add_vertex(label, 1)
        assert graph.all_labels() == ["zeta", "alpha", "mid"]
        assert list(graph) == ["zeta", "alpha", "mid"]

    @pytest.mark.parametrize("method", ["value", "flags", "fort", "neighbors", "degree"])
    def test_unknown_label(self, path_graph: FortGraph, method: str):
        with pytest.raises(UnknownVertexError):
            getattr(path_graph, method)("nope")

    def test_has_edge_unknown(self, path_graph: FortGraph):
        with pytest.raises(UnknownVertexError):
            path_graph.has_edge("A", "nope")


class TestFortGraphRemoval:
    def test_remove_vertex_drops_edges(self, path_graph: FortGraph):
        path_graph.remove_vertex("B")
        assert "B" not in path_graph
        assert path_graph.neighbors("A") == []
        assert path_graph.neighbors("C") == []
        assert path_graph.number_of_edges() == 0

    def test_remove_unknown_vertex(self, path_graph: FortGraph):
        with pytest.raises(UnknownVertexError):
            path_graph.remove_vertex("Z")
        assert len(path_graph) == 3

    def test_remove_edge(self, path_graph: FortGraph):
        path_graph.remove_edge("C", "B")
        assert not path_graph.has_edge("B", "C")
        with pytest.raises(GraphError):
            path_graph.remove_edge("B", "C")


class TestFortGraphStructure:
    def test_components(self):
        graph = FortGraph()
        for label in ("a", "b", "c", "d", "e"):
            graph.add_vertex(label, 1)
        graph.add_edge("a", "c")
        graph.add_edge("b", "d")
        components = graph.components()
        assert components == [["a", "c"], ["b", "d"], ["e"]]

    def test_is_forest(self, path_graph: FortGraph, triangle_graph: FortGraph):
        assert path_graph.is_forest()
        assert not triangle_graph.is_forest()
        assert FortGraph().is_forest()


class TestFortGraphCopy:
    def test_copy_is_equal(self, path_graph: FortGraph):
        clone = path_graph.copy()
        assert clone == path_graph
        assert clone is not path_graph

    def test_copy_is_independent(self, path_graph: FortGraph):
        clone = path_graph.copy()
        clone.add_vertex("D", 1)
        clone.add_edge("C", "D")
        clone.remove_edge("A", "B")
        assert "D" not in path_graph
        assert path_graph.has_edge("A", "B")
        assert clone != path_graph

    def test_copy_keeps_flags(self, path_graph: FortGraph):
        clone = path_graph.copy()
        assert clone.flags("B") == SELF_ALERT

    def test_equality_checks_values(self):
        g1, g2 = FortGraph(), FortGraph()
        g1.add_vertex("a", 1)
        g2.add_vertex("a", 2)
        assert g1 != g2
