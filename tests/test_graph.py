import logging

import pytest

from digraphs import (
    CorruptGraphError,
    DuplicateNodeError,
    Graph,
    MismatchedNodeSetError,
    UnknownNodeError,
)

from conftest import graph_of


class TestAddNode:
    def test_new_node_has_no_edges(self):
        graph = Graph()
        graph.add_node("A")

        assert graph.node_set() == {"A"}
        assert graph.successors_of("A") == ()
        assert graph.predecessors_of("A") == ()

    def test_duplicate_node_fails(self):
        graph = graph_of("AB", [("A", "B")])

        with pytest.raises(DuplicateNodeError) as info:
            graph.add_node("A")

        assert info.value.node == "A"
        assert len(graph) == 2
        assert graph.successors_of("A") == ("B",)

    def test_none_is_not_a_node(self):
        with pytest.raises(TypeError):
            Graph().add_node(None)


class TestAddEdge:
    def test_edge_is_stored_both_ways(self):
        graph = graph_of("AB", [("A", "B")])

        assert graph.succ_map()["A"] == ("B",)
        assert graph.pred_map()["B"] == ("A",)
        assert graph.exists_edge("A", "B")
        assert not graph.exists_edge("B", "A")

    def test_unknown_from_node(self):
        graph = graph_of("A", [])

        with pytest.raises(UnknownNodeError) as info:
            graph.add_edge("X", "A")

        assert info.value.node == "X"
        assert info.value.endpoint == "from"

    def test_unknown_to_node(self):
        graph = graph_of("A", [])

        with pytest.raises(UnknownNodeError) as info:
            graph.add_edge("A", "X")

        assert info.value.node == "X"
        assert info.value.endpoint == "to"
        assert graph.successors_of("A") == ()

    def test_duplicate_edge_is_ignored_with_warning(self, caplog):
        graph = graph_of("AB", [("A", "B")])
        before = graph.copy()

        with caplog.at_level(logging.WARNING, logger="digraphs.graph"):
            added = graph.add_edge("A", "B")

        assert added is False
        assert graph == before
        assert graph.successors_of("A") == ("B",)
        assert "already exists" in caplog.text

    def test_adjacency_is_sorted_regardless_of_insertion_order(self):
        first = graph_of("ABCD", [("A", "D"), ("A", "B"), ("A", "C")])
        second = graph_of("ABCD", [("A", "C"), ("A", "D"), ("A", "B")])

        assert first.successors_of("A") == ("B", "C", "D")
        assert first == second

    def test_self_loop(self):
        graph = graph_of("A", [("A", "A")])

        assert graph.exists_edge("A", "A")
        assert graph.predecessors_of("A") == ("A",)


class TestQueries:
    def test_exists_edge_agrees_with_both_maps(self, any_graph):
        for src in any_graph:
            for dst in any_graph:
                forward = dst in any_graph.succ_map()[src]
                backward = src in any_graph.pred_map()[dst]
                assert forward == backward == any_graph.exists_edge(src, dst)

    def test_exists_edge_detects_corruption(self):
        graph = graph_of("AB", [])
        graph._succ["A"] = ("B",)

        with pytest.raises(CorruptGraphError):
            graph.exists_edge("A", "B")

    def test_maps_are_read_only(self, path):
        with pytest.raises(TypeError):
            path.succ_map()["A"] = ()

    def test_unknown_node_lookup(self, path):
        with pytest.raises(UnknownNodeError):
            path.successors_of("Z")

    def test_edges_in_natural_order(self):
        graph = graph_of("CBA", [("C", "A"), ("A", "C"), ("A", "B")])

        assert list(graph.edges()) == [("A", "B"), ("A", "C"), ("C", "A")]
        assert graph.edge_count() == 3

    def test_protocols(self, path):
        assert len(path) == 3
        assert "A" in path
        assert "Z" not in path
        assert list(path) == ["A", "B", "C"]
        assert repr(path) == "Graph(N=3, E=2)"


class TestEquality:
    def test_equal_graphs(self, path):
        assert path.equals(graph_of("ABC", [("B", "C"), ("A", "B")]))

    def test_different_edges(self, path, cycle):
        assert path != cycle

    def test_different_nodes(self, path):
        assert path != graph_of("ABCD", [("A", "B"), ("B", "C")])

    def test_not_a_graph(self, path):
        assert path != "ABC"


class TestTransforms:
    def test_copy_and_clear(self, cycle):
        cleared = cycle.copy_and_clear()

        assert cleared.node_set() == cycle.node_set()
        assert cleared.printer is cycle.printer
        assert list(cleared.edges()) == []
        assert cycle.edge_count() == 3

    def test_copy_is_independent(self, path):
        copy = path.copy()
        copy.add_edge("C", "A")

        assert copy != path
        assert not path.exists_edge("C", "A")

    def test_transpose(self, path):
        transpose = path.transpose()

        assert transpose == graph_of("ABC", [("B", "A"), ("C", "B")])
        assert transpose.successors_of("A") == ()
        assert transpose.predecessors_of("A") == ("B",)

    def test_transpose_keeps_adjacency_sorted(self):
        graph = graph_of("ABCD", [("D", "A"), ("B", "A"), ("C", "A")])

        assert graph.transpose().successors_of("A") == ("B", "C", "D")

    def test_transpose_twice_is_identity(self, any_graph):
        assert any_graph.transpose().transpose() == any_graph

    def test_transpose_does_not_mutate(self, path):
        before = path.copy()
        path.transpose()

        assert path == before

    def test_union(self, path):
        other = graph_of("ABC", [("B", "C"), ("C", "A")])

        result = path.union(other)

        assert list(result.edges()) == [("A", "B"), ("B", "C"), ("C", "A")]
        assert path + other == result

    def test_union_with_self(self, any_graph):
        assert any_graph.union(any_graph) == any_graph.copy()

    def test_union_overlap_is_silent(self, path, caplog):
        with caplog.at_level(logging.WARNING):
            path.union(path)

        assert caplog.records == []

    def test_union_mismatched_nodes(self, path):
        other = graph_of("ABD", [])

        with pytest.raises(MismatchedNodeSetError) as info:
            path.union(other)

        assert info.value.only_left == {"C"}
        assert info.value.only_right == {"D"}
