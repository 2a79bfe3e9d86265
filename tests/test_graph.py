"""Tests for ideagraph_layout.ir.graph — AdjacencyIndex construction and reachability."""

from ideagraph_layout.ir.graph import AdjacencyIndex
from ideagraph_layout.types import GraphEdge


def _index(*pairs: tuple[str, str]) -> AdjacencyIndex:
    return AdjacencyIndex.from_edges(GraphEdge(id=f"e{i}", source=s, target=t) for i, (s, t) in enumerate(pairs))


class TestBasicConstruction:
    def test_empty(self):
        index = _index()
        assert index.edge_count() == 0
        assert index.parents_of("A") == []
        assert index.children_of("A") == []

    def test_parents_and_children(self):
        index = _index(("A", "C"), ("B", "C"), ("A", "D"))
        assert index.parents_of("C") == ["A", "B"]
        assert index.children_of("A") == ["C", "D"]
        assert index.parents_of("A") == []

    def test_edge_list_order_preserved(self):
        index = _index(("B", "X"), ("A", "X"), ("C", "X"))
        assert index.parents_of("X") == ["B", "A", "C"]


class TestMultiEdges:
    def test_duplicates_preserved(self):
        index = _index(("A", "B"), ("A", "B"))
        assert index.parents_of("B") == ["A", "A"]
        assert index.children_of("A") == ["B", "B"]
        assert index.edge_count() == 2

    def test_same_id_twice_counts_once_in_graph(self):
        """The multigraph is keyed by edge id; the lookup lists are not."""
        edges = [GraphEdge("e", "A", "B"), GraphEdge("e", "A", "B")]
        index = AdjacencyIndex.from_edges(edges)
        assert index.edge_count() == 1
        assert index.parents_of("B") == ["A", "A"]


class TestDanglingEndpoints:
    def test_dangling_ids_recorded(self):
        index = _index(("GHOST", "A"))
        assert index.parents_of("A") == ["GHOST"]
        assert index.children_of("GHOST") == ["A"]


class TestReachability:
    def test_descendants(self):
        index = _index(("A", "B"), ("B", "C"), ("A", "D"), ("X", "A"))
        assert index.descendants("A") == {"B", "C", "D"}
        assert index.descendants("C") == set()

    def test_unknown_node(self):
        assert _index(("A", "B")).descendants("Z") == set()

    def test_affected_includes_self(self):
        index = _index(("A", "B"), ("B", "C"))
        assert index.affected_by("B") == {"B", "C"}
        assert index.affected_by("Z") == {"Z"}

    def test_cycle_terminates(self):
        index = _index(("A", "B"), ("B", "C"), ("C", "A"))
        assert index.affected_by("A") == {"A", "B", "C"}
