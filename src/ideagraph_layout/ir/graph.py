"""Adjacency index — parent/child lookups built from a flat edge list.

The index wraps a networkx MultiDiGraph so that duplicate edges between the
same pair of nodes stay distinct; a parent reached through two edges counts
twice when barycenter scores are averaged. Edge endpoints that are not part
of the rendered node set are kept as-is: consumers decide how to treat them.
"""

from __future__ import annotations

from collections.abc import Iterable

import networkx as nx

from ideagraph_layout.types import GraphEdge


class AdjacencyIndex:
    """Ordered parent/child lookups for one layout call."""

    def __init__(self, digraph: nx.MultiDiGraph, parents: dict[str, list[str]], children: dict[str, list[str]]) -> None:
        self.digraph = digraph
        self._parents = parents
        self._children = children

    @classmethod
    def from_edges(cls, edges: Iterable[GraphEdge]) -> AdjacencyIndex:
        """Build the index; parent and child lists follow edge-list order."""
        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        parents: dict[str, list[str]] = {}
        children: dict[str, list[str]] = {}
        for edge in edges:
            digraph.add_edge(edge.source, edge.target, key=edge.id)
            parents.setdefault(edge.target, []).append(edge.source)
            children.setdefault(edge.source, []).append(edge.target)
        return cls(digraph=digraph, parents=parents, children=children)

    def parents_of(self, node_id: str) -> list[str]:
        return self._parents.get(node_id, [])

    def children_of(self, node_id: str) -> list[str]:
        return self._children.get(node_id, [])

    def descendants(self, node_id: str) -> set[str]:
        """All ids reachable from ``node_id`` along edge direction (excluding itself)."""
        if node_id not in self.digraph:
            return set()
        return nx.descendants(self.digraph, node_id)

    def affected_by(self, node_id: str) -> set[str]:
        """The node itself plus its full forward reachability."""
        return {node_id} | self.descendants(node_id)

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()
