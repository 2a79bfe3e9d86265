"""Intermediate representation: adjacency index over the edge list."""

from ideagraph_layout.ir.graph import AdjacencyIndex

__all__ = ["AdjacencyIndex"]
