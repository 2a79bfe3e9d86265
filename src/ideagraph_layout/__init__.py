"""ideagraph-layout: stable, incremental layered layout for idea graphs."""

from ideagraph_layout.config import LayoutConfig
from ideagraph_layout.layout import LayoutResult, layout_graph, relayout_all, relayout_from
from ideagraph_layout.types import GraphEdge, GraphNode, Position

__all__ = [
    "GraphEdge",
    "GraphNode",
    "LayoutConfig",
    "LayoutResult",
    "Position",
    "layout_graph",
    "relayout_all",
    "relayout_from",
]
