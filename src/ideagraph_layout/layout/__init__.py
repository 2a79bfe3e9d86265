"""Layout engine public API."""

from __future__ import annotations

from ideagraph_layout.layout.incremental import (
    RelayoutPlan,
    layout_graph,
    plan_relayout,
    relayout_all,
    relayout_from,
)
from ideagraph_layout.layout.layered import (
    LayeredLayout,
    RankAssignment,
    assign_coordinates,
    assign_ranks,
    barycenter,
    build_columns,
    column_offsets,
    order_columns,
    topological_order,
)
from ideagraph_layout.layout.types import CYCLE_DETECTED, LayoutResult

__all__ = [
    "CYCLE_DETECTED",
    "LayeredLayout",
    "LayoutResult",
    "RankAssignment",
    "RelayoutPlan",
    "assign_coordinates",
    "assign_ranks",
    "barycenter",
    "build_columns",
    "column_offsets",
    "layout_graph",
    "order_columns",
    "plan_relayout",
    "relayout_all",
    "relayout_from",
    "topological_order",
]
