"""Incremental re-layout after a localized edit.

Columns to the left of the changed node's rank cannot change membership or
order, so on large graphs only columns at or right of that rank are
recomputed; the rest keep their positions.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from ideagraph_layout.config import LayoutConfig
from ideagraph_layout.ir.graph import AdjacencyIndex
from ideagraph_layout.layout.layered import LayeredLayout, RankAssignment, build_columns, column_offsets
from ideagraph_layout.layout.types import LayoutResult
from ideagraph_layout.types import GraphEdge, GraphNode

logger = logging.getLogger(__name__)


@dataclass
class RelayoutPlan:
    """Which nodes a ``relayout_from`` call recomputes.

    Attributes:
        changed_id: The node the edit touched.
        delegated: True when the graph is small enough for a full layout.
        min_column: Rank of the changed node (0 if unknown).
        ranks: Global rank of every node.
        affected: The changed node plus all of its descendants.
        movable: Ids with rank >= ``min_column``, in input order.
        fixed: Ids with rank < ``min_column``, in input order.
        origin_x: Left x that column ``min_column`` has in a full layout.
    """

    changed_id: str
    delegated: bool
    min_column: int = 0
    ranks: dict[str, int] = field(default_factory=dict)
    affected: set[str] = field(default_factory=set)
    movable: list[str] = field(default_factory=list)
    fixed: list[str] = field(default_factory=list)
    origin_x: float = 0


def plan_relayout(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    changed_id: str,
    config: LayoutConfig | None = None,
) -> RelayoutPlan:
    config = config or LayoutConfig()
    if len(nodes) <= config.incremental_threshold:
        return RelayoutPlan(changed_id=changed_id, delegated=True, movable=[n.id for n in nodes])

    node_ids = [n.id for n in nodes]
    index = AdjacencyIndex.from_edges(edges)
    ranks = RankAssignment.assign(node_ids, index).ranks
    min_column = ranks.get(changed_id, 0)

    movable = [nid for nid in node_ids if ranks.get(nid, 0) >= min_column]
    fixed = [nid for nid in node_ids if ranks.get(nid, 0) < min_column]

    widths = {n.id: n.width for n in nodes}
    offsets = column_offsets(build_columns(ranks), widths, config)

    return RelayoutPlan(
        changed_id=changed_id,
        delegated=False,
        min_column=min_column,
        ranks=ranks,
        affected=index.affected_by(changed_id) & set(node_ids),
        movable=movable,
        fixed=fixed,
        origin_x=offsets.get(min_column, 0),
    )


def layout_graph(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Full layout, reporting ranks, columns and whether it degraded."""
    return LayeredLayout(config).layout(nodes, edges)


def relayout_all(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    config: LayoutConfig | None = None,
) -> list[GraphNode]:
    """Recompute positions for every node.

    Returns:
        One node per input node, in input order, with only ``position`` replaced.
    """
    return layout_graph(nodes, edges, config).nodes


def relayout_from(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    changed_id: str,
    config: LayoutConfig | None = None,
) -> list[GraphNode]:
    """Recompute positions starting from the rank of ``changed_id``.

    Graphs at or below ``config.incremental_threshold`` nodes get a full
    layout. Above it, nodes ranked left of the changed node are returned
    untouched.
    """
    config = config or LayoutConfig()
    plan = plan_relayout(nodes, edges, changed_id, config)
    if plan.delegated:
        logger.debug("relayout_from(%s): %d nodes, full layout", changed_id, len(nodes))
        return relayout_all(nodes, edges, config)

    logger.debug(
        "relayout_from(%s): column %d, %d movable, %d fixed, %d affected",
        changed_id,
        plan.min_column,
        len(plan.movable),
        len(plan.fixed),
        len(plan.affected),
    )
    movable_ids = set(plan.movable)
    movable_nodes = [n for n in nodes if n.id in movable_ids]
    sub_edges = [
        e
        for e in edges
        if e.source in plan.ranks
        and e.target in plan.ranks
        and plan.ranks[e.source] >= plan.min_column
        and plan.ranks[e.target] >= plan.min_column
    ]

    result = LayeredLayout(config).layout(movable_nodes, sub_edges, origin_x=plan.origin_x)
    laid: dict[str, GraphNode] = {n.id: n for n in result.nodes}
    return [laid.get(n.id, n) for n in nodes]
