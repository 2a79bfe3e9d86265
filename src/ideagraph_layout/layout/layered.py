"""Layered (Sugiyama-style) layout for idea graphs.

Phases:
  1. Adjacency index (parents/children)
  2. Topological order (Kahn) + longest-path ranking
  3. Columns by rank
  4. Intra-column order (barycenter, previous-y tie-break)
  5. Coordinate assignment (columns left to right, nodes top to bottom)
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from ideagraph_layout.config import LayoutConfig
from ideagraph_layout.ir.graph import AdjacencyIndex
from ideagraph_layout.layout.types import CYCLE_DETECTED, LayoutResult
from ideagraph_layout.types import GraphEdge, GraphNode, Position

logger = logging.getLogger(__name__)


# ─── Ranking ─────────────────────────────────────────────────────────────────


def topological_order(node_ids: Sequence[str], index: AdjacencyIndex) -> tuple[list[str], bool]:
    """Order ``node_ids`` parents-first using Kahn's algorithm.

    Only parents inside ``node_ids`` count towards in-degree. If a cycle
    stalls elimination, the input order is returned unchanged.

    Returns:
        (order, complete) where ``complete`` is False when the fallback fired.
    """
    known = set(node_ids)
    in_deg: dict[str, int] = {}
    for node_id in node_ids:
        in_deg[node_id] = sum(1 for p in index.parents_of(node_id) if p in known)

    queue: deque[str] = deque(n for n in node_ids if in_deg[n] == 0)
    order: list[str] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for child in index.children_of(u):
            if child not in in_deg:
                continue
            in_deg[child] -= 1
            if in_deg[child] == 0:
                queue.append(child)

    if len(order) < len(in_deg):
        return list(node_ids), False
    return order, True


@dataclass
class RankAssignment:
    ranks: dict[str, int]
    order: list[str]
    cycle_detected: bool = False

    @classmethod
    def assign(cls, node_ids: Sequence[str], index: AdjacencyIndex) -> RankAssignment:
        """Longest-path layering over the topological order."""
        order, complete = topological_order(node_ids, index)
        known = set(node_ids)
        ranks: dict[str, int] = {}
        for node_id in order:
            parents = [p for p in index.parents_of(node_id) if p in known]
            if not parents:
                ranks[node_id] = 0
                continue
            # Parents not ranked yet only occur on the cyclic fallback path.
            ranks[node_id] = 1 + max(ranks.get(p, -1) for p in parents)
        return cls(ranks=ranks, order=order, cycle_detected=not complete)


def assign_ranks(node_ids: Sequence[str], index: AdjacencyIndex) -> dict[str, int]:
    return RankAssignment.assign(node_ids, index).ranks


# ─── Columns ─────────────────────────────────────────────────────────────────


def build_columns(ranks: dict[str, int]) -> dict[int, list[str]]:
    """Group node ids by rank; member order follows ``ranks`` iteration order."""
    columns: dict[int, list[str]] = {}
    for node_id, rank in ranks.items():
        columns.setdefault(rank, []).append(node_id)
    return columns


def barycenter(node_id: str, index: AdjacencyIndex, prev_index: dict[str, int]) -> float:
    """Mean index of the node's parents in the previous column, or +inf."""
    positions = [prev_index[p] for p in index.parents_of(node_id) if p in prev_index]
    if not positions:
        return float("inf")
    return sum(positions) / len(positions)


def order_columns(
    columns: dict[int, list[str]],
    index: AdjacencyIndex,
    prev_y: dict[str, float],
) -> dict[int, list[str]]:
    """Order every column by barycenter, breaking ties on previous y."""
    ordered: dict[int, list[str]] = {}
    for rank in sorted(columns):
        prev_ids = ordered.get(rank - 1, [])
        prev_index: dict[str, int] = {nid: i for i, nid in enumerate(prev_ids)}
        ordered[rank] = sorted(
            columns[rank],
            key=lambda nid, p=prev_index: (barycenter(nid, index, p), prev_y.get(nid, 0)),
        )
    return ordered


# ─── Coordinate Assignment ───────────────────────────────────────────────────


def column_offsets(
    columns: dict[int, list[str]],
    widths: dict[str, float | None],
    config: LayoutConfig,
    origin_x: float = 0,
) -> dict[int, float]:
    """Left x of each column: previous left + widest previous node + col_gap."""
    offsets: dict[int, float] = {}
    prev_rank: int | None = None
    for rank in sorted(columns):
        if prev_rank is None:
            offsets[rank] = origin_x
        else:
            widest = max(config.node_width(widths.get(nid)) for nid in columns[prev_rank])
            offsets[rank] = offsets[prev_rank] + widest + config.col_gap
        prev_rank = rank
    return offsets


def assign_coordinates(
    columns: dict[int, list[str]],
    nodes_by_id: dict[str, GraphNode],
    config: LayoutConfig,
    origin_x: float = 0,
) -> dict[str, Position]:
    """Stack each column top to bottom starting at y = 0."""
    widths = {nid: n.width for nid, n in nodes_by_id.items()}
    offsets = column_offsets(columns, widths, config, origin_x)

    positions: dict[str, Position] = {}
    for rank, ids in columns.items():
        x = offsets[rank]
        y: float = 0
        for node_id in ids:
            positions[node_id] = Position(x=x, y=y)
            y += config.node_height(nodes_by_id[node_id].height) + config.row_gap
    return positions


# ─── LayeredLayout Engine ────────────────────────────────────────────────────


class LayeredLayout:
    """Full layered layout pipeline."""

    def __init__(self, config: LayoutConfig | None = None) -> None:
        self.config = config or LayoutConfig()

    def layout(
        self,
        nodes: Sequence[GraphNode],
        edges: Iterable[GraphEdge],
        origin_x: float = 0,
    ) -> LayoutResult:
        nodes_by_id: dict[str, GraphNode] = {n.id: n for n in nodes}
        index = AdjacencyIndex.from_edges(edges)

        ra = RankAssignment.assign(list(nodes_by_id), index)
        if ra.cycle_detected:
            logger.warning("graph contains a cycle; ranking %d nodes in input order", len(nodes_by_id))

        columns = build_columns(ra.ranks)
        prev_y = {nid: n.position.y for nid, n in nodes_by_id.items()}
        ordering = order_columns(columns, index, prev_y)
        positions = assign_coordinates(ordering, nodes_by_id, self.config, origin_x)
        logger.debug(
            "laid out %d nodes, %d edges in %d columns", len(nodes_by_id), index.edge_count(), len(ordering)
        )

        return LayoutResult(
            nodes=[replace(n, position=positions[n.id]) for n in nodes],
            ranks=ra.ranks,
            columns=ordering,
            degraded_reason=CYCLE_DETECTED if ra.cycle_detected else None,
        )
