"""Layout result types shared by the full and incremental pipelines."""

from __future__ import annotations

from dataclasses import dataclass, field

from ideagraph_layout.types import GraphNode

CYCLE_DETECTED = "cycle-detected"


@dataclass
class LayoutResult:
    """Positioned nodes plus the layering that produced them.

    ``degraded_reason`` is ``CYCLE_DETECTED`` when the topological order fell
    back to input order; positions are still complete in that case.
    """

    nodes: list[GraphNode]
    ranks: dict[str, int] = field(default_factory=dict)
    columns: dict[int, list[str]] = field(default_factory=dict)
    degraded_reason: str | None = None

    @property
    def degraded(self) -> bool:
        return self.degraded_reason is not None

    def column_count(self) -> int:
        return len(self.columns)
