"""Centralized configuration for ideagraph-layout."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """Spacing and tuning parameters for the layout pipeline.

    Attributes:
        col_gap: Horizontal gap between two adjacent columns.
        row_gap: Vertical gap between two stacked nodes of a column.
        default_width: Width used for nodes without an explicit width.
        default_height: Height used for nodes without an explicit height.
        incremental_threshold: Graphs with at most this many nodes are
            always laid out in full by ``relayout_from``.
    """

    col_gap: float = 160
    row_gap: float = 40
    default_width: float = 320
    default_height: float = 120
    incremental_threshold: int = 300

    def __post_init__(self) -> None:
        if self.col_gap < 0 or self.row_gap < 0:
            raise ValueError(f"gaps must be non-negative, got col_gap={self.col_gap} row_gap={self.row_gap}")
        if self.default_width <= 0 or self.default_height <= 0:
            raise ValueError(
                f"default sizes must be positive, got {self.default_width}x{self.default_height}"
            )
        if self.incremental_threshold < 0:
            raise ValueError(f"incremental_threshold must be non-negative, got {self.incremental_threshold}")

    def node_width(self, width: float | None) -> float:
        return self.default_width if width is None else width

    def node_height(self, height: float | None) -> float:
        return self.default_height if height is None else height
