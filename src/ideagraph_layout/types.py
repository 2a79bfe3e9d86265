"""Shared data model for ideagraph-layout.

Nodes and edges are owned by the caller; the engine only ever replaces
``GraphNode.position``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Position:
    """Top-left corner of a node in canvas pixels."""

    x: float = 0
    y: float = 0


@dataclass
class GraphNode:
    """A node of the idea graph.

    ``width``/``height`` are size hints; ``None`` means the configured
    default is used. ``data`` is never inspected by the layout engine.
    """

    id: str
    position: Position = field(default_factory=Position)
    width: float | None = None
    height: float | None = None
    data: Any = None


@dataclass
class GraphEdge:
    """A directed edge ``source -> target``."""

    id: str
    source: str
    target: str
    data: Any = None
