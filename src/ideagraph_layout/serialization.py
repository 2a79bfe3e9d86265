"""JSON document format exchanged with the canvas.

A document is ``{"nodes": [...], "edges": [...]}`` where nodes look like
``{"id", "position": {"x", "y"}, "width"?, "height"?, "data"?}`` and edges
like ``{"id", "source", "target", "data"?}``. Keys the layout does not use are
kept on the models and written back untouched by ``apply_positions``.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, ValidationError, model_validator

from ideagraph_layout.types import GraphEdge, GraphNode, Position

Number = StrictInt | StrictFloat
Identifier = Annotated[StrictStr, Field(min_length=1)]


class GraphFormatError(ValueError):
    """The document does not describe a node/edge graph."""


class PositionDoc(BaseModel):
    model_config = ConfigDict(extra="allow")

    x: Number = 0
    y: Number = 0


class NodeDoc(BaseModel):
    """One canvas node; unknown keys (``type``, ``selected``, ...) are kept."""

    model_config = ConfigDict(extra="allow")

    id: Identifier
    position: PositionDoc = Field(default_factory=PositionDoc)
    width: Number | None = None
    height: Number | None = None
    data: Any = None

    def to_node(self) -> GraphNode:
        return GraphNode(
            id=self.id,
            position=Position(x=self.position.x, y=self.position.y),
            width=self.width,
            height=self.height,
            data=self.data,
        )


class EdgeDoc(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Identifier
    source: Identifier
    target: Identifier
    data: Any = None

    def to_edge(self) -> GraphEdge:
        return GraphEdge(id=self.id, source=self.source, target=self.target, data=self.data)


class GraphDocument(BaseModel):
    """A whole canvas document."""

    model_config = ConfigDict(extra="allow")

    nodes: list[NodeDoc]
    edges: list[EdgeDoc] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_node_ids(self) -> GraphDocument:
        seen: set[str] = set()
        for node in self.nodes:
            if node.id in seen:
                raise ValueError(f"duplicate node id '{node.id}'")
            seen.add(node.id)
        return self

    def to_graph(self) -> tuple[list[GraphNode], list[GraphEdge]]:
        return [n.to_node() for n in self.nodes], [e.to_edge() for e in self.edges]


def _describe(err: ValidationError) -> str:
    parts: list[str] = []
    for item in err.errors():
        loc = ".".join(str(p) for p in item["loc"]) or "document"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)


def load_document(doc: Any) -> GraphDocument:
    """Validate a decoded JSON value as a graph document.

    Raises:
        GraphFormatError: If the document is malformed or node ids repeat.
    """
    try:
        return GraphDocument.model_validate(doc)
    except ValidationError as e:
        raise GraphFormatError(_describe(e)) from e


def parse_document(text: str) -> GraphDocument:
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise GraphFormatError(f"invalid JSON: {e}") from e
    return load_document(doc)


def apply_positions(document: GraphDocument, nodes: Sequence[GraphNode]) -> dict[str, Any]:
    """Dump ``document`` with node positions taken from ``nodes``.

    Only keys present in the input are written, plus the new positions.
    """
    by_id = {n.id: n.position for n in nodes}
    out = document.model_copy(deep=True)
    for node in out.nodes:
        pos = by_id.get(node.id)
        if pos is not None:
            node.position = PositionDoc(x=pos.x, y=pos.y)
    return out.model_dump(exclude_unset=True)
