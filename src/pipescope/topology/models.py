"""PipeScope topology graph models.

Nodes and edges use the generic shape expected by graph-rendering
surfaces: string ids, absolute positions and a free-form `data` payload.
They are created fresh on every build and owned by the caller.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from pipescope.enums import NodeKind


class Position(BaseModel):
    """Absolute layout coordinates."""

    x: float
    y: float


class Node(BaseModel):
    """A node of a pipeline topology graph.

    Attributes:
        id: Deterministic node id.
        kind: Section, component role, or placeholder.
        position: Absolute layout position.
        data: Rendering payload (label, metrics, section size...).
        selectable: Whether the node can be selected.
        draggable: Whether the node can be dragged.
    """

    id: str
    kind: NodeKind
    position: Position
    data: dict[str, Any] = Field(default_factory=dict)
    selectable: bool = True
    draggable: bool = True


class Edge(BaseModel):
    """A directed edge between two nodes."""

    id: str
    source: str
    target: str
    type: str = "smoothstep"
    animated: bool = True


class TopologyGraph(BaseModel):
    """Nodes and edges of a built topology."""

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)

    @property
    def is_placeholder(self) -> bool:
        """True when the graph only carries an informational node."""
        return len(self.nodes) == 1 and self.nodes[0].kind == NodeKind.PLACEHOLDER

    def node(self, node_id: str) -> Node | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def nodes_of_kind(self, kind: NodeKind) -> list[Node]:
        return [node for node in self.nodes if node.kind == kind]

    def edges_from(self, node_id: str) -> list[Edge]:
        return [edge for edge in self.edges if edge.source == node_id]

    def edges_to(self, node_id: str) -> list[Edge]:
        return [edge for edge in self.edges if edge.target == node_id]
