"""
Workflow Record — the durable, serialized form of a workflow graph.

Nodes and edges are stored as two independent JSON strings, exactly as
the document store keeps them. ``WorkflowRecord`` is persisted by
``WorkflowStore``; a builder session produces one on save and can be
rebuilt from one on load.

``WorkflowDocument`` is the portable export format: one JSON object with
the nodes and edges inline, as a user downloads and re-imports it.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Sequence

from pydantic import Field, TypeAdapter, ValidationError

from recruitflow.workflow.errors import WorkflowImportError
from recruitflow.workflow.nodes import WireModel, WorkflowNode
from recruitflow.workflow.workflow_graph import WorkflowEdge, WorkflowGraph

_NODE_LIST = TypeAdapter(List[WorkflowNode])
_EDGE_LIST = TypeAdapter(List[WorkflowEdge])


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class WorkflowStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


# ── Node / edge JSON ──


def dump_nodes(nodes: Sequence[WorkflowNode]) -> str:
    return json.dumps([n.to_wire() for n in nodes])


def load_nodes(text: str) -> List[WorkflowNode]:
    return _NODE_LIST.validate_json(text)


def dump_edges(edges: Sequence[WorkflowEdge]) -> str:
    return json.dumps([e.model_dump(mode="json", by_alias=True) for e in edges])


def load_edges(text: str) -> List[WorkflowEdge]:
    return _EDGE_LIST.validate_json(text)


class WorkflowRecord(WireModel):
    """A stored workflow: metadata plus serialized nodes and edges."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = "Untitled Workflow"
    description: str = ""
    nodes: str = "[]"
    edges: str = "[]"
    created_at: str = ""
    updated_at: str = ""
    created_by: str = ""
    is_template: bool = False
    template_category: str = ""
    status: WorkflowStatus = WorkflowStatus.DRAFT
    tags: List[str] = Field(default_factory=list)

    @classmethod
    def from_graph(cls, graph: WorkflowGraph, **fields) -> "WorkflowRecord":
        """Serialize a graph into a new record; ``fields`` sets metadata."""
        return cls(
            nodes=dump_nodes(graph.node_list()),
            edges=dump_edges(graph.edges),
            **fields,
        )

    def set_graph(self, graph: WorkflowGraph) -> None:
        self.nodes = dump_nodes(graph.node_list())
        self.edges = dump_edges(graph.edges)

    def to_graph(self) -> WorkflowGraph:
        return WorkflowGraph(nodes=load_nodes(self.nodes), edges=load_edges(self.edges))

    def touch(self) -> None:
        """Update the ``updated_at`` timestamp."""
        self.updated_at = now_iso()


# ── Export / import ──


class WorkflowDocument(WireModel):
    """Single-file export of a builder graph, with nodes and edges inline."""

    id: Optional[str] = None
    name: str = "Untitled Workflow"
    description: str = ""
    nodes: List[WorkflowNode]
    edges: List[WorkflowEdge]

    @classmethod
    def from_graph(cls, graph: WorkflowGraph, **fields) -> "WorkflowDocument":
        copy = graph.snapshot()
        return cls(nodes=copy.node_list(), edges=copy.edges, **fields)

    def to_graph(self) -> WorkflowGraph:
        return WorkflowGraph(nodes=self.nodes, edges=self.edges).snapshot()

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


def import_workflow(text: str) -> WorkflowDocument:
    """Parse an exported workflow file.

    Raises ``WorkflowImportError`` if the text is not JSON or lacks
    ``nodes`` / ``edges``.
    """
    try:
        return WorkflowDocument.model_validate_json(text)
    except ValidationError as e:
        raise WorkflowImportError(f"Invalid workflow file format: {e}") from e
