"""
Workflow Graph — the node set and edge set of one builder session.

Nodes are kept in an insertion-ordered mapping from ID to node, edges
in a plain list. All operations are synchronous and in memory. Edges
are never deduplicated: two edges with the same source and target are
distinct and each counts toward degree totals.
"""

from __future__ import annotations

import uuid
from typing import Dict, Iterable, List, Optional

from pydantic import Field

from recruitflow.workflow.node_factory import create_node
from recruitflow.workflow.nodes import (
    NodeVariant,
    WireModel,
    WorkflowNode,
)

START_POSITION = {"x": 250, "y": 50}
END_POSITION = {"x": 250, "y": 350}


class WorkflowEdge(WireModel):
    """A directed edge between two node IDs. Carries no payload."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    source: str
    target: str
    type: str = "custom-edge"


class WorkflowGraph:
    """Mutable node/edge container owned by a single builder session.

    Referential integrity is the caller's job: ``remove_node`` leaves
    incident edges in place (use ``prune_edges`` to drop them) and
    ``add_edge`` accepts any IDs.
    """

    def __init__(
        self,
        nodes: Optional[Iterable[WorkflowNode]] = None,
        edges: Optional[Iterable[WorkflowEdge]] = None,
    ) -> None:
        self.nodes: Dict[str, WorkflowNode] = {}
        self.edges: List[WorkflowEdge] = list(edges or [])
        for node in nodes or []:
            self.add_node(node)

    @classmethod
    def seeded(cls) -> "WorkflowGraph":
        """The default graph a new session starts with: one Start, one End."""
        start = create_node(NodeVariant.START, "Start", START_POSITION)
        end = create_node(NodeVariant.END, "End", END_POSITION)
        return cls(nodes=[start, end])

    # ── Nodes ──

    def add_node(self, node: WorkflowNode) -> WorkflowNode:
        if node.id in self.nodes:
            raise ValueError(f"Duplicate node id: {node.id}")
        self.nodes[node.id] = node
        return node

    def remove_node(self, node_id: str) -> Optional[WorkflowNode]:
        """Remove a node. Incident edges are NOT pruned."""
        return self.nodes.pop(node_id, None)

    def replace_node(self, node: WorkflowNode) -> bool:
        """Swap in an updated node with a matching ID, keeping its order."""
        if node.id not in self.nodes:
            return False
        self.nodes[node.id] = node
        return True

    def get_node(self, node_id: str) -> Optional[WorkflowNode]:
        return self.nodes.get(node_id)

    def node_list(self) -> List[WorkflowNode]:
        return list(self.nodes.values())

    # ── Edges ──

    def add_edge(self, source: str, target: str) -> WorkflowEdge:
        edge = WorkflowEdge(source=source, target=target)
        self.edges.append(edge)
        return edge

    def remove_edge(self, edge_id: str) -> bool:
        for i, edge in enumerate(self.edges):
            if edge.id == edge_id:
                del self.edges[i]
                return True
        return False

    def get_edges_from(self, node_id: str) -> List[WorkflowEdge]:
        return [e for e in self.edges if e.source == node_id]

    def get_edges_to(self, node_id: str) -> List[WorkflowEdge]:
        return [e for e in self.edges if e.target == node_id]

    def incident_edges(self, node_id: str) -> List[WorkflowEdge]:
        return [e for e in self.edges if node_id in (e.source, e.target)]

    def prune_edges(self, node_id: str) -> int:
        """Drop every edge touching ``node_id``; returns how many went."""
        before = len(self.edges)
        self.edges = [e for e in self.edges if node_id not in (e.source, e.target)]
        return before - len(self.edges)

    # ── Snapshots ──

    def snapshot(self) -> "WorkflowGraph":
        """Deep copy, independent of later mutation."""
        return WorkflowGraph(
            nodes=[n.model_copy(deep=True) for n in self.nodes.values()],
            edges=[e.model_copy() for e in self.edges],
        )

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"WorkflowGraph(nodes={len(self.nodes)}, edges={len(self.edges)})"
