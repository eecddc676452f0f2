"""
Workflow Node Model — a single tagged union over node variants.

A node is discriminated by ``kind`` (start / end / task) and, for
tasks, by ``task_kind`` (notification / assignment / interview).
The pair selects the payload model from ``PAYLOAD_MODELS``; there is
no class per variant. Code that needs variant-specific behaviour
switches on ``node.variant``.

Only the *shape* is checked at construction: ``task_kind`` must be
present exactly for task nodes and the payload must fit the variant.
Field contents (empty labels, blank URLs) are legal here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import Field, model_validator

from recruitflow.workflow.nodes.payloads import (
    PAYLOAD_MODELS,
    NodePayload,
    NodeVariant,
    WireModel,
)


class NodeKind(str, Enum):
    """Top-level node discriminator."""
    START = "start"
    END = "end"
    TASK = "task"


class TaskKind(str, Enum):
    """Sub-discriminator for task nodes."""
    NOTIFICATION = "notification"
    ASSIGNMENT = "assignment"
    INTERVIEW = "interview"


class HandleSide(str, Enum):
    """Which side of the node a connection handle sits on (layout only)."""
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


TERMINAL_KINDS = (NodeKind.START, NodeKind.END)


def variant_of(kind: NodeKind, task_kind: Optional[TaskKind]) -> NodeVariant:
    """Collapse the (kind, task_kind) pair into a single variant tag."""
    if kind == NodeKind.TASK:
        if task_kind is None:
            raise ValueError("Task nodes require a task_kind")
        return NodeVariant(task_kind.value)
    if task_kind is not None:
        raise ValueError(f"{kind.value} nodes cannot have a task_kind")
    return NodeVariant(kind.value)


def kinds_for(variant: NodeVariant) -> Tuple[NodeKind, Optional[TaskKind]]:
    """Inverse of ``variant_of``."""
    if variant in (NodeVariant.START, NodeVariant.END):
        return NodeKind(variant.value), None
    return NodeKind.TASK, TaskKind(variant.value)


class NodeData(WireModel):
    label: str = ""


class NodePosition(WireModel):
    x: float = 0
    y: float = 0


class WorkflowNode(WireModel):
    """A single node placed on the workflow canvas.

    ``position`` and the handle sides are layout hints; the validator
    never looks at them.
    """

    id: str
    kind: NodeKind
    task_kind: Optional[TaskKind] = None
    data: NodeData = Field(default_factory=NodeData)
    position: NodePosition = Field(default_factory=NodePosition)
    source_position: Optional[HandleSide] = None
    target_position: Optional[HandleSide] = None
    payload: NodePayload

    @model_validator(mode="before")
    @classmethod
    def _shape_payload(cls, values: Any) -> Any:
        if not isinstance(values, Mapping):
            return values
        values = dict(values)
        kind = NodeKind(values["kind"]) if "kind" in values else None
        if kind is None:
            return values
        raw_task_kind = _pick(values, "task_kind", "taskKind")
        task_kind = TaskKind(raw_task_kind) if raw_task_kind is not None else None
        variant = variant_of(kind, task_kind)
        model = PAYLOAD_MODELS[variant]

        payload = values.get("payload")
        if isinstance(payload, model):
            return values
        if payload is None:
            # Flat documents keep payload fields next to the node fields.
            payload = {
                key: values[key]
                for name, info in model.model_fields.items()
                for key in (name, info.alias)
                if key in values
            }
        elif not isinstance(payload, Mapping):
            raise ValueError(f"{variant.value} payload must be a mapping")
        values["payload"] = model.model_validate(payload)
        return values

    @property
    def variant(self) -> NodeVariant:
        return variant_of(self.kind, self.task_kind)

    @property
    def label(self) -> str:
        return self.data.label

    @property
    def is_terminal(self) -> bool:
        return self.kind in TERMINAL_KINDS

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict in the persisted camelCase shape."""
        return self.model_dump(mode="json", by_alias=True)


def _pick(values: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if values.get(key) is not None:
            return values[key]
    return None


def clone_node(node: WorkflowNode) -> WorkflowNode:
    """Deep copy of a node, keeping its ID."""
    return node.model_copy(deep=True)


def deserialize_node(document: Mapping[str, Any]) -> WorkflowNode:
    """Build a node from a JSON-decoded mapping.

    Accepts both the nested ``payload`` shape and flat documents with
    payload fields at the top level. Absent payload fields take their
    defaults. Raises ``pydantic.ValidationError`` on malformed input.
    """
    return WorkflowNode.model_validate(document)
