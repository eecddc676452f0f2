"""
Workflow Nodes Package.

The node model is one pydantic model discriminated by ``kind`` and
``task_kind``; the payload for each variant lives in ``payloads``.
"""

from recruitflow.workflow.nodes.base import (
    HandleSide,
    NodeData,
    NodeKind,
    NodePosition,
    TaskKind,
    WorkflowNode,
    clone_node,
    deserialize_node,
    kinds_for,
    variant_of,
)
from recruitflow.workflow.nodes.payloads import (
    PAYLOAD_MODELS,
    AssignmentPayload,
    EmailConfig,
    EndPayload,
    InterviewPayload,
    MessageConfig,
    NodePayload,
    NodeVariant,
    NotificationOption,
    NotificationPayload,
    StartPayload,
    WireModel,
)

__all__ = [
    "HandleSide",
    "NodeData",
    "NodeKind",
    "NodePosition",
    "TaskKind",
    "WorkflowNode",
    "clone_node",
    "deserialize_node",
    "kinds_for",
    "variant_of",
    "PAYLOAD_MODELS",
    "AssignmentPayload",
    "EmailConfig",
    "EndPayload",
    "InterviewPayload",
    "MessageConfig",
    "NodePayload",
    "NodeVariant",
    "NotificationOption",
    "NotificationPayload",
    "StartPayload",
    "WireModel",
]
