"""
Node Factory — the single entry point for creating new nodes.

``create_node`` returns a correctly shaped ``WorkflowNode`` for any of
the five known variants, with a fresh ID and variant defaults (empty
strings, empty lists, "now" for timestamps). An unrecognised variant
yields ``None``: callers treat that as "unsupported type", not as a
fatal error.
"""

from __future__ import annotations

import uuid
from logging import getLogger
from typing import Any, Mapping, Optional, Union

from recruitflow.workflow.nodes import (
    PAYLOAD_MODELS,
    HandleSide,
    NodeData,
    NodePosition,
    NodeVariant,
    WorkflowNode,
    kinds_for,
)

logger = getLogger(__name__)

LabelData = Union[NodeData, Mapping[str, Any], str]
PositionLike = Union[NodePosition, Mapping[str, float]]


def generate_node_id() -> str:
    return str(uuid.uuid4())


def parse_variant(variant: Union[NodeVariant, str, None]) -> Optional[NodeVariant]:
    """Resolve a variant tag, returning ``None`` for unknown values."""
    if isinstance(variant, NodeVariant):
        return variant
    try:
        return NodeVariant(variant)
    except ValueError:
        return None


def default_label(variant: NodeVariant) -> str:
    """Label given to a freshly dropped node, e.g. ``"Interview Node"``."""
    return f"{variant.value.capitalize()} Node"


def create_node(
    variant: Union[NodeVariant, str],
    data: LabelData,
    position: PositionLike,
    source_position: Optional[HandleSide] = None,
    target_position: Optional[HandleSide] = None,
) -> Optional[WorkflowNode]:
    """Create a new node of the requested variant.

    Args:
        variant: One of the ``NodeVariant`` tags (or its string value).
        data: Label data, either a ``NodeData``, a mapping with ``label``,
            or the label string itself.
        position: Canvas coordinates.
        source_position / target_position: Optional handle-side hints.

    Returns:
        The new node, or ``None`` if ``variant`` is not recognised.
    """
    resolved = parse_variant(variant)
    if resolved is None:
        logger.warning(f"Unsupported node type requested: {variant!r}")
        return None

    kind, task_kind = kinds_for(resolved)
    return WorkflowNode(
        id=generate_node_id(),
        kind=kind,
        task_kind=task_kind,
        data=_coerce_data(data),
        position=NodePosition.model_validate(position),
        source_position=source_position,
        target_position=target_position,
        payload=PAYLOAD_MODELS[resolved](),
    )


def _coerce_data(data: LabelData) -> NodeData:
    if isinstance(data, NodeData):
        return data.model_copy()
    if isinstance(data, str):
        return NodeData(label=data)
    return NodeData.model_validate(data)
