"""Common fixtures."""

from __future__ import annotations

from typing import Callable

import pytest

from recruitflow.config import reset_configs
from recruitflow.workflow import NodeVariant, WorkflowEdge, WorkflowNode, create_node


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Point the default store at a temp dir and re-read config per test."""
    monkeypatch.setenv("RECRUITFLOW_WORKFLOW_DIR", str(tmp_path / "default-store"))
    reset_configs()
    yield
    reset_configs()


@pytest.fixture
def make_node() -> Callable[..., WorkflowNode]:
    """Build a node of ``variant`` with a fixed, readable ID."""

    def _make(variant: NodeVariant, node_id: str, label: str = "") -> WorkflowNode:
        node = create_node(variant, label or node_id, {"x": 0, "y": 0})
        return node.model_copy(update={"id": node_id})

    return _make


@pytest.fixture
def edge() -> Callable[[str, str], WorkflowEdge]:
    def _edge(source: str, target: str) -> WorkflowEdge:
        return WorkflowEdge(source=source, target=target)

    return _edge
