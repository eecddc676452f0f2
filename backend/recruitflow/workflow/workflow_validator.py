"""
Workflow Validator — structural well-formedness of a workflow graph.

``validate_workflow`` checks a (nodes, edges) snapshot against a fixed,
ordered list of rules and stops at the first one that fails:

    1. exactly one Start node and exactly one End node
    2. (build in/out degree tables)
    3. no idle task nodes (in-degree 0 or out-degree 0)
    4. every task node has exactly two incoming edges
    5. Start has no incoming edges
    6. End has no outgoing edges

Invalidity is returned as a ``ValidationResult``, never raised. Only
local degree invariants are checked: reachability from Start to End
and acyclicity are not. Edges whose endpoints are not in the node set
are counted like any other edge and are not reported.
"""

from __future__ import annotations

from enum import Enum
from logging import getLogger
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from recruitflow.workflow.nodes import NodeKind, WorkflowNode
from recruitflow.workflow.workflow_graph import WorkflowEdge, WorkflowGraph

logger = getLogger(__name__)

REQUIRED_TASK_FAN_IN = 2

PASSED_TITLE = "Workflow Validation Passed"
FAILED_TITLE = "Workflow Validation Failed"


class ValidationCategory(str, Enum):
    """Which rule rejected the graph."""
    MISSING_OR_DUPLICATE_TERMINAL = "missing_or_duplicate_terminal"
    DISCONNECTED_NODES = "disconnected_nodes"
    WRONG_FAN_IN = "wrong_fan_in"
    START_HAS_INCOMING = "start_has_incoming"
    END_HAS_OUTGOING = "end_has_outgoing"


class ValidationResult(BaseModel):
    """Verdict of one validation run. Exactly one message per run."""

    ok: bool
    title: str
    message: str
    category: Optional[ValidationCategory] = None
    affected_count: Optional[int] = None
    affected_node_ids: List[str] = Field(default_factory=list)

    @classmethod
    def passed(cls) -> "ValidationResult":
        return cls(
            ok=True,
            title=PASSED_TITLE,
            message="Workflow is valid! All nodes are properly connected.",
        )

    @classmethod
    def failed(
        cls,
        category: ValidationCategory,
        message: str,
        affected: Optional[Sequence[str]] = None,
    ) -> "ValidationResult":
        return cls(
            ok=False,
            title=FAILED_TITLE,
            message=message,
            category=category,
            affected_count=len(affected) if affected is not None else None,
            affected_node_ids=list(affected or []),
        )


def compute_degrees(
    nodes: Iterable[WorkflowNode],
    edges: Iterable[WorkflowEdge],
) -> Tuple[Dict[str, int], Dict[str, int]]:
    """Return ``(in_degree, out_degree)`` keyed by node ID.

    Every node starts at 0. Each edge is walked once. An endpoint that
    is not a known node simply gains its own key.
    """
    in_degree: Dict[str, int] = {}
    out_degree: Dict[str, int] = {}
    for node in nodes:
        in_degree[node.id] = 0
        out_degree[node.id] = 0
    for edge in edges:
        out_degree[edge.source] = out_degree.get(edge.source, 0) + 1
        in_degree[edge.target] = in_degree.get(edge.target, 0) + 1
    return in_degree, out_degree


def validate_workflow(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
) -> ValidationResult:
    """Validate a workflow graph snapshot. Does not mutate its inputs."""
    result = _run_rules(nodes, edges)
    if result.ok:
        logger.debug(f"Workflow valid: {len(nodes)} nodes, {len(edges)} edges")
    else:
        logger.debug(f"Workflow invalid ({result.category.value}): {result.message}")
    return result


def validate_graph(graph: WorkflowGraph) -> ValidationResult:
    return validate_workflow(graph.node_list(), graph.edges)


def _run_rules(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
) -> ValidationResult:
    start_nodes = [n for n in nodes if n.kind == NodeKind.START]
    end_nodes = [n for n in nodes if n.kind == NodeKind.END]
    if len(start_nodes) != 1 or len(end_nodes) != 1:
        return ValidationResult.failed(
            ValidationCategory.MISSING_OR_DUPLICATE_TERMINAL,
            "Workflow must have exactly one Start and one End node",
        )

    in_degree, out_degree = compute_degrees(nodes, edges)
    task_nodes = [n for n in nodes if not n.is_terminal]

    idle = [
        n.id for n in task_nodes
        if in_degree[n.id] == 0 or out_degree[n.id] == 0
    ]
    if idle:
        return ValidationResult.failed(
            ValidationCategory.DISCONNECTED_NODES,
            f"Found {len(idle)} disconnected node(s). All nodes must be connected.",
            idle,
        )

    wrong_fan_in = [
        n.id for n in task_nodes
        if in_degree[n.id] != REQUIRED_TASK_FAN_IN
    ]
    if wrong_fan_in:
        return ValidationResult.failed(
            ValidationCategory.WRONG_FAN_IN,
            f"Found {len(wrong_fan_in)} node(s) without exactly "
            f"{REQUIRED_TASK_FAN_IN} incoming connections.",
            wrong_fan_in,
        )

    if in_degree[start_nodes[0].id] != 0:
        return ValidationResult.failed(
            ValidationCategory.START_HAS_INCOMING,
            "Start node should not have any incoming edges",
        )

    if out_degree[end_nodes[0].id] != 0:
        return ValidationResult.failed(
            ValidationCategory.END_HAS_OUTGOING,
            "End node should not have any outgoing edges",
        )

    return ValidationResult.passed()
