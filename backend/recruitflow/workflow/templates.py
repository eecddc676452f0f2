"""
Pre-built Workflow Templates.

Factory functions returning ready-made ``WorkflowRecord`` templates
that pass validation. ``install_templates`` saves any that are not yet
in the store so users can clone them.
"""

from __future__ import annotations

from logging import getLogger
from typing import Callable, List

from recruitflow.workflow.nodes import (
    AssignmentPayload,
    EndPayload,
    HandleSide,
    InterviewPayload,
    NodeKind,
    NotificationOption,
    NotificationPayload,
    StartPayload,
    TaskKind,
    WorkflowNode,
)
from recruitflow.workflow.workflow_graph import WorkflowEdge, WorkflowGraph
from recruitflow.workflow.workflow_model import WorkflowRecord
from recruitflow.workflow.workflow_store import WorkflowStore

logger = getLogger(__name__)

TEMPLATE_OWNER = "system"


# ============================================================================
# Dual Review Template
# ============================================================================


def create_dual_review_template() -> WorkflowRecord:
    """Hiring pipeline where every step needs two upstream sign-offs.

    Topology::
        START → notify, START → assignment
        interview → notify        (re-notify after each interview round)
        notify → assignment
        notify → interview, assignment → interview
        interview → END
    """
    nodes: List[WorkflowNode] = []
    edges: List[WorkflowEdge] = []

    def _add(nid, kind, label, x, y, payload, task_kind=None):
        nodes.append(WorkflowNode(
            id=nid, kind=kind, task_kind=task_kind,
            data={"label": label}, position={"x": x, "y": y},
            source_position=HandleSide.BOTTOM, target_position=HandleSide.TOP,
            payload=payload,
        ))

    def _edge(src: str, tgt: str):
        edges.append(WorkflowEdge(id=f"{src}-{tgt}", source=src, target=tgt))

    _add("start", NodeKind.START, "Start", 250, 50, StartPayload())
    _add("notify", NodeKind.TASK, "Notify Candidate", 100, 200,
         NotificationPayload(notification_options=[NotificationOption.EMAIL]),
         TaskKind.NOTIFICATION)
    _add("assignment", NodeKind.TASK, "Take-home Assignment", 400, 200,
         AssignmentPayload(description="Complete the take-home exercise."),
         TaskKind.ASSIGNMENT)
    _add("interview", NodeKind.TASK, "Panel Interview", 250, 350,
         InterviewPayload(description="Technical and team-fit interview.", duration=60),
         TaskKind.INTERVIEW)
    _add("end", NodeKind.END, "End", 250, 500, EndPayload())

    _edge("start", "notify")
    _edge("interview", "notify")
    _edge("start", "assignment")
    _edge("notify", "assignment")
    _edge("notify", "interview")
    _edge("assignment", "interview")
    _edge("interview", "end")

    return WorkflowRecord.from_graph(
        WorkflowGraph(nodes=nodes, edges=edges),
        id="template-dual-review",
        name="Dual Review Hiring Pipeline",
        description="Notification, assignment and interview steps, each gated by two predecessors.",
        created_by=TEMPLATE_OWNER,
        is_template=True,
        template_category="engineering",
        tags=["template", "interview"],
    )


TEMPLATE_FACTORIES: List[Callable[[], WorkflowRecord]] = [
    create_dual_review_template,
]


def install_templates(store: WorkflowStore) -> int:
    """Save every template missing from ``store``; returns how many were added."""
    added = 0
    for factory in TEMPLATE_FACTORIES:
        template = factory()
        if store.exists(template.id):
            continue
        store.create(template)
        added += 1
    if added:
        logger.info(f"Installed {added} workflow template(s)")
    return added
