"""
Workflow Engine — recruitment workflow graph builder.

Provides the node model, the editor-side graph and session, the
structural validator, and persistence for workflow records.

Architecture:
    nodes/             — tagged-union node model and variant payloads
    node_factory       — creates fresh nodes with generated IDs
    workflow_graph     — node map + edge list for one builder session
    workflow_validator — structural well-formedness check
    node_forms         — per-variant node editors
    builder_session    — editor handlers, undo/redo, save
    workflow_model     — serialized WorkflowRecord, export document
    workflow_store     — JSON-file persistence for records
    templates          — pre-built valid workflows
"""

from recruitflow.workflow.builder_session import BuilderSession
from recruitflow.workflow.errors import (
    NodeFormError,
    WorkflowConflictError,
    WorkflowError,
    WorkflowImportError,
    WorkflowNotFoundError,
    WorkflowTemplateError,
    WorkflowValidationError,
)
from recruitflow.workflow.node_factory import create_node, default_label
from recruitflow.workflow.node_forms import FORM_FIELDS, FormField, NodeForm
from recruitflow.workflow.nodes import (
    NodeKind,
    NodeVariant,
    NotificationOption,
    TaskKind,
    WorkflowNode,
    clone_node,
    deserialize_node,
)
from recruitflow.workflow.templates import create_dual_review_template, install_templates
from recruitflow.workflow.workflow_graph import WorkflowEdge, WorkflowGraph
from recruitflow.workflow.workflow_model import (
    WorkflowDocument,
    WorkflowRecord,
    WorkflowStatus,
    import_workflow,
)
from recruitflow.workflow.workflow_store import WorkflowStore, get_workflow_store
from recruitflow.workflow.workflow_validator import (
    ValidationCategory,
    ValidationResult,
    compute_degrees,
    validate_graph,
    validate_workflow,
)

__all__ = [
    "BuilderSession",
    "NodeFormError",
    "WorkflowConflictError",
    "WorkflowError",
    "WorkflowImportError",
    "WorkflowNotFoundError",
    "WorkflowTemplateError",
    "WorkflowValidationError",
    "create_node",
    "default_label",
    "FORM_FIELDS",
    "FormField",
    "NodeForm",
    "NodeKind",
    "NodeVariant",
    "NotificationOption",
    "TaskKind",
    "WorkflowNode",
    "clone_node",
    "deserialize_node",
    "create_dual_review_template",
    "install_templates",
    "WorkflowEdge",
    "WorkflowGraph",
    "WorkflowDocument",
    "WorkflowRecord",
    "WorkflowStatus",
    "import_workflow",
    "WorkflowStore",
    "get_workflow_store",
    "ValidationCategory",
    "ValidationResult",
    "compute_degrees",
    "validate_graph",
    "validate_workflow",
]
