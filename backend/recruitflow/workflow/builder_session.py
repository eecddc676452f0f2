"""
Builder Session — one user's in-progress workflow graph.

Wraps a ``WorkflowGraph`` with the handlers the editor calls: dropping a
node from the palette, connecting two nodes, submitting a node form,
deleting, clearing, undo/redo, validating and saving, plus loading a
template and exporting or importing the graph as a single JSON file.

The palette's "currently dragged variant" is not kept here; the editor
passes it to ``on_drop`` explicitly.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

from recruitflow.config import get_workflow_config
from recruitflow.workflow.errors import WorkflowTemplateError, WorkflowValidationError
from recruitflow.workflow.node_factory import create_node, default_label, parse_variant
from recruitflow.workflow.nodes import (
    HandleSide,
    NodeVariant,
    WorkflowNode,
)
from recruitflow.workflow.workflow_graph import WorkflowEdge, WorkflowGraph
from recruitflow.workflow.workflow_model import (
    WorkflowDocument,
    WorkflowRecord,
    import_workflow,
)
from recruitflow.workflow.workflow_validator import ValidationResult, validate_graph

if TYPE_CHECKING:
    from recruitflow.workflow.node_factory import PositionLike
    from recruitflow.workflow.workflow_store import WorkflowStore

logger = getLogger(__name__)


class BuilderSession:
    """Owns exactly one graph; every mutation is recorded for undo."""

    def __init__(
        self,
        graph: Optional[WorkflowGraph] = None,
        history_limit: Optional[int] = None,
        workflow_id: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        self.graph = graph if graph is not None else WorkflowGraph.seeded()
        self.workflow_id = workflow_id
        self.name = name
        self._history_limit = max(
            1,
            history_limit if history_limit is not None
            else get_workflow_config().history_limit,
        )
        self._history: List[WorkflowGraph] = [self.graph.snapshot()]
        self._history_index = 0
        self.is_modified = False

    @classmethod
    def from_record(
        cls,
        record: WorkflowRecord,
        history_limit: Optional[int] = None,
    ) -> "BuilderSession":
        """Resume editing a stored workflow.

        A template opens as an unsaved copy: the session is not bound to
        the template's ID, so saving creates a new workflow.
        """
        workflow_id = None if record.is_template else record.id
        return cls(
            graph=record.to_graph(),
            history_limit=history_limit,
            workflow_id=workflow_id,
            name=record.name,
        )

    # ── Templates, export & import ──

    def load_template(self, template: WorkflowRecord) -> None:
        """Replace the graph with a copy of a template's nodes and edges.

        Undoable. The session keeps its own ``workflow_id``.
        """
        self.graph = template.to_graph()
        self.name = template.name
        self._record()
        logger.info(f"Template loaded into session: {template.name} ({template.id})")

    def export_json(self, name: Optional[str] = None, description: str = "") -> str:
        """The current graph as one downloadable JSON document."""
        document = WorkflowDocument.from_graph(
            self.graph,
            id=self.workflow_id,
            name=name or self.name or "Untitled Workflow",
            description=description,
        )
        return document.to_json()

    def import_json(self, text: str) -> WorkflowDocument:
        """Replace the graph with an exported document's nodes and edges.

        Raises ``WorkflowImportError`` without touching the graph when
        the document is not a workflow export. Undoable.
        """
        document = import_workflow(text)
        self.graph = document.to_graph()
        if document.name:
            self.name = document.name
        self._record()
        return document

    # ── Editor handlers ──

    def on_drop(
        self,
        dragged: Union[NodeVariant, str, None],
        position: "PositionLike",
    ) -> Optional[WorkflowNode]:
        """Place a node of the dragged variant; no-op if nothing valid is dragged."""
        if dragged is None:
            return None
        variant = parse_variant(dragged)
        node = create_node(
            dragged,
            default_label(variant) if variant else "",
            position,
            source_position=HandleSide.BOTTOM,
            target_position=HandleSide.TOP,
        )
        if node is None:
            return None
        self.graph.add_node(node)
        self._record()
        return node

    def on_connect(self, source: str, target: str) -> WorkflowEdge:
        edge = self.graph.add_edge(source, target)
        self._record()
        return edge

    def on_node_submit(self, node: WorkflowNode) -> bool:
        """Commit a submitted node form back into the graph."""
        replaced = self.graph.replace_node(node)
        if replaced:
            self._record()
        else:
            logger.warning(f"Submitted node {node.id} is not in the graph")
        return replaced

    def delete_node(self, node_id: str) -> Optional[WorkflowNode]:
        """Remove a node together with its incident edges."""
        node = self.graph.remove_node(node_id)
        if node is None:
            return None
        self.graph.prune_edges(node_id)
        self._record()
        return node

    def delete_edge(self, edge_id: str) -> bool:
        removed = self.graph.remove_edge(edge_id)
        if removed:
            self._record()
        return removed

    def delete_selected(
        self,
        node_ids: Sequence[str] = (),
        edge_ids: Sequence[str] = (),
    ) -> None:
        for edge_id in edge_ids:
            self.graph.remove_edge(edge_id)
        for node_id in node_ids:
            if self.graph.remove_node(node_id) is not None:
                self.graph.prune_edges(node_id)
        self._record()

    def clear(self) -> None:
        """Reset to the default Start/End graph."""
        self.graph = WorkflowGraph.seeded()
        self._record()

    # ── History ──

    @property
    def can_undo(self) -> bool:
        return self._history_index > 0

    @property
    def can_redo(self) -> bool:
        return self._history_index < len(self._history) - 1

    def undo(self) -> bool:
        if not self.can_undo:
            return False
        self._history_index -= 1
        self.graph = self._history[self._history_index].snapshot()
        return True

    def redo(self) -> bool:
        if not self.can_redo:
            return False
        self._history_index += 1
        self.graph = self._history[self._history_index].snapshot()
        return True

    def _record(self) -> None:
        # Drop any redo states, then append.
        del self._history[self._history_index + 1:]
        self._history.append(self.graph.snapshot())
        if len(self._history) > self._history_limit:
            del self._history[0]
        self._history_index = len(self._history) - 1
        self.is_modified = True

    # ── Validation & persistence ──

    def validate(self) -> ValidationResult:
        return validate_graph(self.graph)

    def save(
        self,
        store: "WorkflowStore",
        name: Optional[str] = None,
        created_by: str = "",
        **fields,
    ) -> WorkflowRecord:
        """Validate, serialize and hand the graph to the store.

        A session bound to a stored workflow updates that record in
        place; otherwise a new record is created. Raises
        ``WorkflowValidationError`` without touching the store if the
        graph is invalid, and ``WorkflowTemplateError`` if the bound
        record is a template. Store errors propagate unchanged.
        """
        result = self.validate()
        if not result.ok:
            raise WorkflowValidationError(result)

        name = name or self.name or "Untitled Workflow"
        stored = store.get(self.workflow_id) if self.workflow_id is not None else None
        if stored is not None:
            if stored.is_template:
                raise WorkflowTemplateError(stored.id)
            record = stored.model_copy(update={**fields, "name": name})
            record.set_graph(self.graph)
            record = store.update(record)
        else:
            if self.workflow_id is not None:
                fields["id"] = self.workflow_id
            record = WorkflowRecord.from_graph(
                self.graph, name=name, created_by=created_by, **fields
            )
            record = store.create(record)
        self.workflow_id = record.id
        self.name = record.name
        self.is_modified = False
        logger.info(f"Builder session saved workflow {record.id}")
        return record
