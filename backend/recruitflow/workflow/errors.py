"""
Workflow Errors — exceptions raised around (never by) the validator.

Structural invalidity is reported by ``validate_workflow`` as a normal
``ValidationResult``. These exceptions cover the places where an
invalid graph or a missing record must stop the caller: saving,
activating, updating and editing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from recruitflow.workflow.workflow_validator import ValidationResult


class WorkflowError(Exception):
    """Base class for all recruitflow workflow errors."""


class WorkflowValidationError(WorkflowError):
    """A graph failed validation where a valid one was required."""

    def __init__(self, result: "ValidationResult") -> None:
        super().__init__(result.message)
        self.result = result


class WorkflowNotFoundError(WorkflowError):
    """No stored workflow exists under the requested ID."""

    def __init__(self, workflow_id: str) -> None:
        super().__init__(f"Workflow not found: {workflow_id}")
        self.workflow_id = workflow_id


class WorkflowConflictError(WorkflowError):
    """A workflow with the same ID is already stored."""

    def __init__(self, workflow_id: str) -> None:
        super().__init__(f"Workflow already exists: {workflow_id}")
        self.workflow_id = workflow_id


class NodeFormError(WorkflowError):
    """A node form was asked to edit a field its variant does not have."""

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.field_name = field_name


class WorkflowTemplateError(WorkflowError):
    """Templates are read-only; a session tried to overwrite one."""

    def __init__(self, workflow_id: str) -> None:
        super().__init__(f"Workflow templates cannot be overwritten: {workflow_id}")
        self.workflow_id = workflow_id


class WorkflowImportError(WorkflowError):
    """An imported document is not a workflow export."""
