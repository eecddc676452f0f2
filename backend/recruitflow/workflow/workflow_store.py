"""
Workflow Store — JSON-file persistence for workflow records.

Stores each ``WorkflowRecord`` as an individual JSON file under a
configurable directory. Calls are synchronous; there is no locking
and no retrying. File system errors propagate to the caller.

Workflow IDs double as file names. An ID containing anything other
than letters, digits, "-" or "_" is rejected with ``ValueError``
rather than mangled, so two IDs never share a file.
"""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from recruitflow.config import get_workflow_config
from recruitflow.workflow.errors import (
    WorkflowConflictError,
    WorkflowNotFoundError,
    WorkflowValidationError,
)
from recruitflow.workflow.workflow_model import (
    WorkflowRecord,
    WorkflowStatus,
    now_iso,
)
from recruitflow.workflow.workflow_validator import validate_graph

logger = getLogger(__name__)


class WorkflowStore:
    """Persist and load WorkflowRecord objects as JSON files."""

    def __init__(self, storage_dir: Optional[Union[str, Path]] = None) -> None:
        self._dir = Path(storage_dir or get_workflow_config().storage_dir)
        self._dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"WorkflowStore initialized at {self._dir}")

    @property
    def storage_dir(self) -> Path:
        return self._dir

    # ── CRUD ──

    def create(self, record: WorkflowRecord) -> WorkflowRecord:
        """Store a new record. Fills ``created_at`` if empty."""
        if self.exists(record.id):
            raise WorkflowConflictError(record.id)
        if not record.created_at:
            record.created_at = now_iso()
        record.touch()
        self._write(record)
        logger.info(f"Workflow created: {record.name} ({record.id})")
        return record

    def update(self, record: WorkflowRecord) -> WorkflowRecord:
        """Overwrite a stored record, keeping its creation metadata."""
        stored = self.get(record.id)
        if stored is None:
            raise WorkflowNotFoundError(record.id)
        record.created_at = stored.created_at
        record.created_by = stored.created_by
        record.touch()
        self._write(record)
        logger.info(f"Workflow updated: {record.name} ({record.id})")
        return record

    def save(self, record: WorkflowRecord) -> WorkflowRecord:
        """Create or update, whichever applies."""
        if self.exists(record.id):
            return self.update(record)
        return self.create(record)

    def get(self, workflow_id: str) -> Optional[WorkflowRecord]:
        """Load a single record by ID, or ``None`` if it is not stored."""
        path = self._path_for(workflow_id)
        if not path.exists():
            return None
        return WorkflowRecord.model_validate_json(path.read_text(encoding="utf-8"))

    def delete(self, workflow_id: str) -> bool:
        path = self._path_for(workflow_id)
        if path.exists():
            path.unlink()
            logger.info(f"Workflow deleted: {workflow_id}")
            return True
        return False

    def exists(self, workflow_id: str) -> bool:
        return self._path_for(workflow_id).exists()

    # ── Listing ──

    def list_all(
        self,
        last_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[WorkflowRecord]:
        """Most recently updated first.

        ``last_id`` is a cursor: only records after it are returned.
        An unknown cursor yields an empty page.
        """
        records = sorted(
            self._load_all(),
            key=lambda r: r.updated_at,
            reverse=True,
        )
        if last_id is not None:
            ids = [r.id for r in records]
            if last_id not in ids:
                return []
            records = records[ids.index(last_id) + 1:]
        if limit is not None:
            records = records[:limit]
        return records

    def list_page(
        self,
        last_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[WorkflowRecord]:
        """One page of ``list_all``; page size defaults to ``WorkflowConfig.list_limit``."""
        if limit is None:
            limit = get_workflow_config().list_limit
        return self.list_all(last_id=last_id, limit=limit)

    def list_by_owner(self, created_by: str) -> List[WorkflowRecord]:
        return [r for r in self.list_all() if r.created_by == created_by]

    def list_templates(self) -> List[WorkflowRecord]:
        return [r for r in self.list_all() if r.is_template]

    # ── Status ──

    def activate(self, workflow_id: str) -> WorkflowRecord:
        """Mark a stored workflow active if its graph validates."""
        record = self._require(workflow_id)
        result = validate_graph(record.to_graph())
        if not result.ok:
            logger.warning(
                f"Refusing to activate workflow {workflow_id}: {result.message}"
            )
            raise WorkflowValidationError(result)
        record.status = WorkflowStatus.ACTIVE
        return self.update(record)

    def archive(self, workflow_id: str) -> WorkflowRecord:
        record = self._require(workflow_id)
        record.status = WorkflowStatus.ARCHIVED
        return self.update(record)

    # ── Internals ──

    def _require(self, workflow_id: str) -> WorkflowRecord:
        record = self.get(workflow_id)
        if record is None:
            raise WorkflowNotFoundError(workflow_id)
        return record

    def _load_all(self) -> List[WorkflowRecord]:
        records: List[WorkflowRecord] = []
        for path in sorted(self._dir.glob("*.json")):
            try:
                records.append(
                    WorkflowRecord.model_validate_json(path.read_text(encoding="utf-8"))
                )
            except ValidationError as e:
                logger.warning(f"Skipping malformed workflow file {path.name}: {e}")
        return records

    def _write(self, record: WorkflowRecord) -> None:
        self._path_for(record.id).write_text(
            record.model_dump_json(by_alias=True, indent=2),
            encoding="utf-8",
        )

    def _path_for(self, workflow_id: str) -> Path:
        # IDs map one-to-one onto file names, so only filesystem-safe IDs are stored.
        safe_id = "".join(c for c in workflow_id if c.isalnum() or c in "-_")
        if not safe_id or safe_id != workflow_id:
            raise ValueError(
                f"Invalid workflow id {workflow_id!r}: "
                "use letters, digits, '-' or '_'"
            )
        return self._dir / f"{safe_id}.json"


# ── Singleton ──

_store_instance: Optional[WorkflowStore] = None


def get_workflow_store() -> WorkflowStore:
    """Return the global WorkflowStore singleton."""
    global _store_instance
    if _store_instance is None:
        _store_instance = WorkflowStore()
    return _store_instance
