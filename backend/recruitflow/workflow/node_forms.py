"""
Node Configuration Forms — per-variant editors for a single node.

A ``NodeForm`` works on a private copy of the node. Edits stay local
until ``submit()``, which returns a same-ID node carrying the changes;
the caller then hands that to ``WorkflowGraph.replace_node``. There is
no cross-node logic here and no content validation beyond the type
coercion pydantic applies to each payload field.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import Any, Dict, List, Optional, Union

from recruitflow.workflow.errors import NodeFormError
from recruitflow.workflow.nodes import (
    EmailConfig,
    MessageConfig,
    NodeVariant,
    NotificationOption,
    WorkflowNode,
    clone_node,
)

logger = getLogger(__name__)


@dataclass(frozen=True)
class FormField:
    """One input on a node form."""
    name: str
    label: str
    type: str = "string"
    options: Optional[List[str]] = None


_LABEL = FormField(name="label", label="Label")

FORM_FIELDS: Dict[NodeVariant, List[FormField]] = {
    NodeVariant.START: [_LABEL],
    NodeVariant.END: [_LABEL],
    NodeVariant.NOTIFICATION: [
        _LABEL,
        FormField(
            name="notification_options",
            label="Notification Methods",
            type="multiselect",
            options=[o.value for o in NotificationOption],
        ),
        FormField(name="email_config", label="Email", type="email"),
        FormField(name="message_config", label="Message", type="message"),
    ],
    NodeVariant.ASSIGNMENT: [
        _LABEL,
        FormField(name="url", label="URL", type="url"),
        FormField(name="deadline", label="Deadline", type="datetime"),
        FormField(name="description", label="Description", type="textarea"),
    ],
    NodeVariant.INTERVIEW: [
        _LABEL,
        FormField(name="link", label="Meeting Link", type="url"),
        FormField(name="time", label="Time", type="datetime"),
        FormField(name="description", label="Description", type="textarea"),
    ],
}

_ATTACHMENT_VARIANTS = (NodeVariant.ASSIGNMENT, NodeVariant.INTERVIEW)

# Ticking a channel opens the config block that channel sends with.
_CHANNEL_CONFIGS = {
    NotificationOption.EMAIL: ("email_config", EmailConfig),
    NotificationOption.SMS: ("message_config", MessageConfig),
    NotificationOption.WHATSAPP: ("message_config", MessageConfig),
}


class NodeForm:
    """Uncommitted editor for one node."""

    def __init__(self, node: WorkflowNode) -> None:
        self._draft = clone_node(node)

    @property
    def node_id(self) -> str:
        return self._draft.id

    @property
    def variant(self) -> NodeVariant:
        return self._draft.variant

    @property
    def fields(self) -> List[FormField]:
        return FORM_FIELDS[self.variant]

    def value(self, name: str) -> Any:
        if name == "label":
            return self._draft.data.label
        self._require_payload_field(name)
        return getattr(self._draft.payload, name)

    # ── Edits ──

    def set_label(self, label: str) -> None:
        self._draft.data = self._draft.data.model_copy(update={"label": label})

    def update(self, **changes: Any) -> None:
        """Set one or more fields by name (``label`` or payload fields)."""
        payload_changes = {}
        for name, value in changes.items():
            if name == "label":
                continue
            self._require_payload_field(name)
            payload_changes[name] = value

        if payload_changes:
            payload = self._draft.payload
            merged = {**payload.model_dump(), **payload_changes}
            self._draft.payload = type(payload).model_validate(merged)
        if "label" in changes:
            self.set_label(changes["label"])

    def toggle_channel(
        self,
        option: Union[NotificationOption, str],
        checked: bool,
    ) -> None:
        """Tick or untick a notification channel.

        Ticking a channel whose config block is still unset starts it
        out empty; unticking leaves the block in place.
        """
        self._require_notification("notification_options")
        option = NotificationOption(option)
        current = list(self._draft.payload.notification_options)
        changes: Dict[str, Any] = {}
        if checked and option not in current:
            current.append(option)
            config_name, config_model = _CHANNEL_CONFIGS[option]
            if getattr(self._draft.payload, config_name) is None:
                changes[config_name] = config_model()
        elif not checked:
            current = [o for o in current if o != option]
        self.update(notification_options=current, **changes)

    def set_email_config(self, **fields: Any) -> None:
        """Set ``to``, ``cc``, ``bcc``, ``subject`` or ``body`` on the email block."""
        self._set_channel_config("email_config", EmailConfig, fields)

    def set_message_config(self, **fields: Any) -> None:
        """Set ``phone_number`` or ``body`` on the SMS/WhatsApp block."""
        self._set_channel_config("message_config", MessageConfig, fields)

    def add_attachment(self, reference: str) -> None:
        self._require_attachments()
        self.update(attachments=[*self._draft.payload.attachments, reference])

    def remove_attachment(self, reference: str) -> bool:
        self._require_attachments()
        current = list(self._draft.payload.attachments)
        if reference not in current:
            return False
        current.remove(reference)
        self.update(attachments=current)
        return True

    # ── Commit ──

    def submit(self) -> WorkflowNode:
        """Return the edited node. The form's draft stays usable."""
        logger.debug(f"Node form submitted for {self.variant.value} node {self.node_id}")
        return clone_node(self._draft)

    # ── Internals ──

    def _require_payload_field(self, name: str) -> None:
        if name not in type(self._draft.payload).model_fields:
            raise NodeFormError(
                f"{self.variant.value} nodes have no field '{name}'",
                name,
            )

    def _require_notification(self, name: str) -> None:
        if self.variant != NodeVariant.NOTIFICATION:
            raise NodeFormError(
                f"{self.variant.value} nodes have no notification channels",
                name,
            )

    def _set_channel_config(self, name: str, model: type, fields: Dict[str, Any]) -> None:
        self._require_notification(name)
        unknown = [key for key in fields if key not in model.model_fields]
        if unknown:
            raise NodeFormError(f"{name} has no field '{unknown[0]}'", name)
        current = getattr(self._draft.payload, name)
        merged = {**(current.model_dump() if current is not None else {}), **fields}
        self.update(**{name: merged})

    def _require_attachments(self) -> None:
        if self.variant not in _ATTACHMENT_VARIANTS:
            raise NodeFormError(
                f"{self.variant.value} nodes have no attachments",
                "attachments",
            )
