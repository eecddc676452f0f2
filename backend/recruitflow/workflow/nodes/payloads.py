"""
Node Payloads — the variant-specific field sets of workflow nodes.

Every node variant maps to exactly one payload model through
``PAYLOAD_MODELS``. Start and End carry no payload beyond the
display label kept in ``WorkflowNode.data``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WireModel(BaseModel):
    """camelCase on the wire, snake_case (or camelCase) accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NodeVariant(str, Enum):
    """The five concrete node variants a builder can place."""
    START = "start"
    END = "end"
    NOTIFICATION = "notification"
    ASSIGNMENT = "assignment"
    INTERVIEW = "interview"


class NotificationOption(str, Enum):
    """Delivery channels for a notification task."""
    EMAIL = "email"
    SMS = "sms"
    WHATSAPP = "whatsapp"


class StartPayload(WireModel):
    pass


class EndPayload(WireModel):
    pass


class EmailConfig(WireModel):
    """Message sent when the email channel is ticked."""

    to: str = ""
    cc: str = ""
    bcc: str = ""
    subject: str = ""
    body: str = ""


class MessageConfig(WireModel):
    """Text sent over SMS or WhatsApp."""

    phone_number: str = ""
    body: str = ""


class NotificationPayload(WireModel):
    notification_options: List[NotificationOption] = Field(default_factory=list)
    email_config: Optional[EmailConfig] = None
    message_config: Optional[MessageConfig] = None


class AssignmentPayload(WireModel):
    """Take-home assignment sent to the candidate."""

    url: str = ""
    deadline: datetime = Field(default_factory=utc_now)
    description: str = ""
    attachments: List[str] = Field(default_factory=list)


class InterviewPayload(WireModel):
    """Scheduled interview. ``duration`` is in minutes."""

    link: str = ""
    time: datetime = Field(default_factory=utc_now)
    description: str = ""
    attachments: List[str] = Field(default_factory=list)
    duration: Optional[int] = None
    participants: Optional[List[str]] = None


NodePayload = Union[
    StartPayload,
    EndPayload,
    NotificationPayload,
    AssignmentPayload,
    InterviewPayload,
]

PAYLOAD_MODELS: Dict[NodeVariant, Type[WireModel]] = {
    NodeVariant.START: StartPayload,
    NodeVariant.END: EndPayload,
    NodeVariant.NOTIFICATION: NotificationPayload,
    NodeVariant.ASSIGNMENT: AssignmentPayload,
    NodeVariant.INTERVIEW: InterviewPayload,
}
