"""Tests for the tagged-union node model."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from recruitflow.workflow.nodes import (
    AssignmentPayload,
    EndPayload,
    HandleSide,
    InterviewPayload,
    NodeKind,
    NodeVariant,
    NotificationOption,
    NotificationPayload,
    TaskKind,
    WorkflowNode,
    clone_node,
    deserialize_node,
    kinds_for,
    variant_of,
)


class TestVariantTags:
    @pytest.mark.parametrize("variant", list(NodeVariant))
    def test_kinds_round_trip(self, variant):
        kind, task_kind = kinds_for(variant)
        assert variant_of(kind, task_kind) == variant

    def test_task_requires_task_kind(self):
        with pytest.raises(ValueError):
            variant_of(NodeKind.TASK, None)

    def test_terminal_rejects_task_kind(self):
        with pytest.raises(ValueError):
            variant_of(NodeKind.START, TaskKind.INTERVIEW)


class TestConstruction:
    def test_payload_chosen_from_kind(self):
        node = WorkflowNode(id="n1", kind="task", task_kind="assignment", payload={})

        assert isinstance(node.payload, AssignmentPayload)
        assert node.variant == NodeVariant.ASSIGNMENT
        assert node.payload.url == ""
        assert node.payload.attachments == []
        assert not node.is_terminal

    def test_end_node_has_empty_payload(self):
        node = WorkflowNode(id="e", kind=NodeKind.END, data={"label": "End"}, payload={})

        assert isinstance(node.payload, EndPayload)
        assert node.is_terminal
        assert node.label == "End"

    def test_empty_label_is_legal(self):
        node = WorkflowNode(id="n", kind="start", payload={})
        assert node.label == ""

    def test_task_without_task_kind_is_rejected(self):
        with pytest.raises(ValidationError):
            WorkflowNode(id="n", kind="task", payload={})

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(ValidationError):
            WorkflowNode(id="n", kind="condition", payload={})

    def test_payload_of_wrong_variant_is_rejected(self):
        with pytest.raises(ValidationError):
            WorkflowNode(
                id="n",
                kind="task",
                task_kind="interview",
                payload=NotificationPayload(),
            )

    def test_bad_channel_is_rejected(self):
        with pytest.raises(ValidationError):
            WorkflowNode(
                id="n",
                kind="task",
                task_kind="notification",
                payload={"notification_options": ["pigeon"]},
            )


class TestSerialization:
    def test_wire_shape_is_camel_case(self):
        node = WorkflowNode(
            id="n1",
            kind="task",
            task_kind="notification",
            data={"label": "Notify"},
            position={"x": 10, "y": 20},
            source_position=HandleSide.BOTTOM,
            payload={"notification_options": ["email", "sms"]},
        )

        wire = node.to_wire()

        assert wire["taskKind"] == "notification"
        assert wire["sourcePosition"] == "bottom"
        assert wire["targetPosition"] is None
        assert wire["payload"] == {"notificationOptions": ["email", "sms"]}
        assert wire["data"] == {"label": "Notify"}

    def test_json_round_trip_keeps_variant(self):
        deadline = datetime(2026, 1, 5, 9, 30, tzinfo=timezone.utc)
        node = WorkflowNode(
            id="a1",
            kind="task",
            task_kind="assignment",
            payload=AssignmentPayload(url="https://x.test", deadline=deadline, attachments=["f1"]),
        )

        restored = deserialize_node(json.loads(json.dumps(node.to_wire())))

        assert restored == node
        assert isinstance(restored.payload, AssignmentPayload)
        assert restored.payload.deadline == deadline

    def test_flat_document_is_accepted(self):
        document = {
            "id": "i1",
            "kind": "task",
            "taskKind": "interview",
            "data": {"label": "Panel"},
            "position": {"x": 1, "y": 2},
            "link": "https://meet.test/abc",
            "description": "Round 1",
            "participants": ["a@x.test"],
        }

        node = deserialize_node(document)

        assert isinstance(node.payload, InterviewPayload)
        assert node.payload.link == "https://meet.test/abc"
        assert node.payload.participants == ["a@x.test"]
        assert node.payload.attachments == []
        assert node.payload.duration is None

    def test_channels_deserialize_to_enum(self):
        node = deserialize_node({
            "id": "n",
            "kind": "task",
            "taskKind": "notification",
            "payload": {"notificationOptions": ["whatsapp"]},
        })
        assert node.payload.notification_options == [NotificationOption.WHATSAPP]


class TestClone:
    def test_clone_is_deep_and_keeps_id(self):
        node = WorkflowNode(
            id="a1", kind="task", task_kind="assignment",
            payload={"attachments": ["one"]},
        )

        copy = clone_node(node)
        copy.payload.attachments.append("two")

        assert copy.id == node.id
        assert node.payload.attachments == ["one"]
