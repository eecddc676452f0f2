"""Tests for the node factory."""

from datetime import datetime, timedelta, timezone

import pytest

from recruitflow.workflow import NodeKind, NodeVariant, TaskKind, create_node, default_label
from recruitflow.workflow.nodes import (
    AssignmentPayload,
    HandleSide,
    InterviewPayload,
    NodeData,
    NotificationPayload,
    StartPayload,
)


class TestCreateNode:
    @pytest.mark.parametrize(
        "variant, kind, task_kind, payload_type",
        [
            (NodeVariant.START, NodeKind.START, None, StartPayload),
            (NodeVariant.END, NodeKind.END, None, None),
            (NodeVariant.NOTIFICATION, NodeKind.TASK, TaskKind.NOTIFICATION, NotificationPayload),
            (NodeVariant.ASSIGNMENT, NodeKind.TASK, TaskKind.ASSIGNMENT, AssignmentPayload),
            (NodeVariant.INTERVIEW, NodeKind.TASK, TaskKind.INTERVIEW, InterviewPayload),
        ],
    )
    def test_known_variants(self, variant, kind, task_kind, payload_type):
        node = create_node(variant, {"label": "X"}, {"x": 5, "y": 7})

        assert node is not None
        assert node.kind == kind
        assert node.task_kind == task_kind
        assert node.variant == variant
        assert node.label == "X"
        assert (node.position.x, node.position.y) == (5, 7)
        if payload_type is not None:
            assert isinstance(node.payload, payload_type)

    def test_string_tag_is_accepted(self):
        node = create_node("interview", "Panel", {"x": 0, "y": 0})
        assert node.variant == NodeVariant.INTERVIEW

    @pytest.mark.parametrize("tag", ["condition", "wait", "", None, 42])
    def test_unknown_variant_returns_none(self, tag):
        assert create_node(tag, "X", {"x": 0, "y": 0}) is None

    def test_defaults(self):
        before = datetime.now(timezone.utc)
        assignment = create_node(NodeVariant.ASSIGNMENT, "A", {"x": 0, "y": 0})
        interview = create_node(NodeVariant.INTERVIEW, "I", {"x": 0, "y": 0})
        notification = create_node(NodeVariant.NOTIFICATION, "N", {"x": 0, "y": 0})

        assert assignment.payload.url == ""
        assert assignment.payload.description == ""
        assert assignment.payload.attachments == []
        assert before <= assignment.payload.deadline <= before + timedelta(minutes=1)
        assert interview.payload.link == ""
        assert before <= interview.payload.time <= before + timedelta(minutes=1)
        assert notification.payload.notification_options == []

    def test_label_data_forms(self):
        data = NodeData(label="from model")
        node = create_node(NodeVariant.START, data, {"x": 0, "y": 0})

        assert node.label == "from model"
        assert node.data is not data

    def test_layout_hints(self):
        node = create_node(
            NodeVariant.NOTIFICATION, "N", {"x": 0, "y": 0},
            source_position=HandleSide.BOTTOM, target_position=HandleSide.TOP,
        )
        assert node.source_position == HandleSide.BOTTOM
        assert node.target_position == HandleSide.TOP

    def test_ids_are_unique(self):
        ids = {create_node(NodeVariant.START, "S", {"x": 0, "y": 0}).id for _ in range(10_000)}
        assert len(ids) == 10_000

    def test_default_label(self):
        assert default_label(NodeVariant.NOTIFICATION) == "Notification Node"
        assert default_label(NodeVariant.START) == "Start Node"
