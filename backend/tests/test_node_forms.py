"""Tests for per-variant node forms."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from recruitflow.workflow import (
    FORM_FIELDS,
    NodeForm,
    NodeFormError,
    NodeVariant,
    NotificationOption,
    WorkflowGraph,
)
from recruitflow.workflow.nodes import EmailConfig, MessageConfig


class TestFields:
    @pytest.mark.parametrize("variant", list(NodeVariant))
    def test_every_variant_has_a_label_field(self, variant):
        assert FORM_FIELDS[variant][0].name == "label"

    def test_assignment_fields(self):
        names = [f.name for f in FORM_FIELDS[NodeVariant.ASSIGNMENT]]
        assert names == ["label", "url", "deadline", "description"]


class TestEditing:
    def test_edits_are_local_until_submit(self, make_node):
        node = make_node(NodeVariant.ASSIGNMENT, "t1", label="Old")
        graph = WorkflowGraph([node])
        form = NodeForm(node)

        form.update(label="New", url="https://task.test", description="Build a CLI")

        assert graph.get_node("t1").label == "Old"
        assert node.payload.url == ""

        submitted = form.submit()
        assert graph.replace_node(submitted)
        assert graph.get_node("t1").label == "New"
        assert graph.get_node("t1").payload.url == "https://task.test"

    def test_submit_keeps_id_and_variant(self, make_node):
        node = make_node(NodeVariant.INTERVIEW, "i1")
        form = NodeForm(node)
        form.update(link="https://meet.test/room", time="2026-03-01T10:00:00Z")

        submitted = form.submit()

        assert submitted.id == "i1"
        assert submitted.variant == NodeVariant.INTERVIEW
        assert submitted.payload.time == datetime(2026, 3, 1, 10, tzinfo=timezone.utc)

    def test_value_reads_draft(self, make_node):
        form = NodeForm(make_node(NodeVariant.START, "s1", label="Start"))
        form.set_label("Begin")
        assert form.value("label") == "Begin"

    def test_field_from_other_variant_rejected(self, make_node):
        form = NodeForm(make_node(NodeVariant.NOTIFICATION, "n1"))
        with pytest.raises(NodeFormError) as exc:
            form.update(url="https://nope.test")
        assert exc.value.field_name == "url"

    def test_bad_value_rejected(self, make_node):
        form = NodeForm(make_node(NodeVariant.ASSIGNMENT, "a1"))
        with pytest.raises(ValidationError):
            form.update(deadline="not a date")


class TestChannels:
    def test_toggle_channels(self, make_node):
        form = NodeForm(make_node(NodeVariant.NOTIFICATION, "n1"))

        form.toggle_channel(NotificationOption.EMAIL, True)
        form.toggle_channel("sms", True)
        form.toggle_channel("email", True)
        form.toggle_channel(NotificationOption.EMAIL, False)

        assert form.submit().payload.notification_options == [NotificationOption.SMS]

    def test_channels_only_on_notifications(self, make_node):
        form = NodeForm(make_node(NodeVariant.INTERVIEW, "i1"))
        with pytest.raises(NodeFormError):
            form.toggle_channel("email", True)


class TestAttachments:
    def test_add_and_remove(self, make_node):
        form = NodeForm(make_node(NodeVariant.ASSIGNMENT, "a1"))
        form.add_attachment("brief.pdf")
        form.add_attachment("data.csv")

        assert form.remove_attachment("brief.pdf")
        assert not form.remove_attachment("missing.txt")
        assert form.submit().payload.attachments == ["data.csv"]

    def test_terminal_nodes_have_no_attachments(self, make_node):
        form = NodeForm(make_node(NodeVariant.END, "e1"))
        with pytest.raises(NodeFormError):
            form.add_attachment("x")


class TestChannelConfig:
    def test_ticking_a_channel_opens_its_config(self, make_node):
        form = NodeForm(make_node(NodeVariant.NOTIFICATION, "n1"))

        form.toggle_channel(NotificationOption.EMAIL, True)
        form.toggle_channel(NotificationOption.WHATSAPP, True)
        payload = form.submit().payload

        assert payload.email_config == EmailConfig()
        assert payload.message_config == MessageConfig()

    def test_email_config_edits_merge(self, make_node):
        form = NodeForm(make_node(NodeVariant.NOTIFICATION, "n1"))

        form.set_email_config(to="candidate@example.test", subject="Next steps")
        form.set_email_config(cc="hr@example.test")
        node = form.submit()

        assert node.payload.email_config == EmailConfig(
            to="candidate@example.test", cc="hr@example.test", subject="Next steps",
        )
        assert node.to_wire()["payload"]["emailConfig"]["to"] == "candidate@example.test"

    def test_message_config(self, make_node):
        form = NodeForm(make_node(NodeVariant.NOTIFICATION, "n1"))

        form.set_message_config(phone_number="+15550100", body="See you soon")

        wire = form.submit().to_wire()["payload"]["messageConfig"]
        assert wire == {"phoneNumber": "+15550100", "body": "See you soon"}

    def test_unknown_config_field_rejected(self, make_node):
        form = NodeForm(make_node(NodeVariant.NOTIFICATION, "n1"))
        with pytest.raises(NodeFormError) as exc:
            form.set_message_config(subject="nope")
        assert exc.value.field_name == "message_config"

    def test_config_only_on_notifications(self, make_node):
        form = NodeForm(make_node(NodeVariant.ASSIGNMENT, "a1"))
        with pytest.raises(NodeFormError):
            form.set_email_config(to="x@example.test")
