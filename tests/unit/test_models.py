"""
Unit tests for rsmq models.
"""

from rsmq_admin_tool.rsmq.models import Message, QueueStats


class TestQueueStats:
    """Tests for QueueStats."""

    def _stats(self, msgs: int, hiddenmsgs: int) -> QueueStats:
        return QueueStats(
            name="jobs",
            vt=30,
            delay=0,
            maxsize=65536,
            totalrecv=0,
            totalsent=3,
            created=1_700_000_000,
            modified=1_700_000_000,
            msgs=msgs,
            hiddenmsgs=hiddenmsgs,
            timestamp=1_700_000_000_000,
        )

    def test_visible_msgs(self):
        """Test that visible messages are derived from the counts."""
        assert self._stats(msgs=5, hiddenmsgs=2).visible_msgs == 3

    def test_to_dict_includes_derived_count(self):
        """Test JSON representation."""
        data = self._stats(msgs=1, hiddenmsgs=0).to_dict()

        assert data["name"] == "jobs"
        assert data["msgs"] == 1
        assert data["visiblemsgs"] == 1


class TestMessage:
    """Tests for Message."""

    def test_text_replaces_invalid_utf8(self):
        """Test that binary bodies still render."""
        message = Message(id="a" * 32, body=b"ok\xff")

        assert message.text == "ok�"

    def test_is_hidden(self):
        """Test the hidden predicate is strict."""
        message = Message(id="a" * 32, body=b"", visible_at=1000)

        assert message.is_hidden(999) is True
        assert message.is_hidden(1000) is False

    def test_to_dict(self):
        """Test JSON representation."""
        message = Message(id="a" * 32, body=b"hello", sent=5, visible_at=5)

        assert message.to_dict() == {
            "id": "a" * 32,
            "body": "hello",
            "rc": 0,
            "fr": 0,
            "sent": 5,
            "visible_at": 5,
        }
