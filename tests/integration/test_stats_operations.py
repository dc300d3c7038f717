"""
Integration tests for queue statistics, including the end-to-end scenarios.
"""

import fakeredis
import pytest

from rsmq_admin_tool.rsmq.core.client import RedisClient
from rsmq_admin_tool.rsmq.core.message_operations import list_messages, send_message
from rsmq_admin_tool.rsmq.core.queue_operations import create_queue
from rsmq_admin_tool.rsmq.core.stats_operations import get_queue_stats
from rsmq_admin_tool.rsmq.exceptions import QueueNotFoundError, TransportError


class TestGetQueueStats:
    """Tests for get_queue_stats."""

    def test_new_queue(self, client: RedisClient, clock):
        """Test stats of a freshly created queue."""
        create_queue(client, "jobs", vt=30, delay=0, maxsize=65536)

        stats = get_queue_stats(client, "jobs")

        assert stats.name == "jobs"
        assert (stats.vt, stats.delay, stats.maxsize) == (30, 0, 65536)
        assert (stats.totalsent, stats.totalrecv) == (0, 0)
        assert stats.created == stats.modified == clock.now_seconds()
        assert (stats.msgs, stats.hiddenmsgs, stats.visible_msgs) == (0, 0, 0)
        assert stats.timestamp == clock.now_millis()

    def test_unknown_queue(self, client: RedisClient):
        """Test that stats of a missing queue fail."""
        with pytest.raises(QueueNotFoundError):
            get_queue_stats(client, "ghost")

    def test_hidden_boundary_is_exclusive(self, client: RedisClient, clock):
        """Test that a message becomes visible exactly at its score."""
        create_queue(client, "jobs", vt=30, delay=5, maxsize=65536)
        send_message(client, "jobs", "later")

        clock.advance_ms(4999)
        assert get_queue_stats(client, "jobs").hiddenmsgs == 1

        clock.advance_ms(1)
        assert get_queue_stats(client, "jobs").hiddenmsgs == 0

    def test_transport_failure_propagates(
        self, client: RedisClient, redis_server: fakeredis.FakeServer, clock
    ):
        """Test that a lost connection surfaces as TransportError."""
        create_queue(client, "jobs", vt=30, delay=0, maxsize=65536)
        redis_server.connected = False

        with pytest.raises(TransportError):
            get_queue_stats(client, "jobs")


class TestScenarios:
    """End-to-end scenarios."""

    def test_send_then_inspect(self, client: RedisClient):
        """Test create, send, stats and list on one queue."""
        create_queue(client, "jobs", vt=30, delay=0, maxsize=65536)
        send_message(client, "jobs", "hello")

        stats = get_queue_stats(client, "jobs")
        assert stats.msgs == 1
        assert stats.hiddenmsgs == 0
        assert stats.totalsent == 1

        messages = list_messages(client, "jobs")
        assert len(messages) == 1
        assert messages[0].body == b"hello"
        assert messages[0].rc == 0

    def test_delayed_message_becomes_visible(self, client: RedisClient, clock):
        """Test that a delayed message is hidden until its delay has passed."""
        create_queue(client, "jobs", vt=30, delay=5, maxsize=65536)
        send_message(client, "jobs", "later")

        clock.advance_ms(900)
        stats = get_queue_stats(client, "jobs")
        assert stats.hiddenmsgs == 1
        assert stats.visible_msgs == 0

        clock.advance_ms(5000)
        stats = get_queue_stats(client, "jobs")
        assert stats.hiddenmsgs == 0
        assert stats.visible_msgs == 1
