"""
Pytest configuration and shared fixtures.

Redis is simulated in-process with fakeredis; every test gets a fresh server.
"""

from dataclasses import dataclass

import fakeredis
import pytest

from rsmq_admin_tool.rsmq.commands import info_commands, message_commands, queue_commands
from rsmq_admin_tool.rsmq.core import message_operations, queue_operations, stats_operations
from rsmq_admin_tool.rsmq.core.client import RedisClient

# 2023-11-14 22:13:20 UTC
BASE_TIME_MICROS = 1_700_000_000_000_000


@dataclass
class FrozenClock:
    """Controllable clock for the operations modules."""

    micros: int = BASE_TIME_MICROS

    def advance_ms(self, ms: int) -> None:
        self.micros += ms * 1000

    def now_micros(self) -> int:
        return self.micros

    def now_millis(self) -> int:
        return self.micros // 1000

    def now_seconds(self) -> int:
        return self.micros // 1_000_000


@pytest.fixture
def redis_server() -> fakeredis.FakeServer:
    """Create an isolated fake Redis server."""
    return fakeredis.FakeServer()


@pytest.fixture
def fake_redis(redis_server: fakeredis.FakeServer) -> fakeredis.FakeRedis:
    """Create a raw redis connection to the fake server."""
    return fakeredis.FakeRedis(server=redis_server)


@pytest.fixture
def client(fake_redis: fakeredis.FakeRedis) -> RedisClient:
    """Create an rsmq client in the default namespace."""
    return RedisClient(redis_client=fake_redis)


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FrozenClock:
    """Freeze the time seen by queue, message and stats operations."""
    frozen = FrozenClock()
    monkeypatch.setattr(queue_operations, "now_seconds", frozen.now_seconds)
    monkeypatch.setattr(message_operations, "now_micros", frozen.now_micros)
    monkeypatch.setattr(stats_operations, "now_millis", frozen.now_millis)
    return frozen


@pytest.fixture
def cli_client(monkeypatch: pytest.MonkeyPatch, client: RedisClient) -> RedisClient:
    """Make every command talk to the fake server instead of building a client."""
    for module in (queue_commands, message_commands, info_commands):
        monkeypatch.setattr(module, "build_client", lambda *args, **kwargs: client)
    return client
