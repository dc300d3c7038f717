"""
Status operations for rsmq - connectivity probe and server information.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import time
from typing import Any

from .client import RedisClient
from .queue_operations import list_queues


def check_connection(client: RedisClient) -> dict[str, Any]:
    """
    Probe the configured endpoint with PING.

    Args:
        client: Redis client

    Returns:
        Dictionary with endpoint, reachable flag and round-trip latency

    Raises:
        TransportError: If the server cannot be reached
    """
    started = time.perf_counter()
    client.ping()
    latency_ms = (time.perf_counter() - started) * 1000

    return {
        "endpoint": client.endpoint,
        "reachable": True,
        "latency_ms": round(latency_ms, 3),
    }


def get_server_status(client: RedisClient) -> dict[str, Any]:
    """
    Get Redis server information and the number of queues in the namespace.

    Returns server version and memory figures from INFO, plus the namespace
    and its queue count.

    Raises:
        TransportError: For Redis errors
    """
    server = client.info("server")
    memory = client.info("memory")

    return {
        "endpoint": client.endpoint,
        "redis_version": server.get("redis_version", "unknown"),
        "uptime_seconds": server.get("uptime_in_seconds", 0),
        "used_memory_human": memory.get("used_memory_human", "unknown"),
        "namespace": client.namespace,
        "queue_count": len(list_queues(client)),
    }
