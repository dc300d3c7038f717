"""
Queue statistics for rsmq.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from ..models import QueueStats
from ..utils import now_millis
from .client import RedisClient
from .queue_operations import get_queue_attributes


def get_queue_stats(client: RedisClient, queue_name: str) -> QueueStats:
    """
    Get attributes and message counts of a queue.

    Reads the attribute hash, the sorted set cardinality and the number of
    hidden messages (score strictly after now). The reads are independent and
    not transactional; all of them use the same `now` which is reported as
    `timestamp`.

    Args:
        client: Redis client
        queue_name: Queue name

    Returns:
        Queue statistics snapshot

    Raises:
        QueueNotFoundError: If the queue does not exist
        TransportError: For Redis errors
    """
    now = now_millis()
    attributes = get_queue_attributes(client, queue_name)

    zset_key = client.queue_zset_key(queue_name)
    msgs = client.zcard(zset_key)
    hiddenmsgs = client.zcount(zset_key, f"({now}", "+inf")

    return QueueStats(
        name=queue_name,
        vt=attributes.vt,
        delay=attributes.delay,
        maxsize=attributes.maxsize,
        totalrecv=attributes.totalrecv,
        totalsent=attributes.totalsent,
        created=attributes.created,
        modified=attributes.modified,
        msgs=msgs,
        hiddenmsgs=hiddenmsgs,
        timestamp=now,
    )
