"""
Queue registry operations for rsmq.

A queue is a name in the global `<ns>QUEUES` set plus an attribute hash at
`<ns><name>:Q`. The queue exists iff that hash has at least one field.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any

from redis.client import Pipeline

from ..constants import (
    FIELD_CREATED,
    FIELD_DELAY,
    FIELD_MAXSIZE,
    FIELD_MODIFIED,
    FIELD_TOTAL_RECV,
    FIELD_TOTAL_SENT,
    FIELD_VT,
    QUEUE_FIELDS,
    TRANSACTION_ATTEMPTS,
)
from ..exceptions import (
    InvalidArgumentError,
    QueueExistsError,
    QueueNotFoundError,
    TransactionConflictError,
)
from ..models import QueueAttributes
from ..utils import now_seconds, to_int, validate_attributes, validate_queue_name
from .client import RedisClient


def list_queues(client: RedisClient) -> set[str]:
    """
    List all registered queue names.

    Args:
        client: Redis client

    Returns:
        Set of queue names

    Raises:
        TransportError: For Redis errors
    """
    return client.smembers(client.queues_key)


def get_queue_attributes(client: RedisClient, queue_name: str) -> QueueAttributes:
    """
    Read the seven attribute fields of a queue.

    Missing or unparsable fields decode as 0.

    Args:
        client: Redis client
        queue_name: Queue name

    Returns:
        Typed queue attributes

    Raises:
        QueueNotFoundError: If the attribute hash has no fields
        TransportError: For Redis errors
    """
    values = client.hmget(client.queue_hash_key(queue_name), QUEUE_FIELDS)
    if all(v is None for v in values):
        raise QueueNotFoundError(f"Queue '{queue_name}' not found")

    raw = dict(zip(QUEUE_FIELDS, values))
    return QueueAttributes(
        vt=to_int(raw[FIELD_VT]),
        delay=to_int(raw[FIELD_DELAY]),
        maxsize=to_int(raw[FIELD_MAXSIZE]),
        created=to_int(raw[FIELD_CREATED]),
        modified=to_int(raw[FIELD_MODIFIED]),
        totalrecv=to_int(raw[FIELD_TOTAL_RECV]),
        totalsent=to_int(raw[FIELD_TOTAL_SENT]),
    )


def create_queue(
    client: RedisClient,
    queue_name: str,
    vt: int,
    delay: int,
    maxsize: int,
) -> dict[str, Any]:
    """
    Create a queue.

    The attribute hash and the queue-name set entry are written in one
    MULTI/EXEC, so a queue never appears in the set without attributes or
    vice versa. The hash key is watched from the existence check until EXEC;
    a concurrent create of the same name aborts this one.

    Args:
        client: Redis client
        queue_name: Queue name
        vt: Visibility timeout in seconds
        delay: Delivery delay in seconds for new messages
        maxsize: Maximum message size in bytes

    Returns:
        Dictionary with queue name, attributes and creation timestamp

    Raises:
        InvalidArgumentError: If the name or an attribute is invalid
        QueueExistsError: If the queue already exists
        TransportError: For Redis errors
    """
    validate_queue_name(queue_name)
    validate_attributes(vt, delay, maxsize)

    hash_key = client.queue_hash_key(queue_name)
    now = now_seconds()

    def check(pipe: Pipeline) -> None:
        if pipe.exists(hash_key):
            raise QueueExistsError(f"Queue '{queue_name}' already exists")

    def build(pipe: Pipeline) -> None:
        pipe.hset(
            hash_key,
            mapping={
                FIELD_VT: vt,
                FIELD_DELAY: delay,
                FIELD_MAXSIZE: maxsize,
                FIELD_CREATED: now,
                FIELD_MODIFIED: now,
                FIELD_TOTAL_RECV: 0,
                FIELD_TOTAL_SENT: 0,
            },
        )
        pipe.sadd(client.queues_key, queue_name)

    try:
        client.execute_transaction(build, watch=[hash_key], precondition=check)
    except TransactionConflictError:
        raise QueueExistsError(f"Queue '{queue_name}' was created concurrently")

    return {
        "queue": queue_name,
        "vt": vt,
        "delay": delay,
        "maxsize": maxsize,
        "created": now,
    }


def delete_queue(client: RedisClient, queue_name: str) -> dict[str, Any]:
    """
    Delete a queue with all its messages.

    Removes the attribute hash, the sorted set and the name from the
    queue-name set in one MULTI/EXEC. Deleting an unknown queue is not an
    error; the `deleted` flag reports whether anything was removed.

    Args:
        client: Redis client
        queue_name: Queue name

    Returns:
        Dictionary with queue name and deleted status

    Raises:
        TransportError: For Redis errors
    """

    def build(pipe: Pipeline) -> None:
        pipe.delete(client.queue_hash_key(queue_name))
        pipe.delete(client.queue_zset_key(queue_name))
        pipe.srem(client.queues_key, queue_name)

    replies = client.execute_transaction(build)

    return {
        "queue": queue_name,
        "deleted": any(int(r) > 0 for r in replies),
    }


def set_queue_attributes(
    client: RedisClient,
    queue_name: str,
    vt: int | None = None,
    delay: int | None = None,
    maxsize: int | None = None,
) -> dict[str, Any]:
    """
    Update a queue's vt, delay and maxsize.

    Attributes given as None keep their stored value. The stored values are
    read under WATCH of the attribute hash and the merged values are written
    in the same MULTI/EXEC, so a concurrent delete or update is never
    overwritten. An aborted EXEC re-reads and retries; a queue deleted in the
    meantime is reported as not found. Messages already in the queue keep
    their visibility score.

    Args:
        client: Redis client
        queue_name: Queue name
        vt: Visibility timeout in seconds (optional)
        delay: Delivery delay in seconds for new messages (optional)
        maxsize: Maximum message size in bytes (optional)

    Returns:
        Dictionary with queue name, new attributes and modification timestamp

    Raises:
        InvalidArgumentError: If no attribute is given or one is invalid
        QueueNotFoundError: If the queue does not exist
        TransactionConflictError: If concurrent writers kept aborting the update
        TransportError: For Redis errors
    """
    if vt is None and delay is None and maxsize is None:
        raise InvalidArgumentError("No attribute to update")
    validate_attributes(vt, delay, maxsize)

    hash_key = client.queue_hash_key(queue_name)
    now = now_seconds()
    updated: dict[str, int] = {}

    def check(pipe: Pipeline) -> None:
        current = pipe.hmget(hash_key, QUEUE_FIELDS)
        if all(v is None for v in current):
            raise QueueNotFoundError(f"Queue '{queue_name}' not found")
        stored = dict(zip(QUEUE_FIELDS, current))
        updated[FIELD_VT] = to_int(stored[FIELD_VT]) if vt is None else vt
        updated[FIELD_DELAY] = to_int(stored[FIELD_DELAY]) if delay is None else delay
        updated[FIELD_MAXSIZE] = to_int(stored[FIELD_MAXSIZE]) if maxsize is None else maxsize

    def build(pipe: Pipeline) -> None:
        pipe.hset(hash_key, mapping={**updated, FIELD_MODIFIED: now})

    client.execute_transaction(
        build, watch=[hash_key], precondition=check, attempts=TRANSACTION_ATTEMPTS
    )

    return {
        "queue": queue_name,
        "vt": updated[FIELD_VT],
        "delay": updated[FIELD_DELAY],
        "maxsize": updated[FIELD_MAXSIZE],
        "modified": now,
    }
