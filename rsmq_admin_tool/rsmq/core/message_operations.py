"""
Message operations for rsmq.

Each queue keeps its messages in two structures that are always changed
together inside one MULTI/EXEC:

- sorted set `<ns><name>`: member = message id, score = visible-at (epoch ms)
- hash `<ns><name>:Q`: `<id>` = body, `<id>:rc`, `<id>:fr`, `<id>:sent`

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any

from redis.client import Pipeline

from ..constants import (
    FIELD_TOTAL_SENT,
    MSG_FR_SUFFIX,
    MSG_RC_SUFFIX,
    MSG_SENT_SUFFIX,
    TRANSACTION_ATTEMPTS,
)
from ..exceptions import MessageTooLargeError, QueueNotFoundError
from ..id_generator import decode_id_timestamp, generate_id
from ..models import Message
from ..utils import now_micros, to_bytes, to_int, validate_message_id
from .client import RedisClient
from .queue_operations import get_queue_attributes


def _message_fields(message_id: str) -> list[str]:
    """Hash fields holding one message: body, rc, fr, sent."""
    return [
        message_id,
        message_id + MSG_RC_SUFFIX,
        message_id + MSG_FR_SUFFIX,
        message_id + MSG_SENT_SUFFIX,
    ]


def send_message(client: RedisClient, queue_name: str, body: str | bytes) -> dict[str, Any]:
    """
    Send a message to a queue.

    The message becomes visible `delay` seconds after it is sent. The sorted
    set entry, the four hash fields and the totalsent increment commit in one
    MULTI/EXEC, guarded by a WATCH on the queue-name set so a queue deleted
    after its attributes were read is not written back. Senders do not touch
    that set, so they never abort each other.

    Args:
        client: Redis client
        queue_name: Queue name
        body: Message body; str is stored UTF-8 encoded

    Returns:
        Dictionary with queue name, message id, sent and visible_at (epoch ms)

    Raises:
        QueueNotFoundError: If the queue does not exist
        MessageTooLargeError: If the body exceeds the queue's maxsize
        TransactionConflictError: If queues kept being created or deleted meanwhile
        TransportError: For Redis errors
    """
    attributes = get_queue_attributes(client, queue_name)

    payload = to_bytes(body)
    if len(payload) > attributes.maxsize:
        raise MessageTooLargeError(
            f"Message of {len(payload)} bytes exceeds maxsize {attributes.maxsize} "
            f"of queue '{queue_name}'"
        )

    # One clock reading for both the id prefix and the stored sent field
    sent_micros = now_micros()
    message_id = generate_id(sent_micros)
    sent = sent_micros // 1000
    visible_at = sent + attributes.delay * 1000

    hash_key = client.queue_hash_key(queue_name)
    rc_field, fr_field, sent_field = _message_fields(message_id)[1:]

    def check(pipe: Pipeline) -> None:
        if not pipe.sismember(client.queues_key, queue_name):
            raise QueueNotFoundError(f"Queue '{queue_name}' was deleted")

    def build(pipe: Pipeline) -> None:
        pipe.zadd(client.queue_zset_key(queue_name), {message_id: visible_at})
        pipe.hset(
            hash_key,
            mapping={
                message_id: payload,
                rc_field: 0,
                fr_field: 0,
                sent_field: sent,
            },
        )
        pipe.hincrby(hash_key, FIELD_TOTAL_SENT, 1)

    client.execute_transaction(
        build, watch=[client.queues_key], precondition=check, attempts=TRANSACTION_ATTEMPTS
    )

    return {
        "queue": queue_name,
        "id": message_id,
        "sent": sent,
        "visible_at": visible_at,
    }


def delete_message(client: RedisClient, queue_name: str, message_id: str) -> dict[str, Any]:
    """
    Delete a message from a queue.

    This operation is idempotent: deleting an absent id succeeds, with
    `deleted` False.

    Args:
        client: Redis client
        queue_name: Queue name
        message_id: Message id

    Returns:
        Dictionary with queue name, message id and deleted status

    Raises:
        InvalidArgumentError: If the id is malformed
        TransportError: For Redis errors
    """
    validate_message_id(message_id)

    def build(pipe: Pipeline) -> None:
        pipe.zrem(client.queue_zset_key(queue_name), message_id)
        pipe.hdel(client.queue_hash_key(queue_name), *_message_fields(message_id))

    removed, _ = client.execute_transaction(build)

    return {
        "queue": queue_name,
        "id": message_id,
        "deleted": int(removed) > 0,
    }


def clear_queue(client: RedisClient, queue_name: str) -> dict[str, Any]:
    """
    Delete every message of a queue, keeping the queue and its counters.

    An empty queue costs a single ZRANGE and no transaction.

    Args:
        client: Redis client
        queue_name: Queue name

    Returns:
        Dictionary with queue name and number of messages removed

    Raises:
        TransportError: For Redis errors
    """
    message_ids = client.zrange(client.queue_zset_key(queue_name))
    if not message_ids:
        return {"queue": queue_name, "cleared": 0}

    fields = [field for message_id in message_ids for field in _message_fields(message_id)]

    def build(pipe: Pipeline) -> None:
        pipe.hdel(client.queue_hash_key(queue_name), *fields)
        pipe.delete(client.queue_zset_key(queue_name))

    client.execute_transaction(build)

    return {"queue": queue_name, "cleared": len(message_ids)}


def list_messages(client: RedisClient, queue_name: str) -> list[Message]:
    """
    List every message of a queue, ordered by visibility time.

    The sorted set and the payload fields are read in two round trips
    without a transaction; the result is a snapshot.

    Args:
        client: Redis client
        queue_name: Queue name

    Returns:
        Messages ordered by ascending visible_at (empty list for an empty queue)

    Raises:
        TransportError: For Redis errors
    """
    entries = client.zrange_with_scores(client.queue_zset_key(queue_name))
    if not entries:
        return []

    fields = [field for message_id, _ in entries for field in _message_fields(message_id)]
    values = client.hmget(client.queue_hash_key(queue_name), fields)

    messages = []
    for index, (message_id, score) in enumerate(entries):
        body, rc, fr, sent = values[index * 4 : index * 4 + 4]
        if sent is None:
            sent_ms = decode_id_timestamp(message_id) // 1000
        else:
            sent_ms = to_int(sent)

        messages.append(
            Message(
                id=message_id,
                body=to_bytes(body) if body is not None else b"",
                rc=to_int(rc),
                fr=to_int(fr),
                sent=sent_ms,
                visible_at=int(score),
            )
        )

    return messages
