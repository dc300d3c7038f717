"""
Message commands for rsmq.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import BinaryIO

import click

from ..core.message_operations import clear_queue, delete_message, list_messages, send_message
from ..exceptions import (
    InvalidArgumentError,
    MessageTooLargeError,
    QueueNotFoundError,
    RSMQError,
    TransactionConflictError,
)
from ..logging_config import get_logger, setup_logging
from ..utils import format_timestamp, now_millis, output_json, output_text
from .options import (
    EXIT_INVALID_ARGUMENT,
    EXIT_REJECTED,
    EXIT_TRANSPORT,
    TRANSPORT_SOLUTION,
    build_client,
    common_options,
    fail,
)

logger = get_logger(__name__)


@click.command("send")
@click.argument("queue_name")
@click.argument("body", required=False)
@click.option(
    "--file",
    "body_file",
    type=click.File("rb"),
    help="Read the message body from a file ('-' for stdin)",
)
@common_options
@click.pass_context
def send_command(
    ctx: click.Context,
    queue_name: str,
    body: str | None,
    body_file: BinaryIO | None,
    host: str,
    port: int,
    db: int,
    password: str | None,
    url: str | None,
    namespace: str,
    timeout: float,
    text: bool,
    verbose: int,
) -> None:
    """Send a message to a queue.

    The message stays hidden for the queue's delay and is rejected if it
    exceeds the queue's maxsize.

    Examples:

    \b
        # Send a text message
        rsmq-admin-tool rsmq send jobs "hello"

    \b
        # Send a file's contents
        rsmq-admin-tool rsmq send jobs --file payload.json

    \b
        # Keep the id for a later delete
        ID=$(rsmq-admin-tool rsmq send jobs "hello" | jq -r '.id')
        rsmq-admin-tool rsmq delete-message jobs "$ID"

    \b
    Output Format:
        Returns JSON:
        {"queue": "jobs", "id": "...", "sent": 1234567890123, "visible_at": 1234567890123}
    """
    setup_logging(verbose)

    if (body is None) == (body_file is None):
        fail(
            ctx,
            click.UsageError("Give the message body either as BODY or with --file"),
            "rsmq-admin-tool rsmq send QUEUE_NAME BODY",
            EXIT_INVALID_ARGUMENT,
            text,
        )

    payload = body if body is not None else body_file.read()  # type: ignore[union-attr]

    try:
        logger.info(f"Sending message to queue '{queue_name}'")
        logger.debug(f"Body length: {len(payload)}")

        client = build_client(host, port, db, password, url, namespace, timeout)
        ctx.call_on_close(client.close)
        result = send_message(client, queue_name, payload)

        if text:
            output_text(f"✅ Message sent to queue '{queue_name}'")
            output_text(f"   ID: {result['id']}")
            output_text(f"   Visible at: {format_timestamp(result['visible_at'], millis=True)}")
        else:
            output_json(result)

    except QueueNotFoundError as e:
        fail(ctx, e, "Create the queue first with 'create-queue'", EXIT_REJECTED, text)

    except MessageTooLargeError as e:
        fail(
            ctx,
            e,
            "Shorten the message or raise maxsize with 'set-attributes'",
            EXIT_REJECTED,
            text,
        )

    except TransactionConflictError as e:
        fail(ctx, e, "Queues kept being created or deleted; retry the command", EXIT_REJECTED, text)

    except RSMQError as e:
        fail(ctx, e, TRANSPORT_SOLUTION, EXIT_TRANSPORT, text)


@click.command("list-messages")
@click.argument("queue_name")
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    help="Show at most this many messages (earliest visible first)",
)
@common_options
@click.pass_context
def list_messages_command(
    ctx: click.Context,
    queue_name: str,
    limit: int | None,
    host: str,
    port: int,
    db: int,
    password: str | None,
    url: str | None,
    namespace: str,
    timeout: float,
    text: bool,
    verbose: int,
) -> None:
    """List the messages of a queue ordered by visibility time.

    Examples:

    \b
        # List all messages
        rsmq-admin-tool rsmq list-messages jobs

    \b
        # Show the next 10 messages to become visible
        rsmq-admin-tool rsmq list-messages jobs --limit 10 --text

    \b
    Output Format:
        Returns JSON:
        {"queue": "jobs", "messages": [{"id": "...", "body": "hello", "rc": 0,
         "fr": 0, "sent": 1234567890123, "visible_at": 1234567890123}], "count": 1}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Listing messages of queue '{queue_name}'")

        client = build_client(host, port, db, password, url, namespace, timeout)
        ctx.call_on_close(client.close)
        messages = list_messages(client, queue_name)
        if limit is not None:
            messages = messages[:limit]

        if text:
            if not messages:
                output_text(f"Queue '{queue_name}' has no messages")
            now = now_millis()
            for message in messages:
                state = "hidden" if message.is_hidden(now) else "visible"
                output_text(
                    f"{message.id}  {state:<7}  rc={message.rc}  "
                    f"sent={format_timestamp(message.sent, millis=True)}  "
                    f"visible_at={format_timestamp(message.visible_at, millis=True)}"
                )
                output_text(f"    {message.text}")
        else:
            output_json(
                {
                    "queue": queue_name,
                    "messages": [message.to_dict() for message in messages],
                    "count": len(messages),
                }
            )

    except RSMQError as e:
        fail(ctx, e, TRANSPORT_SOLUTION, EXIT_TRANSPORT, text)


@click.command("delete-message")
@click.argument("queue_name")
@click.argument("message_id")
@common_options
@click.pass_context
def delete_message_command(
    ctx: click.Context,
    queue_name: str,
    message_id: str,
    host: str,
    port: int,
    db: int,
    password: str | None,
    url: str | None,
    namespace: str,
    timeout: float,
    text: bool,
    verbose: int,
) -> None:
    """Delete a message from a queue.

    This operation is idempotent. Deleting a message that is already gone
    succeeds with "deleted": false.

    Examples:

    \b
        # Delete a message by id
        rsmq-admin-tool rsmq delete-message jobs lz2w0vb7k0AbCdEfGhIjKlMnOpQrStUv

    \b
    Output Format:
        Returns JSON:
        {"queue": "jobs", "id": "...", "deleted": true}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Deleting message '{message_id}' from queue '{queue_name}'")

        client = build_client(host, port, db, password, url, namespace, timeout)
        ctx.call_on_close(client.close)
        result = delete_message(client, queue_name, message_id)

        if text:
            if result["deleted"]:
                output_text(f"✅ Message '{message_id}' deleted from queue '{queue_name}'")
            else:
                output_text(f"Message '{message_id}' was not in queue '{queue_name}'")
        else:
            output_json(result)

    except InvalidArgumentError as e:
        fail(ctx, e, "Copy the id from 'list-messages' output", EXIT_INVALID_ARGUMENT, text)

    except RSMQError as e:
        fail(ctx, e, TRANSPORT_SOLUTION, EXIT_TRANSPORT, text)


@click.command("clear-queue")
@click.argument("queue_name")
@click.option(
    "--approve",
    is_flag=True,
    help="Required flag to confirm deleting every message",
)
@common_options
@click.pass_context
def clear_queue_command(
    ctx: click.Context,
    queue_name: str,
    approve: bool,
    host: str,
    port: int,
    db: int,
    password: str | None,
    url: str | None,
    namespace: str,
    timeout: float,
    text: bool,
    verbose: int,
) -> None:
    """Delete every message of a queue.

    The queue, its attributes and its counters are kept. Requires --approve.

    Examples:

    \b
        # Empty a queue
        rsmq-admin-tool rsmq clear-queue jobs --approve

    \b
    Output Format:
        Returns JSON:
        {"queue": "jobs", "cleared": 42}
    """
    setup_logging(verbose)

    if not approve:
        fail(
            ctx,
            click.UsageError(f"Clearing queue '{queue_name}' requires --approve"),
            f"Re-run with: rsmq-admin-tool rsmq clear-queue {queue_name} --approve",
            EXIT_INVALID_ARGUMENT,
            text,
        )

    try:
        logger.info(f"Clearing queue '{queue_name}'")

        client = build_client(host, port, db, password, url, namespace, timeout)
        ctx.call_on_close(client.close)
        result = clear_queue(client, queue_name)

        if text:
            output_text(f"✅ Removed {result['cleared']} message(s) from queue '{queue_name}'")
        else:
            output_json(result)

    except RSMQError as e:
        fail(ctx, e, TRANSPORT_SOLUTION, EXIT_TRANSPORT, text)
