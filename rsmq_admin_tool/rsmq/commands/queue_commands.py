"""
Queue commands for rsmq.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import click

from ..constants import DEFAULT_DELAY, DEFAULT_MAX_SIZE, DEFAULT_VT
from ..core.queue_operations import (
    create_queue,
    delete_queue,
    list_queues,
    set_queue_attributes,
)
from ..exceptions import (
    InvalidArgumentError,
    QueueExistsError,
    QueueNotFoundError,
    RSMQError,
    TransactionConflictError,
)
from ..logging_config import get_logger, setup_logging
from ..utils import output_json, output_text
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


@click.command("list-queues")
@common_options
@click.pass_context
def list_queues_command(
    ctx: click.Context,
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
    """List all queues in the namespace.

    Examples:

    \b
        # List queues in the default namespace
        rsmq-admin-tool rsmq list-queues

    \b
        # List queues of another deployment sharing the server
        rsmq-admin-tool rsmq list-queues --namespace "staging:"

    \b
    Output Format:
        Returns JSON:
        {"namespace": "rsmq:", "queues": ["emails", "jobs"], "count": 2}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Listing queues in namespace '{namespace}'")

        client = build_client(host, port, db, password, url, namespace, timeout)
        ctx.call_on_close(client.close)
        queues = sorted(list_queues(client))

        if text:
            if not queues:
                output_text(f"No queues in namespace '{namespace}'")
            for name in queues:
                output_text(name)
        else:
            output_json({"namespace": namespace, "queues": queues, "count": len(queues)})

    except RSMQError as e:
        fail(ctx, e, TRANSPORT_SOLUTION, EXIT_TRANSPORT, text)


@click.command("create-queue")
@click.argument("queue_name")
@click.option(
    "--vt",
    type=int,
    default=DEFAULT_VT,
    show_default=True,
    help="Visibility timeout in seconds",
)
@click.option(
    "--delay",
    type=int,
    default=DEFAULT_DELAY,
    show_default=True,
    help="Delay in seconds before new messages become visible",
)
@click.option(
    "--maxsize",
    type=int,
    default=DEFAULT_MAX_SIZE,
    show_default=True,
    help="Maximum message size in bytes",
)
@common_options
@click.pass_context
def create_queue_command(
    ctx: click.Context,
    queue_name: str,
    vt: int,
    delay: int,
    maxsize: int,
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
    """Create a queue.

    Examples:

    \b
        # Create a queue with defaults (vt 30, delay 0, maxsize 65536)
        rsmq-admin-tool rsmq create-queue jobs

    \b
        # Create a queue whose messages stay hidden for 5 seconds
        rsmq-admin-tool rsmq create-queue reminders --delay 5

    \b
    Output Format:
        Returns JSON:
        {"queue": "jobs", "vt": 30, "delay": 0, "maxsize": 65536, "created": 1234567890}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Creating queue '{queue_name}'")
        logger.debug(f"vt: {vt}, delay: {delay}, maxsize: {maxsize}")

        client = build_client(host, port, db, password, url, namespace, timeout)
        ctx.call_on_close(client.close)
        result = create_queue(client, queue_name, vt, delay, maxsize)

        if text:
            output_text(f"✅ Queue '{queue_name}' created")
            output_text(f"   vt: {vt}s, delay: {delay}s, maxsize: {maxsize} bytes")
        else:
            output_json(result)

    except QueueExistsError as e:
        fail(ctx, e, "Use a different queue name or delete the existing queue", EXIT_REJECTED, text)

    except InvalidArgumentError as e:
        fail(ctx, e, "Check queue name and attribute ranges", EXIT_INVALID_ARGUMENT, text)

    except RSMQError as e:
        fail(ctx, e, TRANSPORT_SOLUTION, EXIT_TRANSPORT, text)


@click.command("delete-queue")
@click.argument("queue_name")
@click.option(
    "--approve",
    is_flag=True,
    help="Required flag to confirm queue deletion",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if the queue does not exist",
)
@common_options
@click.pass_context
def delete_queue_command(
    ctx: click.Context,
    queue_name: str,
    approve: bool,
    strict: bool,
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
    """Delete a queue and all of its messages.

    Requires --approve. Deleting a queue that does not exist succeeds
    unless --strict is given.

    Examples:

    \b
        # Delete a queue
        rsmq-admin-tool rsmq delete-queue jobs --approve

    \b
    Output Format:
        Returns JSON:
        {"queue": "jobs", "deleted": true}
    """
    setup_logging(verbose)

    if not approve:
        fail(
            ctx,
            click.UsageError(f"Deleting queue '{queue_name}' requires --approve"),
            f"Re-run with: rsmq-admin-tool rsmq delete-queue {queue_name} --approve",
            EXIT_INVALID_ARGUMENT,
            text,
        )

    try:
        logger.info(f"Deleting queue '{queue_name}'")

        client = build_client(host, port, db, password, url, namespace, timeout)
        ctx.call_on_close(client.close)
        result = delete_queue(client, queue_name)

        if strict and not result["deleted"]:
            raise QueueNotFoundError(f"Queue '{queue_name}' not found")

        if text:
            output_text(f"✅ Queue '{queue_name}' deleted")
        else:
            output_json(result)

    except QueueNotFoundError as e:
        fail(ctx, e, "Check queue name with 'list-queues' command", EXIT_REJECTED, text)

    except RSMQError as e:
        fail(ctx, e, TRANSPORT_SOLUTION, EXIT_TRANSPORT, text)


@click.command("set-attributes")
@click.argument("queue_name")
@click.option("--vt", type=int, help="Visibility timeout in seconds")
@click.option("--delay", type=int, help="Delay in seconds before new messages become visible")
@click.option(
    "--maxsize",
    type=int,
    help="Maximum message size in bytes",
)
@common_options
@click.pass_context
def set_attributes_command(
    ctx: click.Context,
    queue_name: str,
    vt: int | None,
    delay: int | None,
    maxsize: int | None,
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
    """Change a queue's vt, delay or maxsize.

    Attributes that are not given keep their current value; the merge and
    the write happen in one transaction, so concurrent updates of other
    attributes are not lost. Messages already in the queue keep their
    visibility time.

    Examples:

    \b
        # Raise the visibility timeout
        rsmq-admin-tool rsmq set-attributes jobs --vt 120

    \b
        # Change delay and maxsize together
        rsmq-admin-tool rsmq set-attributes jobs --delay 10 --maxsize 2048

    \b
    Output Format:
        Returns JSON:
        {"queue": "jobs", "vt": 120, "delay": 0, "maxsize": 65536, "modified": 1234567890}
    """
    setup_logging(verbose)

    if vt is None and delay is None and maxsize is None:
        fail(
            ctx,
            click.UsageError("No attribute to change"),
            "Give at least one of --vt, --delay, --maxsize",
            EXIT_INVALID_ARGUMENT,
            text,
        )

    try:
        logger.info(f"Setting attributes of queue '{queue_name}'")

        client = build_client(host, port, db, password, url, namespace, timeout)
        ctx.call_on_close(client.close)
        result = set_queue_attributes(client, queue_name, vt, delay, maxsize)

        if text:
            output_text(f"✅ Queue '{queue_name}' updated")
            output_text(
                f"   vt: {result['vt']}s, delay: {result['delay']}s, "
                f"maxsize: {result['maxsize']} bytes"
            )
        else:
            output_json(result)

    except QueueNotFoundError as e:
        fail(ctx, e, "Check queue name with 'list-queues' command", EXIT_REJECTED, text)

    except InvalidArgumentError as e:
        fail(ctx, e, "Check attribute ranges", EXIT_INVALID_ARGUMENT, text)

    except TransactionConflictError as e:
        fail(ctx, e, "The queue kept changing; retry the command", EXIT_REJECTED, text)

    except RSMQError as e:
        fail(ctx, e, TRANSPORT_SOLUTION, EXIT_TRANSPORT, text)
