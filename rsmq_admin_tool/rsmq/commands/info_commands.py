"""
Info commands for rsmq - queue statistics and connection status.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import click

from ..core.stats_operations import get_queue_stats
from ..core.status_operations import check_connection, get_server_status
from ..exceptions import QueueNotFoundError, RSMQError
from ..logging_config import get_logger, setup_logging
from ..utils import format_timestamp, output_json, output_text
from .options import (
    EXIT_REJECTED,
    EXIT_TRANSPORT,
    TRANSPORT_SOLUTION,
    build_client,
    common_options,
    fail,
)

logger = get_logger(__name__)


@click.command("stats")
@click.argument("queue_name")
@common_options
@click.pass_context
def stats_command(
    ctx: click.Context,
    queue_name: str,
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
    """Show attributes, counters and message counts of a queue.

    hiddenmsgs counts messages whose visibility time is still in the
    future. The counts are a snapshot taken at "timestamp".

    Examples:

    \b
        # Show queue statistics
        rsmq-admin-tool rsmq stats jobs

    \b
        # Watch the backlog
        watch -n 5 rsmq-admin-tool rsmq stats jobs --text

    \b
    Output Format:
        Returns JSON:
        {"name": "jobs", "vt": 30, "delay": 0, "maxsize": 65536, "totalrecv": 0,
         "totalsent": 1, "created": 1234567890, "modified": 1234567890,
         "msgs": 1, "hiddenmsgs": 0, "timestamp": 1234567890123, "visiblemsgs": 1}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Getting stats for queue '{queue_name}'")

        client = build_client(host, port, db, password, url, namespace, timeout)
        ctx.call_on_close(client.close)
        stats = get_queue_stats(client, queue_name)

        if text:
            output_text(f"=== Queue: {stats.name} ===\n")
            output_text(f"Visibility timeout: {stats.vt}s")
            output_text(f"Delay:              {stats.delay}s")
            output_text(f"Max size:           {stats.maxsize} bytes")
            output_text(f"Created:            {format_timestamp(stats.created)}")
            output_text(f"Modified:           {format_timestamp(stats.modified)}")
            output_text(f"Total sent:         {stats.totalsent}")
            output_text(f"Total received:     {stats.totalrecv}")
            output_text(f"Messages:           {stats.msgs}")
            output_text(f"  visible:          {stats.visible_msgs}")
            output_text(f"  hidden:           {stats.hiddenmsgs}")
        else:
            output_json(stats.to_dict())

    except QueueNotFoundError as e:
        fail(ctx, e, "Check queue name with 'list-queues' command", EXIT_REJECTED, text)

    except RSMQError as e:
        fail(ctx, e, TRANSPORT_SOLUTION, EXIT_TRANSPORT, text)


@click.command("ping")
@common_options
@click.pass_context
def ping_command(
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
    """Test the connection to Redis.

    Examples:

    \b
        # Check the configured endpoint before use
        rsmq-admin-tool rsmq ping --host redis.internal

    \b
    Output Format:
        Returns JSON:
        {"endpoint": "localhost:6379/0", "reachable": true, "latency_ms": 0.412}
    """
    setup_logging(verbose)

    try:
        logger.info("Testing connection")

        client = build_client(host, port, db, password, url, namespace, timeout)
        ctx.call_on_close(client.close)
        result = check_connection(client)

        if text:
            output_text(f"✅ Connected to {result['endpoint']} ({result['latency_ms']} ms)")
        else:
            output_json(result)

    except RSMQError as e:
        fail(ctx, e, "Check host, port, password and network access", EXIT_TRANSPORT, text)


@click.command("status")
@common_options
@click.pass_context
def status_command(
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
    """Show Redis server information and the namespace's queue count.

    Examples:

    \b
        # Show server status
        rsmq-admin-tool rsmq status --text

    \b
    Output Format:
        Returns JSON:
        {"endpoint": "localhost:6379/0", "redis_version": "7.2.4",
         "uptime_seconds": 3600, "used_memory_human": "1.2M",
         "namespace": "rsmq:", "queue_count": 2}
    """
    setup_logging(verbose)

    try:
        logger.info("Getting server status")

        client = build_client(host, port, db, password, url, namespace, timeout)
        ctx.call_on_close(client.close)
        result = get_server_status(client)

        if text:
            output_text(f"=== Redis: {result['endpoint']} ===\n")
            output_text(f"Version:   {result['redis_version']}")
            output_text(f"Uptime:    {result['uptime_seconds']}s")
            output_text(f"Memory:    {result['used_memory_human']}")
            output_text(f"Namespace: {result['namespace']}")
            output_text(f"Queues:    {result['queue_count']}")
        else:
            output_json(result)

    except RSMQError as e:
        fail(ctx, e, TRANSPORT_SOLUTION, EXIT_TRANSPORT, text)
