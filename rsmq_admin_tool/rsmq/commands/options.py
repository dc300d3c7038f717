"""
Shared click options and helpers for rsmq commands.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from collections.abc import Callable
from typing import Any

import click

from ..constants import DEFAULT_DB, DEFAULT_HOST, DEFAULT_NAMESPACE, DEFAULT_PORT, DEFAULT_TIMEOUT
from ..core.client import RedisClient
from ..utils import error_json, error_text

# Exit codes
EXIT_REJECTED = 1  # queue missing or exists, message too large, write conflict
EXIT_INVALID_ARGUMENT = 2
EXIT_TRANSPORT = 3

TRANSPORT_SOLUTION = "Check that Redis is reachable with 'rsmq-admin-tool rsmq ping'"


def common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add connection, output and verbosity options to a command."""
    options = [
        click.option(
            "--host",
            envvar="RSMQ_HOST",
            default=DEFAULT_HOST,
            show_default=True,
            help="Redis host",
        ),
        click.option(
            "--port",
            envvar="RSMQ_PORT",
            type=int,
            default=DEFAULT_PORT,
            show_default=True,
            help="Redis port",
        ),
        click.option(
            "--db",
            envvar="RSMQ_DB",
            type=click.IntRange(0, 15),
            default=DEFAULT_DB,
            show_default=True,
            help="Redis database number",
        ),
        click.option("--password", envvar="RSMQ_PASSWORD", help="Redis password"),
        click.option(
            "--url",
            envvar="RSMQ_URL",
            help="Redis URL (overrides host, port, db and password)",
        ),
        click.option(
            "--namespace",
            envvar="RSMQ_NAMESPACE",
            default=DEFAULT_NAMESPACE,
            show_default=True,
            help="Key namespace prefix",
        ),
        click.option(
            "--timeout",
            envvar="RSMQ_TIMEOUT",
            type=float,
            default=DEFAULT_TIMEOUT,
            show_default=True,
            help="Socket timeout in seconds",
        ),
        click.option("--text", is_flag=True, help="Output as human-readable text"),
        click.option(
            "--verbose",
            "-v",
            count=True,
            help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_client(
    host: str,
    port: int,
    db: int,
    password: str | None,
    url: str | None,
    namespace: str,
    timeout: float,
) -> RedisClient:
    """Create a Redis client from command options."""
    return RedisClient(
        host=host,
        port=port,
        db=db,
        password=password,
        namespace=namespace,
        timeout=timeout,
        url=url,
    )


def fail(ctx: click.Context, error: Exception, solution: str, exit_code: int, text: bool) -> None:
    """Report an error on stderr and exit with `exit_code`."""
    if text:
        click.echo(error_text(str(error), solution), err=True)
    else:
        click.echo(error_json(str(error), solution, exit_code), err=True)
    ctx.exit(exit_code)
