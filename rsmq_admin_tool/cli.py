"""CLI entry point for rsmq-admin-tool.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import click

from rsmq_admin_tool import __version__
from rsmq_admin_tool.rsmq.commands.info_commands import (
    ping_command,
    stats_command,
    status_command,
)
from rsmq_admin_tool.rsmq.commands.message_commands import (
    clear_queue_command,
    delete_message_command,
    list_messages_command,
    send_command,
)
from rsmq_admin_tool.rsmq.commands.queue_commands import (
    create_queue_command,
    delete_queue_command,
    list_queues_command,
    set_attributes_command,
)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """A CLI for administering Redis Simple Message Queue (RSMQ) queues"""
    pass


@main.group("rsmq")
def rsmq() -> None:
    """Queues and messages stored in Redis with the RSMQ layout"""
    pass


# Register queue commands
rsmq.add_command(list_queues_command)
rsmq.add_command(create_queue_command)
rsmq.add_command(delete_queue_command)
rsmq.add_command(set_attributes_command)

# Register message commands
rsmq.add_command(send_command)
rsmq.add_command(list_messages_command)
rsmq.add_command(delete_message_command)
rsmq.add_command(clear_queue_command)

# Register info/status commands
rsmq.add_command(stats_command)
rsmq.add_command(ping_command)
rsmq.add_command(status_command)

if __name__ == "__main__":
    main()
