"""
Logging configuration for rsmq commands.

Verbosity follows the repeatable -v flag:

    0  WARNING
    1  INFO   (-v)
    2  DEBUG  (-vv)
    3  DEBUG plus redis library internals (-vvv)

Logs always go to stderr so JSON on stdout stays parseable.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}

_handler: logging.StreamHandler | None = None  # type: ignore[type-arg]


def setup_logging(verbose: int = 0) -> None:
    """
    Configure root logging for the given verbosity count.

    Args:
        verbose: Number of -v flags given on the command line
    """
    global _handler
    level = _LEVELS.get(verbose, logging.DEBUG)

    root = logging.getLogger()
    root.setLevel(level)
    # sys.stderr may differ from the one bound on a previous call
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _handler.setLevel(level)
    root.addHandler(_handler)

    # Third-party chatter only at the highest verbosity
    logging.getLogger("redis").setLevel(logging.DEBUG if verbose >= 3 else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
