"""
Utility functions for rsmq operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
import re
import time
from datetime import datetime
from typing import Any

from .constants import (
    MESSAGE_ID_RE,
    MIN_DELAY,
    MIN_MAX_SIZE,
    MIN_VT,
    QUEUE_HASH_SUFFIX,
    QUEUE_NAME_RE,
    QUEUES_KEY,
)
from .exceptions import InvalidArgumentError


def queues_key(namespace: str) -> str:
    """Key of the global set of queue names (e.g. 'rsmq:QUEUES')."""
    return f"{namespace}{QUEUES_KEY}"


def queue_hash_key(namespace: str, queue_name: str) -> str:
    """Key of a queue's attribute and payload hash (e.g. 'rsmq:jobs:Q')."""
    return f"{namespace}{queue_name}{QUEUE_HASH_SUFFIX}"


def queue_zset_key(namespace: str, queue_name: str) -> str:
    """Key of a queue's ordering sorted set (e.g. 'rsmq:jobs')."""
    return f"{namespace}{queue_name}"


def now_micros() -> int:
    """Current time in epoch microseconds."""
    return time.time_ns() // 1000


def now_millis() -> int:
    """Current time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def now_seconds() -> int:
    """Current time in epoch seconds."""
    return time.time_ns() // 1_000_000_000


def to_str(value: Any) -> str:
    """Decode a value returned by redis into str."""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def to_int(value: Any, default: int = 0) -> int:
    """
    Decode a redis value into int.

    Redis returns every hash field as a string. Missing (None) or unparsable
    values map to `default` instead of raising.

    Args:
        value: Raw value from redis (bytes, str, number or None)
        default: Value to use when missing or unparsable

    Returns:
        Parsed integer
    """
    if value is None:
        return default
    try:
        return int(to_str(value))
    except ValueError:
        try:
            return int(float(to_str(value)))
        except ValueError:
            return default


def to_bytes(value: str | bytes) -> bytes:
    """Encode a message body for storage."""
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def validate_queue_name(queue_name: str) -> bool:
    """
    Validate queue name.

    Args:
        queue_name: Queue name to validate

    Returns:
        True if valid

    Raises:
        InvalidArgumentError: If queue name is invalid
    """
    if not queue_name:
        raise InvalidArgumentError("Queue name cannot be empty")
    if not re.match(QUEUE_NAME_RE, queue_name):
        raise InvalidArgumentError(
            "Queue name must be 1-160 characters of letters, digits, hyphens and underscores"
        )
    return True


def validate_message_id(message_id: str) -> bool:
    """
    Validate message id.

    Raises:
        InvalidArgumentError: If the id is not 32 alphanumeric characters
    """
    if not re.match(MESSAGE_ID_RE, message_id or ""):
        raise InvalidArgumentError(f"Invalid message id '{message_id}': expected 32 alphanumerics")
    return True


def validate_attributes(
    vt: int | None = None,
    delay: int | None = None,
    maxsize: int | None = None,
) -> bool:
    """
    Validate queue attributes. Values given as None are not checked.

    Args:
        vt: Visibility timeout in seconds
        delay: Delivery delay in seconds
        maxsize: Maximum message size in bytes

    Returns:
        True if valid

    Raises:
        InvalidArgumentError: If vt or delay is negative, or maxsize is not positive
    """
    if vt is not None and vt < MIN_VT:
        raise InvalidArgumentError(f"vt must be at least {MIN_VT}, got {vt}")
    if delay is not None and delay < MIN_DELAY:
        raise InvalidArgumentError(f"delay must be at least {MIN_DELAY}, got {delay}")
    if maxsize is not None and maxsize < MIN_MAX_SIZE:
        raise InvalidArgumentError(f"maxsize must be at least {MIN_MAX_SIZE}, got {maxsize}")
    return True


def format_timestamp(epoch: int, millis: bool = False) -> str:
    """Render an epoch timestamp for text output; 0 renders as '-'."""
    if not epoch:
        return "-"
    seconds = epoch / 1000 if millis else epoch
    return datetime.fromtimestamp(seconds).isoformat(sep=" ", timespec="seconds")


def output_json(data: Any, quiet: bool = False) -> None:
    """
    Output JSON to stdout.

    Args:
        data: Data to output as JSON
        quiet: If True, suppress output
    """
    if not quiet:
        print(json.dumps(data))


def output_text(message: str, quiet: bool = False) -> None:
    """
    Output text to stdout.

    Args:
        message: Message to output
        quiet: If True, suppress output
    """
    if not quiet:
        print(message)


def error_json(error: str, solution: str, exit_code: int) -> str:
    """
    Format error as a JSON document.

    Args:
        error: Error message
        solution: Solution suggestion
        exit_code: Exit code

    Returns:
        Serialized error document
    """
    return json.dumps({"error": error, "solution": solution, "exit_code": exit_code})


def error_text(error: str, solution: str) -> str:
    """
    Format error as human-readable text.

    Args:
        error: Error message
        solution: Solution suggestion

    Returns:
        Formatted error message
    """
    return f"❌ Error: {error}\n\n💡 Solution: {solution}"
