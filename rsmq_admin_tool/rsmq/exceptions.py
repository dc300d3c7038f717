"""
Custom exceptions for rsmq operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""


class RSMQError(Exception):
    """Base exception for rsmq operations."""

    pass


class QueueNotFoundError(RSMQError):
    """Queue does not exist (its attribute hash has no fields)."""

    pass


class QueueExistsError(RSMQError):
    """Queue already exists."""

    pass


class MessageTooLargeError(RSMQError):
    """Message body exceeds the queue's maxsize."""

    pass


class TransportError(RSMQError):
    """Redis connectivity, timeout, authentication or protocol failure."""

    pass


class InvalidArgumentError(RSMQError, ValueError):
    """Malformed queue name, message id or attribute value."""

    pass


class TransactionConflictError(RSMQError):
    """A watched key changed before a transaction could commit."""

    pass
