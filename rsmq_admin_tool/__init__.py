"""rsmq-admin-tool: administer RSMQ queues stored in Redis."""

__version__ = "0.1.0"
