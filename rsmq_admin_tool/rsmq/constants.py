"""
Constants for rsmq operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

# Default key namespace
DEFAULT_NAMESPACE = "rsmq:"

# Connection defaults
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 6379
DEFAULT_DB = 0
DEFAULT_TIMEOUT = 5.0  # seconds

# Key suffixes (global queue set: ns + QUEUES, attribute hash: ns + name + :Q)
QUEUES_KEY = "QUEUES"
QUEUE_HASH_SUFFIX = ":Q"

# Queue attribute hash fields
FIELD_VT = "vt"
FIELD_DELAY = "delay"
FIELD_MAXSIZE = "maxsize"
FIELD_CREATED = "created"
FIELD_MODIFIED = "modified"
FIELD_TOTAL_RECV = "totalrecv"
FIELD_TOTAL_SENT = "totalsent"

QUEUE_FIELDS = (
    FIELD_VT,
    FIELD_DELAY,
    FIELD_MAXSIZE,
    FIELD_CREATED,
    FIELD_MODIFIED,
    FIELD_TOTAL_RECV,
    FIELD_TOTAL_SENT,
)

# Per-message hash field suffixes (the body is stored under the bare id)
MSG_RC_SUFFIX = ":rc"
MSG_FR_SUFFIX = ":fr"
MSG_SENT_SUFFIX = ":sent"

# Queue attribute defaults
DEFAULT_VT = 30
DEFAULT_DELAY = 0
DEFAULT_MAX_SIZE = 65536

# Queue attribute lower bounds
MIN_VT = 0
MIN_DELAY = 0
MIN_MAX_SIZE = 1

# Attempts for transactions whose watched keys other writers also touch
TRANSACTION_ATTEMPTS = 5

# Validation patterns
QUEUE_NAME_RE = r"^[a-zA-Z0-9_-]{1,160}$"
MESSAGE_ID_RE = r"^[a-zA-Z0-9]{32}$"

# Message id layout
ID_TIMESTAMP_LENGTH = 10
ID_RANDOM_LENGTH = 22
ID_CHARACTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
