"""
Message id generation.

An id is 32 characters: the enqueue time in epoch microseconds encoded as
10 zero-padded base-36 digits, followed by 22 random characters from
[A-Za-z0-9]. Ids therefore sort lexicographically in timestamp order and ids
generated within the same microsecond differ only in their random suffix.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import random
import time

from .constants import BASE36_ALPHABET, ID_CHARACTERS, ID_RANDOM_LENGTH, ID_TIMESTAMP_LENGTH

# Process-wide, seeded once at import. Not for cryptographic use.
_rng = random.Random(time.time_ns())


def base36_encode(n: int) -> str:
    """Encode a non-negative integer in lowercase base 36."""
    if n < 0:
        raise ValueError("Cannot base36-encode a negative number")
    if n == 0:
        return "0"

    result = ""
    while n:
        n, i = divmod(n, len(BASE36_ALPHABET))
        result = BASE36_ALPHABET[i] + result
    return result


def generate_id(timestamp_micros: int | None = None, rng: random.Random | None = None) -> str:
    """
    Generate a unique, time-sortable message id.

    Args:
        timestamp_micros: Epoch microseconds for the prefix (default: now)
        rng: Random source for the suffix (default: the module RNG)

    Returns:
        32-character message id
    """
    if timestamp_micros is None:
        timestamp_micros = time.time_ns() // 1000
    source = rng or _rng

    prefix = base36_encode(timestamp_micros).rjust(ID_TIMESTAMP_LENGTH, "0")
    suffix = "".join(source.choice(ID_CHARACTERS) for _ in range(ID_RANDOM_LENGTH))
    return prefix + suffix


def decode_id_timestamp(message_id: str) -> int:
    """
    Decode the epoch microseconds encoded in a message id.

    Returns 0 when the prefix is not valid base 36.
    """
    try:
        return int(message_id[:ID_TIMESTAMP_LENGTH], 36)
    except ValueError:
        return 0
