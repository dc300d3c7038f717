"""
Unit tests for utility functions.
"""

import pytest

from rsmq_admin_tool.rsmq.exceptions import InvalidArgumentError
from rsmq_admin_tool.rsmq.utils import (
    format_timestamp,
    queue_hash_key,
    queue_zset_key,
    queues_key,
    to_bytes,
    to_int,
    to_str,
    validate_attributes,
    validate_message_id,
    validate_queue_name,
)


class TestKeys:
    """Tests for key formatting."""

    def test_default_namespace(self):
        """Test key layout in the default namespace."""
        assert queues_key("rsmq:") == "rsmq:QUEUES"
        assert queue_hash_key("rsmq:", "jobs") == "rsmq:jobs:Q"
        assert queue_zset_key("rsmq:", "jobs") == "rsmq:jobs"

    def test_custom_namespace(self):
        """Test that the namespace is used verbatim as a prefix."""
        assert queues_key("staging-") == "staging-QUEUES"
        assert queue_hash_key("staging-", "jobs") == "staging-jobs:Q"


class TestDecoding:
    """Tests for typed decoding of redis values."""

    def test_to_int_from_bytes(self):
        """Test decoding integers returned as bytes."""
        assert to_int(b"42") == 42

    def test_to_int_missing(self):
        """Test that missing values fall back to the default."""
        assert to_int(None) == 0
        assert to_int(None, default=7) == 7

    def test_to_int_unparsable(self):
        """Test that garbage falls back to the default instead of raising."""
        assert to_int(b"not-a-number") == 0

    def test_to_int_float_string(self):
        """Test that float strings are truncated."""
        assert to_int("1700000000123.0") == 1700000000123

    def test_to_str(self):
        """Test decoding bytes and passthrough of str."""
        assert to_str(b"jobs") == "jobs"
        assert to_str("jobs") == "jobs"

    def test_to_bytes(self):
        """Test that str bodies are UTF-8 encoded."""
        assert to_bytes("héllo") == "héllo".encode()
        assert to_bytes(b"\x00\xff") == b"\x00\xff"


class TestValidation:
    """Tests for argument validation."""

    @pytest.mark.parametrize("name", ["jobs", "emails_v2", "a-b", "x" * 160])
    def test_valid_queue_names(self, name: str):
        """Test accepted queue names."""
        assert validate_queue_name(name) is True

    @pytest.mark.parametrize("name", ["", "with space", "colon:name", "x" * 161])
    def test_invalid_queue_names(self, name: str):
        """Test rejected queue names."""
        with pytest.raises(InvalidArgumentError):
            validate_queue_name(name)

    def test_invalid_message_id(self):
        """Test that short or punctuated ids are rejected."""
        with pytest.raises(InvalidArgumentError):
            validate_message_id("abc")
        with pytest.raises(InvalidArgumentError):
            validate_message_id("-" * 32)

    def test_valid_message_id(self):
        """Test that 32 alphanumerics are accepted."""
        assert validate_message_id("a" * 32) is True

    def test_valid_attributes(self):
        """Test boundaries of accepted attributes."""
        assert validate_attributes(0, 0, 1) is True
        assert validate_attributes(10_000_000, 86_400, 1_048_576) is True

    def test_unset_attributes_are_skipped(self):
        """Test that None values are not checked."""
        assert validate_attributes(vt=None, delay=5, maxsize=None) is True
        assert validate_attributes() is True

    @pytest.mark.parametrize(
        "vt,delay,maxsize",
        [(-1, 0, 65536), (30, -1, 65536), (30, 0, 0), (30, 0, -1), (None, None, -1)],
    )
    def test_invalid_attributes(self, vt: int | None, delay: int | None, maxsize: int):
        """Test that out-of-range attributes are rejected."""
        with pytest.raises(InvalidArgumentError):
            validate_attributes(vt, delay, maxsize)

    def test_invalid_argument_is_value_error(self):
        """Test that InvalidArgumentError can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_attributes(-1, 0, 1024)


class TestFormatTimestamp:
    """Tests for format_timestamp."""

    def test_zero_renders_dash(self):
        """Test that unset timestamps render as '-'."""
        assert format_timestamp(0) == "-"

    def test_millis_and_seconds_agree(self):
        """Test that millisecond input renders like its second equivalent."""
        assert format_timestamp(1_700_000_000_000, millis=True) == format_timestamp(1_700_000_000)
