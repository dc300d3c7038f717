"""
Type models for rsmq operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class QueueAttributes:
    """Configuration and counters stored in a queue's attribute hash."""

    vt: int
    delay: int
    maxsize: int
    created: int = 0
    modified: int = 0
    totalrecv: int = 0
    totalsent: int = 0


@dataclass
class QueueStats:
    """Snapshot of a queue: attributes plus message counts at `timestamp`."""

    name: str
    vt: int
    delay: int
    maxsize: int
    totalrecv: int
    totalsent: int
    created: int
    modified: int
    msgs: int
    hiddenmsgs: int
    timestamp: int  # epoch ms used for the hidden-count range query

    @property
    def visible_msgs(self) -> int:
        return self.msgs - self.hiddenmsgs

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["visiblemsgs"] = self.visible_msgs
        return data


@dataclass
class Message:
    """A message as stored in a queue's sorted set and attribute hash."""

    id: str
    body: bytes
    rc: int = 0
    fr: int = 0  # epoch ms of first retrieval, 0 if never retrieved
    sent: int = 0  # epoch ms
    visible_at: int = 0  # epoch ms, the sorted set score

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")

    def is_hidden(self, now_ms: int) -> bool:
        return self.visible_at > now_ms

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "body": self.text,
            "rc": self.rc,
            "fr": self.fr,
            "sent": self.sent,
            "visible_at": self.visible_at,
        }
