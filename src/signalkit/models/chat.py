"""Chat message model."""

from __future__ import annotations

import random
import string
import time

from pydantic import ConfigDict

from signalkit.models.base import WireModel

_ID_ALPHABET = string.digits + string.ascii_lowercase


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class ChatMessage(WireModel):
    """An immutable chat line in a room's log."""

    model_config = ConfigDict(frozen=True)

    id: str
    peer_id: str | None = None
    sender_name: str | None = None
    content: str = ""
    timestamp: int

    @classmethod
    def create(
        cls, peer_id: str | None, sender_name: str | None, content: str
    ) -> ChatMessage:
        """Stamp a new message with the current time and a random suffix."""
        timestamp = now_ms()
        suffix = "".join(random.choices(_ID_ALPHABET, k=5))  # noqa: S311
        return cls(
            id=f"{timestamp}-{suffix}",
            peer_id=peer_id,
            sender_name=sender_name,
            content=content,
            timestamp=timestamp,
        )
