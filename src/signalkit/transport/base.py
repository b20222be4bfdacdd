"""Abstract connection type the hub talks to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any
from uuid import uuid4


@dataclass
class ConnectionState:
    """What a connection last claimed about itself when it joined a room.

    Used as a fallback on disconnect when the connection index has no entry.
    """

    room_code: str | None = None
    peer_id: str | None = None
    display_name: str | None = None
    is_host: bool = False


class Connection(ABC):
    """One live, ordered, bidirectional client connection.

    Implementations must make ``send`` fire-and-forget: it queues the event
    and returns immediately, never raising and never suspending, so that hub
    handlers stay atomic. Sends after the connection closed are dropped.
    """

    def __init__(self, connection_id: str | None = None) -> None:
        self.id = connection_id or uuid4().hex
        self.state = ConnectionState()

    @abstractmethod
    def send(self, event: str, data: Any) -> None:
        """Queue an outbound event for delivery."""
        ...

    @property
    @abstractmethod
    def closed(self) -> bool:
        """Whether the underlying transport has gone away."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
