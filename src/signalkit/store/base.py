"""Abstract base class for the signaling registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from signalkit.models.chat import ChatMessage
from signalkit.models.peer import ConnectionBinding, Peer


class SignalingStore(ABC):
    """Rooms, peers, per-room chat logs, and the connection index.

    Implement this ABC to plug in another registry backend. The library
    ships with ``InMemorySignalingStore`` for single-process deployments.

    Methods are synchronous: the hub mutates the registry without ever
    suspending, which keeps each inbound event atomic on the event loop.
    A missing room, peer, or connection is never an error; lookups return
    ``None`` and removals report that nothing was there.
    """

    # Room / peer operations

    @abstractmethod
    def upsert_peer(self, room_code: str, peer: Peer) -> Peer:
        """Seat a peer, creating the room (and its chat log) if absent."""
        ...

    @abstractmethod
    def update_peer(self, room_code: str, peer_id: str, **changes: Any) -> Peer | None:
        """Apply field changes to a seated peer. Returns ``None`` if absent."""
        ...

    @abstractmethod
    def remove_peer(self, room_code: str, peer_id: str) -> Peer | None:
        """Unseat a peer, tearing down an emptied room together with its chat log."""
        ...

    @abstractmethod
    def lookup_peer(self, room_code: str, peer_id: str) -> Peer | None:
        """Get a peer within a room, or ``None``."""
        ...

    @abstractmethod
    def list_peers(self, room_code: str) -> list[Peer]:
        """List peers in a room (empty if the room does not exist)."""
        ...

    @abstractmethod
    def has_room(self, room_code: str) -> bool:
        """Return ``True`` while the room has at least one peer."""
        ...

    @property
    @abstractmethod
    def room_count(self) -> int:
        """Number of live rooms."""
        ...

    # Connection index

    @abstractmethod
    def bind_connection(self, connection_id: str, room_code: str, peer_id: str) -> None:
        """Record which seat a connection holds, replacing any previous entry."""
        ...

    @abstractmethod
    def unbind_connection(self, connection_id: str) -> ConnectionBinding | None:
        """Drop a connection's entry and return it, or ``None`` if unbound."""
        ...

    @abstractmethod
    def lookup_connection(self, connection_id: str) -> ConnectionBinding | None:
        """Get a connection's entry without removing it."""
        ...

    @property
    @abstractmethod
    def connection_count(self) -> int:
        """Number of bound connections."""
        ...

    # Chat log

    @abstractmethod
    def append_message(self, room_code: str, message: ChatMessage) -> bool:
        """Append to a live room's log. Returns ``False`` if the room does not exist."""
        ...

    @abstractmethod
    def get_history(self, room_code: str) -> list[ChatMessage]:
        """Return the room's messages in posting order (empty if none)."""
        ...

    def close(self) -> None:
        """Release all state.

        Override this method in subclasses that need cleanup.
        The default implementation does nothing.
        """
        return None
