"""In-memory implementation of SignalingStore."""

from __future__ import annotations

import logging
from typing import Any

from signalkit.models.chat import ChatMessage
from signalkit.models.peer import ConnectionBinding, Peer
from signalkit.store.base import SignalingStore

logger = logging.getLogger("signalkit.store")


class InMemorySignalingStore(SignalingStore):
    """Dict-based registry for a single process."""

    def __init__(self) -> None:
        self._rooms: dict[str, dict[str, Peer]] = {}
        self._chat: dict[str, list[ChatMessage]] = {}
        self._connections: dict[str, ConnectionBinding] = {}

    # Room / peer operations

    def upsert_peer(self, room_code: str, peer: Peer) -> Peer:
        room = self._rooms.get(room_code)
        if room is None:
            room = self._rooms[room_code] = {}
            self._chat[room_code] = []
            logger.debug("Room %s created", room_code)
        stored = peer.model_copy(update={"room_code": room_code})
        room[peer.peer_id] = stored
        return stored.model_copy()

    def update_peer(self, room_code: str, peer_id: str, **changes: Any) -> Peer | None:
        room = self._rooms.get(room_code)
        if room is None or peer_id not in room:
            return None
        updated = room[peer_id].model_copy(update=changes)
        room[peer_id] = updated
        return updated.model_copy()

    def remove_peer(self, room_code: str, peer_id: str) -> Peer | None:
        room = self._rooms.get(room_code)
        if room is None:
            return None
        peer = room.pop(peer_id, None)
        if not room:
            del self._rooms[room_code]
            self._chat.pop(room_code, None)
            logger.info("Room %s is now empty, deleted", room_code)
        return peer.model_copy() if peer is not None else None

    def lookup_peer(self, room_code: str, peer_id: str) -> Peer | None:
        peer = self._rooms.get(room_code, {}).get(peer_id)
        return peer.model_copy() if peer is not None else None

    def list_peers(self, room_code: str) -> list[Peer]:
        return [p.model_copy() for p in self._rooms.get(room_code, {}).values()]

    def has_room(self, room_code: str) -> bool:
        return room_code in self._rooms

    @property
    def room_count(self) -> int:
        return len(self._rooms)

    # Connection index

    def bind_connection(self, connection_id: str, room_code: str, peer_id: str) -> None:
        self._connections[connection_id] = ConnectionBinding(
            connection_id=connection_id, room_code=room_code, peer_id=peer_id
        )

    def unbind_connection(self, connection_id: str) -> ConnectionBinding | None:
        return self._connections.pop(connection_id, None)

    def lookup_connection(self, connection_id: str) -> ConnectionBinding | None:
        binding = self._connections.get(connection_id)
        return binding.model_copy() if binding is not None else None

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    # Chat log

    def append_message(self, room_code: str, message: ChatMessage) -> bool:
        log = self._chat.get(room_code)
        if log is None:
            return False
        log.append(message)
        return True

    def get_history(self, room_code: str) -> list[ChatMessage]:
        return list(self._chat.get(room_code, []))

    def close(self) -> None:
        self._rooms.clear()
        self._chat.clear()
        self._connections.clear()
