"""PresenceMixin — join, leave, and disconnect reconciliation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from signalkit.core._helpers import HelpersMixin
from signalkit.models.enums import OutboundEvent
from signalkit.models.inbound import JoinRoom, LeaveRoom
from signalkit.models.outbound import ExistingPeers, PeerJoined, PeerLeft
from signalkit.models.peer import Peer
from signalkit.transport.base import ConnectionState

if TYPE_CHECKING:
    from signalkit.transport.base import Connection

logger = logging.getLogger("signalkit.hub")


class PresenceMixin(HelpersMixin):
    """Room membership: who is seated where, and on which connection."""

    def join_room(self, connection: Connection, request: JoinRoom) -> None:
        """Seat a peer and introduce it to the room.

        A join for a peer id that is already seated on another connection is
        a reconnect: the old connection's index entry is dropped before the
        snapshot is taken, and the new connection takes over the seat. New
        peers always start muted with the camera off and no locks.
        """
        room_code, peer_id = request.room_code, request.peer_id
        logger.info("%s (%s) joining %s", peer_id, request.display_name, room_code)

        previous = self._store.lookup_connection(connection.id)
        if previous is not None and (previous.room_code, previous.peer_id) != (room_code, peer_id):
            self._reconcile_departure(connection, previous.room_code, previous.peer_id)

        existing = self._store.lookup_peer(room_code, peer_id)
        if existing is not None and existing.connection_id != connection.id:
            logger.info("%s reconnected with new connection, cleaning stale entry", peer_id)
            self._store.unbind_connection(existing.connection_id)

        others = [p.info() for p in self._store.list_peers(room_code) if p.peer_id != peer_id]

        connection.state = ConnectionState(
            room_code=room_code,
            peer_id=peer_id,
            display_name=request.display_name,
            is_host=request.is_host,
        )
        self._store.upsert_peer(
            room_code,
            Peer(
                peer_id=peer_id,
                room_code=room_code,
                connection_id=connection.id,
                display_name=request.display_name,
                is_host=request.is_host,
            ),
        )
        self._store.bind_connection(connection.id, room_code, peer_id)

        self._send(
            connection.id, OutboundEvent.EXISTING_PEERS, ExistingPeers(peers=others).to_wire()
        )
        joined = PeerJoined(
            peer_id=peer_id, display_name=request.display_name, is_host=request.is_host
        )
        self._send_to_room(
            room_code, OutboundEvent.PEER_JOINED, joined.to_wire(), exclude=connection.id
        )

    def leave_room(self, connection: Connection, request: LeaveRoom) -> None:
        self._reconcile_departure(connection, request.room_code, request.peer_id)

    def connection_closed(self, connection: Connection, reason: str = "") -> None:
        """Reconcile whatever seat a closing connection still holds.

        The connection index is authoritative. When it has no entry, the
        connection's own last-claimed room and peer are used instead.
        """
        logger.info("Connection %s disconnected reason: %s", connection.id, reason)
        binding = self._store.lookup_connection(connection.id)
        if binding is not None:
            self._reconcile_departure(connection, binding.room_code, binding.peer_id)
        elif connection.state.room_code and connection.state.peer_id:
            self._reconcile_departure(
                connection, connection.state.room_code, connection.state.peer_id
            )

    def _reconcile_departure(self, connection: Connection, room_code: str, peer_id: str) -> bool:
        """Remove *peer_id* from *room_code* on behalf of *connection*.

        Only the connection currently holding the seat can vacate it, so a
        connection orphaned by a reconnect is ignored. Returns ``True`` if
        the peer was removed.
        """
        peer = self._store.lookup_peer(room_code, peer_id)
        if peer is None or peer.connection_id != connection.id:
            logger.debug(
                "Ignoring departure of %s from %s: connection %s does not hold the seat",
                peer_id,
                room_code,
                connection.id,
            )
            return False

        logger.info("%s leaving %s", peer_id, room_code)
        self._store.unbind_connection(connection.id)
        self._store.remove_peer(room_code, peer_id)
        if (connection.state.room_code, connection.state.peer_id) == (room_code, peer_id):
            connection.state = ConnectionState()
        self._send_to_room(room_code, OutboundEvent.PEER_LEFT, PeerLeft(peer_id=peer_id).to_wire())
        return True
