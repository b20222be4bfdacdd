"""HelpersMixin — delivery helpers shared across hub mixins."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from signalkit.models.outbound import ParticipantUpdated
from signalkit.models.peer import Peer

if TYPE_CHECKING:
    from signalkit.store.base import SignalingStore
    from signalkit.transport.base import Connection

logger = logging.getLogger("signalkit.hub")

ModelT = TypeVar("ModelT", bound=BaseModel)


class HelpersMixin:
    """Internal helpers used by other hub mixins."""

    _store: SignalingStore
    _connections: dict[str, Connection]

    def _send(self, connection_id: str, event: str, data: Any) -> bool:
        """Queue *event* on one connection. Unknown connections are skipped."""
        connection = self._connections.get(connection_id)
        if connection is None or connection.closed:
            return False
        connection.send(event, data)
        return True

    def _send_many(self, connection_ids: Iterable[str], event: str, data: Any) -> int:
        return sum(self._send(conn_id, event, data) for conn_id in connection_ids)

    def _room_connection_ids(self, room_code: str, *, exclude: str | None = None) -> list[str]:
        """Connection ids of every peer seated in a room, minus *exclude*."""
        return [
            peer.connection_id
            for peer in self._store.list_peers(room_code)
            if peer.connection_id != exclude
        ]

    def _send_to_room(
        self, room_code: str, event: str, data: Any, *, exclude: str | None = None
    ) -> int:
        """Fan *event* out to a room. Returns the number of connections reached."""
        return self._send_many(self._room_connection_ids(room_code, exclude=exclude), event, data)

    @staticmethod
    def _status(peer: Peer) -> ParticipantUpdated:
        return ParticipantUpdated(
            peer_id=peer.peer_id,
            is_muted=peer.is_muted,
            is_camera_off=peer.is_camera_off,
            is_mic_locked=peer.is_mic_locked,
            is_camera_locked=peer.is_camera_locked,
        )

    @staticmethod
    def _parse(model: type[ModelT], data: Any) -> ModelT:
        """Validate an inbound payload, raising ``MalformedEventError`` on failure."""
        from signalkit.core.hub import MalformedEventError

        if not isinstance(data, dict):
            raise MalformedEventError(f"{model.__name__} payload must be an object")
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise MalformedEventError(
                f"{model.__name__}: {exc.error_count()} validation error(s)"
            ) from exc
