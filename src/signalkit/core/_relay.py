"""RelayMixin — directed signaling, room broadcasts, and captions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from signalkit.core._helpers import HelpersMixin
from signalkit.models.chat import now_ms
from signalkit.models.enums import BroadcastKind, OutboundEvent
from signalkit.models.inbound import Broadcast, Caption, Signal
from signalkit.models.outbound import BroadcastDelivery, CaptionDelivery, SignalDelivery

if TYPE_CHECKING:
    from signalkit.transport.base import Connection

logger = logging.getLogger("signalkit.hub")


class RelayMixin(HelpersMixin):
    """Stateless fan-out. Payloads are passed through uninterpreted."""

    def signal(self, connection: Connection, request: Signal) -> None:
        """Deliver a negotiation message to exactly one peer.

        Best-effort: an absent target drops the message with a warning and
        the sender is not told.
        """
        target = self._store.lookup_peer(request.room_code, request.to_peer)
        if target is None:
            logger.warning(
                "signal target %s not found in room %s", request.to_peer, request.room_code
            )
            return
        delivery = SignalDelivery(
            from_peer=request.from_peer, type=request.type, payload=request.payload
        )
        self._send(target.connection_id, OutboundEvent.SIGNAL, delivery.to_wire())

    def broadcast(self, connection: Connection, request: Broadcast) -> None:
        """Fan a known broadcast kind out to everyone else in the room."""
        try:
            kind = BroadcastKind(request.type)
        except ValueError:
            logger.warning(
                "Dropping broadcast of unknown kind %r in room %s", request.type, request.room_code
            )
            return
        delivery = BroadcastDelivery(from_peer=request.from_peer, payload=request.payload)
        self._send_to_room(
            request.room_code, kind.value, delivery.to_wire(), exclude=connection.id
        )

    def caption(self, connection: Connection, request: Caption) -> None:
        logger.debug(
            "Caption from %s (%s): %r interim:%s",
            request.display_name,
            request.peer_id,
            request.text,
            request.interim,
        )
        delivery = CaptionDelivery(
            peer_id=request.peer_id,
            display_name=request.display_name,
            text=request.text,
            interim=request.interim,
            timestamp=now_ms(),
        )
        self._send_to_room(
            request.room_code, OutboundEvent.CAPTION, delivery.to_wire(), exclude=connection.id
        )
