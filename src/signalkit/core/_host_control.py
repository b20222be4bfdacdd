"""HostControlMixin — host-imposed and self-reported media state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from signalkit.core._helpers import HelpersMixin
from signalkit.models.enums import HostAction, OutboundEvent
from signalkit.models.inbound import HostControl, ParticipantStatus
from signalkit.models.outbound import HostControlDelivery, HostControlPayload

if TYPE_CHECKING:
    from signalkit.transport.base import Connection

logger = logging.getLogger("signalkit.hub")


class HostControlMixin(HelpersMixin):
    """Mute and lock flags on seated peers.

    Neither path checks authority: any connection may issue host control
    against any peer, and a peer may report media state that contradicts
    its locks. Clients enforce both.
    """

    def host_control(self, connection: Connection, request: HostControl) -> None:
        """Apply a host action to a target peer.

        The target alone receives the raw action so its client can enforce
        it; the rest of the room (minus the issuer) receives the target's
        updated status. Unknown actions are ignored.
        """
        try:
            action = HostAction(request.action)
        except ValueError:
            logger.debug("Ignoring unknown host action %r", request.action)
            return

        target = self._store.update_peer(
            request.room_code, request.target_peer, **{action.peer_field: request.value}
        )
        if target is None:
            logger.warning(
                "host-control target %s not found in room %s",
                request.target_peer,
                request.room_code,
            )
            return

        logger.info(
            "%s applied %s=%s to %s in %s",
            request.from_peer,
            action.value,
            request.value,
            request.target_peer,
            request.room_code,
        )
        delivery = HostControlDelivery(
            from_peer=request.from_peer,
            payload=HostControlPayload(action=action.value, value=request.value),
        )
        self._send(target.connection_id, OutboundEvent.HOST_CONTROL, delivery.to_wire())
        self._send_to_room(
            request.room_code,
            OutboundEvent.PARTICIPANT_UPDATED,
            self._status(target).to_wire(),
            exclude=connection.id,
        )

    def participant_status(self, connection: Connection, request: ParticipantStatus) -> None:
        """Record self-reported media state. A flag sent as ``null`` keeps its value."""
        changes = {
            field: value
            for field, value in (
                ("is_muted", request.is_muted),
                ("is_camera_off", request.is_camera_off),
            )
            if value is not None
        }
        peer = self._store.update_peer(request.room_code, request.peer_id, **changes)
        if peer is None:
            logger.debug(
                "participant-status for unknown peer %s in %s", request.peer_id, request.room_code
            )
            return
        self._send_to_room(
            request.room_code,
            OutboundEvent.PARTICIPANT_UPDATED,
            self._status(peer).to_wire(),
            exclude=connection.id,
        )
