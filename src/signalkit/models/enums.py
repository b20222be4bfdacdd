"""All string enums for SignalKit."""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class InboundEvent(StrEnum):
    """Event names a client may send to the hub."""

    JOIN_ROOM = "join-room"
    SIGNAL = "signal"
    BROADCAST = "broadcast"
    PARTICIPANT_STATUS = "participant-status"
    HOST_CONTROL = "host-control"
    CHAT_MESSAGE = "chat-message"
    GET_CHAT_HISTORY = "get-chat-history"
    CAPTION = "caption"
    LEAVE_ROOM = "leave-room"


@unique
class OutboundEvent(StrEnum):
    """Event names the hub sends to clients (broadcast kinds aside)."""

    EXISTING_PEERS = "existing-peers"
    PEER_JOINED = "peer-joined"
    PEER_LEFT = "peer-left"
    SIGNAL = "signal"
    PARTICIPANT_UPDATED = "participant-updated"
    HOST_CONTROL = "host-control"
    CHAT_MESSAGE = "chat-message"
    CHAT_HISTORY = "chat-history"
    CAPTION = "caption"


@unique
class BroadcastKind(StrEnum):
    """Room-wide broadcast kinds the relay is willing to fan out.

    The value doubles as the outbound event name.
    """

    REACTION = "reaction"
    HAND_RAISED = "hand-raised"
    HAND_LOWERED = "hand-lowered"
    SCREEN_SHARE_STARTED = "screen-share-started"
    SCREEN_SHARE_STOPPED = "screen-share-stopped"


@unique
class HostAction(StrEnum):
    LOCK_MIC = "lock-mic"
    UNLOCK_MIC = "unlock-mic"
    LOCK_CAMERA = "lock-camera"
    UNLOCK_CAMERA = "unlock-camera"
    MUTE = "mute"
    UNMUTE = "unmute"

    @property
    def peer_field(self) -> str:
        """Name of the ``Peer`` attribute this action writes."""
        return _HOST_ACTION_FIELDS[self]


_HOST_ACTION_FIELDS: dict[HostAction, str] = {
    HostAction.LOCK_MIC: "is_mic_locked",
    HostAction.UNLOCK_MIC: "is_mic_locked",
    HostAction.LOCK_CAMERA: "is_camera_locked",
    HostAction.UNLOCK_CAMERA: "is_camera_locked",
    HostAction.MUTE: "is_muted",
    HostAction.UNMUTE: "is_muted",
}
