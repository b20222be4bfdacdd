"""Payload models for events the hub sends to clients."""

from __future__ import annotations

from typing import Any

from signalkit.models.base import WireModel
from signalkit.models.peer import PeerInfo


class ExistingPeers(WireModel):
    peers: list[PeerInfo]


class PeerJoined(WireModel):
    peer_id: str
    display_name: str | None = None
    is_host: bool = False


class PeerLeft(WireModel):
    peer_id: str


class SignalDelivery(WireModel):
    from_peer: str | None = None
    type: str | None = None
    payload: Any = None


class BroadcastDelivery(WireModel):
    from_peer: str | None = None
    payload: Any = None


class ParticipantUpdated(WireModel):
    """Combined media and lock status of one peer."""

    peer_id: str
    is_muted: bool
    is_camera_off: bool
    is_mic_locked: bool
    is_camera_locked: bool


class HostControlPayload(WireModel):
    action: str
    value: bool


class HostControlDelivery(WireModel):
    from_peer: str | None = None
    payload: HostControlPayload


class CaptionDelivery(WireModel):
    peer_id: str
    display_name: str | None = None
    text: str = ""
    interim: bool = False
    timestamp: int
