"""Peer model and its public projections."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from signalkit.models.base import WireModel


class PeerInfo(WireModel):
    """Public state of a peer, as shown to the rest of the room."""

    peer_id: str
    display_name: str | None = None
    is_host: bool = False
    is_muted: bool = True
    is_camera_off: bool = True
    is_mic_locked: bool = False
    is_camera_locked: bool = False


class Peer(WireModel):
    """A participant seated in a room, bound to one live connection.

    ``is_host`` is self-declared at join time and never verified. The
    mute/camera flags are self-reported; the lock flags are imposed by
    host control and are advisory only.
    """

    peer_id: str
    room_code: str
    connection_id: str
    display_name: str | None = None
    is_host: bool = False
    is_muted: bool = True
    is_camera_off: bool = True
    is_mic_locked: bool = False
    is_camera_locked: bool = False
    joined_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def info(self) -> PeerInfo:
        return PeerInfo(
            peer_id=self.peer_id,
            display_name=self.display_name,
            is_host=self.is_host,
            is_muted=self.is_muted,
            is_camera_off=self.is_camera_off,
            is_mic_locked=self.is_mic_locked,
            is_camera_locked=self.is_camera_locked,
        )


class ConnectionBinding(BaseModel):
    """Connection index entry: which seat a live connection currently holds."""

    connection_id: str
    room_code: str
    peer_id: str
