"""Payload models for events sent by clients.

Required identifying fields (room codes, peer ids) reject empty strings so
that a malformed event fails validation and is dropped by the dispatcher.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, model_validator

from signalkit.models.base import WireModel

NonEmptyStr = Annotated[str, Field(min_length=1)]


class InboundPayload(WireModel):
    """Base for client payloads.

    Browsers often send ``null`` for a field they have no value for. A ``null``
    is treated as an absent key, so optional fields take their defaults and
    only a missing required field fails validation.
    """

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {k: v for k, v in data.items() if v is not None}


class JoinRoom(InboundPayload):
    room_code: NonEmptyStr
    peer_id: NonEmptyStr
    display_name: str | None = None
    is_host: bool = False


class LeaveRoom(InboundPayload):
    room_code: NonEmptyStr
    peer_id: NonEmptyStr


class Signal(InboundPayload):
    """Directed negotiation message (offer, answer, ICE candidate, ...)."""

    room_code: NonEmptyStr
    from_peer: str | None = None
    to_peer: NonEmptyStr
    type: str | None = None
    payload: Any = None


class Broadcast(InboundPayload):
    room_code: NonEmptyStr
    from_peer: str | None = None
    type: NonEmptyStr
    payload: Any = None


class ParticipantStatus(InboundPayload):
    room_code: NonEmptyStr
    peer_id: NonEmptyStr
    is_muted: bool | None = None
    is_camera_off: bool | None = None


class HostControl(InboundPayload):
    room_code: NonEmptyStr
    from_peer: str | None = None
    target_peer: NonEmptyStr
    action: str
    value: bool


class PostChatMessage(InboundPayload):
    room_code: NonEmptyStr
    peer_id: str | None = None
    sender_name: str | None = None
    content: str = ""


class GetChatHistory(InboundPayload):
    room_code: NonEmptyStr


class Caption(InboundPayload):
    """A live speech-to-text fragment, interim or final."""

    room_code: NonEmptyStr
    peer_id: NonEmptyStr
    display_name: str | None = None
    text: str = ""
    interim: bool = False
