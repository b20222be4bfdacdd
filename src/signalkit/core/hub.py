"""SignalingHub - central broker for room presence and peer signaling."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from signalkit.core._chat import ChatMixin
from signalkit.core._host_control import HostControlMixin
from signalkit.core._presence import PresenceMixin
from signalkit.core._relay import RelayMixin
from signalkit.models.enums import InboundEvent
from signalkit.models.inbound import (
    Broadcast,
    Caption,
    GetChatHistory,
    HostControl,
    JoinRoom,
    LeaveRoom,
    ParticipantStatus,
    PostChatMessage,
    Signal,
)
from signalkit.store.base import SignalingStore
from signalkit.store.memory import InMemorySignalingStore
from signalkit.transport.base import Connection

__all__ = [
    "CredentialVerificationError",
    "MalformedEventError",
    "SignalKitError",
    "SignalingHub",
]

logger = logging.getLogger("signalkit.hub")

EventHandler = Callable[[Connection, Any], None]


class SignalKitError(Exception):
    """Base exception for all SignalKit errors."""


class MalformedEventError(SignalKitError):
    """Inbound payload is missing or has invalid required fields."""


class CredentialVerificationError(SignalKitError):
    """Identity credential could not be verified."""


class SignalingHub(PresenceMixin, RelayMixin, HostControlMixin, ChatMixin):
    """Central broker tying connections, rooms, and chat logs together.

    Every handler runs to completion without suspending, so each inbound
    event is atomic with respect to the store. Outbound events are queued
    on the target connections and never awaited. No handler failure is
    allowed to escape into the transport.
    """

    def __init__(self, store: SignalingStore | None = None) -> None:
        self._store = store or InMemorySignalingStore()
        self._connections: dict[str, Connection] = {}
        self._handlers: dict[InboundEvent, tuple[type[BaseModel], EventHandler]] = {
            InboundEvent.JOIN_ROOM: (JoinRoom, self.join_room),
            InboundEvent.LEAVE_ROOM: (LeaveRoom, self.leave_room),
            InboundEvent.SIGNAL: (Signal, self.signal),
            InboundEvent.BROADCAST: (Broadcast, self.broadcast),
            InboundEvent.PARTICIPANT_STATUS: (ParticipantStatus, self.participant_status),
            InboundEvent.HOST_CONTROL: (HostControl, self.host_control),
            InboundEvent.CHAT_MESSAGE: (PostChatMessage, self.chat_message),
            InboundEvent.GET_CHAT_HISTORY: (GetChatHistory, self.get_chat_history),
            InboundEvent.CAPTION: (Caption, self.caption),
        }

    @property
    def store(self) -> SignalingStore:
        return self._store

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    @property
    def stats(self) -> dict[str, Any]:
        return {
            "activeRooms": self._store.room_count,
            "activeConnections": len(self._connections),
        }

    def connect(self, connection: Connection) -> None:
        """Register a live connection so events can be routed to it."""
        self._connections[connection.id] = connection
        logger.info("Connection %s connected", connection.id)

    def disconnect(self, connection: Connection, reason: str = "") -> None:
        """Reconcile a closed connection's seat and forget the connection."""
        try:
            self.connection_closed(connection, reason)
        except Exception:
            logger.exception("Error reconciling disconnect of %s", connection.id)
        finally:
            self._connections.pop(connection.id, None)

    def dispatch(self, connection: Connection, event: str, data: Any) -> bool:
        """Route one inbound event to its handler.

        Unknown events and malformed payloads are dropped without telling
        the sender.

        Returns:
            True if a handler ran to completion.
        """
        try:
            kind = InboundEvent(event)
        except ValueError:
            logger.debug("Ignoring unknown event %r from %s", event, connection.id)
            return False

        model, handler = self._handlers[kind]
        try:
            payload = self._parse(model, data)
        except MalformedEventError as exc:
            logger.debug("Dropping malformed %s from %s: %s", kind.value, connection.id, exc)
            return False

        try:
            handler(connection, payload)
        except Exception:
            logger.exception("Error handling %s from %s", kind.value, connection.id)
            return False
        return True

    def close(self) -> None:
        """Drop all rooms, chat logs, and connections."""
        self._connections.clear()
        self._store.close()
