"""ChatMixin — per-room chat with history."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from signalkit.core._helpers import HelpersMixin
from signalkit.models.chat import ChatMessage
from signalkit.models.enums import OutboundEvent
from signalkit.models.inbound import GetChatHistory, PostChatMessage

if TYPE_CHECKING:
    from signalkit.transport.base import Connection

logger = logging.getLogger("signalkit.hub")


class ChatMixin(HelpersMixin):
    """Chat logs live exactly as long as their room."""

    def chat_message(self, connection: Connection, request: PostChatMessage) -> None:
        """Append to the room's log and echo to the whole room, sender included."""
        message = ChatMessage.create(request.peer_id, request.sender_name, request.content)
        if not self._store.append_message(request.room_code, message):
            logger.warning("Dropping chat message for unknown room %s", request.room_code)
            return

        recipients = self._room_connection_ids(request.room_code)
        if connection.id not in recipients:
            recipients.append(connection.id)
        self._send_many(recipients, OutboundEvent.CHAT_MESSAGE, message.to_wire())

    def get_chat_history(self, connection: Connection, request: GetChatHistory) -> None:
        history = [m.to_wire() for m in self._store.get_history(request.room_code)]
        self._send(connection.id, OutboundEvent.CHAT_HISTORY, history)
