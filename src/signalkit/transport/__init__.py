"""Client connection transports."""

from signalkit.transport.base import Connection, ConnectionState
from signalkit.transport.mock import MockConnection, SentEvent

__all__ = ["Connection", "ConnectionState", "MockConnection", "SentEvent"]
