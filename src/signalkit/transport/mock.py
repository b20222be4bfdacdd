"""Mock connection for testing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from signalkit.transport.base import Connection


@dataclass(frozen=True)
class SentEvent:
    event: str
    data: Any


class MockConnection(Connection):
    """Records every event sent to it instead of writing to a socket."""

    def __init__(self, connection_id: str | None = None) -> None:
        super().__init__(connection_id)
        self.sent: list[SentEvent] = []
        self._closed = False

    def send(self, event: str, data: Any) -> None:
        if self._closed:
            return
        self.sent.append(SentEvent(event=event, data=data))

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def events(self, name: str) -> list[Any]:
        """Return the payloads of every sent event called *name*, in order."""
        return [s.data for s in self.sent if s.event == name]

    def event_names(self) -> list[str]:
        return [s.event for s in self.sent]

    def clear(self) -> None:
        self.sent.clear()
