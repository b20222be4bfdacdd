"""Registry backends for rooms, peers, chat logs, and connections."""

from signalkit.store.base import SignalingStore
from signalkit.store.memory import InMemorySignalingStore

__all__ = ["InMemorySignalingStore", "SignalingStore"]
