"""Data models for SignalKit."""

from signalkit.models.chat import ChatMessage
from signalkit.models.enums import BroadcastKind, HostAction, InboundEvent, OutboundEvent
from signalkit.models.peer import ConnectionBinding, Peer, PeerInfo

__all__ = [
    "BroadcastKind",
    "ChatMessage",
    "ConnectionBinding",
    "HostAction",
    "InboundEvent",
    "OutboundEvent",
    "Peer",
    "PeerInfo",
]
