"""SignalKit - Pure async Python signaling hub for peer-to-peer video rooms."""

from signalkit._version import __version__
from signalkit.auth import (
    CredentialVerifier,
    GoogleAuthConfig,
    GoogleCredentialVerifier,
    MockCredentialVerifier,
    VerifiedUser,
)
from signalkit.config import ServerConfig
from signalkit.core.hub import (
    CredentialVerificationError,
    MalformedEventError,
    SignalingHub,
    SignalKitError,
)
from signalkit.models import (
    BroadcastKind,
    ChatMessage,
    ConnectionBinding,
    HostAction,
    InboundEvent,
    OutboundEvent,
    Peer,
    PeerInfo,
)
from signalkit.server import create_app
from signalkit.store import InMemorySignalingStore, SignalingStore
from signalkit.transport import Connection, ConnectionState, MockConnection
from signalkit.transport.websocket import WebSocketConnection

__all__ = [
    "BroadcastKind",
    "ChatMessage",
    "Connection",
    "ConnectionBinding",
    "ConnectionState",
    "CredentialVerificationError",
    "CredentialVerifier",
    "GoogleAuthConfig",
    "GoogleCredentialVerifier",
    "HostAction",
    "InMemorySignalingStore",
    "InboundEvent",
    "MalformedEventError",
    "MockConnection",
    "MockCredentialVerifier",
    "OutboundEvent",
    "Peer",
    "PeerInfo",
    "ServerConfig",
    "SignalKitError",
    "SignalingHub",
    "SignalingStore",
    "VerifiedUser",
    "WebSocketConnection",
    "__version__",
    "create_app",
]
