"""Hub core: presence, relay, host control, and chat."""

from signalkit.core.hub import (
    CredentialVerificationError,
    MalformedEventError,
    SignalingHub,
    SignalKitError,
)

__all__ = [
    "CredentialVerificationError",
    "MalformedEventError",
    "SignalKitError",
    "SignalingHub",
]
