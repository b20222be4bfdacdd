"""Identity verification performed by clients before joining a room."""

from signalkit.auth.base import CredentialVerifier, VerifiedUser
from signalkit.auth.config import GoogleAuthConfig
from signalkit.auth.google import GoogleCredentialVerifier
from signalkit.auth.mock import MockCredentialVerifier
from signalkit.auth.routes import make_google_login_handler

__all__ = [
    "CredentialVerifier",
    "GoogleAuthConfig",
    "GoogleCredentialVerifier",
    "MockCredentialVerifier",
    "VerifiedUser",
    "make_google_login_handler",
]
