"""Mock credential verifier for testing."""

from __future__ import annotations

from signalkit.auth.base import CredentialVerifier, VerifiedUser
from signalkit.core.hub import CredentialVerificationError


class MockCredentialVerifier(CredentialVerifier):
    """Accepts only credentials present in a pre-configured mapping."""

    def __init__(self, users: dict[str, VerifiedUser] | None = None) -> None:
        self._users = users or {}
        self.calls: list[str] = []

    async def verify(self, credential: str) -> VerifiedUser:
        self.calls.append(credential)
        user = self._users.get(credential)
        if user is None:
            raise CredentialVerificationError("unknown credential")
        return user
