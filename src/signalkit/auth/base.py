"""Abstract base class for identity credential verification."""

from __future__ import annotations

from abc import ABC, abstractmethod

from signalkit.models.base import WireModel


class VerifiedUser(WireModel):
    """Profile returned to the client after a successful sign-in."""

    google_id: str
    email: str | None = None
    name: str | None = None
    picture: str | None = None
    email_verified: bool = False


class CredentialVerifier(ABC):
    """Turns an opaque client credential into a verified user profile.

    Verification is stateless and independent of room state; clients call
    it before joining to obtain a display identity.
    """

    @abstractmethod
    async def verify(self, credential: str) -> VerifiedUser:
        """Verify *credential*.

        Raises:
            CredentialVerificationError: The credential is invalid, expired,
                issued for another audience, or could not be checked.
        """
        ...

    async def close(self) -> None:
        """Release resources.

        Override this method in subclasses that need cleanup.
        The default implementation does nothing.
        """
        return None
