"""Google sign-in verifier configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")


class GoogleAuthConfig(BaseModel):
    """Configuration for verifying Google ID tokens locally.

    Signing keys are fetched from ``certs_url`` and cached for
    ``certs_ttl`` seconds; a token signed with an unknown key id forces a
    refresh.
    """

    client_id: str = Field(min_length=1)
    certs_url: str = "https://www.googleapis.com/oauth2/v3/certs"
    certs_ttl: float = Field(default=3600.0, gt=0)
    allowed_issuers: tuple[str, ...] = GOOGLE_ISSUERS
    leeway: float = Field(default=30.0, ge=0)
    timeout: float = Field(default=10.0, gt=0)

    @field_validator("certs_url")
    @classmethod
    def _enforce_https(cls, v: str) -> str:
        if not v.startswith("https://"):
            raise ValueError("certs_url must use HTTPS")
        return v
