"""Google ID token verifier that checks signatures locally."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx
import jwt

from signalkit.auth.base import CredentialVerifier, VerifiedUser
from signalkit.auth.config import GoogleAuthConfig
from signalkit.core.hub import CredentialVerificationError

logger = logging.getLogger("signalkit.auth")


class GoogleCredentialVerifier(CredentialVerifier):
    """Verify Google Sign-In ID tokens.

    The RS256 signature, audience, and expiry are checked with PyJWT against
    Google's published signing keys; the issuer is then matched against
    ``allowed_issuers``. Only the key set is fetched over the network.
    """

    def __init__(self, config: GoogleAuthConfig) -> None:
        self._config = config
        self._client = httpx.AsyncClient(timeout=config.timeout)
        self._keys: dict[str, Any] = {}
        self._keys_fetched_at = 0.0

    async def verify(self, credential: str) -> VerifiedUser:
        try:
            header = jwt.get_unverified_header(credential)
        except jwt.PyJWTError as exc:
            raise CredentialVerificationError(f"malformed token: {exc}") from exc

        key = await self._signing_key(header.get("kid"))
        try:
            claims = jwt.decode(
                credential,
                key,
                algorithms=["RS256"],
                audience=self._config.client_id,
                leeway=self._config.leeway,
                options={"require": ["exp", "iss", "aud", "sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise CredentialVerificationError("token expired") from exc
        except jwt.InvalidAudienceError as exc:
            raise CredentialVerificationError("audience mismatch") from exc
        except jwt.PyJWTError as exc:
            raise CredentialVerificationError(str(exc)) from exc

        return self._user_from_claims(claims)

    async def _signing_key(self, key_id: Any) -> Any:
        if not isinstance(key_id, str) or not key_id:
            raise CredentialVerificationError("token has no key id")
        stale = time.monotonic() - self._keys_fetched_at > self._config.certs_ttl
        if stale or key_id not in self._keys:
            await self._refresh_keys()
        try:
            return self._keys[key_id]
        except KeyError:
            raise CredentialVerificationError(f"unknown signing key {key_id!r}") from None

    async def _refresh_keys(self) -> None:
        try:
            resp = await self._client.get(self._config.certs_url)
            resp.raise_for_status()
            key_set = jwt.PyJWKSet.from_dict(resp.json())
        except httpx.TimeoutException as exc:
            raise CredentialVerificationError("timeout") from exc
        except httpx.HTTPStatusError as exc:
            raise CredentialVerificationError(f"http_{exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise CredentialVerificationError(str(exc)) from exc
        except (ValueError, TypeError, AttributeError, jwt.PyJWTError) as exc:
            raise CredentialVerificationError("invalid signing key set") from exc

        self._keys = {k.key_id: k.key for k in key_set.keys if k.key_id}
        self._keys_fetched_at = time.monotonic()
        logger.debug("Loaded %d Google signing keys", len(self._keys))

    def _user_from_claims(self, claims: dict[str, Any]) -> VerifiedUser:
        if claims.get("iss") not in self._config.allowed_issuers:
            raise CredentialVerificationError(f"unexpected issuer {claims.get('iss')!r}")
        subject = claims.get("sub")
        if not subject:
            raise CredentialVerificationError("missing subject")

        return VerifiedUser(
            google_id=str(subject),
            email=claims.get("email"),
            name=claims.get("name"),
            picture=claims.get("picture"),
            email_verified=_as_bool(claims.get("email_verified")),
        )

    async def close(self) -> None:
        await self._client.aclose()


def _as_bool(value: Any) -> bool:
    # Older tokens carry booleans as the strings "true"/"false"
    if isinstance(value, str):
        return value.lower() == "true"
    return bool(value)
