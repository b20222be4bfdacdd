"""aiohttp route for exchanging a Google credential for a user profile."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable

from aiohttp import web

from signalkit.auth.base import CredentialVerifier
from signalkit.core.hub import CredentialVerificationError

logger = logging.getLogger("signalkit.auth")

RequestHandler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def make_google_login_handler(verifier: CredentialVerifier) -> RequestHandler:
    """Create the ``POST /api/auth/google`` handler.

    Responds 400 when no credential is supplied and 401 on any verification
    failure. Failure details are logged but never returned to the caller.
    """

    async def google_login(request: web.Request) -> web.StreamResponse:
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            body = None

        credential = body.get("credential") if isinstance(body, dict) else None
        if not credential or not isinstance(credential, str):
            return web.json_response({"error": "No credential provided"}, status=400)

        try:
            user = await verifier.verify(credential)
        except CredentialVerificationError as exc:
            logger.error("Token verification failed: %s", exc)
            return web.json_response({"error": "Invalid token"}, status=401)

        logger.info("Google login: %s (%s)", user.email, user.name)
        return web.json_response({"user": user.to_wire()})

    return google_login
