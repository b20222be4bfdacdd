"""aiohttp application wiring and process entry point."""

from __future__ import annotations

import logging

from aiohttp import web

from signalkit.auth.base import CredentialVerifier
from signalkit.auth.google import GoogleCredentialVerifier
from signalkit.auth.routes import make_google_login_handler
from signalkit.config import ServerConfig
from signalkit.core.hub import SignalingHub
from signalkit.transport.websocket import make_websocket_handler

logger = logging.getLogger("signalkit.server")

HUB_KEY = web.AppKey("hub", SignalingHub)


def create_app(
    config: ServerConfig | None = None,
    *,
    hub: SignalingHub | None = None,
    verifier: CredentialVerifier | None = None,
) -> web.Application:
    """Build the web application.

    Routes:
        ``GET /ws``: signaling WebSocket.
        ``GET /health``: room and connection counts.
        ``POST /api/auth/google``: credential exchange, mounted only when a
        verifier is given or a Google client id is configured.
    """
    config = config or ServerConfig()
    hub = hub or SignalingHub()
    if verifier is None:
        google = config.google_auth()
        if google is not None:
            verifier = GoogleCredentialVerifier(google)

    app = web.Application()
    app[HUB_KEY] = hub

    async def health(request: web.Request) -> web.Response:
        return web.json_response({"status": "healthy", **request.app[HUB_KEY].stats})

    app.router.add_get("/health", health)
    app.router.add_get(
        "/ws",
        make_websocket_handler(
            hub, heartbeat=config.ping_interval, receive_timeout=config.ping_timeout
        ),
    )
    if verifier is not None:
        app.router.add_post("/api/auth/google", make_google_login_handler(verifier))
    else:
        logger.warning("GOOGLE_CLIENT_ID not set, /api/auth/google is disabled")

    async def on_cleanup(app: web.Application) -> None:
        app[HUB_KEY].close()
        if verifier is not None:
            await verifier.close()

    app.on_cleanup.append(on_cleanup)
    return app


def main() -> None:
    config = ServerConfig.from_env()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Running on port %d", config.port)
    web.run_app(create_app(config), host=config.host, port=config.port, print=None)


if __name__ == "__main__":
    main()
