"""Process configuration for the signaling server."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, SecretStr

from signalkit.auth.config import GoogleAuthConfig

DEFAULT_PORT = 3001


class ServerConfig(BaseModel):
    """Server configuration.

    ``ping_interval`` and ``ping_timeout`` drive the WebSocket heartbeat that
    detects peers which vanished without a clean close.
    """

    host: str = "0.0.0.0"  # noqa: S104  # nosec B104
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    ping_interval: float = Field(default=25.0, gt=0)
    ping_timeout: float = Field(default=60.0, gt=0)
    google_client_id: SecretStr | None = None
    auth_timeout: float = Field(default=10.0, gt=0)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Build a config from ``PORT``, ``HOST``, ``GOOGLE_CLIENT_ID`` and ``LOG_LEVEL``."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for key, field_name in (
            ("PORT", "port"),
            ("HOST", "host"),
            ("GOOGLE_CLIENT_ID", "google_client_id"),
            ("LOG_LEVEL", "log_level"),
        ):
            if env.get(key):
                values[field_name] = env[key]
        return cls.model_validate(values)

    def google_auth(self) -> GoogleAuthConfig | None:
        """Verifier config, or ``None`` when Google sign-in is not configured."""
        if self.google_client_id is None:
            return None
        return GoogleAuthConfig(
            client_id=self.google_client_id.get_secret_value(),
            timeout=self.auth_timeout,
        )
