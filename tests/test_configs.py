"""Tests for server configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from signalkit.config import DEFAULT_PORT, ServerConfig


class TestServerConfig:
    def test_defaults(self) -> None:
        cfg = ServerConfig()
        assert cfg.port == DEFAULT_PORT == 3001
        assert cfg.ping_interval == 25.0
        assert cfg.ping_timeout == 60.0
        assert cfg.google_client_id is None
        assert cfg.google_auth() is None

    def test_port_range(self) -> None:
        with pytest.raises(ValidationError):
            ServerConfig(port=0)
        with pytest.raises(ValidationError):
            ServerConfig(port=70000)

    def test_from_env(self) -> None:
        cfg = ServerConfig.from_env(
            {
                "PORT": "8080",
                "GOOGLE_CLIENT_ID": "cid.apps.googleusercontent.com",
                "UNRELATED": "x",
            }
        )
        assert cfg.port == 8080
        assert cfg.google_client_id is not None
        assert cfg.google_client_id.get_secret_value() == "cid.apps.googleusercontent.com"

    def test_from_env_empty_uses_defaults(self) -> None:
        cfg = ServerConfig.from_env({"PORT": ""})
        assert cfg.port == DEFAULT_PORT

    def test_from_env_rejects_bad_port(self) -> None:
        with pytest.raises(ValidationError):
            ServerConfig.from_env({"PORT": "not-a-port"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "4000")
        monkeypatch.delenv("GOOGLE_CLIENT_ID", raising=False)
        assert ServerConfig.from_env().port == 4000

    def test_client_id_is_masked(self) -> None:
        cfg = ServerConfig.from_env({"GOOGLE_CLIENT_ID": "super-secret-id"})
        assert "super-secret-id" not in repr(cfg)

    def test_google_auth_config(self) -> None:
        cfg = ServerConfig.from_env({"GOOGLE_CLIENT_ID": "cid"})
        google = cfg.google_auth()
        assert google is not None
        assert google.client_id == "cid"
        assert google.timeout == cfg.auth_timeout
