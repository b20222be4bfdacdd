"""Shared test fixtures and helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from signalkit.core.hub import SignalingHub
from signalkit.store.memory import InMemorySignalingStore
from signalkit.transport.mock import MockConnection

ConnectFn = Callable[..., MockConnection]


@pytest.fixture
def store() -> InMemorySignalingStore:
    return InMemorySignalingStore()


@pytest.fixture
def hub(store: InMemorySignalingStore) -> SignalingHub:
    return SignalingHub(store=store)


@pytest.fixture
def connect(hub: SignalingHub) -> ConnectFn:
    """Open a mock connection on the hub::

    conn = connect()          # random id
    conn = connect("sock-a")  # fixed id
    """

    def _connect(connection_id: str | None = None) -> MockConnection:
        conn = MockConnection(connection_id)
        hub.connect(conn)
        return conn

    return _connect


def join(
    hub: SignalingHub,
    conn: MockConnection,
    peer_id: str,
    room_code: str = "R1",
    display_name: str | None = None,
    is_host: bool = False,
    **extra: Any,
) -> bool:
    """Dispatch a ``join-room`` event the way a browser client would."""
    return hub.dispatch(
        conn,
        "join-room",
        {
            "roomCode": room_code,
            "peerId": peer_id,
            "displayName": display_name or peer_id.upper(),
            "isHost": is_host,
            **extra,
        },
    )
