"""Tests for signal, broadcast, and caption relaying."""

from __future__ import annotations

import logging
import time

import pytest

from signalkit.core.hub import SignalingHub
from signalkit.models.enums import BroadcastKind
from signalkit.transport.mock import MockConnection
from tests.conftest import ConnectFn, join


@pytest.fixture
def trio(hub: SignalingHub, connect: ConnectFn) -> tuple[MockConnection, ...]:
    a, b, c = connect("sock-a"), connect("sock-b"), connect("sock-c")
    for conn, peer_id in ((a, "a"), (b, "b"), (c, "c")):
        join(hub, conn, peer_id)
    for conn in (a, b, c):
        conn.clear()
    return a, b, c


class TestSignal:
    def test_delivers_to_exactly_one_target(
        self, hub: SignalingHub, trio: tuple[MockConnection, ...]
    ) -> None:
        a, b, c = trio
        offer = {"sdp": "v=0...", "type": "offer"}
        hub.dispatch(
            a,
            "signal",
            {"roomCode": "R1", "fromPeer": "a", "toPeer": "b", "type": "offer", "payload": offer},
        )
        assert b.events("signal") == [{"fromPeer": "a", "type": "offer", "payload": offer}]
        assert a.sent == []
        assert c.sent == []

    def test_payload_is_opaque(self, hub: SignalingHub, trio: tuple[MockConnection, ...]) -> None:
        a, b, _ = trio
        payload = {"candidate": "candidate:1 1 udp 2122260223 10.0.0.1 54321 typ host"}
        hub.dispatch(
            a,
            "signal",
            {
                "roomCode": "R1",
                "fromPeer": "a",
                "toPeer": "b",
                "type": "whatever",
                "payload": payload,
            },
        )
        (delivered,) = b.events("signal")
        assert delivered["type"] == "whatever"
        assert delivered["payload"] == payload

    def test_missing_target_is_dropped_with_warning(
        self,
        hub: SignalingHub,
        trio: tuple[MockConnection, ...],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        a, b, c = trio
        with caplog.at_level(logging.WARNING, logger="signalkit.hub"):
            hub.dispatch(
                a,
                "signal",
                {"roomCode": "R1", "fromPeer": "a", "toPeer": "zed", "type": "offer"},
            )
        assert all(conn.sent == [] for conn in (a, b, c))
        assert "zed" in caplog.text

    def test_missing_room_is_dropped(
        self, hub: SignalingHub, trio: tuple[MockConnection, ...]
    ) -> None:
        a, b, _ = trio
        hub.dispatch(a, "signal", {"roomCode": "R9", "fromPeer": "a", "toPeer": "b"})
        assert b.sent == []

    def test_signal_follows_reconnect(
        self, hub: SignalingHub, trio: tuple[MockConnection, ...], connect: ConnectFn
    ) -> None:
        a, b, _ = trio
        b2 = connect("sock-b2")
        join(hub, b2, "b")
        hub.dispatch(a, "signal", {"roomCode": "R1", "fromPeer": "a", "toPeer": "b"})
        assert len(b2.events("signal")) == 1
        assert b.events("signal") == []


class TestBroadcast:
    def test_known_kind_fans_out_to_others(
        self, hub: SignalingHub, trio: tuple[MockConnection, ...]
    ) -> None:
        a, b, c = trio
        hub.dispatch(
            a,
            "broadcast",
            {
                "roomCode": "R1",
                "fromPeer": "a",
                "type": "hand-raised",
                "payload": {"raised": True},
            },
        )
        expected = {"fromPeer": "a", "payload": {"raised": True}}
        assert b.events("hand-raised") == [expected]
        assert c.events("hand-raised") == [expected]
        assert a.sent == []

    @pytest.mark.parametrize("kind", list(BroadcastKind))
    def test_every_kind_uses_its_value_as_event_name(
        self, hub: SignalingHub, trio: tuple[MockConnection, ...], kind: BroadcastKind
    ) -> None:
        a, b, _ = trio
        hub.dispatch(a, "broadcast", {"roomCode": "R1", "fromPeer": "a", "type": kind.value})
        assert b.event_names() == [kind.value]

    def test_unknown_kind_is_rejected(
        self,
        hub: SignalingHub,
        trio: tuple[MockConnection, ...],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        a, b, c = trio
        with caplog.at_level(logging.WARNING, logger="signalkit.hub"):
            hub.dispatch(
                a,
                "broadcast",
                {"roomCode": "R1", "fromPeer": "a", "type": "peer-left", "payload": {}},
            )
        assert b.sent == []
        assert c.sent == []
        assert "unknown kind" in caplog.text


class TestCaption:
    def test_null_text_and_interim_take_defaults(
        self, hub: SignalingHub, trio: tuple[MockConnection, ...]
    ) -> None:
        a, b, _ = trio
        ok = hub.dispatch(
            a,
            "caption",
            {"roomCode": "R1", "peerId": "a", "displayName": None, "text": None, "interim": None},
        )
        assert ok is True
        (caption,) = b.events("caption")
        assert caption["text"] == ""
        assert caption["interim"] is False
        assert caption["displayName"] is None

    def test_caption_goes_to_others_with_timestamp(
        self, hub: SignalingHub, trio: tuple[MockConnection, ...]
    ) -> None:
        a, b, c = trio
        before = int(time.time() * 1000)
        hub.dispatch(
            a,
            "caption",
            {
                "roomCode": "R1",
                "peerId": "a",
                "displayName": "Alice",
                "text": "hello every",
                "interim": True,
            },
        )
        after = int(time.time() * 1000)

        assert a.sent == []
        for conn in (b, c):
            (caption,) = conn.events("caption")
            assert caption["peerId"] == "a"
            assert caption["displayName"] == "Alice"
            assert caption["text"] == "hello every"
            assert caption["interim"] is True
            assert before <= caption["timestamp"] <= after

    def test_interim_and_final_are_independent(
        self, hub: SignalingHub, trio: tuple[MockConnection, ...]
    ) -> None:
        a, b, _ = trio
        base = {"roomCode": "R1", "peerId": "a", "displayName": "Alice"}
        hub.dispatch(a, "caption", {**base, "text": "hel", "interim": True})
        hub.dispatch(a, "caption", {**base, "text": "hello", "interim": False})
        hub.dispatch(a, "caption", {**base, "text": "hello", "interim": False})
        assert [(c["text"], c["interim"]) for c in b.events("caption")] == [
            ("hel", True),
            ("hello", False),
            ("hello", False),
        ]

    def test_caption_requires_peer_id(
        self, hub: SignalingHub, trio: tuple[MockConnection, ...]
    ) -> None:
        a, b, _ = trio
        assert hub.dispatch(a, "caption", {"roomCode": "R1", "text": "hi"}) is False
        assert b.sent == []
