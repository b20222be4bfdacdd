"""Tests for wire models and enums."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from signalkit.models.enums import BroadcastKind, HostAction, InboundEvent, OutboundEvent
from signalkit.models.inbound import Caption, HostControl, JoinRoom, Signal
from signalkit.models.outbound import HostControlDelivery, HostControlPayload
from signalkit.models.peer import Peer


class TestPeer:
    def test_defaults_are_muted_and_unlocked(self) -> None:
        peer = Peer(peer_id="a", room_code="R1", connection_id="c1")
        assert peer.is_muted is True
        assert peer.is_camera_off is True
        assert peer.is_mic_locked is False
        assert peer.is_camera_locked is False
        assert peer.joined_at.tzinfo is not None

    def test_info_hides_connection(self) -> None:
        peer = Peer(peer_id="a", room_code="R1", connection_id="c1", display_name="A")
        wire = peer.info().to_wire()
        assert wire == {
            "peerId": "a",
            "displayName": "A",
            "isHost": False,
            "isMuted": True,
            "isCameraOff": True,
            "isMicLocked": False,
            "isCameraLocked": False,
        }


class TestInbound:
    def test_join_accepts_camel_and_snake(self) -> None:
        camel = JoinRoom.model_validate({"roomCode": "R1", "peerId": "a", "isHost": True})
        snake = JoinRoom(room_code="R1", peer_id="a", is_host=True)
        assert camel == snake

    def test_join_rejects_empty_ids(self) -> None:
        with pytest.raises(ValidationError):
            JoinRoom.model_validate({"roomCode": "", "peerId": "a"})

    def test_signal_payload_defaults(self) -> None:
        signal = Signal.model_validate({"roomCode": "R1", "toPeer": "b"})
        assert signal.from_peer is None
        assert signal.type is None
        assert signal.payload is None

    def test_host_control_value_required(self) -> None:
        with pytest.raises(ValidationError):
            HostControl.model_validate({"roomCode": "R1", "targetPeer": "b", "action": "mute"})

    def test_null_means_absent(self) -> None:
        join = JoinRoom.model_validate(
            {"roomCode": "R1", "peerId": "a", "displayName": None, "isHost": None}
        )
        assert join == JoinRoom(room_code="R1", peer_id="a")

    def test_null_identifier_still_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JoinRoom.model_validate({"roomCode": None, "peerId": "a"})
        with pytest.raises(ValidationError):
            HostControl.model_validate(
                {"roomCode": "R1", "targetPeer": "b", "action": "mute", "value": None}
            )

    def test_caption_defaults(self) -> None:
        caption = Caption.model_validate({"roomCode": "R1", "peerId": "a"})
        assert caption.text == ""
        assert caption.interim is False


class TestOutbound:
    def test_host_control_delivery_nests_payload(self) -> None:
        delivery = HostControlDelivery(
            from_peer="a", payload=HostControlPayload(action="mute", value=True)
        )
        assert delivery.to_wire() == {
            "fromPeer": "a",
            "payload": {"action": "mute", "value": True},
        }


class TestEnums:
    def test_inbound_names(self) -> None:
        assert {e.value for e in InboundEvent} == {
            "join-room",
            "signal",
            "broadcast",
            "participant-status",
            "host-control",
            "chat-message",
            "get-chat-history",
            "caption",
            "leave-room",
        }

    def test_broadcast_kinds_do_not_shadow_hub_events(self) -> None:
        reserved = {e.value for e in OutboundEvent} | {e.value for e in InboundEvent}
        assert not reserved & {k.value for k in BroadcastKind}

    def test_every_host_action_maps_to_a_peer_field(self) -> None:
        for action in HostAction:
            assert action.peer_field in Peer.model_fields
