import json

import pytest

from rendezvous.constants import MessageType
from rendezvous.errors import MalformedMessage
from rendezvous.messages import (
    MESSAGE_REGISTRY,
    Answer,
    CreateRoom,
    GetRooms,
    IceCandidate,
    JoinRoom,
    Offer,
    decode_message,
    opponent_left,
    room_created,
    rooms_list,
)


def test_decode_create_room():
    message = decode_message(json.dumps({"type": "create_room", "name": "Arena", "isPublic": True}))
    assert isinstance(message, CreateRoom)
    assert message.type == MessageType.CREATE_ROOM
    assert message.name == "Arena"
    assert message.is_public is True
    assert message.password is None


def test_create_room_defaults_to_private_and_ignores_empty_password():
    message = decode_message('{"type": "create_room", "password": ""}')
    assert message.is_public is False
    assert message.password is None


def test_decode_join_room():
    message = decode_message('{"type": "join_room", "roomCode": "AB12C", "password": "pw"}')
    assert isinstance(message, JoinRoom)
    assert message.room_code == "AB12C"
    assert message.password == "pw"


def test_decode_get_rooms_ignores_extra_fields():
    assert isinstance(decode_message('{"type": "get_rooms", "roomCode": "X"}'), GetRooms)


def test_relay_variants_keep_payload_untouched():
    candidate = {"candidate": "candidate:1 1 udp 2122260223 10.0.0.1 5000 typ host", "sdpMLineIndex": 0}
    offer = decode_message(json.dumps({"type": "offer", "roomCode": "R", "sdp": {"type": "offer", "sdp": "v=0"}}))
    answer = decode_message('{"type": "answer", "sdp": "v=0"}')
    ice = decode_message(json.dumps({"type": "ice_candidate", "roomCode": "R", "candidate": candidate}))

    assert isinstance(offer, Offer)
    assert offer.forward_payload() == {"type": "offer", "sdp": {"type": "offer", "sdp": "v=0"}}
    assert isinstance(answer, Answer)
    assert answer.room_code is None
    assert answer.forward_payload() == {"type": "answer", "sdp": "v=0"}
    assert isinstance(ice, IceCandidate)
    assert ice.forward_payload() == {"type": "ice_candidate", "candidate": candidate}


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "",
        "[1, 2, 3]",
        '"create_room"',
        "{}",
        '{"type": 5}',
        '{"type": "dance"}',
        b"\xff\xfe",
    ],
)
def test_malformed_messages_are_rejected(raw):
    with pytest.raises(MalformedMessage):
        decode_message(raw)


def test_registry_covers_every_inbound_type():
    inbound = {
        MessageType.CREATE_ROOM,
        MessageType.JOIN_ROOM,
        MessageType.GET_ROOMS,
        MessageType.OFFER,
        MessageType.ANSWER,
        MessageType.ICE_CANDIDATE,
    }
    assert set(MESSAGE_REGISTRY) == {t.value for t in inbound}


def test_outbound_builders():
    assert room_created("AB12C") == {"type": "room_created", "roomCode": "AB12C"}
    assert rooms_list([]) == {"type": "rooms_list", "rooms": []}
    assert opponent_left() == {"type": "opponent_left"}


def test_non_string_fields_are_read_as_text():
    create = decode_message('{"type": "create_room", "name": 42, "password": 1234, "isPublic": true}')
    assert create.name == "42"
    assert create.password == "1234"

    join = decode_message('{"type": "join_room", "roomCode": 12345, "password": 1234}')
    assert join.room_code == "12345"
    assert join.password == "1234"


def test_unusable_fields_fall_back_to_absent():
    create = decode_message('{"type": "create_room", "name": ["Arena"], "password": false}')
    assert create.name is None
    assert create.password is None

    join = decode_message('{"type": "join_room", "roomCode": {"code": "AB12C"}}')
    assert join.room_code is None
