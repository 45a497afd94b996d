"""Protocol messages: inbound variants decoded once, outbound payload builders."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, Union

from rendezvous.constants import MessageType
from rendezvous.errors import MalformedMessage


def _text(payload: Dict[str, Any], key: str) -> Optional[str]:
    """Read a text field; numbers and booleans are taken in their JSON spelling."""
    value = payload.get(key)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return None


@dataclass
class ClientMessage(ABC):
    """Abstract base of the inbound variants; one subclass per wire ``type``."""

    type: MessageType

    @classmethod
    @abstractmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ClientMessage":
        ...


@dataclass
class CreateRoom(ClientMessage):
    name: Optional[str] = None
    is_public: bool = False
    password: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "CreateRoom":
        return cls(
            type=MessageType.CREATE_ROOM,
            name=_text(payload, "name"),
            is_public=bool(payload.get("isPublic", False)),
            password=_text(payload, "password") if payload.get("password") else None,
        )


@dataclass
class JoinRoom(ClientMessage):
    room_code: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "JoinRoom":
        return cls(
            type=MessageType.JOIN_ROOM,
            room_code=_text(payload, "roomCode"),
            password=_text(payload, "password"),
        )


@dataclass
class GetRooms(ClientMessage):
    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "GetRooms":
        return cls(type=MessageType.GET_ROOMS)


@dataclass
class RelayMessage(ClientMessage):
    """A handshake payload forwarded verbatim to the room counterpart."""

    field_name = ""
    message_type = MessageType.OFFER

    room_code: Optional[str] = None
    body: Any = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "RelayMessage":
        return cls(
            type=cls.message_type,
            room_code=_text(payload, "roomCode"),
            body=payload.get(cls.field_name),
        )

    def forward_payload(self) -> Dict[str, Any]:
        return {"type": self.type.value, self.field_name: self.body}


@dataclass
class Offer(RelayMessage):
    field_name = "sdp"
    message_type = MessageType.OFFER


@dataclass
class Answer(RelayMessage):
    field_name = "sdp"
    message_type = MessageType.ANSWER


@dataclass
class IceCandidate(RelayMessage):
    field_name = "candidate"
    message_type = MessageType.ICE_CANDIDATE


MESSAGE_REGISTRY: Dict[str, Type[ClientMessage]] = {
    MessageType.CREATE_ROOM.value: CreateRoom,
    MessageType.JOIN_ROOM.value: JoinRoom,
    MessageType.GET_ROOMS.value: GetRooms,
    MessageType.OFFER.value: Offer,
    MessageType.ANSWER.value: Answer,
    MessageType.ICE_CANDIDATE.value: IceCandidate,
}


def decode_message(raw: Union[str, bytes]) -> ClientMessage:
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise MalformedMessage("Message is not valid JSON.") from exc
    if not isinstance(payload, dict):
        raise MalformedMessage("Message must be a JSON object.")
    message_type = payload.get("type")
    if not isinstance(message_type, str):
        raise MalformedMessage("Missing message type.")
    message_cls = MESSAGE_REGISTRY.get(message_type)
    if not message_cls:
        raise MalformedMessage(f"Unknown message type '{message_type}'.")
    return message_cls.from_payload(payload)


def room_created(room_code: str) -> Dict[str, str]:
    return {"type": MessageType.ROOM_CREATED.value, "roomCode": room_code}


def room_joined() -> Dict[str, str]:
    return {"type": MessageType.ROOM_JOINED.value}


def rooms_list(rooms: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"type": MessageType.ROOMS_LIST.value, "rooms": rooms}


def opponent_left() -> Dict[str, str]:
    return {"type": MessageType.OPPONENT_LEFT.value}
