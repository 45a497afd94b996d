"""Exceptions raised by the signaling core."""

from typing import Dict

from rendezvous.constants import MessageType


class SignalingError(Exception):
    """Base class for every error raised by the rendezvous package."""


class MalformedMessage(SignalingError):
    """Inbound message could not be decoded into a known variant."""


class RoomError(SignalingError):
    """A room request that is answered to the requester with a typed reply."""

    response_type: MessageType = MessageType.ERROR
    message: str = "Room request failed."

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_payload(self) -> Dict[str, str]:
        return {"type": self.response_type.value, "message": self.message}


class RoomNotFound(RoomError):
    response_type = MessageType.ROOM_NOT_FOUND
    message = "Room not found."


class RoomFull(RoomError):
    response_type = MessageType.ERROR
    message = "Room is full."


class AccessDenied(RoomError):
    response_type = MessageType.WRONG_PASSWORD
    message = "Incorrect password."


class AlreadyInRoom(RoomError):
    response_type = MessageType.ERROR
    message = "Already in a room."


class RoomCodesExhausted(RoomError):
    response_type = MessageType.ERROR
    message = "Could not allocate a room code."
