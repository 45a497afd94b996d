"""Rendezvous signaling core: rooms, sessions and message relay."""

from rendezvous.constants import MessageType, Role, Visibility
from rendezvous.errors import (
    AccessDenied,
    AlreadyInRoom,
    MalformedMessage,
    RoomError,
    RoomFull,
    RoomNotFound,
    SignalingError,
)
from rendezvous.lifecycle import ConnectionLifecycle
from rendezvous.lobby import LobbyBroadcaster
from rendezvous.models import Room
from rendezvous.registry import RoomRegistry
from rendezvous.router import MessageRouter
from rendezvous.session import ConnectionSession, SessionSet

__all__ = [
    "AccessDenied",
    "AlreadyInRoom",
    "ConnectionLifecycle",
    "ConnectionSession",
    "LobbyBroadcaster",
    "MalformedMessage",
    "MessageRouter",
    "MessageType",
    "Role",
    "Room",
    "RoomError",
    "RoomFull",
    "RoomNotFound",
    "RoomRegistry",
    "SessionSet",
    "SignalingError",
    "Visibility",
]
