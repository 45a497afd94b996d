"""Dispatches decoded protocol messages to their handlers."""

import logging
from typing import Awaitable, Callable, Dict, Type, Union

from rendezvous.constants import Visibility
from rendezvous.errors import MalformedMessage, RoomError
from rendezvous.lobby import LobbyBroadcaster
from rendezvous.messages import (
    MESSAGE_REGISTRY,
    Answer,
    ClientMessage,
    CreateRoom,
    GetRooms,
    IceCandidate,
    JoinRoom,
    Offer,
    RelayMessage,
    decode_message,
    room_created,
    room_joined,
    rooms_list,
)
from rendezvous.registry import RoomRegistry
from rendezvous.session import ConnectionSession

logger = logging.getLogger(__name__)

Handler = Callable[[ConnectionSession, ClientMessage], Awaitable[None]]


class MessageRouter:
    def __init__(self, registry: RoomRegistry, broadcaster: LobbyBroadcaster) -> None:
        self._registry = registry
        self._broadcaster = broadcaster
        self._handlers: Dict[Type[ClientMessage], Handler] = {
            CreateRoom: self._create_room,
            JoinRoom: self._join_room,
            GetRooms: self._get_rooms,
            Offer: self._relay,
            Answer: self._relay,
            IceCandidate: self._relay,
        }
        missing = set(MESSAGE_REGISTRY.values()) - set(self._handlers)
        if missing:
            raise TypeError(f"No handler for message types: {sorted(m.__name__ for m in missing)}")

    async def dispatch(self, session: ConnectionSession, raw: Union[str, bytes]) -> None:
        try:
            message = decode_message(raw)
        except MalformedMessage as exc:
            logger.warning("Dropping malformed message from session %s: %s", session.session_id, exc)
            return
        await self.handle(session, message)

    async def handle(self, session: ConnectionSession, message: ClientMessage) -> None:
        handler = self._handlers[type(message)]
        try:
            await handler(session, message)
        except RoomError as exc:
            logger.info(
                "%s rejected for session %s: %s", message.type.value, session.session_id, exc.message
            )
            await session.send(exc.to_payload())

    async def _create_room(self, session: ConnectionSession, message: CreateRoom) -> None:
        visibility = Visibility.PUBLIC if message.is_public else Visibility.PRIVATE
        room = await self._registry.create_room(session, message.name, visibility, message.password)
        await session.send(room_created(room.code))
        if room.is_public:
            await self._broadcaster.publish()

    async def _join_room(self, session: ConnectionSession, message: JoinRoom) -> None:
        room = await self._registry.join_room(message.room_code, session, message.password)
        await room.host.send(room_joined())
        if room.is_public:
            await self._broadcaster.publish()

    async def _get_rooms(self, session: ConnectionSession, message: GetRooms) -> None:
        await session.send(rooms_list(await self._registry.list_public()))

    async def _relay(self, session: ConnectionSession, message: RelayMessage) -> None:
        if session.in_lobby:
            logger.debug("Dropping %s from session %s: not in a room", message.type.value, session.session_id)
            return
        if message.room_code is not None and message.room_code != session.room_code:
            logger.debug(
                "Dropping %s from session %s: declared room %s, attached to %s",
                message.type.value,
                session.session_id,
                message.room_code,
                session.room_code,
            )
            return
        room = await self._registry.get_room(session.room_code)
        target = room.counterpart(session) if room else None
        if target is None or not target.is_open:
            logger.debug("Dropping %s in room %s: peer unavailable", message.type.value, session.room_code)
            return
        if await target.send(message.forward_payload()):
            logger.debug("Relayed %s in room %s", message.type.value, session.room_code)
