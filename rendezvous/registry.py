"""In-memory room registry.

Every read used for a reply and every mutation goes through one asyncio lock,
so a join validates and attaches the guest in a single critical section.
"""

import asyncio
import logging
import secrets
from typing import Dict, List, Optional, Union

from rendezvous.constants import (
    DEFAULT_ROOM_NAME,
    MAX_ROOM_NAME_LENGTH,
    ROOM_CODE_ALPHABET,
    ROOM_CODE_LENGTH,
    ROOM_CODE_MAX_ATTEMPTS,
    Role,
    Visibility,
)
from rendezvous.errors import (
    AccessDenied,
    AlreadyInRoom,
    RoomCodesExhausted,
    RoomFull,
    RoomNotFound,
)
from rendezvous.models import Room
from rendezvous.session import ConnectionSession

logger = logging.getLogger(__name__)


class RoomRegistry:
    def __init__(self) -> None:
        self._rooms: Dict[str, Room] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, code: object) -> bool:
        return code in self._rooms

    async def create_room(
        self,
        host: ConnectionSession,
        name: Optional[str],
        visibility: Visibility,
        access_secret: Optional[str] = None,
    ) -> Room:
        async with self._lock:
            if not host.in_lobby:
                raise AlreadyInRoom()
            room = Room(
                code=self._generate_code(),
                name=self._sanitize_room_name(name),
                visibility=visibility,
                host=host,
                access_secret=access_secret or None,
            )
            self._rooms[room.code] = room
            host.attach(room.code, Role.HOST)
        logger.info(
            "Room created: %s (public=%s, password=%s)", room.code, room.is_public, room.has_secret
        )
        return room

    async def join_room(
        self, code: Optional[str], guest: ConnectionSession, supplied_secret: Optional[str] = None
    ) -> Room:
        async with self._lock:
            if not guest.in_lobby:
                raise AlreadyInRoom()
            room = self._rooms.get(code) if code else None
            if not room:
                raise RoomNotFound()
            if room.is_full:
                raise RoomFull()
            if not room.check_secret(supplied_secret):
                raise AccessDenied()
            room.guest = guest
            guest.attach(room.code, Role.GUEST)
        logger.info("Guest joined room: %s", room.code)
        return room

    async def list_public(self) -> List[Dict[str, Union[str, bool]]]:
        async with self._lock:
            return [room.to_summary() for room in self._rooms.values() if room.is_joinable]

    async def get_room(self, code: Optional[str]) -> Optional[Room]:
        if not code:
            return None
        async with self._lock:
            return self._rooms.get(code)

    async def remove_room(self, code: Optional[str]) -> Optional[Room]:
        if not code:
            return None
        async with self._lock:
            room = self._rooms.pop(code, None)
        if room:
            logger.info("Room closed: %s", code)
        return room

    def _generate_code(self) -> str:
        for _ in range(ROOM_CODE_MAX_ATTEMPTS):
            code = "".join(secrets.choice(ROOM_CODE_ALPHABET) for _ in range(ROOM_CODE_LENGTH))
            if code not in self._rooms:
                return code
        raise RoomCodesExhausted()

    def _sanitize_room_name(self, raw_name: Optional[str]) -> str:
        cleaned = (raw_name or "").strip()[:MAX_ROOM_NAME_LENGTH].rstrip()
        return cleaned or DEFAULT_ROOM_NAME
