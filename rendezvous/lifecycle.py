"""Connection arrival and departure."""

import logging
from typing import Any

from rendezvous.lobby import LobbyBroadcaster
from rendezvous.messages import opponent_left
from rendezvous.registry import RoomRegistry
from rendezvous.session import ConnectionSession, SessionSet

logger = logging.getLogger(__name__)


class ConnectionLifecycle:
    def __init__(
        self, registry: RoomRegistry, sessions: SessionSet, broadcaster: LobbyBroadcaster
    ) -> None:
        self._registry = registry
        self._sessions = sessions
        self._broadcaster = broadcaster

    def connect(self, channel: Any) -> ConnectionSession:
        session = ConnectionSession(channel)
        self._sessions.add(session)
        logger.info("Client connected: %s (%d open)", session.session_id, len(self._sessions))
        return session

    async def disconnect(self, session: ConnectionSession) -> None:
        """Release everything the session held.

        The room ends as soon as either member leaves; the surviving member is
        told with ``opponent_left`` and goes back to the lobby.
        """
        if session not in self._sessions and not session.is_open:
            return
        session.close()
        self._sessions.discard(session)
        logger.info("Client disconnected: %s (%d open)", session.session_id, len(self._sessions))

        room_code = session.room_code
        session.detach()
        if not room_code:
            return
        room = await self._registry.get_room(room_code)
        if not room or not room.is_member(session):
            return
        await self._registry.remove_room(room_code)
        other = room.counterpart(session)
        if other is not None:
            other.detach()
            if other.is_open:
                await other.send(opponent_left())
        await self._broadcaster.publish()
