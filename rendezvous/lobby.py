"""Pushes the joinable room list to every connection still in the lobby."""

import logging

from rendezvous.messages import rooms_list
from rendezvous.registry import RoomRegistry
from rendezvous.session import SessionSet

logger = logging.getLogger(__name__)


class LobbyBroadcaster:
    def __init__(self, registry: RoomRegistry, sessions: SessionSet) -> None:
        self._registry = registry
        self._sessions = sessions

    async def publish(self) -> int:
        """Send ``rooms_list`` to each lobby session; return how many received it."""
        payload = rooms_list(await self._registry.list_public())
        delivered = 0
        for session in self._sessions.lobby():
            if await session.send(payload):
                delivered += 1
        logger.debug("Lobby update (%d rooms) sent to %d sessions", len(payload["rooms"]), delivered)
        return delivered
