"""Live client connections and the process-wide set that tracks them."""

import logging
from typing import Any, Dict, List, Optional, Set
from uuid import uuid4

from rendezvous.constants import Role

logger = logging.getLogger(__name__)


class ConnectionSession:
    """One open client channel plus the room slot it currently occupies.

    ``channel`` is anything with an awaitable ``send_json(payload)``; in the
    running server it is a Starlette ``WebSocket``. The room registry only
    keeps references to sessions, the channel's own termination is what drives
    cleanup.
    """

    def __init__(self, channel: Any, session_id: Optional[str] = None) -> None:
        self.channel = channel
        self.session_id = session_id or uuid4().hex
        self.room_code: Optional[str] = None
        self.role: Optional[Role] = None
        self.is_open = True

    def __repr__(self) -> str:
        return f"<ConnectionSession {self.session_id[:8]} room={self.room_code} role={self.role}>"

    @property
    def in_lobby(self) -> bool:
        return self.room_code is None

    def attach(self, room_code: str, role: Role) -> None:
        self.room_code = room_code
        self.role = role

    def detach(self) -> None:
        self.room_code = None
        self.role = None

    def close(self) -> None:
        self.is_open = False

    async def send(self, payload: Dict[str, object]) -> bool:
        if not self.is_open:
            return False
        try:
            await self.channel.send_json(payload)
        except Exception as exc:
            logger.warning("Send to session %s failed: %s", self.session_id, exc)
            return False
        return True


class SessionSet:
    def __init__(self) -> None:
        self._sessions: Set[ConnectionSession] = set()

    def add(self, session: ConnectionSession) -> None:
        self._sessions.add(session)

    def discard(self, session: ConnectionSession) -> None:
        self._sessions.discard(session)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session: object) -> bool:
        return session in self._sessions

    def lobby(self) -> List[ConnectionSession]:
        """Open sessions that are not attached to any room."""
        return [s for s in self._sessions if s.is_open and s.in_lobby]
