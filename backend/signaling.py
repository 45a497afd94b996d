"""
Signaling server state: one room registry and the open-connection set.
"""

import anyio
from fastapi import WebSocket

from backend.logging_config import get_logger
from rendezvous import (
    ConnectionLifecycle,
    LobbyBroadcaster,
    MessageRouter,
    RoomRegistry,
    SessionSet,
)

logger = get_logger(__name__)


class SignalingServer:
    def __init__(self) -> None:
        self.registry = RoomRegistry()
        self.sessions = SessionSet()
        self.broadcaster = LobbyBroadcaster(self.registry, self.sessions)
        self.router = MessageRouter(self.registry, self.broadcaster)
        self.lifecycle = ConnectionLifecycle(self.registry, self.sessions, self.broadcaster)

    async def serve(self, websocket: WebSocket) -> None:
        await websocket.accept()
        session = self.lifecycle.connect(websocket)
        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    break
                raw = message.get("text")
                if raw is None:
                    raw = message.get("bytes") or b""
                await self.router.dispatch(session, raw)
        except Exception as e:
            logger.error(f"WebSocket error for session {session.session_id}: {e}", exc_info=True)
        finally:
            with anyio.CancelScope(shield=True):
                await self.lifecycle.disconnect(session)

    async def rooms_snapshot(self):
        return await self.registry.list_public()

    def stats(self):
        return {"rooms": len(self.registry), "connections": len(self.sessions)}
