"""
API Router for room listing and the signaling websocket.
"""

from fastapi import APIRouter, Request, WebSocket

from backend.api.v1.schemas import HealthStatus, RoomsList

api_router = APIRouter()


@api_router.get("/rooms", response_model=RoomsList, tags=["Rooms"])
async def get_rooms(request: Request):
    rooms = await request.app.state.signaling.rooms_snapshot()
    return {"rooms": rooms, "count": len(rooms)}


@api_router.get("/health", response_model=HealthStatus, tags=["Health"])
async def health(request: Request):
    return {"status": "ok", **request.app.state.signaling.stats()}


@api_router.websocket("/signaling/ws")
async def signaling_ws(websocket: WebSocket):
    await websocket.app.state.signaling.serve(websocket)
