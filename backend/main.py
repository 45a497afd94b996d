"""
Rendezvous Signaling API
Introduces two peers to each other and relays their connection handshake.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend import config
from backend.api.v1.routers import api_router, signaling_ws
from backend.logging_config import get_logger, setup_logging
from backend.signaling import SignalingServer

setup_logging(log_level=config.LOG_LEVEL, log_file=config.LOG_FILE)
logger = get_logger(__name__)

app = FastAPI(
    title="Rendezvous Signaling API",
    description="Room matchmaking and handshake relay for peer-to-peer clients.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.signaling = SignalingServer()

app.include_router(api_router, prefix="/api/v1")
app.add_api_websocket_route("/", signaling_ws)

logger.info("Signaling application initialized")


@app.get("/", tags=["Root"])
async def read_root():
    return {"message": "Rendezvous signaling server is running."}
