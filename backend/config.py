"""Process configuration read from the environment."""

import os

from backend.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PORT = 3000

HOST = os.getenv("HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", None)
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]


def get_port(raw_port=None) -> int:
    raw_port = raw_port if raw_port is not None else os.getenv("PORT")
    if not raw_port:
        return DEFAULT_PORT
    try:
        port = int(raw_port)
    except ValueError:
        logger.warning(f"Invalid PORT value {raw_port!r}, falling back to {DEFAULT_PORT}")
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning(f"PORT {port} out of range, falling back to {DEFAULT_PORT}")
        return DEFAULT_PORT
    return port


PORT = get_port()
