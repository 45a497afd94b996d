import uvicorn

from backend import config
from backend.logging_config import get_logger, setup_logging

setup_logging(log_level=config.LOG_LEVEL, log_file=config.LOG_FILE)
logger = get_logger(__name__)

if __name__ == "__main__":
    logger.info(f"Signaling server listening on {config.HOST}:{config.PORT}")
    uvicorn.run("backend.main:app", host=config.HOST, port=config.PORT)
