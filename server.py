import uvicorn
import os
import logging

from wavheader import config


logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)

APP_MODULE = os.getenv("APP_MODULE", "main:app")  # module:app
HOST = os.getenv("HOST", config.server.host)
PORT = int(os.getenv("PORT", config.server.port))
RELOAD = os.getenv("RELOAD", "false").lower() in ("true", "1", "yes")


def run() -> None:
    """Serve the inspection app with uvicorn."""
    logger.info(f"Starting {APP_MODULE} on {HOST}:{PORT}")
    uvicorn.run(
        APP_MODULE,
        host=HOST,
        port=PORT,
        reload=RELOAD,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    run()
