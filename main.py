import logging
from typing import Dict, Any, Callable, Awaitable

from wavheader import config
from services import (
    HealthHandler,
    InspectHandler,
    send_response,
)


# Configure logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Type aliases
Scope = Dict[str, Any]
Receive = Callable[[], Awaitable[Dict[str, Any]]]
Send = Callable[[Dict[str, Any]], Awaitable[None]]


class InspectionApp:
    """
    Main ASGI application for WAV header inspection.

    Routes:
    - /inspect  → POST a WAV stream, get its parsed header
    - /health   → Liveness check (JSON)
    """

    def __init__(self):
        self._routes = {
            "/inspect": InspectHandler.handle,
            "/health": HealthHandler.handle,
        }
        logger.info(f"InspectionApp initialized, max body {config.server.max_body_size} bytes")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI application entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        if scope["type"] == "http":
            path = scope.get("path", "/")
            handler = self._routes.get(path)

            if handler:
                await handler(scope, receive, send)
            else:
                await send_response(send, 404, b"Not found", b"text/plain")
            return

    async def _handle_lifespan(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Handle ASGI lifespan events for startup/shutdown."""
        while True:
            message = await receive()

            if message["type"] == "lifespan.startup":
                logger.info("ASGI lifespan: startup")
                await send({"type": "lifespan.startup.complete"})

            elif message["type"] == "lifespan.shutdown":
                logger.info("ASGI lifespan: shutdown")
                await send({"type": "lifespan.shutdown.complete"})
                return


# Create ASGI application instance
app = InspectionApp()
