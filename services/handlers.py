"""
Request handlers for the inspection server.
Header inspection endpoint, health endpoint.
"""

import io
import json
import logging
from typing import Any, Callable, Awaitable, Dict, Optional
from urllib.parse import parse_qs

from wavheader import config, parse_header, render, ParseError


logger = logging.getLogger(__name__)


# Type aliases for ASGI
Scope = Dict[str, Any]
Receive = Callable[[], Awaitable[Dict[str, Any]]]
Send = Callable[[Dict[str, Any]], Awaitable[None]]


async def send_response(send: Send, status: int, body: bytes, content_type: bytes) -> None:
    """Send a complete, non-streaming HTTP response."""
    await send({
        "type": "http.response.start",
        "status": status,
        "headers": [
            (b"content-type", content_type),
            (b"content-length", str(len(body)).encode()),
        ],
    })
    await send({
        "type": "http.response.body",
        "body": body,
    })


async def send_json(send: Send, status: int, payload: Dict[str, Any]) -> None:
    body = json.dumps(payload, indent=2).encode()
    await send_response(send, status, body, b"application/json")


async def read_body(receive: Receive, limit: int) -> Optional[bytes]:
    """
    Collect the request body.

    Returns None once the body grows past limit, or if the client
    disconnects before the body is complete.
    """
    body = bytearray()
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            return None
        body += message.get("body", b"")
        if len(body) > limit:
            return None
        if not message.get("more_body", False):
            return bytes(body)


class InspectHandler:
    """Handler for WAV header inspection.

    Protocol:
    1. Client sends POST /inspect with the WAV bytes as body
    2. Only the first 44 bytes are parsed; the payload is ignored
    3. 200 with the rendered header, or 400 with the parse error

    Append ?format=json for a JSON response instead of plain text.
    """

    @staticmethod
    async def handle(scope: Scope, receive: Receive, send: Send) -> None:
        """Handle inspection request."""
        if scope.get("method", "GET") != "POST":
            await send_response(send, 405, b"Method not allowed", b"text/plain")
            return

        query = parse_qs(scope.get("query_string", b"").decode())
        as_json = query.get("format", ["text"])[0] == "json"

        body = await read_body(receive, config.server.max_body_size)
        if body is None:
            logger.warning("Inspect request body too large or incomplete")
            await send_response(send, 413, b"Request body too large", b"text/plain")
            return

        try:
            header = parse_header(io.BytesIO(body))
        except ParseError as e:
            logger.info(f"Rejected upload of {len(body)} bytes: {e}")
            if as_json:
                await send_json(send, 400, {
                    "valid": False,
                    "error": e.kind,
                    "message": str(e),
                })
            else:
                await send_response(send, 400, str(e).encode(), b"text/plain")
            return

        logger.info(
            f"Accepted header: {header.num_channels} ch, "
            f"{header.sample_rate} Hz, {header.bits_per_sample} bit"
        )
        if as_json:
            await send_json(send, 200, {"valid": True, "header": header.to_dict()})
        else:
            await send_response(send, 200, render(header).encode(), b"text/plain; charset=utf-8")


class HealthHandler:
    """Handler for liveness checks (HTTP)."""

    @staticmethod
    async def handle(scope: Scope, receive: Receive, send: Send) -> None:
        """Handle health request."""
        await send_json(send, 200, {"status": "ok"})
