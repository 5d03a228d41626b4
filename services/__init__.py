"""
Service modules for the inspection server.
"""

from services.handlers import (
    InspectHandler,
    HealthHandler,
    send_response,
    send_json,
    read_body,
)

__all__ = [
    # Handlers
    "InspectHandler",
    "HealthHandler",
    # Response helpers
    "send_response",
    "send_json",
    "read_body",
]
