"""API routers for NexLink."""

from nexlink.api.routers import health, investors, metrics, users

__all__ = [
    "health",
    "investors",
    "metrics",
    "users",
]
