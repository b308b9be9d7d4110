"""Middleware for NexLink API.

Note: For CORS, use FastAPI's built-in CORSMiddleware from starlette.middleware.cors
"""

from nexlink.api.middleware.correlation import CorrelationMiddleware

__all__ = [
    "CorrelationMiddleware",
]
