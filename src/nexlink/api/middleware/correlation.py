"""Per-request logging context.

Each request starts with a fresh context: a request ID (taken from the
``x-request-id`` header or generated), a correlation ID shared across
services, and an empty caller token. ``authenticated_user`` fills in the
caller's encoded ``user_id`` once the credential check passes, so log lines
never carry a raw key and never inherit a previous request's caller.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from nexlink.observability.logging import correlation_id_var, request_id_var, user_id_var

REQUEST_ID_HEADER = "x-request-id"
CORRELATION_ID_HEADER = "x-correlation-id"


def _bind(values: dict[ContextVar[str], str]) -> list[tuple[ContextVar[str], Token[str]]]:
    return [(var, var.set(value)) for var, value in values.items()]


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Seed the logging context and echo the request IDs on the response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or request_id
        bound = _bind(
            {request_id_var: request_id, correlation_id_var: correlation_id, user_id_var: ""}
        )
        try:
            response = await call_next(request)
        finally:
            for var, token in bound:
                var.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
