"""Error responses in the legacy mobile-API envelope.

Every error body has the shape clients of the previous backend expect:

    {"status": false, "rcode": 404, "message": "User not found"}
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorBody(BaseModel):
    """Legacy error envelope."""

    model_config = {"extra": "forbid"}

    status: bool = False
    rcode: int
    message: str


class ApiError(HTTPException):
    """Base exception for API errors."""

    def __init__(self, status_code: int, message: str):
        self.message = message
        super().__init__(status_code=status_code, detail=message)

    def to_payload(self) -> ErrorBody:
        return ErrorBody(rcode=self.status_code, message=self.message)


class NotFoundError(ApiError):
    """Resource not found (404).

    Also raised for identifier tokens that do not decode, so the two cases
    produce identical responses.
    """

    def __init__(self, resource_type: str):
        super().__init__(status_code=404, message=f"{resource_type} not found")


class BadRequestError(ApiError):
    """Invalid request (400)."""

    def __init__(self, message: str):
        super().__init__(status_code=400, message=message)


class AuthenticationError(ApiError):
    """Missing or mismatched caller credential (401)."""

    def __init__(self) -> None:
        super().__init__(status_code=401, message="Token Mismatch Exception")


class InternalServerError(ApiError):
    """Internal server error (500)."""

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(status_code=500, message=message)


async def api_exception_handler(request: Request, exc: ApiError) -> ORJSONResponse:
    """Exception handler for API errors."""
    return ORJSONResponse(status_code=exc.status_code, content=exc.to_payload().model_dump())


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> ORJSONResponse:
    """Render framework HTTP errors (unknown route, bad method) in the envelope."""
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return ORJSONResponse(
        status_code=exc.status_code,
        content=ErrorBody(rcode=exc.status_code, message=message).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> ORJSONResponse:
    """Render FastAPI validation failures as a 400 with the first problem."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = first.get("loc", ())
        field = ".".join(str(part) for part in location if part not in ("query", "path", "header"))
        message = f"{field} is required" if first.get("type") == "missing" else first.get("msg")
    else:
        message = "Validation failed"
    return ORJSONResponse(
        status_code=400,
        content=ErrorBody(rcode=400, message=str(message)).model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Exception handler for unexpected errors."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return ORJSONResponse(
        status_code=500,
        content=ErrorBody(rcode=500, message="Internal Server Error").model_dump(),
    )
