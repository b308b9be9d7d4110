from __future__ import annotations

from typing import Any

from fastapi.responses import ORJSONResponse


def success_response(
    message: str = "Success", status_code: int = 200, **data: Any
) -> ORJSONResponse:
    """Build a success body in the legacy envelope, with ``data`` merged at top level."""
    return ORJSONResponse(
        content={"status": True, "rcode": status_code, "message": message, **data},
        status_code=status_code,
    )
