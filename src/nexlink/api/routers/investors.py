"""Investor unlock status endpoint.

A caller may only learn about investors through encoded tokens. A token that
does not decode is answered exactly like an unknown investor; there is no
fallback to treating the raw path value as a key.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from nexlink.api.deps import (
    CurrentUser,
    InvestorIdPath,
    get_investor_repository,
    get_unlock_repository,
)
from nexlink.api.errors import NotFoundError
from nexlink.api.responses import success_response
from nexlink.core.ids import encode_id
from nexlink.persistence.repositories import InvestorRepository, UnlockRecord, UnlockRepository

router = APIRouter(prefix="/investors", tags=["Investors"])

# A scheduled meeting becomes "Ready" this long before it starts
MEETING_READY_WINDOW = timedelta(days=1)


def request_status(unlock: UnlockRecord | None, now: datetime) -> str:
    """Derive the client-facing state of an investor unlock."""
    if unlock is None:
        return "Locked"
    if unlock.meeting_date is not None and unlock.meeting_time is not None:
        meeting_at = datetime.combine(unlock.meeting_date, unlock.meeting_time)
        if now <= meeting_at <= now + MEETING_READY_WINDOW:
            return "Ready"
    return "Unlocked"


@router.get("/{investor_id}/unlock-status", summary="Check whether the caller unlocked an investor")
async def get_unlock_status(
    caller: CurrentUser,
    investor_id: InvestorIdPath,
    investors: Annotated[InvestorRepository, Depends(get_investor_repository)],
    unlocks: Annotated[UnlockRepository, Depends(get_unlock_repository)],
) -> ORJSONResponse:
    investor = await investors.get(investor_id)
    if investor is None or investor.status != 1:
        raise NotFoundError("Investor")

    unlock = await unlocks.get(caller.user_id, investor.investor_id)

    return success_response(
        "Investor unlock status checked successfully",
        user_id=encode_id(caller.user_id),
        investor_id=encode_id(investor.investor_id),
        is_unlocked=unlock is not None,
        request_status=request_status(unlock, datetime.now()),
        meeting_date=unlock.meeting_date.isoformat() if unlock and unlock.meeting_date else None,
        meeting_time=unlock.meeting_time.isoformat() if unlock and unlock.meeting_time else None,
    )
