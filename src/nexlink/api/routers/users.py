"""Member profile endpoints.

Members are addressed by encoded identifier tokens; raw keys never appear in
paths or bodies.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from nexlink.api.deps import CurrentUser, MemberIdPath, get_user_repository
from nexlink.api.errors import NotFoundError
from nexlink.api.responses import success_response
from nexlink.core.ids import encode_id
from nexlink.persistence.repositories import UserRecord, UserRepository

router = APIRouter(prefix="/users", tags=["Users"])


def public_profile(user: UserRecord, include_private: bool = False) -> dict[str, Any]:
    """Serialize a member for clients, encoding the key."""
    profile: dict[str, Any] = {
        "user_id": encode_id(user.user_id),
        "full_name": user.full_name or "",
        "profile_photo": user.profile_photo or "",
        "linkedin_url": user.linkedin_url or "",
        "summary": user.summary or "",
    }
    if include_private:
        profile["email"] = user.email or ""
    return profile


@router.get("/{member_id}", summary="Get a member profile")
async def get_member(
    caller: CurrentUser,
    member_id: MemberIdPath,
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> ORJSONResponse:
    is_self = member_id == caller.user_id
    member = caller if is_self else await users.get(member_id)
    if member is None or member.deleted:
        raise NotFoundError("User")

    return success_response(
        "User details",
        user=public_profile(member, include_private=is_self),
        is_self=is_self,
    )
