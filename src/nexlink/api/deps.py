"""Shared FastAPI dependencies for NexLink routers.

Provides reusable components to reduce boilerplate across API endpoints:
- Identifier token decoding (fail closed, indistinguishable from not-found)
- Caller authentication against the per-user credential
- Repository providers
"""

from __future__ import annotations

import hmac
import logging
from typing import Annotated

from fastapi import Depends, Header, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from nexlink.api.errors import AuthenticationError, NotFoundError
from nexlink.core.ids import InvalidToken, decode_id
from nexlink.observability.logging import user_id_var
from nexlink.observability.metrics import record_decode_failure
from nexlink.persistence.db import get_session
from nexlink.persistence.repositories import (
    InvestorRepository,
    UnlockRepository,
    UserRecord,
    UserRepository,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Repository Providers
# =============================================================================


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UserRepository:
    return UserRepository(session)


def get_investor_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> InvestorRepository:
    return InvestorRepository(session)


def get_unlock_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UnlockRepository:
    return UnlockRepository(session)


# =============================================================================
# Identifier Token Decoding Dependencies
# =============================================================================


def decode_identifier(raw_id: str, resource_type: str) -> int:
    """Decode an identifier token taken from the request.

    Args:
        raw_id: Token from the URL path or query string
        resource_type: Resource name used in the error message

    Returns:
        Internal integer key

    Raises:
        NotFoundError: If the token is not a valid encoding. The response is
            identical to the one for a valid token with no matching row.
    """
    try:
        return decode_id(raw_id)
    except InvalidToken as exc:
        logger.debug("Rejected %s token: %s", resource_type, exc)
        record_decode_failure(resource_type)
        raise NotFoundError(resource_type) from None


def decoded_member_id(
    member_id: Annotated[str, Path(description="Encoded user identifier of the member")],
) -> int:
    """FastAPI dependency to decode a member (user) identifier from path."""
    return decode_identifier(member_id, "User")


def decoded_investor_id(
    investor_id: Annotated[str, Path(description="Encoded investor identifier")],
) -> int:
    """FastAPI dependency to decode an investor identifier from path."""
    return decode_identifier(investor_id, "Investor")


# =============================================================================
# Caller Authentication
# =============================================================================


async def authenticated_user(
    users: Annotated[UserRepository, Depends(get_user_repository)],
    user_id: Annotated[str | None, Query(description="Encoded id of the caller")] = None,
    token: Annotated[str | None, Query(description="Caller credential")] = None,
    x_user_id: Annotated[str | None, Header(alias="X-User-Id")] = None,
    x_auth_token: Annotated[str | None, Header(alias="X-Auth-Token")] = None,
) -> UserRecord:
    """Resolve and verify the calling user.

    A malformed id, an unknown or deleted user and a wrong credential all
    raise the same AuthenticationError.
    """
    raw_user_id = user_id or x_user_id
    credential = token or x_auth_token
    if not raw_user_id or not credential:
        raise AuthenticationError()

    try:
        caller_id = decode_id(raw_user_id)
    except InvalidToken:
        record_decode_failure("Caller")
        raise AuthenticationError() from None

    user = await users.get(caller_id)
    if user is None or user.deleted:
        raise AuthenticationError()
    if not hmac.compare_digest(user.unique_token.encode(), credential.encode()):
        logger.info("Credential mismatch for caller %s", raw_user_id)
        raise AuthenticationError()

    user_id_var.set(raw_user_id)
    return user


CurrentUser = Annotated[UserRecord, Depends(authenticated_user)]
MemberIdPath = Annotated[int, Depends(decoded_member_id)]
InvestorIdPath = Annotated[int, Depends(decoded_investor_id)]
