"""Repository pattern for the identifier boundary.

Repositories take raw integer keys (already decoded at the API edge) and
return plain frozen records, so nothing above this layer holds ORM rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nexlink.persistence.tables import InvestorTable, InvestorUnlockTable, UserTable


@dataclass(frozen=True)
class UserRecord:
    user_id: int
    full_name: str | None
    email: str | None
    profile_photo: str | None
    linkedin_url: str | None
    summary: str | None
    unique_token: str
    status: int
    deleted: bool


@dataclass(frozen=True)
class InvestorRecord:
    investor_id: int
    user_id: int
    name: str | None
    profile: str | None
    status: int


@dataclass(frozen=True)
class UnlockRecord:
    user_id: int
    investor_id: int
    meeting_date: date | None
    meeting_time: time | None


class BaseRepository:
    def __init__(self, session: AsyncSession):
        self.session = session


class UserRepository(BaseRepository):
    async def get(self, user_id: int) -> UserRecord | None:
        stmt = select(
            UserTable.user_id,
            UserTable.full_name,
            UserTable.email,
            UserTable.profile_photo,
            UserTable.linkedin_url,
            UserTable.summary,
            UserTable.unique_token,
            UserTable.status,
            UserTable.deleted,
        ).where(UserTable.user_id == user_id)
        row = (await self.session.execute(stmt)).first()
        if row is None:
            return None
        return UserRecord(
            user_id=row.user_id,
            full_name=row.full_name,
            email=row.email,
            profile_photo=row.profile_photo,
            linkedin_url=row.linkedin_url,
            summary=row.summary,
            unique_token=row.unique_token,
            status=row.status,
            deleted=bool(row.deleted),
        )


class InvestorRepository(BaseRepository):
    async def get(self, investor_id: int) -> InvestorRecord | None:
        stmt = select(
            InvestorTable.investor_id,
            InvestorTable.user_id,
            InvestorTable.name,
            InvestorTable.profile,
            InvestorTable.status,
        ).where(InvestorTable.investor_id == investor_id)
        row = (await self.session.execute(stmt)).first()
        if row is None:
            return None
        return InvestorRecord(
            investor_id=row.investor_id,
            user_id=row.user_id,
            name=row.name,
            profile=row.profile,
            status=row.status,
        )


class UnlockRepository(BaseRepository):
    async def get(self, user_id: int, investor_id: int) -> UnlockRecord | None:
        """Most recent unlock of ``investor_id`` by ``user_id``."""
        stmt = (
            select(
                InvestorUnlockTable.user_id,
                InvestorUnlockTable.investor_id,
                InvestorUnlockTable.meeting_date,
                InvestorUnlockTable.meeting_time,
            )
            .where(
                InvestorUnlockTable.user_id == user_id,
                InvestorUnlockTable.investor_id == investor_id,
            )
            .order_by(InvestorUnlockTable.created_dts.desc())
            .limit(1)
        )
        row = (await self.session.execute(stmt)).first()
        if row is None:
            return None
        return UnlockRecord(
            user_id=row.user_id,
            investor_id=row.investor_id,
            meeting_date=row.meeting_date,
            meeting_time=row.meeting_time,
        )
