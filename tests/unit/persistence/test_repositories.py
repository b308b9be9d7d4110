"""Tests for repositories against a mocked async session."""

from datetime import date, time
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.dialects import postgresql

from nexlink.persistence.repositories import (
    InvestorRepository,
    UnlockRepository,
    UserRecord,
    UserRepository,
)


def _session_returning(row: object | None) -> AsyncMock:
    result = MagicMock()
    result.first.return_value = row
    session = AsyncMock()
    session.execute.return_value = result
    return session


def _compiled_sql(session: AsyncMock) -> str:
    stmt = session.execute.call_args.args[0]
    return str(stmt.compile(dialect=postgresql.dialect()))


class TestUserRepository:
    """Tests for UserRepository."""

    async def test_get_returns_record(self) -> None:
        row = SimpleNamespace(
            user_id=68,
            full_name="Member",
            email="m@example.com",
            profile_photo=None,
            linkedin_url=None,
            summary=None,
            unique_token="tok",
            status=1,
            deleted=0,
        )
        session = _session_returning(row)

        user = await UserRepository(session).get(68)

        assert isinstance(user, UserRecord)
        assert user.user_id == 68
        assert user.deleted is False

    async def test_get_missing_returns_none(self) -> None:
        session = _session_returning(None)
        assert await UserRepository(session).get(1) is None

    async def test_query_is_parameterized(self) -> None:
        session = _session_returning(None)
        await UserRepository(session).get(68)

        sql = _compiled_sql(session)
        assert "FROM users" in sql
        assert "users.user_id = %(user_id_1)s" in sql


class TestInvestorRepository:
    """Tests for InvestorRepository."""

    async def test_get_returns_record(self) -> None:
        row = SimpleNamespace(investor_id=60, user_id=68, name="Fund", profile=None, status=1)
        investor = await InvestorRepository(_session_returning(row)).get(60)
        assert investor is not None
        assert investor.investor_id == 60
        assert investor.name == "Fund"


class TestUnlockRepository:
    """Tests for UnlockRepository."""

    async def test_get_returns_record(self) -> None:
        row = SimpleNamespace(
            user_id=1, investor_id=60, meeting_date=date(2026, 3, 1), meeting_time=time(10, 0)
        )
        unlock = await UnlockRepository(_session_returning(row)).get(1, 60)
        assert unlock is not None
        assert unlock.meeting_date == date(2026, 3, 1)

    async def test_get_filters_on_both_keys(self) -> None:
        session = _session_returning(None)
        assert await UnlockRepository(session).get(1, 60) is None

        sql = _compiled_sql(session)
        assert "user_investors_unlocked.user_id =" in sql
        assert "user_investors_unlocked.investor_id =" in sql
        assert "LIMIT" in sql
