"""Shared fixtures: in-memory repositories behind the real routers."""

from __future__ import annotations

from datetime import date, time

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from nexlink.api.app import register_exception_handlers
from nexlink.api.deps import get_investor_repository, get_unlock_repository, get_user_repository
from nexlink.api.routers import investors, users
from nexlink.persistence.repositories import InvestorRecord, UnlockRecord, UserRecord


def make_user(user_id: int, token: str = "secret", deleted: bool = False) -> UserRecord:
    return UserRecord(
        user_id=user_id,
        full_name=f"Member {user_id}",
        email=f"member{user_id}@example.com",
        profile_photo=None,
        linkedin_url=None,
        summary="Founder",
        unique_token=token,
        status=1,
        deleted=deleted,
    )


class FakeUserRepository:
    def __init__(self, records: list[UserRecord]) -> None:
        self.records = {record.user_id: record for record in records}
        self.lookups: list[int] = []

    async def get(self, user_id: int) -> UserRecord | None:
        self.lookups.append(user_id)
        return self.records.get(user_id)


class FakeInvestorRepository:
    def __init__(self, records: list[InvestorRecord]) -> None:
        self.records = {record.investor_id: record for record in records}
        self.lookups: list[int] = []

    async def get(self, investor_id: int) -> InvestorRecord | None:
        self.lookups.append(investor_id)
        return self.records.get(investor_id)


class FakeUnlockRepository:
    def __init__(self, records: list[UnlockRecord]) -> None:
        self.records = {(record.user_id, record.investor_id): record for record in records}

    async def get(self, user_id: int, investor_id: int) -> UnlockRecord | None:
        return self.records.get((user_id, investor_id))


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository(
        [
            make_user(1, token="caller-token"),
            make_user(68, token="other-token"),
            make_user(70, token="gone-token", deleted=True),
        ]
    )


@pytest.fixture
def investor_repo() -> FakeInvestorRepository:
    return FakeInvestorRepository(
        [
            InvestorRecord(investor_id=60, user_id=68, name="Seed Fund", profile=None, status=1),
            InvestorRecord(investor_id=61, user_id=68, name="Closed Fund", profile=None, status=0),
            InvestorRecord(investor_id=62, user_id=68, name="Angel", profile=None, status=1),
        ]
    )


@pytest.fixture
def unlock_repo() -> FakeUnlockRepository:
    return FakeUnlockRepository(
        [
            UnlockRecord(
                user_id=1,
                investor_id=60,
                meeting_date=date(2026, 3, 1),
                meeting_time=time(10, 30),
            ),
        ]
    )


@pytest.fixture
def client(
    user_repo: FakeUserRepository,
    investor_repo: FakeInvestorRepository,
    unlock_repo: FakeUnlockRepository,
) -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(users.router)
    app.include_router(investors.router)
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    app.dependency_overrides[get_investor_repository] = lambda: investor_repo
    app.dependency_overrides[get_unlock_repository] = lambda: unlock_repo
    return TestClient(app)


@pytest.fixture
def caller_params() -> dict[str, str]:
    """Credentials of member 1 in the legacy query-string form."""
    return {"user_id": "MQ==", "token": "caller-token"}
