"""SQLAlchemy ORM models for the legacy platform tables.

Only the columns read by the identifier boundary are mapped. Primary keys are
the raw BIGINT keys that are never exposed to clients; they leave the service
only through ``nexlink.core.ids.encode_id``.
"""

from __future__ import annotations

from datetime import date, datetime, time

from sqlalchemy import (
    BigInteger,
    Date,
    DateTime,
    ForeignKey,
    Index,
    SmallInteger,
    String,
    Text,
    Time,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class UserTable(Base):
    """Platform members."""

    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    full_name: Mapped[str | None] = mapped_column(String(255))
    email: Mapped[str | None] = mapped_column(String(255))
    profile_photo: Mapped[str | None] = mapped_column(String(512))
    linkedin_url: Mapped[str | None] = mapped_column(String(512))
    summary: Mapped[str | None] = mapped_column(Text)

    # Per-user credential issued at login, checked on every legacy API call
    unique_token: Mapped[str] = mapped_column(String(128), nullable=False)

    status: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=1)
    deleted: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    created_dts: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


class InvestorTable(Base):
    """Investor profiles owned by a user."""

    __tablename__ = "user_investor"

    investor_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str | None] = mapped_column(String(255))
    profile: Mapped[str | None] = mapped_column(Text)
    status: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=1)


class InvestorUnlockTable(Base):
    """Investors a user has paid to unlock (and any scheduled meeting)."""

    __tablename__ = "user_investors_unlocked"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )
    investor_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("user_investor.investor_id", ondelete="CASCADE"),
        nullable=False,
    )
    meeting_date: Mapped[date | None] = mapped_column(Date)
    meeting_time: Mapped[time | None] = mapped_column(Time)
    rating: Mapped[int | None] = mapped_column(SmallInteger)
    created_dts: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (Index("ix_unlocked_user_investor", "user_id", "investor_id"),)
