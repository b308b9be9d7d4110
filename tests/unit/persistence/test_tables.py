"""Tests for persistence table definitions."""

from sqlalchemy import BigInteger

from nexlink.persistence.tables import Base, InvestorTable, InvestorUnlockTable, UserTable


class TestTableDefinitions:
    """Test table schema definitions."""

    def test_all_tables_inherit_from_base(self) -> None:
        for table in (UserTable, InvestorTable, InvestorUnlockTable):
            assert issubclass(table, Base)

    def test_legacy_table_names(self) -> None:
        assert UserTable.__tablename__ == "users"
        assert InvestorTable.__tablename__ == "user_investor"
        assert InvestorUnlockTable.__tablename__ == "user_investors_unlocked"

    def test_users_table_columns(self) -> None:
        columns = {c.name for c in UserTable.__table__.columns}
        required = {"user_id", "full_name", "email", "unique_token", "status", "deleted"}
        assert required <= columns

    def test_unlock_table_columns(self) -> None:
        columns = {c.name for c in InvestorUnlockTable.__table__.columns}
        assert {"user_id", "investor_id", "meeting_date", "meeting_time"} <= columns

    def test_primary_keys_are_bigint(self) -> None:
        """Keys cover the full range the identifier codec accepts."""
        for table, key in (
            (UserTable, "user_id"),
            (InvestorTable, "investor_id"),
            (InvestorUnlockTable, "id"),
        ):
            column = table.__table__.columns[key]
            assert column.primary_key
            assert isinstance(column.type, BigInteger)
