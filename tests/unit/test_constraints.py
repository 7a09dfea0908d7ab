"""
Unit tests for foreign-key relaxation
"""

import pytest
from unittest.mock import AsyncMock, Mock
from sqlalchemy.exc import OperationalError

from core.exceptions import ConstraintError, UnsupportedDialectError
from migration.constraints import ConstraintManager


def make_conn(dialect_name="postgresql", in_transaction=False):
    conn = AsyncMock()
    conn.dialect = Mock()
    conn.dialect.name = dialect_name
    conn.in_transaction = Mock(return_value=in_transaction)
    return conn


def executed_sql(conn):
    return [call.args[0].text for call in conn.execute.call_args_list]


class TestConstraintManager:

    @pytest.mark.asyncio
    async def test_acquire_and_release_postgres(self):
        conn = make_conn()
        manager = ConstraintManager(conn)

        await manager.acquire()
        assert manager.relaxed is True

        assert await manager.release() is True
        assert manager.relaxed is False
        assert executed_sql(conn) == [
            "SET session_replication_role = 'replica'",
            "SET session_replication_role = 'origin'",
        ]

    @pytest.mark.asyncio
    async def test_sqlite_statements(self):
        conn = make_conn("sqlite")

        async with ConstraintManager(conn):
            pass

        assert executed_sql(conn) == [
            "PRAGMA foreign_keys = OFF",
            "PRAGMA foreign_keys = ON",
        ]

    @pytest.mark.asyncio
    async def test_release_rolls_back_open_transaction(self):
        conn = make_conn(in_transaction=True)
        manager = ConstraintManager(conn)

        await manager.release()

        conn.rollback.assert_called_once()

    @pytest.mark.asyncio
    async def test_released_when_body_fails(self):
        conn = make_conn()

        with pytest.raises(RuntimeError):
            async with ConstraintManager(conn):
                raise RuntimeError("load failed")

        assert executed_sql(conn)[-1] == "SET session_replication_role = 'origin'"

    @pytest.mark.asyncio
    async def test_release_failure_is_reported_not_raised(self):
        conn = make_conn()
        conn.execute = AsyncMock(side_effect=OperationalError("SET", {}, Exception("connection lost")))
        manager = ConstraintManager(conn)

        assert await manager.release() is False

    @pytest.mark.asyncio
    async def test_acquire_failure_raises(self):
        conn = make_conn()
        conn.execute = AsyncMock(side_effect=OperationalError("SET", {}, Exception("permission denied")))

        with pytest.raises(ConstraintError):
            await ConstraintManager(conn).acquire()

    @pytest.mark.asyncio
    async def test_is_enforced(self):
        conn = make_conn()
        result = Mock()
        result.scalar.return_value = "origin"
        conn.execute = AsyncMock(return_value=result)

        assert await ConstraintManager(conn).is_enforced() is True

    def test_unsupported_dialect(self):
        with pytest.raises(UnsupportedDialectError):
            ConstraintManager(make_conn("mssql"))
