"""Unit tests for the unit of work."""

import pytest

from stories.domain.repository import UnitOfWork
from stories.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryUnitOfWork,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUnitOfWork:
    @pytest.mark.asyncio
    async def test_callbacks_run_after_commit_in_order(self):
        database = InMemoryDatabase()
        unit_of_work = InMemoryUnitOfWork(database)
        seen: list[tuple[str, int]] = []

        async def record(name: str) -> None:
            seen.append((name, database.commits))

        unit_of_work.after_commit(lambda: record("first"))
        unit_of_work.after_commit(lambda: record("second"))
        assert seen == []

        await unit_of_work.commit()

        # Both callbacks observe the completed commit
        assert seen == [("first", 1), ("second", 1)]

    @pytest.mark.asyncio
    async def test_failing_callback_does_not_block_the_rest(self):
        unit_of_work = InMemoryUnitOfWork(InMemoryDatabase())
        seen: list[str] = []

        async def boom() -> None:
            raise RuntimeError("socket gone")

        async def record() -> None:
            seen.append("ran")

        unit_of_work.after_commit(boom)
        unit_of_work.after_commit(record)
        await unit_of_work.commit()

        assert seen == ["ran"]

    @pytest.mark.asyncio
    async def test_discard_drops_callbacks(self):
        database = InMemoryDatabase()
        unit_of_work = InMemoryUnitOfWork(database)
        seen: list[str] = []

        async def record() -> None:
            seen.append("ran")

        unit_of_work.after_commit(record)
        unit_of_work.discard()
        await unit_of_work.commit()

        assert seen == []
        assert database.commits == 1

    @pytest.mark.asyncio
    async def test_request_scope_provides_one_unit_of_work(self, unit_env):
        first = await unit_env.get(UnitOfWork)
        second = await unit_env.get(UnitOfWork)

        assert first is second
        assert isinstance(first, InMemoryUnitOfWork)
