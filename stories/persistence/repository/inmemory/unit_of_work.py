"""In-memory unit of work for testing."""

from stories.domain.repository import UnitOfWork
from stories.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryUnitOfWork(UnitOfWork):
    """Writes are applied immediately; commits are only counted."""

    def __init__(self, database: InMemoryDatabase) -> None:
        super().__init__()
        self._db = database

    async def _commit(self) -> None:
        self._db.commits += 1
