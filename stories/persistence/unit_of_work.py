"""SQLAlchemy unit of work."""

from sqlalchemy.ext.asyncio import AsyncSession

from stories.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits the request's session before after-commit callbacks run."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__()
        self.session = session

    async def _commit(self) -> None:
        await self.session.commit()
