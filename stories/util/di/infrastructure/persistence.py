"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from stories.config import Settings
from stories.domain.repository import (
    CommentRepository,
    LikeRepository,
    TestimonialRepository,
    UnitOfWork,
    UserRepository,
)
from stories.persistence.database import create_engine, create_session_factory
from stories.persistence.repository import (
    PostgresCommentRepository,
    PostgresLikeRepository,
    PostgresTestimonialRepository,
    PostgresUserRepository,
)
from stories.persistence.unit_of_work import SqlAlchemyUnitOfWork
from stories.util.di.base import ProviderBase
from stories.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The container hands the request's exception (or None) back to the
        generator when the scope closes: commit on success, roll back
        otherwise.
        """
        async with session_factory() as session:
            error = yield session
            if error is None:
                await session.commit()
                logfire.debug("Session committed")
            else:
                logfire.warn("Session rollback", error=str(error))
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    async def get_unit_of_work(
        self, session: AsyncSession
    ) -> AsyncIterator[UnitOfWork]:
        """Provide the request's unit of work.

        It closes before the session, so after-commit callbacks run once the
        writes are durable.
        """
        unit_of_work = SqlAlchemyUnitOfWork(session)
        error = yield unit_of_work
        if error is None:
            await unit_of_work.commit()
        else:
            unit_of_work.discard()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_testimonial_repository(
        self, session: AsyncSession
    ) -> TestimonialRepository:
        """Provide Testimonial repository."""
        return PostgresTestimonialRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, session: AsyncSession) -> LikeRepository:
        """Provide Like repository."""
        return PostgresLikeRepository(session)
