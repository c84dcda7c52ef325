"""Mock persistence providers for testing."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from stories.domain.repository import (
    CommentRepository,
    LikeRepository,
    TestimonialRepository,
    UnitOfWork,
    UserRepository,
)
from stories.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryLikeRepository,
    InMemoryTestimonialRepository,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)
from stories.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are request scoped but share one app-scoped database, so
    writes made in one request are visible to the next (as with Postgres).
    Each container gets a fresh database unless one is passed in.
    """

    __is_mock__ = True

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        super().__init__()
        self.database = database or InMemoryDatabase()

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory store."""
        return self.database

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, database: InMemoryDatabase) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_testimonial_repository(
        self, database: InMemoryDatabase
    ) -> TestimonialRepository:
        """Provide in-memory testimonial repository."""
        return InMemoryTestimonialRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, database: InMemoryDatabase) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_like_repository(self, database: InMemoryDatabase) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository(database)

    @provide(scope=Scope.REQUEST)
    async def get_unit_of_work(
        self, database: InMemoryDatabase
    ) -> AsyncIterator[UnitOfWork]:
        """Provide an in-memory unit of work, committed when the request ends."""
        unit_of_work = InMemoryUnitOfWork(database)
        error = yield unit_of_work
        if error is None:
            await unit_of_work.commit()
        else:
            unit_of_work.discard()
