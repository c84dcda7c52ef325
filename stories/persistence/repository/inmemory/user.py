"""In-memory user repository for testing."""

from typing import Optional, Sequence

from stories.domain.model.user import User
from stories.domain.repository.user import UserRepository
from stories.domain.value import UserId
from stories.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._db.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        wanted = set(user_ids)
        return [u for u in self._db.users.values() if u.id in wanted]

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._db.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._db.users[user.id] = user
        return user
