"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from stories.domain.error import NotFoundError
from stories.domain.service import UserService
from stories.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_save_then_get_by_id(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = make_user("Alice Martin")

        await user_service.save(user)
        found = await user_service.get_by_id(user.id)

        assert found == user

    @pytest.mark.asyncio
    async def test_get_missing_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_users_by_ids_skips_unknown_and_duplicates(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice = await user_service.save(make_user("Alice Martin"))
        bob = await user_service.save(make_user("Bob Durand"))
        ghost = UserId(uuid4())

        users = await user_service.get_users_by_ids([alice.id, ghost, bob.id, alice.id])

        assert users == {alice.id: alice, bob.id: bob}

    @pytest.mark.asyncio
    async def test_get_users_by_ids_empty(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.get_users_by_ids([]) == {}
