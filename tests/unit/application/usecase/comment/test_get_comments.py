"""Unit tests for GetCommentsUseCase."""

from uuid import UUID, uuid4

import pytest

from stories.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from stories.domain.error import NotFoundError, ValidationError
from stories.domain.service import LikeService, TestimonialService, UserService
from stories.domain.value import CommentId, LikeableType, UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_nested_threads_with_authors(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        testimonial_service = await unit_env.get(TestimonialService)
        create_comment = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)

        alice = await user_service.save(make_user("Alice Martin"))
        bob = await user_service.save(make_user("Bob Durand", promotion="2021"))
        testimonial = await testimonial_service.create_testimonial(
            author_id=alice.id, content="The exchange semester abroad was great."
        )

        root = await create_comment.execute(
            CreateCommentRequest(
                testimonial_id=str(testimonial.id),
                content="Where did you go?",
                author_id=str(bob.id),
            )
        )
        await create_comment.execute(
            CreateCommentRequest(
                testimonial_id=str(testimonial.id),
                content="Montreal!",
                author_id=str(alice.id),
                parent_id=root.id,
            )
        )

        # Act
        response = await get_comments.execute(
            GetCommentsRequest(testimonial_id=str(testimonial.id))
        )

        # Assert
        assert response.testimonial_id == str(testimonial.id)
        assert response.count == 1
        [thread] = response.comments
        assert thread.id == root.id
        assert thread.author.name == "Bob Durand"
        assert thread.author.promotion == "2021"
        assert thread.replies_count == 1
        [reply] = thread.replies
        assert reply.content == "Montreal!"
        assert reply.depth == 1
        assert reply.parent_id == root.id
        assert reply.author.id == str(alice.id)
        assert reply.replies == []

    @pytest.mark.asyncio
    async def test_viewer_like_flags(self, unit_env):
        testimonial_service = await unit_env.get(TestimonialService)
        like_service = await unit_env.get(LikeService)
        create_comment = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)

        viewer_id = UserId(uuid4())
        testimonial = await testimonial_service.create_testimonial(
            author_id=UserId(uuid4()), content="Lab nights with the best people."
        )
        liked = await create_comment.execute(
            CreateCommentRequest(
                testimonial_id=str(testimonial.id),
                content="So true",
                author_id=str(uuid4()),
            )
        )
        await create_comment.execute(
            CreateCommentRequest(
                testimonial_id=str(testimonial.id),
                content="Not for me",
                author_id=str(uuid4()),
            )
        )
        await like_service.toggle_like(
            LikeableType.COMMENT, CommentId(UUID(liked.id)), viewer_id
        )

        as_viewer = await get_comments.execute(
            GetCommentsRequest(
                testimonial_id=str(testimonial.id), viewer_id=str(viewer_id)
            )
        )
        anonymous = await get_comments.execute(
            GetCommentsRequest(testimonial_id=str(testimonial.id))
        )

        flags = {
            c.content: (c.liked_by_user, c.likes_count) for c in as_viewer.comments
        }
        assert flags == {"So true": (True, 1), "Not for me": (False, 0)}
        assert not any(c.liked_by_user for c in anonymous.comments)

    @pytest.mark.asyncio
    async def test_unknown_author_has_null_author(self, unit_env):
        testimonial_service = await unit_env.get(TestimonialService)
        create_comment = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)
        testimonial = await testimonial_service.create_testimonial(
            author_id=UserId(uuid4()), content="A story with a ghost commenter."
        )
        await create_comment.execute(
            CreateCommentRequest(
                testimonial_id=str(testimonial.id),
                content="Boo",
                author_id=str(uuid4()),
            )
        )

        response = await get_comments.execute(
            GetCommentsRequest(testimonial_id=str(testimonial.id))
        )

        assert response.comments[0].author is None

    @pytest.mark.asyncio
    async def test_malformed_id_rejected(self, unit_env):
        get_comments = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(ValidationError, match="Invalid testimonial id"):
            await get_comments.execute(GetCommentsRequest(testimonial_id="nope"))

    @pytest.mark.asyncio
    async def test_missing_testimonial_raises_not_found(self, unit_env):
        get_comments = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await get_comments.execute(GetCommentsRequest(testimonial_id=str(uuid4())))
