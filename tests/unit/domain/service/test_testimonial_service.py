"""Unit tests for TestimonialService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from stories.domain.error import ForbiddenError, NotFoundError, ValidationError
from stories.domain.model import Testimonial
from stories.domain.repository import (
    CommentRepository,
    LikeRepository,
    TestimonialRepository,
)
from stories.domain.service import CommentService, LikeService, TestimonialService
from stories.domain.value import LikeableType, TestimonialId, TestimonialSort, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(env, content: str, minutes_ago: int, likes: int = 0, comments: int = 0):
    """Store a testimonial directly with the given counters and age."""
    repo = await env.get(TestimonialRepository)
    created = datetime.now() - timedelta(minutes=minutes_ago)
    return await repo.save(
        Testimonial(
            id=TestimonialId(uuid4()),
            author_id=UserId(uuid4()),
            content=content,
            likes_count=likes,
            comments_count=comments,
            created_at=created,
            updated_at=created,
        )
    )


class TestCreateTestimonial:
    """Tests for create_testimonial method."""

    @pytest.mark.asyncio
    async def test_create_starts_with_zero_counters(self, unit_env):
        service = await unit_env.get(TestimonialService)
        author_id = UserId(uuid4())

        testimonial = await service.create_testimonial(
            author_id=author_id, content="  The mentoring program was superb.  "
        )

        assert testimonial.author_id == author_id
        assert testimonial.content == "The mentoring program was superb."
        assert testimonial.likes_count == 0
        assert testimonial.comments_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        ["", "too short", "         short         ", "x" * 1001],
    )
    async def test_content_out_of_bounds_rejected(self, unit_env, content):
        """Trimmed content must be 10 to 1000 characters."""
        service = await unit_env.get(TestimonialService)

        with pytest.raises(ValidationError, match="between 10 and 1000"):
            await service.create_testimonial(author_id=UserId(uuid4()), content=content)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("length", [10, 1000])
    async def test_content_at_bounds_accepted(self, unit_env, length):
        service = await unit_env.get(TestimonialService)

        testimonial = await service.create_testimonial(
            author_id=UserId(uuid4()), content="y" * length
        )

        assert len(testimonial.content) == length


class TestListTestimonials:
    """Tests for list_testimonials method."""

    @pytest.mark.asyncio
    async def test_recent_is_newest_first(self, unit_env):
        service = await unit_env.get(TestimonialService)
        old = await seed(unit_env, "An old memory of campus", minutes_ago=30)
        new = await seed(unit_env, "A fresh memory of campus", minutes_ago=1)

        testimonials, total = await service.list_testimonials(TestimonialSort.RECENT)

        assert [t.id for t in testimonials] == [new.id, old.id]
        assert total == 2

    @pytest.mark.asyncio
    async def test_popular_breaks_ties_by_recency(self, unit_env):
        service = await unit_env.get(TestimonialService)
        tie_old = await seed(unit_env, "Tied and older story", minutes_ago=20, likes=3)
        tie_new = await seed(unit_env, "Tied and newer story", minutes_ago=5, likes=3)
        top = await seed(unit_env, "The most liked story", minutes_ago=60, likes=9)

        testimonials, _ = await service.list_testimonials(TestimonialSort.POPULAR)

        assert [t.id for t in testimonials] == [top.id, tie_new.id, tie_old.id]

    @pytest.mark.asyncio
    async def test_commented_orders_by_comments(self, unit_env):
        service = await unit_env.get(TestimonialService)
        quiet = await seed(unit_env, "Nobody replied to this", minutes_ago=1)
        busy = await seed(
            unit_env, "Everybody replied here", minutes_ago=50, comments=7
        )

        testimonials, _ = await service.list_testimonials(TestimonialSort.COMMENTED)

        assert [t.id for t in testimonials] == [busy.id, quiet.id]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring(self, unit_env):
        service = await unit_env.get(TestimonialService)
        match = await seed(unit_env, "I loved the Robotics club", minutes_ago=2)
        await seed(unit_env, "The library was my refuge", minutes_ago=1)

        testimonials, total = await service.list_testimonials(search="  robotics ")

        assert [t.id for t in testimonials] == [match.id]
        assert total == 1

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, unit_env):
        service = await unit_env.get(TestimonialService)
        await seed(unit_env, "We scored 100% on the exam", minutes_ago=2)
        await seed(unit_env, "We scored 100 points on it", minutes_ago=1)

        testimonials, total = await service.list_testimonials(search="100%")

        assert total == 1
        assert "100%" in testimonials[0].content

    @pytest.mark.asyncio
    async def test_pagination_slices_results(self, unit_env):
        service = await unit_env.get(TestimonialService)
        seeded = [
            await seed(unit_env, f"Story number {i:02d} here", minutes_ago=i)
            for i in range(5)
        ]

        page_two, total = await service.list_testimonials(page=2, limit=2)
        beyond, _ = await service.list_testimonials(page=4, limit=2)

        assert total == 5
        assert [t.id for t in page_two] == [seeded[2].id, seeded[3].id]
        assert beyond == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (1, 51)])
    async def test_invalid_paging_rejected(self, unit_env, page, limit):
        service = await unit_env.get(TestimonialService)

        with pytest.raises(ValidationError):
            await service.list_testimonials(page=page, limit=limit)


class TestDeleteTestimonial:
    """Tests for delete_testimonial method."""

    @pytest.mark.asyncio
    async def test_delete_purges_comments_and_likes(self, unit_env):
        # Arrange
        service = await unit_env.get(TestimonialService)
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        testimonial_repo = await unit_env.get(TestimonialRepository)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)

        author_id = UserId(uuid4())
        fan_id = UserId(uuid4())
        testimonial = await service.create_testimonial(
            author_id=author_id, content="Graduation day was unforgettable."
        )
        comment = await comment_service.create_comment(
            testimonial_id=testimonial.id, author_id=fan_id, content="Agreed!"
        )
        await like_service.toggle_like(LikeableType.TESTIMONIAL, testimonial.id, fan_id)
        await like_service.toggle_like(LikeableType.COMMENT, comment.id, fan_id)

        # Act
        deleted = await service.delete_testimonial(testimonial.id, author_id)

        # Assert
        assert deleted.id == testimonial.id
        assert await testimonial_repo.find_by_id(testimonial.id) is None
        assert await comment_repo.find_by_testimonial(testimonial.id) == []
        assert (
            await like_repo.count_by_likeable(LikeableType.TESTIMONIAL, testimonial.id)
            == 0
        )
        assert await like_repo.count_by_likeable(LikeableType.COMMENT, comment.id) == 0

    @pytest.mark.asyncio
    async def test_delete_by_non_author_forbidden(self, unit_env):
        service = await unit_env.get(TestimonialService)
        testimonial = await service.create_testimonial(
            author_id=UserId(uuid4()), content="This one is staying put."
        )

        with pytest.raises(ForbiddenError):
            await service.delete_testimonial(testimonial.id, UserId(uuid4()))

        assert await service.get_testimonial(testimonial.id) == testimonial

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self, unit_env):
        service = await unit_env.get(TestimonialService)

        with pytest.raises(NotFoundError):
            await service.delete_testimonial(TestimonialId(uuid4()), UserId(uuid4()))
