"""Like domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from stories.domain.error import NotFoundError, ValidationError
from stories.domain.model.like import Like
from stories.domain.repository import (
    CommentRepository,
    LikeRepository,
    TestimonialRepository,
)
from stories.domain.value import (
    CommentId,
    LikeableType,
    LikeAction,
    LikeId,
    LikeToggleResult,
    TestimonialId,
    UserId,
)

from .base import Service


class LikeService(Service):
    """Domain service for like operations.

    Testimonials and comments share one toggle: a like is added when the
    user is not yet in the item's like set and removed otherwise. The
    stored like count is then reset to the size of the set.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        testimonial_repository: TestimonialRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            testimonial_repository: Testimonial repository
            comment_repository: Comment repository
        """
        self.like_repository = like_repository
        self.testimonial_repository = testimonial_repository
        self.comment_repository = comment_repository

    async def toggle_like(
        self,
        likeable_type: LikeableType,
        likeable_id: UUID,
        user_id: UserId,
    ) -> LikeToggleResult:
        """Flip a user's membership in an item's like set.

        Args:
            likeable_type: Testimonial or comment
            likeable_id: ID of the item
            user_id: User toggling the like

        Returns:
            The action taken, the settled like count and the user's state

        Raises:
            NotFoundError: If the item does not exist
            ValidationError: If a concurrent toggle by the same user won
        """
        with logfire.span(
            "like_service.toggle_like",
            likeable_type=likeable_type.value,
            likeable_id=str(likeable_id),
            user_id=str(user_id),
        ):
            await self._ensure_exists(likeable_type, likeable_id)

            removed = await self.like_repository.delete_by_user_and_likeable(
                user_id=user_id,
                likeable_type=likeable_type,
                likeable_id=likeable_id,
            )

            if removed:
                action = LikeAction.UNLIKED
            else:
                like = Like(
                    id=LikeId(uuid4()),
                    user_id=user_id,
                    likeable_type=likeable_type,
                    likeable_id=likeable_id,
                    created_at=datetime.now(),
                )
                try:
                    await self.like_repository.save(like)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate like attempt",
                        user_id=str(user_id),
                        likeable_type=likeable_type.value,
                        likeable_id=str(likeable_id),
                    )
                    raise ValidationError("Like already recorded for this item")
                action = LikeAction.LIKED

            likes_count = await self.like_repository.count_by_likeable(
                likeable_type, likeable_id
            )
            if likeable_type == LikeableType.TESTIMONIAL:
                await self.testimonial_repository.update_likes_count(
                    TestimonialId(likeable_id), likes_count
                )
            else:
                await self.comment_repository.update_likes_count(
                    CommentId(likeable_id), likes_count
                )

            logfire.info(
                "Like toggled",
                action=action.value,
                likeable_type=likeable_type.value,
                likeable_id=str(likeable_id),
                likes_count=likes_count,
            )
            return LikeToggleResult(
                action=action,
                likes_count=likes_count,
                liked_by_user=action == LikeAction.LIKED,
            )

    async def get_user_likes(
        self,
        user_id: UserId | None,
        likeable_type: LikeableType,
        likeable_ids: list[UUID],
    ) -> dict[UUID, bool]:
        """Check which items a user has liked.

        Args:
            user_id: Viewer ID, or None for anonymous viewers
            likeable_type: Type of the items
            likeable_ids: Item IDs to check

        Returns:
            Dictionary mapping item ID to whether the user likes it
        """
        if not user_id or not likeable_ids:
            return {likeable_id: False for likeable_id in likeable_ids}

        # Batch query to fetch all likes at once (avoid N+1)
        likes = await self.like_repository.find_by_user_and_likeables(
            user_id=user_id,
            likeable_type=likeable_type,
            likeable_ids=likeable_ids,
        )
        liked_ids = {UUID(str(like.likeable_id)) for like in likes}

        return {lid: UUID(str(lid)) in liked_ids for lid in likeable_ids}

    async def _ensure_exists(
        self, likeable_type: LikeableType, likeable_id: UUID
    ) -> None:
        if likeable_type == LikeableType.TESTIMONIAL:
            found = await self.testimonial_repository.find_by_id(
                TestimonialId(likeable_id)
            )
            resource = "Testimonial"
        else:
            found = await self.comment_repository.find_by_id(CommentId(likeable_id))
            resource = "Comment"

        if not found:
            logfire.warn(
                "Like on non-existent item",
                likeable_type=likeable_type.value,
                likeable_id=str(likeable_id),
            )
            raise NotFoundError(resource, str(likeable_id))
