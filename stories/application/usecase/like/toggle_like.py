"""Toggle like use case."""

import logfire
from pydantic import BaseModel

from stories.application.usecase.base import BaseUseCase
from stories.domain.service import CommentService, LikeService
from stories.domain.value import (
    CommentId,
    LikeableType,
    LikeAction,
    UserId,
    parse_uuid,
)


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    likeable_type: LikeableType
    likeable_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    id: str
    testimonial_id: str  # Testimonial the liked item belongs to
    action: LikeAction
    likes_count: int
    liked_by_user: bool


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a testimonial or a comment."""

    def __init__(
        self, like_service: LikeService, comment_service: CommentService
    ) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
            comment_service: Comment service, to resolve a comment's testimonial
        """
        self.like_service = like_service
        self.comment_service = comment_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            Action taken with the settled like count

        Raises:
            ValidationError: If the id is malformed
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "toggle_like.execute",
            likeable_type=request.likeable_type.value,
            likeable_id=request.likeable_id,
            user_id=request.user_id,
        ):
            likeable_id = parse_uuid(request.likeable_id, request.likeable_type.value)
            user_id = UserId(parse_uuid(request.user_id, "user"))

            result = await self.like_service.toggle_like(
                request.likeable_type, likeable_id, user_id
            )

            if request.likeable_type == LikeableType.COMMENT:
                comment = await self.comment_service.get_comment_by_id(
                    CommentId(likeable_id)
                )
                testimonial_id = str(comment.testimonial_id)
            else:
                testimonial_id = str(likeable_id)

            return ToggleLikeResponse(
                id=str(likeable_id),
                testimonial_id=testimonial_id,
                action=result.action,
                likes_count=result.likes_count,
                liked_by_user=result.liked_by_user,
            )
