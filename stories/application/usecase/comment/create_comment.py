"""Create comment use case."""

from pydantic import BaseModel

from stories.application.usecase.base import BaseUseCase
from stories.application.usecase.comment.common import CommentItem
from stories.domain.service import CommentService, UserService
from stories.domain.value import CommentId, TestimonialId, UserId, parse_uuid


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    testimonial_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentItem):
    """Create comment response."""


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a testimonial or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service, for author display attributes
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Parse identifiers (malformed ids are validation failures)
        2. Create comment via comment service (validates testimonial, parent
           and depth, then recomputes counters)
        3. Attach author display attributes

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If an id is malformed, the content is invalid or
                the reply would be too deep
            NotFoundError: If the testimonial or parent comment is missing
        """
        testimonial_id = TestimonialId(
            parse_uuid(request.testimonial_id, "testimonial")
        )
        parent_id = (
            CommentId(parse_uuid(request.parent_id, "comment"))
            if request.parent_id
            else None
        )
        author_id = UserId(parse_uuid(request.author_id, "user"))

        comment = await self.comment_service.create_comment(
            testimonial_id=testimonial_id,
            author_id=author_id,
            content=request.content,
            parent_id=parent_id,
        )

        authors = await self.user_service.get_users_by_ids([author_id])
        item = CommentItem.from_domain(comment, authors.get(author_id))
        return CreateCommentResponse(**item.model_dump())
