"""Delete comment use case."""

from pydantic import BaseModel

from stories.application.usecase.base import BaseUseCase
from stories.domain.service import CommentService
from stories.domain.value import CommentId, UserId, parse_uuid


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # Requesting user, must be the author


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    testimonial_id: str
    parent_id: str | None
    message: str = "Comment deleted"


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            ValidationError: If the comment id is malformed
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment"))
        requester_id = UserId(parse_uuid(request.user_id, "user"))

        comment = await self.comment_service.delete_comment(comment_id, requester_id)

        return DeleteCommentResponse(
            comment_id=str(comment.id),
            testimonial_id=str(comment.testimonial_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
        )
