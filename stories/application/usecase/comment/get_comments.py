"""Get comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from stories.application.usecase.base import BaseUseCase
from stories.application.usecase.comment.common import CommentItem
from stories.domain.model import User
from stories.domain.service import CommentService, LikeService, UserService
from stories.domain.service.comment_service import CommentTreeNode
from stories.domain.value import LikeableType, TestimonialId, UserId, parse_uuid


class CommentNode(CommentItem):
    """Comment with its loaded replies."""

    replies: list["CommentNode"]

    @classmethod
    def from_tree(
        cls,
        node: CommentTreeNode,
        authors: dict[UserId, User],
        likes: dict[UUID, bool],
    ) -> "CommentNode":
        item = CommentItem.from_domain(
            node.comment,
            authors.get(node.comment.author_id),
            likes.get(node.comment.id, False),
        )
        return cls(
            **item.model_dump(),
            replies=[cls.from_tree(reply, authors, likes) for reply in node.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    testimonial_id: str  # UUID string
    viewer_id: str | None = None  # Authenticated viewer, if any


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    testimonial_id: str
    comments: list[CommentNode]
    count: int  # Number of root comments


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading the comment threads of a testimonial."""

    def __init__(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        user_service: UserService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            like_service: Like service for the viewer's like flags
            user_service: User service for author display attributes
        """
        self.comment_service = comment_service
        self.like_service = like_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Roots come newest first and replies oldest first. Author attributes
        and viewer like flags are loaded with one batch query each.

        Args:
            request: Get comments request with testimonial ID and optional viewer

        Returns:
            Comment forest with the number of root comments

        Raises:
            ValidationError: If the testimonial id is malformed
            NotFoundError: If the testimonial does not exist
        """
        testimonial_id = TestimonialId(
            parse_uuid(request.testimonial_id, "testimonial")
        )
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        roots = await self.comment_service.build_comment_tree(testimonial_id)

        nodes = [node for root in roots for node in root.walk()]
        author_ids = [node.comment.author_id for node in nodes]
        comment_ids: list[UUID] = [node.comment.id for node in nodes]

        authors = await self.user_service.get_users_by_ids(author_ids)
        likes = await self.like_service.get_user_likes(
            viewer_id, LikeableType.COMMENT, comment_ids
        )

        logfire.info(
            "Comments assembled",
            testimonial_id=str(testimonial_id),
            roots=len(roots),
            nodes=len(nodes),
        )

        return GetCommentsResponse(
            testimonial_id=str(testimonial_id),
            comments=[CommentNode.from_tree(root, authors, likes) for root in roots],
            count=len(roots),
        )
