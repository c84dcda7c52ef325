"""Comment domain service.

Owns the comment tree: creating comments and replies under the depth
ceiling, keeping the denormalized thread counters in step, deleting whole
reply subtrees and assembling the nested read view.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from stories.domain.error import (
    ForbiddenError,
    MaxDepthExceededError,
    NotFoundError,
    ValidationError,
)
from stories.domain.model.comment import (
    COMMENT_MAX_LENGTH,
    COMMENT_READ_DEPTH,
    MAX_COMMENT_DEPTH,
    Comment,
)
from stories.domain.repository import (
    CommentRepository,
    LikeRepository,
    TestimonialRepository,
)
from stories.domain.value import CommentId, LikeableType, TestimonialId, UserId

from .base import Service


@dataclass
class CommentTreeNode:
    """Node in an assembled comment thread.

    Holds a comment and the replies loaded beneath it. Nodes at the read
    depth cutoff always have an empty ``replies`` list.
    """

    comment: Comment
    replies: list["CommentTreeNode"]

    def walk(self):
        """Yield this node and every descendant, depth first."""
        yield self
        for reply in self.replies:
            yield from reply.walk()


def normalize_comment_content(content: str) -> str:
    """Trim comment content and check its length.

    Raises:
        ValidationError: If the trimmed content is empty or too long
    """
    trimmed = content.strip() if content else ""
    if not trimmed:
        raise ValidationError("Comment content is required")
    if len(trimmed) > COMMENT_MAX_LENGTH:
        raise ValidationError(
            f"Comment content must be at most {COMMENT_MAX_LENGTH} characters"
        )
    return trimmed


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        testimonial_repository: TestimonialRepository,
        like_repository: LikeRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            testimonial_repository: Testimonial repository (existence checks)
            like_repository: Like repository (cleanup on delete)
        """
        self.comment_repository = comment_repository
        self.testimonial_repository = testimonial_repository
        self.like_repository = like_repository

    async def create_comment(
        self,
        testimonial_id: TestimonialId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a testimonial or reply to another comment.

        Args:
            testimonial_id: Testimonial ID
            author_id: Author user ID
            content: Comment text, trimmed before storage
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or too long, or the parent
                belongs to another testimonial
            MaxDepthExceededError: If the reply would sit below the ceiling
            NotFoundError: If the testimonial or parent comment is missing
        """
        with logfire.span(
            "comment_service.create_comment",
            testimonial_id=str(testimonial_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = normalize_comment_content(content)

            testimonial = await self.testimonial_repository.find_by_id(testimonial_id)
            if not testimonial:
                logfire.warn(
                    "Comment on non-existent testimonial",
                    testimonial_id=str(testimonial_id),
                )
                raise NotFoundError("Testimonial", str(testimonial_id))

            # If replying, verify parent exists and calculate depth
            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        testimonial_id=str(testimonial_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.testimonial_id != testimonial_id:
                    logfire.warn(
                        "Parent comment does not belong to testimonial",
                        parent_id=str(parent_id),
                        parent_testimonial_id=str(parent.testimonial_id),
                        target_testimonial_id=str(testimonial_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this testimonial"
                    )
                depth = parent.depth + 1
                if depth > MAX_COMMENT_DEPTH:
                    logfire.warn(
                        "Reply depth limit reached",
                        parent_id=str(parent_id),
                        depth=depth,
                    )
                    raise MaxDepthExceededError(MAX_COMMENT_DEPTH)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                testimonial_id=testimonial_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                depth=depth,
                likes_count=0,
                replies_count=0,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                testimonial_id=str(testimonial_id),
                depth=depth,
            )

            await self.refresh_counters(testimonial_id, parent_id)
            return saved

    async def refresh_counters(
        self, testimonial_id: TestimonialId, parent_id: CommentId | None = None
    ) -> None:
        """Recompute thread counters, best effort.

        A failure is logged and swallowed: counters are derived data and the
        next mutation under the same testimonial recomputes them whole.

        Args:
            testimonial_id: Testimonial whose comments_count to refresh
            parent_id: Comment whose replies_count to refresh, if any
        """
        try:
            comments_count, replies_count = (
                await self.comment_repository.refresh_counters(
                    testimonial_id, parent_id
                )
            )
        except Exception as e:
            logfire.error(
                "Comment counter refresh failed",
                testimonial_id=str(testimonial_id),
                parent_id=str(parent_id) if parent_id else None,
                error=str(e),
            )
            return

        logfire.info(
            "Comment counters refreshed",
            testimonial_id=str(testimonial_id),
            comments_count=comments_count,
            parent_id=str(parent_id) if parent_id else None,
            replies_count=replies_count,
        )

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def delete_comment(
        self, comment_id: CommentId, requester_id: UserId
    ) -> Comment:
        """Delete a comment together with its whole reply subtree.

        Replies are removed depth first (post-order) so no stored comment
        ever references a deleted parent. Likes on every removed comment go
        with it, and thread counters are recomputed afterwards.

        Args:
            comment_id: Comment to delete
            requester_id: User asking for the deletion

        Returns:
            The deleted comment (as it was before deletion)

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the comment's author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.get_comment_by_id(comment_id)
            if comment.author_id != requester_id:
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    requester_id=str(requester_id),
                )
                raise ForbiddenError("comment", str(comment_id), str(requester_id))

            deleted_ids: list[CommentId] = []

            async def delete_subtree(parent_id: CommentId) -> None:
                for reply in await self.comment_repository.find_children(parent_id):
                    await delete_subtree(reply.id)
                    await self.comment_repository.delete(reply.id)
                    deleted_ids.append(reply.id)

            await delete_subtree(comment.id)
            await self.comment_repository.delete(comment.id)
            deleted_ids.append(comment.id)

            removed_likes = await self.like_repository.delete_by_likeables(
                LikeableType.COMMENT, deleted_ids
            )

            logfire.info(
                "Comment subtree deleted",
                comment_id=str(comment_id),
                testimonial_id=str(comment.testimonial_id),
                deleted_comments=len(deleted_ids),
                deleted_likes=removed_likes,
            )

            await self.refresh_counters(comment.testimonial_id, comment.parent_id)
            return comment

    async def build_comment_tree(
        self,
        testimonial_id: TestimonialId,
        max_depth: int = COMMENT_READ_DEPTH,
    ) -> list[CommentTreeNode]:
        """Assemble the comment threads of a testimonial.

        Algorithm:
        1. Fetch every comment of the testimonial in one query (oldest first)
        2. Build adjacency map of parent_id -> [children]
        3. Roots are comments without a parent, newest first
        4. Recursively attach replies oldest first, stopping at max_depth

        Args:
            testimonial_id: Testimonial ID
            max_depth: Stored depth at which replies stop being loaded

        Returns:
            Root nodes with replies populated recursively

        Raises:
            NotFoundError: If the testimonial does not exist
        """
        with logfire.span(
            "comment_service.build_comment_tree",
            testimonial_id=str(testimonial_id),
            max_depth=max_depth,
        ):
            testimonial = await self.testimonial_repository.find_by_id(testimonial_id)
            if not testimonial:
                logfire.warn(
                    "Comments requested for non-existent testimonial",
                    testimonial_id=str(testimonial_id),
                )
                raise NotFoundError("Testimonial", str(testimonial_id))

            comments = await self.comment_repository.find_by_testimonial(
                testimonial_id
            )
            logfire.info(
                "Fetched comments for tree",
                testimonial_id=str(testimonial_id),
                count=len(comments),
            )

            # Build adjacency map: parent_id -> [children], oldest first
            adjacency: dict[CommentId, list[Comment]] = defaultdict(list)
            roots: list[Comment] = []
            for comment in comments:
                if comment.is_root:
                    roots.append(comment)
                else:
                    adjacency[comment.parent_id].append(comment)

            def build_subtree(comment: Comment, level: int) -> CommentTreeNode:
                """Build tree recursively from a comment node."""
                if level >= max_depth:
                    return CommentTreeNode(comment=comment, replies=[])
                children = adjacency.get(comment.id, [])
                return CommentTreeNode(
                    comment=comment,
                    replies=[build_subtree(child, level + 1) for child in children],
                )

            # Roots newest first
            tree_roots = [build_subtree(root, 0) for root in reversed(roots)]

            logfire.info(
                "Built comment tree",
                testimonial_id=str(testimonial_id),
                root_count=len(tree_roots),
            )
            return tree_roots
