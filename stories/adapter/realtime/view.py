"""Client-side copy of a testimonial's comment threads.

A subscriber loads the assembled tree through the read endpoint and keeps it
current from realtime events. Like updates are applied in place; structural
changes (a comment created or deleted) only mark the view stale, because the
subscriber cannot rebuild depth cutoffs and ordering on its own and must
reload through the read path.
"""

from dataclasses import dataclass
from typing import Any, Iterator

from stories.adapter.realtime.events import ServerEvent


@dataclass(frozen=True)
class LikeSnapshot:
    """Like state of one comment before an optimistic change."""

    comment_id: str
    likes_count: int
    liked_by_user: bool


class CommentThreadView:
    """Mutable comment forest for one testimonial, as JSON dicts."""

    def __init__(
        self, testimonial_id: str, comments: list[dict[str, Any]] | None = None
    ) -> None:
        self.testimonial_id = testimonial_id
        self.comments: list[dict[str, Any]] = comments or []
        self.stale = False

    def load(self, comments: list[dict[str, Any]]) -> None:
        """Replace the forest with a freshly read one."""
        self.comments = comments
        self.stale = False

    def walk(self) -> Iterator[dict[str, Any]]:
        stack = list(reversed(self.comments))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.get("replies", [])))

    def find(self, comment_id: str) -> dict[str, Any] | None:
        for node in self.walk():
            if node["id"] == comment_id:
                return node
        return None

    def apply(self, event: str, data: dict[str, Any]) -> bool:
        """Merge a server event into the view.

        Returns:
            True if the view changed (counts updated or marked stale)
        """
        if str(data.get("testimonial_id")) != self.testimonial_id:
            return False

        if event == ServerEvent.COMMENT_LIKE_UPDATE.value:
            node = self.find(str(data.get("id")))
            if node is None:
                return False
            # Another viewer's like leaves this viewer's own flag alone
            node["likes_count"] = data["likes_count"]
            return True

        if event in (
            ServerEvent.COMMENT_CREATED.value,
            ServerEvent.COMMENT_DELETED.value,
        ):
            self.stale = True
            return True

        return False

    def begin_like(self, comment_id: str) -> LikeSnapshot:
        """Flip the viewer's like optimistically.

        Returns:
            The state to restore if the server rejects the toggle

        Raises:
            KeyError: If the comment is not in the view
        """
        node = self.find(comment_id)
        if node is None:
            raise KeyError(comment_id)

        snapshot = LikeSnapshot(
            comment_id=comment_id,
            likes_count=node["likes_count"],
            liked_by_user=node["liked_by_user"],
        )
        node["likes_count"] += -1 if snapshot.liked_by_user else 1
        node["liked_by_user"] = not snapshot.liked_by_user
        return snapshot

    def confirm_like(
        self, comment_id: str, likes_count: int, liked_by_user: bool
    ) -> None:
        """Adopt the server's settled like state."""
        node = self.find(comment_id)
        if node is not None:
            node["likes_count"] = likes_count
            node["liked_by_user"] = liked_by_user

    def rollback_like(self, snapshot: LikeSnapshot) -> None:
        """Restore the state captured by ``begin_like``."""
        self.confirm_like(
            snapshot.comment_id, snapshot.likes_count, snapshot.liked_by_user
        )
