"""Unit tests for CommentThreadView."""

import pytest

from stories.adapter.realtime import CommentThreadView

TESTIMONIAL = "7d1c7f0e-3a53-4f61-9d2e-0f6a4c1b2a10"


def node(comment_id: str, likes: int = 0, liked: bool = False, replies=None):
    return {
        "id": comment_id,
        "testimonial_id": TESTIMONIAL,
        "likes_count": likes,
        "liked_by_user": liked,
        "replies": replies or [],
    }


@pytest.fixture
def view():
    return CommentThreadView(
        TESTIMONIAL,
        [node("a", likes=2, replies=[node("a1", replies=[node("a11")])]), node("b")],
    )


class TestCommentThreadView:
    def test_walk_is_depth_first_in_display_order(self, view):
        assert [n["id"] for n in view.walk()] == ["a", "a1", "a11", "b"]

    def test_like_update_sets_count_but_not_viewer_flag(self, view):
        changed = view.apply(
            "comment-like-update",
            {"testimonial_id": TESTIMONIAL, "id": "a11", "likes_count": 5},
        )

        assert changed is True
        assert view.find("a11")["likes_count"] == 5
        assert view.find("a11")["liked_by_user"] is False

    def test_events_for_other_testimonials_ignored(self, view):
        changed = view.apply(
            "comment-like-update",
            {"testimonial_id": "someone-else", "id": "a", "likes_count": 99},
        )

        assert changed is False
        assert view.find("a")["likes_count"] == 2

    @pytest.mark.parametrize("event", ["comment-created", "comment-deleted"])
    def test_structural_events_mark_stale(self, view, event):
        assert view.apply(event, {"testimonial_id": TESTIMONIAL}) is True
        assert view.stale is True

        view.load([node("c")])

        assert view.stale is False
        assert [n["id"] for n in view.walk()] == ["c"]

    def test_optimistic_like_then_rollback(self, view):
        snapshot = view.begin_like("a")

        assert view.find("a")["likes_count"] == 3
        assert view.find("a")["liked_by_user"] is True

        view.rollback_like(snapshot)

        assert view.find("a")["likes_count"] == 2
        assert view.find("a")["liked_by_user"] is False

    def test_optimistic_like_then_confirm(self, view):
        view.begin_like("b")
        view.confirm_like("b", likes_count=4, liked_by_user=True)

        assert view.find("b")["likes_count"] == 4
        assert view.find("b")["liked_by_user"] is True

    def test_begin_like_on_missing_comment(self, view):
        with pytest.raises(KeyError):
            view.begin_like("zzz")
