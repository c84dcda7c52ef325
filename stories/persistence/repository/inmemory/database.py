"""Shared in-memory store backing the in-memory repositories."""

from stories.domain.model import Comment, Like, Testimonial, User
from stories.domain.value import CommentId, TestimonialId, UserId


class InMemoryDatabase:
    """Holds every entity so repositories can see each other's writes.

    Repositories built on the same instance behave like repositories sharing
    one database connection.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.testimonials: dict[TestimonialId, Testimonial] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.likes: list[Like] = []
        self.commits = 0
