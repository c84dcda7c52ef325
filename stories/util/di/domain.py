"""Domain layer DI providers."""

from dishka import Scope, provide

from stories.config import AuthSettings
from stories.domain.repository import (
    CommentRepository,
    LikeRepository,
    TestimonialRepository,
    UserRepository,
)
from stories.domain.service import (
    CommentService,
    JWTService,
    LikeService,
    TestimonialService,
    UserService,
)
from stories.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_testimonial_service(
        self,
        testimonial_repository: TestimonialRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
    ) -> TestimonialService:
        """Provide testimonial domain service."""
        return TestimonialService(
            testimonial_repository=testimonial_repository,
            comment_repository=comment_repository,
            like_repository=like_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        testimonial_repository: TestimonialRepository,
        like_repository: LikeRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            testimonial_repository=testimonial_repository,
            like_repository=like_repository,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        testimonial_repository: TestimonialRepository,
        comment_repository: CommentRepository,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            testimonial_repository=testimonial_repository,
            comment_repository=comment_repository,
        )
