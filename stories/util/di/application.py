"""Application layer DI providers."""

from dishka import Scope, provide

from stories.application.usecase.auth import GetCurrentUserUseCase
from stories.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from stories.application.usecase.like import ToggleLikeUseCase
from stories.application.usecase.testimonial import (
    CreateTestimonialUseCase,
    DeleteTestimonialUseCase,
    GetTestimonialUseCase,
    ListTestimonialsUseCase,
)
from stories.domain.service import (
    CommentService,
    JWTService,
    LikeService,
    TestimonialService,
    UserService,
)
from stories.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # Testimonial use cases
    @provide(scope=Scope.REQUEST)
    def get_create_testimonial_use_case(
        self, testimonial_service: TestimonialService, user_service: UserService
    ) -> CreateTestimonialUseCase:
        """Provide create testimonial use case."""
        return CreateTestimonialUseCase(
            testimonial_service=testimonial_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_testimonials_use_case(
        self,
        testimonial_service: TestimonialService,
        like_service: LikeService,
        user_service: UserService,
    ) -> ListTestimonialsUseCase:
        """Provide list testimonials use case."""
        return ListTestimonialsUseCase(
            testimonial_service=testimonial_service,
            like_service=like_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_testimonial_use_case(
        self,
        testimonial_service: TestimonialService,
        like_service: LikeService,
        user_service: UserService,
    ) -> GetTestimonialUseCase:
        """Provide get testimonial use case."""
        return GetTestimonialUseCase(
            testimonial_service=testimonial_service,
            like_service=like_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_testimonial_use_case(
        self, testimonial_service: TestimonialService
    ) -> DeleteTestimonialUseCase:
        """Provide delete testimonial use case."""
        return DeleteTestimonialUseCase(testimonial_service=testimonial_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        user_service: UserService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            like_service=like_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self, like_service: LikeService, comment_service: CommentService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            like_service=like_service, comment_service=comment_service
        )
