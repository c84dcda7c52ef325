"""Testimonial use cases."""

from .common import TestimonialItem
from .create_testimonial import (
    CreateTestimonialRequest,
    CreateTestimonialResponse,
    CreateTestimonialUseCase,
)
from .delete_testimonial import (
    DeleteTestimonialRequest,
    DeleteTestimonialResponse,
    DeleteTestimonialUseCase,
)
from .get_testimonial import (
    GetTestimonialRequest,
    GetTestimonialResponse,
    GetTestimonialUseCase,
)
from .list_testimonials import (
    ListTestimonialsRequest,
    ListTestimonialsResponse,
    ListTestimonialsUseCase,
    Pagination,
)

__all__ = [
    "CreateTestimonialRequest",
    "CreateTestimonialResponse",
    "CreateTestimonialUseCase",
    "DeleteTestimonialRequest",
    "DeleteTestimonialResponse",
    "DeleteTestimonialUseCase",
    "GetTestimonialRequest",
    "GetTestimonialResponse",
    "GetTestimonialUseCase",
    "ListTestimonialsRequest",
    "ListTestimonialsResponse",
    "ListTestimonialsUseCase",
    "Pagination",
    "TestimonialItem",
]
