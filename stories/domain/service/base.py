"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the business rules that span several entities, such as
    keeping a testimonial's counters in step with its comment threads.
    """

    pass
