"""Domain layer errors.

Every error carries a human readable message. The HTTP interface maps each
class to a status code (see ``stories.interface.api.errors``).
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed ids, content out of bounds)."""

    pass


class MaxDepthExceededError(ValidationError):
    """Raised when a reply would nest deeper than the thread allows."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum reply depth reached ({max_depth} levels)")


class AuthenticationError(DomainError):
    """Raised when a request carries no usable credentials."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to delete {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
