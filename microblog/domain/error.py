"""Domain layer errors.

Every failure a core operation can produce is one of these kinds, so the
interface layer can map each to a response deterministically.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Bad input (empty title or handle, unmapped avatar letter, ...)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnauthenticatedError(DomainError):
    """No resolved identity where one is required."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, handle: str):
        self.resource = resource
        self.resource_id = resource_id
        self.handle = handle
        super().__init__(f"User {handle} is not allowed to modify {resource} {resource_id}")


class ConflictError(DomainError):
    """Handle already taken, or a duplicate account creation race."""

    pass


class StoreUnavailableError(DomainError):
    """Underlying persistence failure."""

    pass
