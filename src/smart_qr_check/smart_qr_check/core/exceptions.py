class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a session/event id or code does not match anything."""


class AuthenticationError(DomainError):
    """Raised when an endpoint needs a logged-in user and there is none."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
