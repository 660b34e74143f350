class DomainError(Exception):
    """Base exception for business rule violations.

    ``status_code`` is the HTTP status the web layer answers with.
    """

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is malformed or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when credentials or the session token are invalid."""

    status_code = 401


class ForbiddenError(DomainError):
    """Raised when a user lacks permission or office access."""

    status_code = 403


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    status_code = 404


class InvalidStateError(DomainError):
    """Raised when a referenced entity exists but is not ACTIVE."""


class OutOfRangeError(DomainError):
    """Raised when an incidence date falls outside its period."""


class DuplicateError(DomainError):
    """Raised when an ACTIVE movement already exists for the same triple."""

    status_code = 409


class ConflictError(DomainError):
    """Raised when a write collides with existing rows (FK or unique key)."""

    status_code = 409
