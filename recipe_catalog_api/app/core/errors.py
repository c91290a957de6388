"""
Domain errors raised by the service and storage layers.

Every failure the core can report is a subclass of ``CatalogError``.
The classes carry no HTTP knowledge; ``api.errors`` maps each kind to
a status code.
"""


class CatalogError(Exception):
    """Base class for all recipe catalog errors."""


class NotFoundError(CatalogError):
    """The requested entity does not exist."""


class UnauthorizedError(CatalogError):
    """The caller does not own the resource it tries to change."""


class ForbiddenError(CatalogError):
    """The caller's role does not allow the operation."""


class DuplicateError(CatalogError):
    """A uniqueness constraint (username, email) would be violated."""


class InvalidCredentialsError(CatalogError):
    """Login failed.

    Raised for an unknown username and for a wrong password alike so the
    two cases cannot be told apart.
    """

    def __init__(self, message: str = "invalid credentials") -> None:
        super().__init__(message)


class InvalidTokenError(CatalogError):
    """A bearer token is malformed, wrongly signed or expired."""

    def __init__(self, message: str = "invalid token") -> None:
        super().__init__(message)


class ValidationError(CatalogError):
    """Caller supplied a value outside the accepted range."""
