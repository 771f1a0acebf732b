"""Service-level errors and their HTTP mapping.

Services raise these; ``src.main`` turns them into a single JSON response
``{"detail": ...}`` with the matching status code. The ``detail`` text is
always safe to show to clients.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors that end a request with a client-facing response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class RequestValidationFailed(ServiceError):
    """Missing or malformed input. Nothing was mutated."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"


class ConflictError(ServiceError):
    """A unique key (email) is already taken. Nothing was mutated."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists"


class AuthenticationError(ServiceError):
    """Missing or invalid session credential, or bad login."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"


class AuthorizationError(ServiceError):
    """Authenticated, but not the owner of the target resource."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not allowed to modify this resource"


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"
