# ============================================
# common/exceptions.py
# ============================================
"""
Error taxonomy shared by every service.

Each error is a DRF ``APIException`` so it carries its own HTTP status and
renders as ``{"detail": "..."}`` through the project exception handler.
"""
from rest_framework import status
from rest_framework.exceptions import APIException, AuthenticationFailed


class TaskflowError(APIException):
    """Base class for all application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "An application error occurred"
    default_code = "error"

    def __init__(self, detail=None, code=None, extra=None):
        super().__init__(detail, code)
        # Rendered next to "detail" by the exception handler.
        self.extra = extra or {}


class ValidationError(TaskflowError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Validation failed"
    default_code = "invalid"


class Unauthenticated(TaskflowError, AuthenticationFailed):
    """Missing, malformed or expired credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication failed"
    default_code = "not_authenticated"


class Forbidden(TaskflowError):
    """Authenticated, but not allowed to touch this entity."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have permission to perform this action"
    default_code = "forbidden"


class NotFound(TaskflowError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"
    default_code = "not_found"

    def __init__(self, resource: str = "Resource", detail=None):
        super().__init__(detail or f"{resource} not found")


class Conflict(TaskflowError):
    """Uniqueness violation or already-exists. Sent as 400 on the wire."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Resource already exists"
    default_code = "conflict"


class InvalidOrExpired(ValidationError):
    """A one-time code or reset token that does not (or no longer) match."""

    default_detail = "Invalid or expired token"
    default_code = "invalid_or_expired"


class UpstreamError(TaskflowError):
    """The mail provider refused or failed a send."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Email could not be sent"
    default_code = "upstream_error"
