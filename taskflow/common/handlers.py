# ============================================
# common/handlers.py
# ============================================
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import ProtectedError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from common.exceptions import Conflict, TaskflowError, ValidationError

logger = logging.getLogger(__name__)


def _django_validation_message(exc: DjangoValidationError) -> str:
    if hasattr(exc, "message_dict"):
        parts = []
        for field, messages in exc.message_dict.items():
            parts.append(f"{field}: {' '.join(messages)}")
        return "; ".join(parts)
    return " ".join(exc.messages)


def api_exception_handler(exc, context):
    """
    DRF exception handler for the whole API.

    - Django ``ValidationError`` (model ``full_clean``) -> 400
    - ``ProtectedError`` (delete blocked by a PROTECT foreign key) -> Conflict
    - DRF/app errors -> DRF default rendering (``{"detail": ...}``)
    - anything else -> logged, 500 with the error message
    """
    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(_django_validation_message(exc))
    elif isinstance(exc, ProtectedError):
        exc = Conflict("Entity is still referenced and cannot be deleted")

    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, TaskflowError) and exc.extra and isinstance(response.data, dict):
            response.data.update(exc.extra)
        return response

    view = context.get("view")
    logger.exception("Unhandled error in %s", view.__class__.__name__ if view else "API")
    return Response(
        {"detail": str(exc) or exc.__class__.__name__},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
