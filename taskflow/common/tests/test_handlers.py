from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import ProtectedError

from common.exceptions import Conflict, Forbidden, InvalidOrExpired, NotFound, ValidationError
from common.handlers import api_exception_handler


def _handle(exc):
    return api_exception_handler(exc, {"view": None})


def test_taxonomy_statuses():
    assert _handle(ValidationError("bad")).status_code == 400
    assert _handle(Forbidden("no")).status_code == 403
    assert _handle(NotFound("Project")).status_code == 404
    assert _handle(Conflict("dup")).status_code == 400
    assert _handle(InvalidOrExpired("Invalid or expired OTP")).status_code == 400


def test_detail_body():
    resp = _handle(NotFound("Ticket"))
    assert resp.data == {"detail": "Ticket not found"}


def test_conflict_extra_is_merged_with_native_types():
    resp = _handle(Conflict("Cannot delete", extra={"project_count": 2}))
    assert resp.data["detail"] == "Cannot delete"
    assert resp.data["project_count"] == 2


def test_django_validation_error_becomes_400():
    resp = _handle(DjangoValidationError({"key": ["Key must be 2-10 uppercase letters"]}))
    assert resp.status_code == 400
    assert "key" in resp.data["detail"]


def test_protected_error_becomes_conflict():
    resp = _handle(ProtectedError("protected", set()))
    assert resp.status_code == 400


def test_unhandled_error_exposes_message():
    resp = _handle(RuntimeError("database went away"))
    assert resp.status_code == 500
    assert resp.data == {"detail": "database went away"}
