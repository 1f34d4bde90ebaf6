import re
from datetime import timedelta
from unittest import mock

import pytest
from django.core import mail
from django.utils import timezone

from accounts.models import User
from accounts.services.auth_service import hash_reset_token


def _request_reset(client, email="alice@example.com"):
    return client.post("/api/auth/forgot-password/", {"email": email}, format="json")


def _raw_token_from_outbox():
    match = re.search(r"http://frontend\.test/reset-password/([0-9a-f]{64})", mail.outbox[-1].body)
    assert match, mail.outbox[-1].body
    return match.group(1)


@pytest.mark.django_db
def test_forgot_password_stores_only_the_hash(api_client, alice):
    resp = _request_reset(api_client)
    assert resp.status_code == 200

    raw = _raw_token_from_outbox()
    alice.refresh_from_db()
    assert alice.reset_token_hash == hash_reset_token(raw)
    assert alice.reset_token_hash != raw
    assert alice.reset_token_expires_at > timezone.now()


@pytest.mark.django_db
def test_forgot_password_unknown_email(api_client):
    resp = _request_reset(api_client, "nobody@example.com")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "No user found with this email"


@pytest.mark.django_db
def test_forgot_password_rolls_back_token_when_mail_fails(api_client, alice):
    with mock.patch("common.notify.EmailMultiAlternatives.send", side_effect=OSError("smtp down")):
        resp = _request_reset(api_client)

    assert resp.status_code == 500
    alice.refresh_from_db()
    assert alice.reset_token_hash is None
    assert alice.reset_token_expires_at is None


@pytest.mark.django_db
def test_reset_password_consumes_token(api_client, alice):
    _request_reset(api_client)
    raw = _raw_token_from_outbox()

    resp = api_client.post(f"/api/auth/reset-password/{raw}/", {"password": "brand-new"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["token"]

    alice.refresh_from_db()
    assert alice.check_password("brand-new")
    assert alice.reset_token_hash is None
    assert alice.reset_token_expires_at is None

    again = api_client.post(f"/api/auth/reset-password/{raw}/", {"password": "other-pass"}, format="json")
    assert again.status_code == 400
    assert again.json()["detail"] == "Invalid or expired reset token"


@pytest.mark.django_db
def test_reset_password_expired_token_keeps_password(api_client, alice):
    _request_reset(api_client)
    raw = _raw_token_from_outbox()
    User.objects.filter(pk=alice.pk).update(reset_token_expires_at=timezone.now() - timedelta(seconds=1))
    old_hash = User.objects.get(pk=alice.pk).password

    resp = api_client.post(f"/api/auth/reset-password/{raw}/", {"password": "brand-new"}, format="json")
    assert resp.status_code == 400
    assert User.objects.get(pk=alice.pk).password == old_hash


@pytest.mark.django_db
def test_reset_password_validates_new_password(api_client, alice):
    _request_reset(api_client)
    raw = _raw_token_from_outbox()

    resp = api_client.post(f"/api/auth/reset-password/{raw}/", {"password": "abc"}, format="json")
    assert resp.status_code == 400
    alice.refresh_from_db()
    assert alice.reset_token_hash == hash_reset_token(raw)
