# -*- coding: utf-8 -*-
"""
Credential lifecycle: register -> OTP -> verified, login, password reset.

``AuthService`` is built per request from an ``AuthConfig`` and a notifier so
that nothing here reads process-wide settings.
"""
from __future__ import annotations

import hashlib
import logging
import secrets
from dataclasses import dataclass

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import IntegrityError, transaction
from django.utils import timezone

from accounts import notifications
from accounts.models import User
from accounts.selectors.user_selector import UserSelector
from accounts.services import otp_service
from common.config import AuthConfig
from common.exceptions import (
    Conflict, InvalidOrExpired, NotFound, Unauthenticated, UpstreamError, ValidationError,
)
from common.notify import EmailNotifier
from common.tokens import TokenCodec

logger = logging.getLogger(__name__)


def hash_reset_token(raw_token: str) -> str:
    return hashlib.sha256(raw_token.encode()).hexdigest()


@dataclass(frozen=True)
class AuthResult:
    user: User
    token: str


class AuthService:

    def __init__(self, *, config: AuthConfig, notifier: EmailNotifier):
        self.config = config
        self.notifier = notifier
        self.tokens = TokenCodec(config.tokens)

    @classmethod
    def from_settings(cls) -> "AuthService":
        return cls(config=AuthConfig.from_settings(), notifier=EmailNotifier.from_settings())

    # ---------- helpers ----------
    def _validate_password(self, password: str) -> None:
        if not password:
            raise ValidationError("Please provide new password")
        if len(password) < self.config.min_password_length:
            raise ValidationError(
                f"Password must be at least {self.config.min_password_length} characters"
            )

    def _validate_email(self, email: str) -> str:
        email = User.objects.normalize_email(email)
        try:
            validate_email(email)
        except DjangoValidationError:
            raise ValidationError("Please provide a valid email")
        return email

    # ---------- registration ----------
    def register(self, *, name: str, email: str, password: str) -> AuthResult:
        if not name or not email or not password:
            raise ValidationError("Please provide all required fields")

        email = self._validate_email(email)
        self._validate_password(password)

        if User.objects.filter(email=email).exists():
            raise Conflict("User already exists")

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    email=email,
                    password=password,
                    name=name.strip(),
                    is_email_verified=False,
                )
                otp = otp_service.issue_otp(user=user, ttl=self.config.otp_ttl)
        except IntegrityError:
            raise Conflict("User already exists")

        self.notifier.notify(notifications.verification_otp(user, otp.code, self.config.otp_ttl))

        return AuthResult(user=user, token=self.tokens.issue(user.pk))

    @transaction.atomic
    def verify_email(self, *, email: str, code: str) -> User:
        if not email or not code:
            raise ValidationError("Email and OTP are required")

        otp = otp_service.consume_otp(
            email=User.objects.normalize_email(email),
            code=str(code).strip(),
        )
        if otp is None:
            raise InvalidOrExpired("Invalid or expired OTP")

        user = otp.user
        user.is_email_verified = True
        user.save(update_fields=["is_email_verified", "updated_at"])
        return user

    def resend_otp(self, *, email: str) -> None:
        if not email:
            raise ValidationError("Email is required")

        user = UserSelector.get_user_by_email(email)
        if user is None:
            raise NotFound("User")
        if user.is_email_verified:
            raise ValidationError("Email is already verified")

        otp = otp_service.issue_otp(user=user, ttl=self.config.otp_ttl)
        self.notifier.send(notifications.verification_otp(user, otp.code, self.config.otp_ttl))

    # ---------- login ----------
    def login(self, *, email: str, password: str) -> AuthResult:
        if not email or not password:
            raise ValidationError("Please provide email and password")

        user = UserSelector.get_user_by_email(email)
        if user is None:
            # Hash once anyway so unknown emails cost the same as wrong passwords.
            User().set_password(password)
            raise Unauthenticated("Invalid credentials")

        if not user.check_password(password) or not user.is_active:
            raise Unauthenticated("Invalid credentials")

        logger.debug("User %s logged in", user.pk)
        return AuthResult(user=user, token=self.tokens.issue(user.pk))

    # ---------- password reset ----------
    def forgot_password(self, *, email: str) -> None:
        if not email:
            raise ValidationError("Please provide email address")

        user = UserSelector.get_user_by_email(email)
        if user is None:
            raise NotFound(detail="No user found with this email")

        raw_token = secrets.token_hex(32)
        user.reset_token_hash = hash_reset_token(raw_token)
        user.reset_token_expires_at = timezone.now() + self.config.reset_token_ttl
        user.save(update_fields=["reset_token_hash", "reset_token_expires_at", "updated_at"])

        reset_url = f"{self.config.frontend_url}/reset-password/{raw_token}"
        try:
            self.notifier.send(
                notifications.password_reset(user, reset_url, self.config.reset_token_ttl)
            )
        except UpstreamError:
            user.clear_reset_token()
            user.save(update_fields=["reset_token_hash", "reset_token_expires_at", "updated_at"])
            logger.warning("Reset token for user %s rolled back after failed send", user.pk)
            raise

    @transaction.atomic
    def reset_password(self, *, token: str, password: str) -> AuthResult:
        self._validate_password(password)
        if not token:
            raise InvalidOrExpired("Invalid or expired reset token")

        user = (
            User.objects
            .select_for_update()
            .filter(
                reset_token_hash=hash_reset_token(token),
                reset_token_expires_at__gt=timezone.now(),
            )
            .first()
        )
        if user is None:
            raise InvalidOrExpired("Invalid or expired reset token")

        user.set_password(password)
        user.clear_reset_token()
        user.save()

        return AuthResult(user=user, token=self.tokens.issue(user.pk))
