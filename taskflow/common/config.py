# ============================================
# common/config.py
# ============================================
"""
Immutable configuration objects.

Services never read ``django.conf.settings`` themselves; the edge (views,
the authentication class) builds these with ``from_settings()`` and hands them
over explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from django.conf import settings


@dataclass(frozen=True)
class TokenConfig:
    secret: str
    algorithm: str = "HS256"
    lifetime: timedelta = timedelta(days=30)

    @classmethod
    def from_settings(cls) -> "TokenConfig":
        return cls(
            secret=settings.JWT_SECRET,
            algorithm=getattr(settings, "JWT_ALGO", "HS256"),
            lifetime=timedelta(hours=getattr(settings, "JWT_EXPIRES_HOURS", 720)),
        )


@dataclass(frozen=True)
class MailConfig:
    from_email: str
    subject_prefix: str = ""

    @classmethod
    def from_settings(cls) -> "MailConfig":
        return cls(
            from_email=getattr(settings, "DEFAULT_FROM_EMAIL", None)
            or getattr(settings, "SERVER_EMAIL", ""),
            subject_prefix=getattr(settings, "EMAIL_SUBJECT_PREFIX", ""),
        )


@dataclass(frozen=True)
class AuthConfig:
    frontend_url: str
    tokens: TokenConfig
    otp_ttl: timedelta = timedelta(minutes=10)
    reset_token_ttl: timedelta = timedelta(hours=1)
    min_password_length: int = 6

    @classmethod
    def from_settings(cls) -> "AuthConfig":
        return cls(
            frontend_url=getattr(settings, "FRONTEND_URL", "").rstrip("/"),
            tokens=TokenConfig.from_settings(),
            otp_ttl=timedelta(minutes=getattr(settings, "OTP_TTL_MINUTES", 10)),
            reset_token_ttl=timedelta(minutes=getattr(settings, "RESET_TOKEN_TTL_MINUTES", 60)),
        )
