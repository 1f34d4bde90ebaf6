# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import timedelta

from common.notify import NotificationEvent


def _minutes(ttl: timedelta) -> int:
    return int(ttl.total_seconds() // 60)


def verification_otp(user, code: str, ttl: timedelta) -> NotificationEvent:
    text = (
        f"Hello {user.name}!\n\n"
        "Thank you for registering with TaskFlow. Use the following code to "
        "verify your email address:\n\n"
        f"    {code}\n\n"
        f"This code is valid for {_minutes(ttl)} minutes.\n"
        "If you didn't create an account, please ignore this email.\n"
    )
    return NotificationEvent(
        kind="verification_otp",
        to_email=user.email,
        subject="Email Verification",
        text=text,
        context={"user_id": user.pk},
    )


def password_reset(user, reset_url: str, ttl: timedelta) -> NotificationEvent:
    text = (
        f"Hello {user.name},\n\n"
        "We received a request to reset your password. Open the link below to "
        "choose a new one:\n\n"
        f"{reset_url}\n\n"
        f"The link expires in {_minutes(ttl)} minutes. If you didn't request a "
        "reset, you can ignore this email.\n"
    )
    return NotificationEvent(
        kind="password_reset",
        to_email=user.email,
        subject="Password Reset Request",
        text=text,
        context={"user_id": user.pk},
    )
