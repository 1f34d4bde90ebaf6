# -*- coding: utf-8 -*-
"""
OTP ledger.

At most one unused, unexpired code per (email, purpose): issuing always marks
the previous open codes used first, inside the same transaction as the insert.
"""
from __future__ import annotations

import logging
import secrets
from datetime import timedelta
from typing import Optional

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from accounts.models import OTP, User

logger = logging.getLogger(__name__)

OTP_LENGTH = 6


def generate_code() -> str:
    """Six decimal digits, never starting with 0."""
    low = 10 ** (OTP_LENGTH - 1)
    return str(low + secrets.randbelow(9 * low))


def invalidate_unused(*, email: str, purpose: str = OTP.Purpose.EMAIL_VERIFICATION) -> int:
    return (
        OTP.objects
        .filter(email=email, purpose=purpose, is_used=False)
        .update(is_used=True)
    )


@transaction.atomic
def issue_otp(
    *,
    user: User,
    ttl: timedelta,
    purpose: str = OTP.Purpose.EMAIL_VERIFICATION,
) -> OTP:
    invalidated = invalidate_unused(email=user.email, purpose=purpose)
    otp = OTP.objects.create(
        user=user,
        email=user.email,
        code=generate_code(),
        purpose=purpose,
        expires_at=timezone.now() + ttl,
    )
    logger.info(
        "Issued %s OTP for user %s (invalidated %s previous)", purpose, user.pk, invalidated
    )
    return otp


@transaction.atomic
def consume_otp(
    *,
    email: str,
    code: str,
    purpose: str = OTP.Purpose.EMAIL_VERIFICATION,
) -> Optional[OTP]:
    """
    Mark a matching open OTP used and return it, or ``None``.

    The conditional UPDATE is the single point of truth: of two concurrent
    consumers only one sees a row count of 1.
    """
    otp = (
        OTP.objects
        .filter(
            email=email,
            code=code,
            purpose=purpose,
            is_used=False,
            expires_at__gt=timezone.now(),
        )
        .order_by("-created_at")
        .first()
    )
    if otp is None:
        return None

    claimed = OTP.objects.filter(pk=otp.pk, is_used=False).update(is_used=True)
    if claimed != 1:
        return None

    otp.is_used = True
    return otp


def purge_expired(*, now=None) -> int:
    now = now or timezone.now()
    deleted, _ = OTP.objects.filter(Q(is_used=True) | Q(expires_at__lte=now)).delete()
    return deleted
