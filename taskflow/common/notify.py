# -*- coding: utf-8 -*-
# ============================================
# common/notify.py
# ============================================
"""
Notification dispatcher.

Every state transition that should reach a person by email builds a
``NotificationEvent`` and hands it to an ``EmailNotifier``:

- ``notify(event)`` is best effort: failures are logged and reported as
  ``False``, never raised. Primary writes have already committed.
- ``send(event)`` raises ``UpstreamError``; only callers that must react to a
  failed send (password reset rollback, OTP resend) use it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from django.core.mail import EmailMultiAlternatives

from common.config import MailConfig
from common.exceptions import UpstreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotificationEvent:
    kind: str
    to_email: str
    subject: str
    text: str
    html: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)


def should_notify(recipient, actor) -> bool:
    """Recipient exists, is not the one acting, and has email notifications on."""
    if recipient is None:
        return False
    if actor is not None and recipient.pk == actor.pk:
        return False
    return bool(getattr(recipient, "email_notifications", False))


class EmailNotifier:

    def __init__(self, config: MailConfig, connection=None):
        self.config = config
        self.connection = connection

    @classmethod
    def from_settings(cls) -> "EmailNotifier":
        return cls(MailConfig.from_settings())

    def _mk_subject(self, subject: str) -> str:
        prefix = self.config.subject_prefix
        return f"{prefix}{subject}" if prefix else subject

    def send(self, event: NotificationEvent) -> None:
        if not event.to_email:
            raise UpstreamError("Email could not be sent: no recipient")

        try:
            msg = EmailMultiAlternatives(
                subject=self._mk_subject(event.subject),
                body=event.text,
                from_email=self.config.from_email,
                to=[event.to_email],
                connection=self.connection,
            )
            if event.html:
                msg.attach_alternative(event.html, "text/html")
            msg.send(fail_silently=False)
        except Exception as ex:
            logger.warning("[notify.email] %s to %s failed: %s", event.kind, event.to_email, ex)
            raise UpstreamError("Email could not be sent") from ex

        logger.info("[notify.email] %s sent to %s", event.kind, event.to_email)

    def notify(self, event: NotificationEvent) -> bool:
        try:
            self.send(event)
        except UpstreamError:
            return False
        return True
