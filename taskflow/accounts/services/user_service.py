# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from typing import Dict, Optional

from django.db import transaction

from accounts.models import User
from common.exceptions import Conflict, Forbidden, NotFound, ValidationError

logger = logging.getLogger(__name__)


def update_profile(
    *,
    user: User,
    name: Optional[str] = None,
    avatar: Optional[str] = None,
    email_notifications: Optional[bool] = None,
) -> User:
    fields = []
    if name is not None:
        if not name.strip():
            raise ValidationError("Name cannot be empty")
        user.name = name.strip()
        fields.append("name")
    if avatar is not None:
        user.avatar = avatar
        fields.append("avatar")
    if email_notifications is not None:
        user.email_notifications = email_notifications
        fields.append("email_notifications")

    if fields:
        user.save(update_fields=fields + ["updated_at"])
    return user


def _require_admin(actor: User, message: str) -> None:
    if not actor.is_admin:
        raise Forbidden(message)


def change_role(*, actor: User, user_id, role: str) -> User:
    _require_admin(actor, "Only admins can change roles")

    if role not in User.Role.values:
        raise ValidationError("Invalid role")

    try:
        target = User.objects.get(pk=user_id)
    except (User.DoesNotExist, ValueError, TypeError):
        raise NotFound("User")

    target.role = role
    target.save(update_fields=["role", "updated_at"])
    logger.info("User %s changed role of %s to %s", actor.pk, target.pk, role)
    return target


@transaction.atomic
def delete_user(*, actor: User, user_id) -> Dict[str, int]:
    """
    Delete a user that owns no project and is assigned no ticket.

    Authored tickets and comments stay behind with a null author.
    """
    _require_admin(actor, "Only admins can delete users")

    try:
        target = User.objects.select_for_update().get(pk=user_id)
    except (User.DoesNotExist, ValueError, TypeError):
        raise NotFound("User")

    project_count = target.owned_projects.count()
    if project_count:
        raise Conflict(
            "Cannot delete user who owns projects. Transfer ownership first.",
            extra={"project_count": project_count},
        )

    ticket_count = target.assigned_tickets.count()
    if ticket_count:
        raise Conflict(
            "Cannot delete user with assigned tickets. Unassign tickets first.",
            extra={"ticket_count": ticket_count},
        )

    summary = {
        "tickets_created": target.created_tickets.count(),
        "comments_created": target.comments.count(),
    }
    target.delete()
    logger.info("User %s deleted user %s", actor.pk, user_id)
    return summary
