# ============================================
# tracker/services/membership.py
# ============================================
"""
Team membership side effects.

- ``expand_membership`` is what ticket creation/assignment calls so that an
  assignee is always in the project's team at the moment of assignment.
- ``unassign_removed_members`` is the cascade every removal path runs:
  tickets in the project held by a removed user lose their assignee.
"""
import logging
from typing import Iterable

from tracker.models import Project, Ticket

logger = logging.getLogger(__name__)


def expand_membership(project: Project, user) -> bool:
    """Add ``user`` to ``team_members`` if absent. Returns True when added."""
    if user is None:
        return False
    if project.team_members.filter(pk=user.pk).exists():
        return False

    project.team_members.add(user)
    logger.info("User %s joined project %s via ticket activity", user.pk, project.pk)
    return True


def unassign_removed_members(project: Project, removed_ids: Iterable) -> int:
    removed_ids = [pk for pk in removed_ids if pk is not None]
    if not removed_ids:
        return 0

    count = (
        Ticket.objects
        .filter(project=project, assignee_id__in=removed_ids)
        .update(assignee=None)
    )
    if count:
        logger.info(
            "Unassigned %s ticket(s) in project %s after removing user(s) %s",
            count, project.pk, removed_ids,
        )
    return count
