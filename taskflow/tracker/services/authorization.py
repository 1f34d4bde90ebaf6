# ============================================
# tracker/services/authorization.py
# ============================================
"""
Authorization gate for projects and everything hanging off them.

A member is the project owner or anyone in ``team_members``. The owner is
authorized on ownership alone, whether or not they appear in the set.

Callers resolve the entity first (``NotFound`` when absent) and only then ask
the gate, so a missing project and a present-but-closed one take different
code paths.
"""
from common.exceptions import Forbidden
from tracker.models import Comment, Project, Ticket


def is_owner(project: Project, user) -> bool:
    return user is not None and project.owner_id == user.pk


def is_member(project: Project, user) -> bool:
    if user is None:
        return False
    if is_owner(project, user):
        return True
    return project.team_members.filter(pk=user.pk).exists()


def require_member(project: Project, user, message: str = "Not authorized to access this project") -> None:
    if not is_member(project, user):
        raise Forbidden(message)


def require_owner(project: Project, user, message: str = "Only project owner can perform this action") -> None:
    if not is_owner(project, user):
        raise Forbidden(message)


def can_delete_ticket(ticket: Ticket, user) -> bool:
    """Stricter than update: project owner or the ticket's creator."""
    return is_owner(ticket.project, user) or (user is not None and ticket.creator_id == user.pk)


def is_comment_author(comment: Comment, user) -> bool:
    return user is not None and comment.user_id == user.pk
