# ============================================
# tracker/services/project.py
# ============================================
import logging
import re
from typing import Dict, List, Optional

from django.db import IntegrityError, transaction

from accounts.models import User
from common.exceptions import Conflict, NotFound, ValidationError
from common.notify import EmailNotifier, should_notify
from tracker import notifications
from tracker.models import Comment, Project, Ticket
from tracker.models.project import KEY_PATTERN
from tracker.services import authorization
from tracker.services.membership import unassign_removed_members

logger = logging.getLogger(__name__)


class ProjectService:

    @staticmethod
    def _normalize_key(key: Optional[str]) -> str:
        """Upper-case first so 'bug' and 'BUG' collide."""
        key = (key or '').strip().upper()
        if not key:
            raise ValidationError("Project key is required")
        if not re.match(KEY_PATTERN, key):
            raise ValidationError("Project key must be 2-10 uppercase letters")
        return key

    @staticmethod
    def _resolve_users(user_ids: List[int]) -> List[User]:
        user_ids = list(dict.fromkeys(user_ids))
        users = list(User.objects.filter(pk__in=user_ids))
        if len(users) != len(user_ids):
            found = {u.pk for u in users}
            missing = [pk for pk in user_ids if pk not in found]
            raise NotFound(detail=f"Team member not found: {missing[0]}")
        return users

    @staticmethod
    def create_project(
        *,
        owner: User,
        title: str,
        key: str,
        description: str = '',
        team_members: Optional[List[int]] = None,
        status: str = Project.Status.ACTIVE
    ) -> Project:
        """Create a project owned by ``owner``; the team defaults to the owner alone."""

        if not title or not title.strip():
            raise ValidationError("Project title is required")

        key = ProjectService._normalize_key(key)

        # Fast path; the unique index below is what actually decides.
        if Project.objects.filter(key=key).exists():
            raise Conflict(f"Project key '{key}' already exists")

        members = (
            ProjectService._resolve_users(team_members)
            if team_members is not None
            else [owner]
        )

        try:
            with transaction.atomic():
                project = Project.objects.create(
                    title=title.strip(),
                    key=key,
                    description=description or '',
                    owner=owner,
                    status=status
                )
                project.team_members.set(members)
        except IntegrityError:
            raise Conflict(f"Project key '{key}' already exists")

        logger.info("User %s created project %s (%s)", owner.pk, project.pk, key)
        return project

    @staticmethod
    def update_project(
        *,
        project: Project,
        actor: User,
        **data
    ) -> Project:
        """
        Partial update; only provided fields change.

        Replacing ``team_members`` unassigns the tickets of every user in
        ``old - new``, the owner included.
        """
        authorization.require_owner(project, actor, "Only project owner can update the project")

        if 'key' in data and data['key'] is not None:
            if ProjectService._normalize_key(data['key']) != project.key:
                raise ValidationError("Project key cannot be changed")

        if 'title' in data:
            if not data['title'] or not data['title'].strip():
                raise ValidationError("Project title cannot be empty")
            project.title = data['title'].strip()

        for field in ('description', 'status'):
            if field in data and data[field] is not None:
                setattr(project, field, data[field])

        with transaction.atomic():
            project.save()

            if data.get('team_members') is not None:
                new_members = ProjectService._resolve_users(data['team_members'])
                old_ids = set(project.team_members.values_list('id', flat=True))
                new_ids = {u.pk for u in new_members}
                removed_ids = old_ids - new_ids

                project.team_members.set(new_members)
                unassign_removed_members(project, removed_ids)

        return project

    @staticmethod
    def delete_project(*, project: Project, actor: User) -> Dict[str, int]:
        """Delete comments, then tickets, then the project, in one transaction."""
        authorization.require_owner(project, actor, "Only project owner can delete the project")

        with transaction.atomic():
            comments, _ = Comment.objects.filter(ticket__project=project).delete()
            tickets, _ = Ticket.objects.filter(project=project).delete()
            project_id = project.pk
            project.delete()

        logger.info(
            "User %s deleted project %s with %s ticket(s) and %s comment(s)",
            actor.pk, project_id, tickets, comments,
        )
        return {'tickets_deleted': tickets, 'comments_deleted': comments}

    @staticmethod
    def add_member(
        *,
        project: Project,
        actor: User,
        user_id: int,
        notifier: EmailNotifier
    ) -> Project:
        authorization.require_owner(project, actor, "Only project owner can add team members")

        try:
            member = User.objects.get(pk=user_id)
        except User.DoesNotExist:
            raise NotFound("User")

        if project.team_members.filter(pk=member.pk).exists():
            raise Conflict("User is already a team member")

        project.team_members.add(member)

        if should_notify(member, actor):
            notifier.notify(notifications.added_to_project(member, project, actor))

        return project

    @staticmethod
    def remove_member(*, project: Project, actor: User, user_id: int) -> Project:
        """Remove a user from the team and unassign their tickets in this project."""
        authorization.require_owner(project, actor, "Only project owner can remove team members")

        if project.owner_id == user_id:
            raise ValidationError("Cannot remove project owner")

        with transaction.atomic():
            project.team_members.remove(user_id)
            unassign_removed_members(project, [user_id])

        return project
