# ============================================
# tracker/services/ticket.py
# ============================================
import logging
from typing import List, Optional

from django.db import IntegrityError, transaction
from django.db.models import F

from accounts.models import User
from common.exceptions import Conflict, Forbidden, NotFound, ValidationError
from common.notify import EmailNotifier, should_notify
from tracker import notifications
from tracker.models import Project, Ticket
from tracker.services import authorization
from tracker.services.membership import expand_membership

logger = logging.getLogger(__name__)


class TicketService:

    @staticmethod
    def _reserve_ticket_number(project: Project) -> int:
        """
        Bump the project's counter and read it back.

        Must run inside a transaction: the UPDATE holds the row lock until
        commit, so concurrent creators queue on it and each read their own value.
        """
        Project.objects.filter(pk=project.pk).update(ticket_sequence=F('ticket_sequence') + 1)
        number = Project.objects.filter(pk=project.pk).values_list('ticket_sequence', flat=True).get()
        project.ticket_sequence = number
        return number

    @staticmethod
    def _get_assignee(assignee_id) -> User:
        try:
            return User.objects.get(pk=assignee_id)
        except User.DoesNotExist:
            raise NotFound(detail="Assignee user not found")

    @staticmethod
    def _notify_assignee(ticket: Ticket, actor: User, notifier: EmailNotifier) -> None:
        if should_notify(ticket.assignee, actor):
            notifier.notify(notifications.ticket_assigned(ticket.assignee, ticket, actor))

    @staticmethod
    def create_ticket(
        *,
        actor: User,
        project_id: int,
        title: str,
        notifier: EmailNotifier,
        description: str = '',
        assignee_id: Optional[int] = None,
        priority: str = Ticket.Priority.MEDIUM,
        ticket_type: str = Ticket.TicketType.BUG,
        tags: Optional[List[str]] = None
    ) -> Ticket:
        """Create a ticket with the next per-project number."""

        if not title or not title.strip() or not project_id:
            raise ValidationError("Title and project are required")

        project = Project.objects.filter(pk=project_id).first()
        if project is None:
            raise NotFound("Project")

        authorization.require_member(project, actor, "Not authorized to create tickets in this project")

        assignee = TicketService._get_assignee(assignee_id) if assignee_id else None

        try:
            with transaction.atomic():
                expand_membership(project, actor)
                expand_membership(project, assignee)

                ticket = Ticket.objects.create(
                    project=project,
                    ticket_number=TicketService._reserve_ticket_number(project),
                    title=title.strip(),
                    description=description or '',
                    creator=actor,
                    assignee=assignee,
                    priority=priority,
                    ticket_type=ticket_type,
                    tags=list(tags or [])
                )
        except IntegrityError:
            raise Conflict("Ticket number already taken, please retry")

        logger.info("User %s created ticket %s in project %s", actor.pk, ticket.display_key, project.pk)

        TicketService._notify_assignee(ticket, actor, notifier)
        return ticket

    @staticmethod
    def update_ticket(
        *,
        ticket: Ticket,
        actor: User,
        notifier: EmailNotifier,
        **data
    ) -> Ticket:
        """
        Overwrite every provided field.

        ``assignee_id`` may be ``None`` to unassign; a new assignee who is not
        yet in the team is added to it.
        """
        project = ticket.project
        authorization.require_member(project, actor, "Not authorized to update this ticket")

        if 'title' in data and (not data['title'] or not data['title'].strip()):
            raise ValidationError("Ticket title cannot be empty")

        old_assignee_id = ticket.assignee_id
        new_assignee = None
        if 'assignee_id' in data and data['assignee_id'] is not None:
            new_assignee = TicketService._get_assignee(data['assignee_id'])

        for field in ('title', 'description', 'status', 'priority', 'ticket_type', 'tags'):
            if field in data:
                value = data[field]
                if field == 'title':
                    value = value.strip()
                if field == 'description' and value is None:
                    value = ''
                setattr(ticket, field, value)

        with transaction.atomic():
            if 'assignee_id' in data:
                expand_membership(project, new_assignee)
                ticket.assignee = new_assignee
            ticket.save()

        if ticket.assignee_id and ticket.assignee_id != old_assignee_id:
            TicketService._notify_assignee(ticket, actor, notifier)

        return ticket

    @staticmethod
    def update_status(
        *,
        ticket: Ticket,
        actor: User,
        status: str,
        notifier: EmailNotifier
    ) -> Ticket:
        authorization.require_member(ticket.project, actor, "Not authorized to update ticket status")

        if status not in Ticket.Status.values:
            raise ValidationError("Invalid status")

        old_status = ticket.status
        ticket.status = status
        ticket.save(update_fields=['status', 'updated_at'])

        if should_notify(ticket.assignee, actor):
            notifier.notify(
                notifications.ticket_status_changed(ticket.assignee, ticket, old_status, status, actor)
            )

        return ticket

    @staticmethod
    def delete_ticket(*, ticket: Ticket, actor: User) -> None:
        """Project owner or creator only; comments go first."""
        if not authorization.can_delete_ticket(ticket, actor):
            raise Forbidden("Only project owner or ticket creator can delete this ticket")

        with transaction.atomic():
            ticket.comments.all().delete()
            ticket.delete()
