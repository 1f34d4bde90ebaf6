# ============================================
# tracker/selectors/ticket.py
# ============================================
from typing import Iterable, Optional

from django.db.models import Q, QuerySet

from tracker.models import Ticket


class TicketSelector:

    @staticmethod
    def get_ticket_by_id(ticket_id: int) -> Optional[Ticket]:
        """Get single ticket with related data"""
        try:
            return Ticket.objects.select_related(
                'project', 'project__owner', 'creator', 'assignee'
            ).get(id=ticket_id)
        except Ticket.DoesNotExist:
            return None

    @staticmethod
    def get_tickets_list(
        project_ids: Iterable[int],
        status: str = None,
        priority: str = None,
        assignee_id: int = None,
        ticket_type: str = None,
        search: str = None
    ) -> QuerySet:
        """Get filtered tickets list with optimization"""
        queryset = Ticket.objects.select_related(
            'project', 'creator', 'assignee'
        ).filter(project_id__in=list(project_ids))

        if status:
            queryset = queryset.filter(status=status)

        if priority:
            queryset = queryset.filter(priority=priority)

        if assignee_id:
            queryset = queryset.filter(assignee_id=assignee_id)

        if ticket_type:
            queryset = queryset.filter(ticket_type=ticket_type)

        if search:
            queryset = queryset.filter(
                Q(title__icontains=search) |
                Q(description__icontains=search)
            )

        return queryset.order_by('-created_at', '-id')
