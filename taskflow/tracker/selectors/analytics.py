# ============================================
# tracker/selectors/analytics.py
# ============================================
"""
Read-only aggregates for the dashboard. Nothing here mutates.
"""
from typing import Dict, List, Optional

from django.db.models import Count, Max

from tracker.models import Comment, Project, Ticket
from tracker.selectors.project import ProjectSelector

RECENT_PER_KIND = 10
RECENT_TOTAL = 20

OPEN_STATUSES = (Ticket.Status.TODO, Ticket.Status.IN_PROGRESS)


def _zeroed(choices) -> Dict[str, int]:
    return {value: 0 for value in choices.values}


def _count_by(queryset, field: str, choices) -> Dict[str, int]:
    counts = _zeroed(choices)
    for row in queryset.order_by().values(field).annotate(n=Count('id')):
        counts[row[field]] = row['n']
    return counts


def _user_brief(user) -> Optional[Dict]:
    if user is None:
        return None
    return {'id': user.pk, 'name': user.name, 'email': user.email}


def _ticket_brief(ticket) -> Dict:
    project = ticket.project
    return {
        'id': ticket.pk,
        'title': ticket.title,
        'project': {'id': project.pk, 'key': project.key, 'title': project.title},
    }


class AnalyticsSelector:

    @staticmethod
    def recent_activity(project_ids: List[int]) -> List[Dict]:
        """Latest ticket creations and comments, newest first"""
        tickets = (
            Ticket.objects
            .filter(project_id__in=project_ids)
            .select_related('creator', 'project')
            .order_by('-created_at', '-id')[:RECENT_PER_KIND]
        )
        comments = (
            Comment.objects
            .filter(ticket__project_id__in=project_ids)
            .select_related('user', 'ticket', 'ticket__project')
            .order_by('-created_at', '-id')[:RECENT_PER_KIND]
        )

        activity = [
            {
                'type': 'ticket_created',
                'user': _user_brief(t.creator),
                'ticket': _ticket_brief(t),
                'timestamp': t.created_at,
            }
            for t in tickets
        ]
        activity += [
            {
                'type': 'comment_added',
                'user': _user_brief(c.user),
                'ticket': _ticket_brief(c.ticket),
                'timestamp': c.created_at,
            }
            for c in comments
        ]
        activity.sort(key=lambda item: item['timestamp'], reverse=True)
        return activity[:RECENT_TOTAL]

    @staticmethod
    def dashboard(user) -> Dict:
        project_ids = ProjectSelector.project_ids_for_user(user)
        projects = Project.objects.filter(id__in=project_ids)
        tickets = Ticket.objects.filter(project_id__in=project_ids)

        project_counts = _count_by(projects, 'status', Project.Status)

        return {
            'projects': {
                'total': len(project_ids),
                **project_counts,
            },
            'tickets': {
                'total': tickets.count(),
                'my_assigned': Ticket.objects.filter(assignee=user, status__in=OPEN_STATUSES).count(),
                'my_created': Ticket.objects.filter(creator=user).count(),
                'by_status': _count_by(tickets, 'status', Ticket.Status),
                'by_priority': _count_by(tickets, 'priority', Ticket.Priority),
            },
            'recent_activity': AnalyticsSelector.recent_activity(project_ids),
        }

    @staticmethod
    def project_stats(project: Project) -> Dict:
        tickets = Ticket.objects.filter(project=project)
        last_ticket_update = tickets.aggregate(last=Max('updated_at'))['last']

        return {
            'total_tickets': tickets.count(),
            'by_status': _count_by(tickets, 'status', Ticket.Status),
            'last_activity': last_ticket_update or project.updated_at,
        }
