# ============================================
# tracker/views/base.py
# ============================================
from rest_framework.views import APIView

from common.exceptions import NotFound
from common.notify import EmailNotifier
from tracker.selectors.comment import CommentSelector
from tracker.selectors.project import ProjectSelector
from tracker.selectors.ticket import TicketSelector


class TrackerAPIView(APIView):
    """Lookup helpers shared by the tracker endpoints: 404 before any permission check."""

    def get_notifier(self) -> EmailNotifier:
        return EmailNotifier.from_settings()

    def get_project(self, project_id):
        project = ProjectSelector.get_project_by_id(project_id)
        if not project:
            raise NotFound("Project")
        return project

    def get_ticket(self, ticket_id):
        ticket = TicketSelector.get_ticket_by_id(ticket_id)
        if not ticket:
            raise NotFound("Ticket")
        return ticket

    def get_comment(self, comment_id):
        comment = CommentSelector.get_comment_by_id(comment_id)
        if not comment:
            raise NotFound("Comment")
        return comment
