# ============================================
# tracker/selectors/comment.py
# ============================================
from typing import Optional

from django.db.models import QuerySet

from tracker.models import Comment


class CommentSelector:

    @staticmethod
    def get_comment_by_id(comment_id: int) -> Optional[Comment]:
        try:
            return Comment.objects.select_related('user', 'ticket').get(id=comment_id)
        except Comment.DoesNotExist:
            return None

    @staticmethod
    def get_comments_by_ticket(ticket_id: int) -> QuerySet:
        """Oldest first"""
        return (
            Comment.objects
            .filter(ticket_id=ticket_id)
            .select_related('user')
            .order_by('created_at', 'id')
        )
