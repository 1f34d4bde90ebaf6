# ============================================
# tracker/services/comment.py
# ============================================
from common.exceptions import Forbidden, ValidationError
from common.notify import EmailNotifier, should_notify
from tracker import notifications
from tracker.models import Comment, Ticket
from tracker.services import authorization

MAX_COMMENT_LENGTH = 1000


class CommentService:

    @staticmethod
    def _clean_text(text) -> str:
        text = (text or '').strip()
        if not text:
            raise ValidationError("Comment text is required")
        if len(text) > MAX_COMMENT_LENGTH:
            raise ValidationError(f"Comment cannot exceed {MAX_COMMENT_LENGTH} characters")
        return text

    @staticmethod
    def create_comment(
        *,
        ticket: Ticket,
        actor,
        text: str,
        notifier: EmailNotifier
    ) -> Comment:
        """Post a comment and tell the ticket's creator and assignee, never the author."""

        text = CommentService._clean_text(text)
        authorization.require_member(ticket.project, actor, "Not authorized to comment on this ticket")

        comment = Comment.objects.create(
            ticket=ticket,
            user=actor,
            text=text
        )

        recipients = {}
        for user in (ticket.creator, ticket.assignee):
            if user is not None:
                recipients[user.pk] = user

        for user in recipients.values():
            if should_notify(user, actor):
                notifier.notify(notifications.new_comment(user, comment, actor))

        return comment

    @staticmethod
    def update_comment(*, comment: Comment, actor, text: str) -> Comment:
        if not authorization.is_comment_author(comment, actor):
            raise Forbidden("Not authorized to update this comment")

        comment.text = CommentService._clean_text(text)
        comment.save(update_fields=['text', 'updated_at'])

        return comment

    @staticmethod
    def delete_comment(*, comment: Comment, actor) -> None:
        if not authorization.is_comment_author(comment, actor):
            raise Forbidden("Not authorized to delete this comment")

        comment.delete()
