# ============================================
# tracker/models/comment.py
# ============================================
from django.conf import settings
from django.db import models


class Comment(models.Model):
    ticket = models.ForeignKey(
        'Ticket',
        on_delete=models.CASCADE,
        related_name='comments'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='comments'
    )
    text = models.CharField(max_length=1000)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'comments'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['ticket', 'created_at'], name='comments_ticket_created_idx'),
        ]

    def __str__(self):
        return f"Comment on ticket {self.ticket_id}"
