# ============================================
# tracker/models/ticket.py
# ============================================
from django.conf import settings
from django.db import models


class Ticket(models.Model):
    class Status(models.TextChoices):
        TODO = 'todo', 'To Do'
        IN_PROGRESS = 'in-progress', 'In Progress'
        DONE = 'done', 'Done'

    class Priority(models.TextChoices):
        LOW = 'low', 'Low'
        MEDIUM = 'medium', 'Medium'
        HIGH = 'high', 'High'
        CRITICAL = 'critical', 'Critical'

    class TicketType(models.TextChoices):
        BUG = 'bug', 'Bug'
        FEATURE = 'feature', 'Feature'
        TASK = 'task', 'Task'
        IMPROVEMENT = 'improvement', 'Improvement'

    project = models.ForeignKey(
        'Project',
        on_delete=models.CASCADE,
        related_name='tickets'
    )
    ticket_number = models.PositiveIntegerField()
    title = models.CharField(max_length=200)
    description = models.CharField(max_length=2000, blank=True, default='')
    ticket_type = models.CharField(
        max_length=16,
        choices=TicketType.choices,
        default=TicketType.BUG
    )
    priority = models.CharField(
        max_length=10,
        choices=Priority.choices,
        default=Priority.MEDIUM
    )
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.TODO
    )
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='created_tickets'
    )
    assignee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='assigned_tickets'
    )
    tags = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tickets'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['project', 'ticket_number'],
                name='tickets_unique_number_per_project'
            ),
        ]
        indexes = [
            models.Index(fields=['project', 'status'], name='tickets_project_status_idx'),
            models.Index(fields=['assignee'], name='tickets_assignee_idx'),
            models.Index(fields=['creator'], name='tickets_creator_idx'),
        ]

    def __str__(self):
        return f"{self.display_key} - {self.title}"

    @property
    def display_key(self) -> str:
        return f"{self.project.key}-{self.ticket_number}"
