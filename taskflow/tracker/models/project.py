# ============================================
# tracker/models/project.py
# ============================================
from django.conf import settings
from django.core.validators import RegexValidator
from django.db import models

KEY_PATTERN = r'^[A-Z]{2,10}$'


class Project(models.Model):
    class Status(models.TextChoices):
        ACTIVE = 'active', 'Active'
        ARCHIVED = 'archived', 'Archived'
        COMPLETED = 'completed', 'Completed'

    title = models.CharField(max_length=100)
    key = models.CharField(
        max_length=10,
        unique=True,
        validators=[RegexValidator(KEY_PATTERN, 'Key must be 2-10 uppercase letters')],
    )
    description = models.CharField(max_length=500, blank=True, default='')
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='owned_projects'
    )
    team_members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='member_projects',
        db_table='project_members',
        blank=True
    )
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.ACTIVE)
    # Last ticket number handed out; only ever bumped with an UPDATE.
    ticket_sequence = models.PositiveIntegerField(default=0, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'projects'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['owner', 'title'], name='projects_owner_title_idx'),
        ]

    def __str__(self):
        return f"{self.key} - {self.title}"
