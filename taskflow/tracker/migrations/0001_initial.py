import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=100)),
                ("key", models.CharField(max_length=10, unique=True, validators=[django.core.validators.RegexValidator("^[A-Z]{2,10}$", "Key must be 2-10 uppercase letters")])),
                ("description", models.CharField(blank=True, default="", max_length=500)),
                ("status", models.CharField(choices=[("active", "Active"), ("archived", "Archived"), ("completed", "Completed")], default="active", max_length=16)),
                ("ticket_sequence", models.PositiveIntegerField(default=0, editable=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("owner", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="owned_projects", to=settings.AUTH_USER_MODEL)),
                ("team_members", models.ManyToManyField(blank=True, db_table="project_members", related_name="member_projects", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "projects",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["owner", "title"], name="projects_owner_title_idx")],
            },
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("ticket_number", models.PositiveIntegerField()),
                ("title", models.CharField(max_length=200)),
                ("description", models.CharField(blank=True, default="", max_length=2000)),
                ("ticket_type", models.CharField(choices=[("bug", "Bug"), ("feature", "Feature"), ("task", "Task"), ("improvement", "Improvement")], default="bug", max_length=16)),
                ("priority", models.CharField(choices=[("low", "Low"), ("medium", "Medium"), ("high", "High"), ("critical", "Critical")], default="medium", max_length=10)),
                ("status", models.CharField(choices=[("todo", "To Do"), ("in-progress", "In Progress"), ("done", "Done")], default="todo", max_length=16)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("assignee", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="assigned_tickets", to=settings.AUTH_USER_MODEL)),
                ("creator", models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="created_tickets", to=settings.AUTH_USER_MODEL)),
                ("project", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="tickets", to="tracker.project")),
            ],
            options={
                "db_table": "tickets",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["project", "status"], name="tickets_project_status_idx"),
                    models.Index(fields=["assignee"], name="tickets_assignee_idx"),
                    models.Index(fields=["creator"], name="tickets_creator_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("project", "ticket_number"), name="tickets_unique_number_per_project"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("text", models.CharField(max_length=1000)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("ticket", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="comments", to="tracker.ticket")),
                ("user", models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="comments", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "comments",
                "ordering": ["created_at"],
                "indexes": [models.Index(fields=["ticket", "created_at"], name="comments_ticket_created_idx")],
            },
        ),
    ]
