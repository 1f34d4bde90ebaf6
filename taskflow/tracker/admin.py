from django.contrib import admin

from tracker.models import Comment, Project, Ticket


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("key", "title", "owner", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("key", "title")
    filter_horizontal = ("team_members",)


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ("id", "project", "ticket_number", "title", "status", "priority", "assignee")
    list_filter = ("status", "priority", "ticket_type")
    search_fields = ("title", "description")


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("id", "ticket", "user", "created_at")
    search_fields = ("text",)
