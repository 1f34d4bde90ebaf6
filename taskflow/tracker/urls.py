# ============================================
# tracker/urls.py
# ============================================
from django.urls import path

from tracker.views.analytics import DashboardAPIView, ProjectStatsAPIView
from tracker.views.comment import CommentDetailAPIView, CommentListCreateAPIView
from tracker.views.project import (
    ProjectDetailAPIView,
    ProjectListCreateAPIView,
    ProjectMembersAPIView
)
from tracker.views.ticket import (
    TicketDetailAPIView,
    TicketListCreateAPIView,
    TicketStatusAPIView
)

app_name = 'tracker'

urlpatterns = [
    # Projects
    path('projects/', ProjectListCreateAPIView.as_view(), name='project-list-create'),
    path('projects/<int:project_id>/', ProjectDetailAPIView.as_view(), name='project-detail'),
    path('projects/<int:project_id>/members/', ProjectMembersAPIView.as_view(), name='project-members'),

    # Tickets
    path('tickets/', TicketListCreateAPIView.as_view(), name='ticket-list-create'),
    path('tickets/<int:ticket_id>/', TicketDetailAPIView.as_view(), name='ticket-detail'),
    path('tickets/<int:ticket_id>/status/', TicketStatusAPIView.as_view(), name='ticket-status'),

    # Comments
    path('comments/ticket/<int:ticket_id>/', CommentListCreateAPIView.as_view(), name='comment-list-create'),
    path('comments/<int:comment_id>/', CommentDetailAPIView.as_view(), name='comment-detail'),

    # Analytics
    path('analytics/dashboard/', DashboardAPIView.as_view(), name='analytics-dashboard'),
    path('analytics/project/<int:project_id>/', ProjectStatsAPIView.as_view(), name='analytics-project'),
]
