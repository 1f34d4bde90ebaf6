# ============================================
# tracker/views/analytics.py
# ============================================
from rest_framework.response import Response

from common.schema import OpenApiTypes, extend_schema, path_int, std_errors
from tracker.selectors.analytics import AnalyticsSelector
from tracker.services import authorization
from tracker.views.base import TrackerAPIView


class DashboardAPIView(TrackerAPIView):

    @extend_schema(
        tags=["Analytics"],
        summary="Counts and recent activity across my projects",
        responses={200: OpenApiTypes.OBJECT, **std_errors(401)},
    )
    def get(self, request):
        return Response(AnalyticsSelector.dashboard(request.user))


class ProjectStatsAPIView(TrackerAPIView):

    @extend_schema(
        tags=["Analytics"],
        summary="Ticket counts for one project",
        parameters=[path_int("project_id", "Project ID")],
        responses={200: OpenApiTypes.OBJECT, **std_errors(401, 403, 404)},
    )
    def get(self, request, project_id):
        project = self.get_project(project_id)
        authorization.require_member(project, request.user)

        return Response(AnalyticsSelector.project_stats(project))
