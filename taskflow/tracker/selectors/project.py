# ============================================
# tracker/selectors/project.py
# ============================================
from typing import List, Optional

from django.db.models import Q, QuerySet

from tracker.models import Project


class ProjectSelector:

    @staticmethod
    def get_project_by_id(project_id: int) -> Optional[Project]:
        """Get single project with owner and team"""
        try:
            return (
                Project.objects
                .select_related('owner')
                .prefetch_related('team_members')
                .get(id=project_id)
            )
        except (Project.DoesNotExist, ValueError, TypeError):
            return None

    @staticmethod
    def visible_to(user) -> Q:
        """Filter matching projects ``user`` owns or is a team member of."""
        return Q(owner=user) | Q(team_members=user)

    @staticmethod
    def project_ids_for_user(user) -> List[int]:
        return list(
            Project.objects
            .filter(ProjectSelector.visible_to(user))
            .values_list('id', flat=True)
            .distinct()
        )

    @staticmethod
    def get_projects_list(user, status: str = None) -> QuerySet:
        """Projects the user owns or belongs to, newest first"""
        queryset = (
            Project.objects
            .filter(id__in=ProjectSelector.project_ids_for_user(user))
            .select_related('owner')
            .prefetch_related('team_members')
        )

        if status:
            queryset = queryset.filter(status=status)

        return queryset.order_by('-created_at')
