# ============================================
# tracker/views/project.py
# ============================================
from rest_framework import status
from rest_framework.response import Response

from common.pagination import DefaultPagination
from common.schema import MessageSerializer, extend_schema, path_int, q_str, std_errors
from tracker.serializers.project import (
    ProjectCreateSerializer,
    ProjectMemberSerializer,
    ProjectOutputSerializer,
    ProjectUpdateSerializer
)
from tracker.selectors.project import ProjectSelector
from tracker.services import authorization
from tracker.services.project import ProjectService
from tracker.views.base import TrackerAPIView


class ProjectListCreateAPIView(TrackerAPIView):
    """
    GET: List projects the current user owns or belongs to
    POST: Create a new project

    Query params (GET):
    - status: active/archived/completed (optional)
    - page: int
    - page_size: int

    Request body (POST):
    - title: string (required, max 100 chars)
    - key: string (required, 2-10 letters, unique, stored upper-case)
    - description: string (optional, max 500 chars)
    - status: string (optional)
    - team_members: list of user IDs (optional, defaults to [creator])
    """

    @extend_schema(
        tags=["Projects"],
        summary="My projects",
        parameters=[q_str("status", "active/archived/completed")],
        responses={200: ProjectOutputSerializer(many=True), **std_errors(401)},
    )
    def get(self, request):
        projects = ProjectSelector.get_projects_list(
            request.user,
            status=request.query_params.get('status')
        )

        paginator = DefaultPagination()
        page = paginator.paginate_queryset(projects, request, view=self)

        serializer = ProjectOutputSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    @extend_schema(
        tags=["Projects"],
        summary="Create project",
        request=ProjectCreateSerializer,
        responses={201: ProjectOutputSerializer, **std_errors(400, 401, 404)},
    )
    def post(self, request):
        serializer = ProjectCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.create_project(
            owner=request.user,
            **serializer.validated_data
        )

        return Response(ProjectOutputSerializer(project).data, status=status.HTTP_201_CREATED)


class ProjectDetailAPIView(TrackerAPIView):
    """
    GET: Retrieve project details (member)
    PUT: Update project (owner)
    DELETE: Delete project with its tickets and comments (owner)

    Path params:
    - project_id: int
    """

    @extend_schema(
        tags=["Projects"],
        summary="Project detail",
        parameters=[path_int("project_id", "Project ID")],
        responses={200: ProjectOutputSerializer, **std_errors(401, 403, 404)},
    )
    def get(self, request, project_id):
        project = self.get_project(project_id)
        authorization.require_member(project, request.user)

        return Response(ProjectOutputSerializer(project).data)

    @extend_schema(
        tags=["Projects"],
        summary="Update project",
        parameters=[path_int("project_id", "Project ID")],
        request=ProjectUpdateSerializer,
        responses={200: ProjectOutputSerializer, **std_errors()},
    )
    def put(self, request, project_id):
        project = self.get_project(project_id)

        serializer = ProjectUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        updated_project = ProjectService.update_project(
            project=project,
            actor=request.user,
            **serializer.validated_data
        )

        return Response(ProjectOutputSerializer(updated_project).data)

    @extend_schema(
        tags=["Projects"],
        summary="Delete project",
        parameters=[path_int("project_id", "Project ID")],
        responses={200: MessageSerializer, **std_errors(401, 403, 404)},
    )
    def delete(self, request, project_id):
        project = self.get_project(project_id)

        ProjectService.delete_project(project=project, actor=request.user)

        return Response({'message': 'Project, associated tickets, and comments deleted'})


class ProjectMembersAPIView(TrackerAPIView):
    """
    POST: Add a team member (owner)
    DELETE: Remove a team member and unassign their tickets (owner)

    Request body:
    - user_id: int
    """

    @extend_schema(
        tags=["Projects"],
        summary="Add team member",
        parameters=[path_int("project_id", "Project ID")],
        request=ProjectMemberSerializer,
        responses={200: ProjectOutputSerializer, **std_errors()},
    )
    def post(self, request, project_id):
        project = self.get_project(project_id)

        serializer = ProjectMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.add_member(
            project=project,
            actor=request.user,
            notifier=self.get_notifier(),
            **serializer.validated_data
        )

        return Response(ProjectOutputSerializer(project).data)

    @extend_schema(
        tags=["Projects"],
        summary="Remove team member",
        parameters=[path_int("project_id", "Project ID")],
        request=ProjectMemberSerializer,
        responses={200: ProjectOutputSerializer, **std_errors()},
    )
    def delete(self, request, project_id):
        project = self.get_project(project_id)

        serializer = ProjectMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.remove_member(
            project=project,
            actor=request.user,
            **serializer.validated_data
        )

        return Response(ProjectOutputSerializer(project).data)
