# ============================================
# tracker/views/ticket.py
# ============================================
from rest_framework import status
from rest_framework.response import Response

from common.exceptions import ValidationError
from common.pagination import TicketPagination
from common.schema import MessageSerializer, extend_schema, path_int, q_int, q_str, std_errors
from tracker.selectors.project import ProjectSelector
from tracker.selectors.ticket import TicketSelector
from tracker.serializers.ticket import (
    TicketCreateSerializer,
    TicketOutputSerializer,
    TicketStatusSerializer,
    TicketUpdateSerializer
)
from tracker.services import authorization
from tracker.services.ticket import TicketService
from tracker.views.base import TrackerAPIView


class TicketListCreateAPIView(TrackerAPIView):
    """
    GET: List tickets with filters
    POST: Create a new ticket

    Query params (GET):
    - project_id: int (optional; without it, every project I belong to)
    - status: todo/in-progress/done (optional)
    - priority: low/medium/high/critical (optional)
    - assignee: user ID (optional)
    - type: bug/feature/task/improvement (optional)
    - search: string, matches title or description (optional)
    - page: int
    - page_size: int

    Request body (POST):
    - project_id: int (required)
    - title: string (required)
    - description: string (optional)
    - assignee_id: int (optional, joins the team if needed)
    - priority: string (optional, default medium)
    - type: string (optional, default bug)
    - tags: list of strings (optional)
    """

    @extend_schema(
        tags=["Tickets"],
        summary="List tickets",
        parameters=[
            q_int("project_id", "Project ID"),
            q_str("status", "todo/in-progress/done"),
            q_str("priority", "low/medium/high/critical"),
            q_int("assignee", "Assignee user ID"),
            q_str("type", "bug/feature/task/improvement"),
            q_str("search", "Search in title and description"),
        ],
        responses={200: TicketOutputSerializer(many=True), **std_errors(401, 403, 404)},
    )
    def get(self, request):
        params = request.query_params
        project_id = params.get('project_id')
        assignee = params.get('assignee')
        if assignee and not assignee.isdigit():
            raise ValidationError("Invalid assignee")

        if project_id:
            project = self.get_project(project_id)
            authorization.require_member(
                project, request.user, "Not authorized to view tickets in this project"
            )
            project_ids = [project.pk]
        else:
            project_ids = ProjectSelector.project_ids_for_user(request.user)

        tickets = TicketSelector.get_tickets_list(
            project_ids,
            status=params.get('status'),
            priority=params.get('priority'),
            assignee_id=assignee,
            ticket_type=params.get('type'),
            search=params.get('search'),
        )

        paginator = TicketPagination()
        page = paginator.paginate_queryset(tickets, request, view=self)

        serializer = TicketOutputSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    @extend_schema(
        tags=["Tickets"],
        summary="Create ticket",
        request=TicketCreateSerializer,
        responses={201: TicketOutputSerializer, **std_errors()},
    )
    def post(self, request):
        serializer = TicketCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ticket = TicketService.create_ticket(
            actor=request.user,
            notifier=self.get_notifier(),
            **serializer.validated_data
        )

        return Response(TicketOutputSerializer(ticket).data, status=status.HTTP_201_CREATED)


class TicketDetailAPIView(TrackerAPIView):
    """
    GET: Retrieve ticket details (member)
    PUT: Update ticket, provided fields only (member)
    DELETE: Delete ticket and its comments (project owner or creator)

    Path params:
    - ticket_id: int
    """

    @extend_schema(
        tags=["Tickets"],
        summary="Ticket detail",
        parameters=[path_int("ticket_id", "Ticket ID")],
        responses={200: TicketOutputSerializer, **std_errors(401, 403, 404)},
    )
    def get(self, request, ticket_id):
        ticket = self.get_ticket(ticket_id)
        authorization.require_member(ticket.project, request.user, "Not authorized to view this ticket")

        return Response(TicketOutputSerializer(ticket).data)

    @extend_schema(
        tags=["Tickets"],
        summary="Update ticket",
        parameters=[path_int("ticket_id", "Ticket ID")],
        request=TicketUpdateSerializer,
        responses={200: TicketOutputSerializer, **std_errors()},
    )
    def put(self, request, ticket_id):
        ticket = self.get_ticket(ticket_id)

        serializer = TicketUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        updated_ticket = TicketService.update_ticket(
            ticket=ticket,
            actor=request.user,
            notifier=self.get_notifier(),
            **serializer.validated_data
        )

        return Response(TicketOutputSerializer(updated_ticket).data)

    @extend_schema(
        tags=["Tickets"],
        summary="Delete ticket",
        parameters=[path_int("ticket_id", "Ticket ID")],
        responses={200: MessageSerializer, **std_errors(401, 403, 404)},
    )
    def delete(self, request, ticket_id):
        ticket = self.get_ticket(ticket_id)

        TicketService.delete_ticket(ticket=ticket, actor=request.user)

        return Response({'message': 'Ticket deleted'})


class TicketStatusAPIView(TrackerAPIView):

    @extend_schema(
        tags=["Tickets"],
        summary="Move ticket to another status",
        parameters=[path_int("ticket_id", "Ticket ID")],
        request=TicketStatusSerializer,
        responses={200: TicketOutputSerializer, **std_errors()},
    )
    def patch(self, request, ticket_id):
        ticket = self.get_ticket(ticket_id)

        serializer = TicketStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ticket = TicketService.update_status(
            ticket=ticket,
            actor=request.user,
            status=serializer.validated_data['status'],
            notifier=self.get_notifier()
        )

        return Response(TicketOutputSerializer(ticket).data)
