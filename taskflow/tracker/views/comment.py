# ============================================
# tracker/views/comment.py
# ============================================
from rest_framework import status
from rest_framework.response import Response

from common.schema import MessageSerializer, extend_schema, path_int, std_errors
from tracker.selectors.comment import CommentSelector
from tracker.serializers.comment import CommentInputSerializer, CommentOutputSerializer
from tracker.services import authorization
from tracker.services.comment import CommentService
from tracker.views.base import TrackerAPIView


class CommentListCreateAPIView(TrackerAPIView):
    """
    GET: List comments on a ticket, oldest first (member)
    POST: Comment on a ticket (member)

    Path params:
    - ticket_id: int

    Request body (POST):
    - text: string (required, max 1000 chars)
    """

    @extend_schema(
        tags=["Comments"],
        summary="Ticket comments",
        parameters=[path_int("ticket_id", "Ticket ID")],
        responses={200: CommentOutputSerializer(many=True), **std_errors(401, 403, 404)},
    )
    def get(self, request, ticket_id):
        ticket = self.get_ticket(ticket_id)
        authorization.require_member(ticket.project, request.user, "Not authorized to view comments")

        comments = CommentSelector.get_comments_by_ticket(ticket.pk)
        return Response(CommentOutputSerializer(comments, many=True).data)

    @extend_schema(
        tags=["Comments"],
        summary="Add comment",
        parameters=[path_int("ticket_id", "Ticket ID")],
        request=CommentInputSerializer,
        responses={201: CommentOutputSerializer, **std_errors()},
    )
    def post(self, request, ticket_id):
        serializer = CommentInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ticket = self.get_ticket(ticket_id)

        comment = CommentService.create_comment(
            ticket=ticket,
            actor=request.user,
            text=serializer.validated_data['text'],
            notifier=self.get_notifier()
        )

        return Response(CommentOutputSerializer(comment).data, status=status.HTTP_201_CREATED)


class CommentDetailAPIView(TrackerAPIView):
    """
    PUT: Edit comment (author)
    DELETE: Delete comment (author)

    Path params:
    - comment_id: int
    """

    @extend_schema(
        tags=["Comments"],
        summary="Edit comment",
        parameters=[path_int("comment_id", "Comment ID")],
        request=CommentInputSerializer,
        responses={200: CommentOutputSerializer, **std_errors()},
    )
    def put(self, request, comment_id):
        comment = self.get_comment(comment_id)

        serializer = CommentInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        comment = CommentService.update_comment(
            comment=comment,
            actor=request.user,
            text=serializer.validated_data['text']
        )

        return Response(CommentOutputSerializer(comment).data)

    @extend_schema(
        tags=["Comments"],
        summary="Delete comment",
        parameters=[path_int("comment_id", "Comment ID")],
        responses={200: MessageSerializer, **std_errors(401, 403, 404)},
    )
    def delete(self, request, comment_id):
        comment = self.get_comment(comment_id)

        CommentService.delete_comment(comment=comment, actor=request.user)

        return Response({'message': 'Comment deleted'})
