# ============================================
# tracker/serializers/ticket.py
# ============================================
from rest_framework import serializers

from accounts.serializers.user import UserBriefSerializer
from tracker.models import Ticket
from tracker.serializers.project import ProjectBriefSerializer


class TicketCreateSerializer(serializers.Serializer):
    project_id = serializers.IntegerField()
    title = serializers.CharField(max_length=200)
    description = serializers.CharField(max_length=2000, required=False, allow_blank=True, default='')
    assignee_id = serializers.IntegerField(required=False, allow_null=True)
    priority = serializers.ChoiceField(
        choices=Ticket.Priority.choices,
        default=Ticket.Priority.MEDIUM
    )
    type = serializers.ChoiceField(
        source='ticket_type',
        choices=Ticket.TicketType.choices,
        default=Ticket.TicketType.BUG
    )
    tags = serializers.ListField(
        child=serializers.CharField(max_length=50),
        required=False,
        default=list
    )


class TicketUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(max_length=2000, required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Ticket.Status.choices, required=False)
    priority = serializers.ChoiceField(choices=Ticket.Priority.choices, required=False)
    type = serializers.ChoiceField(source='ticket_type', choices=Ticket.TicketType.choices, required=False)
    assignee_id = serializers.IntegerField(required=False, allow_null=True)
    tags = serializers.ListField(
        child=serializers.CharField(max_length=50),
        required=False
    )


class TicketStatusSerializer(serializers.Serializer):
    # Checked against the enum by the service so the message stays "Invalid status".
    status = serializers.CharField(allow_blank=True)


class TicketOutputSerializer(serializers.ModelSerializer):
    key = serializers.CharField(source='display_key', read_only=True)
    type = serializers.CharField(source='ticket_type', read_only=True)
    project = ProjectBriefSerializer(read_only=True)
    creator = UserBriefSerializer(read_only=True)
    assignee = UserBriefSerializer(read_only=True)

    class Meta:
        model = Ticket
        fields = [
            'id', 'ticket_number', 'key', 'title', 'description',
            'project', 'creator', 'assignee', 'status', 'priority',
            'type', 'tags', 'created_at', 'updated_at'
        ]
