# ============================================
# tracker/serializers/project.py
# ============================================
from rest_framework import serializers

from accounts.serializers.user import UserBriefSerializer
from tracker.models import Project


class ProjectCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=100)
    key = serializers.CharField(max_length=10)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')
    status = serializers.ChoiceField(
        choices=Project.Status.choices,
        default=Project.Status.ACTIVE
    )
    team_members = serializers.ListField(
        child=serializers.IntegerField(),
        required=False
    )


class ProjectUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=100, required=False)
    key = serializers.CharField(max_length=10, required=False)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Project.Status.choices, required=False)
    team_members = serializers.ListField(
        child=serializers.IntegerField(),
        required=False
    )


class ProjectMemberSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()


class ProjectBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Project
        fields = ['id', 'key', 'title']


class ProjectOutputSerializer(serializers.ModelSerializer):
    owner = UserBriefSerializer(read_only=True)
    team_members = UserBriefSerializer(many=True, read_only=True)

    class Meta:
        model = Project
        fields = [
            'id', 'title', 'key', 'description', 'status',
            'owner', 'team_members', 'created_at', 'updated_at'
        ]
