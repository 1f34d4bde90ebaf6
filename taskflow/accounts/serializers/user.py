# ============================================
# accounts/serializers/user.py
# ============================================
from rest_framework import serializers

from accounts.models import User


class UserBriefSerializer(serializers.ModelSerializer):
    """Embedded wherever a project/ticket/comment references a user."""

    class Meta:
        model = User
        fields = ["id", "name", "email"]


class UserOutputSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = [
            "id", "name", "email", "role", "avatar",
            "is_email_verified", "email_notifications",
            "created_at", "updated_at",
        ]


class ProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=50, required=False)
    avatar = serializers.CharField(max_length=500, required=False, allow_blank=True)
    email_notifications = serializers.BooleanField(required=False)


class RoleUpdateSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    role = serializers.ChoiceField(choices=User.Role.choices)
