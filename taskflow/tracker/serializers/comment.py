# ============================================
# tracker/serializers/comment.py
# ============================================
from rest_framework import serializers

from accounts.serializers.user import UserBriefSerializer
from tracker.models import Comment


class CommentInputSerializer(serializers.Serializer):
    # Presence and length are enforced by CommentService.
    text = serializers.CharField(required=False, allow_blank=True, default='')


class CommentOutputSerializer(serializers.ModelSerializer):
    user = UserBriefSerializer(read_only=True)

    class Meta:
        model = Comment
        fields = ['id', 'ticket', 'user', 'text', 'created_at', 'updated_at']
