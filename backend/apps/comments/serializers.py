"""
Comment serializers.
"""
from rest_framework import serializers
from apps.users.services import user_summary
from .models import Comment


class CommentSerializer(serializers.ModelSerializer):
    """Serializer for comments with author and file name."""

    user = serializers.SerializerMethodField()
    file_name = serializers.CharField(source='file.name', read_only=True)

    class Meta:
        model = Comment
        fields = ['id', 'text', 'file', 'file_name', 'user', 'created_at']
        read_only_fields = fields

    def get_user(self, obj):
        return user_summary(obj.user, obj.user_id)


class CreateCommentSerializer(serializers.Serializer):
    text = serializers.CharField()
