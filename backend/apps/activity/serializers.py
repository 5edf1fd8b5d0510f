"""
Activity serializers.
"""
from rest_framework import serializers
from apps.users.services import user_summary
from .models import Activity


class ActivitySerializer(serializers.ModelSerializer):
    """Feed entry with the acting user and file name."""

    user = serializers.SerializerMethodField()
    file_name = serializers.SerializerMethodField()

    class Meta:
        model = Activity
        fields = ['id', 'type', 'user', 'file', 'file_name', 'project', 'timestamp']
        read_only_fields = fields

    def get_user(self, obj):
        return user_summary(obj.user, obj.user_id)

    def get_file_name(self, obj):
        return obj.file.name if obj.file else None
