"""
File serializers.
"""
from rest_framework import serializers
from apps.users.services import user_summary
from .models import File, FileVersion


class FileSerializer(serializers.ModelSerializer):
    """Serializer for files with their uploader."""

    type = serializers.CharField(source='file_type', read_only=True)
    user = serializers.SerializerMethodField()

    class Meta:
        model = File
        fields = [
            'id', 'name', 'type', 'size', 'path', 'description',
            'project', 'user',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_user(self, obj):
        return user_summary(obj.user, obj.user_id)


class FileVersionSerializer(serializers.ModelSerializer):
    """Serializer for version history entries."""

    user = serializers.SerializerMethodField()

    class Meta:
        model = FileVersion
        fields = [
            'id', 'file', 'version', 'path', 'size', 'action', 'notes',
            'user', 'created_at'
        ]
        read_only_fields = fields

    def get_user(self, obj):
        return user_summary(obj.user, obj.user_id)


class UploadFileSerializer(serializers.Serializer):
    """Multipart upload of a new file."""

    file = serializers.FileField()
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)

    def validate_file(self, value):
        return _validate_upload_size(value)


class UploadVersionSerializer(serializers.Serializer):
    """Multipart upload of new content for an existing file."""

    file = serializers.FileField()
    notes = serializers.CharField(required=False, allow_blank=True)

    def validate_file(self, value):
        return _validate_upload_size(value)


def _validate_upload_size(value):
    from django.conf import settings

    max_size = getattr(settings, 'MAX_UPLOAD_SIZE', 10 * 1024 * 1024)
    if value.size > max_size:
        raise serializers.ValidationError(f"File exceeds the {max_size} byte limit")
    return value
