"""
Project serializers.
"""
from rest_framework import serializers
from .models import Project, ProjectMember
from apps.users.serializers import UserSerializer


class ProjectSerializer(serializers.ModelSerializer):
    """Serializer for projects."""

    class Meta:
        model = Project
        fields = ['id', 'name', 'description', 'is_default', 'created_at']
        read_only_fields = ['id', 'is_default', 'created_at']


class ProjectMemberSerializer(serializers.ModelSerializer):
    """Project member serializer."""

    user = UserSerializer(read_only=True)

    class Meta:
        model = ProjectMember
        fields = ['id', 'user', 'role', 'joined_at']
        read_only_fields = ['id', 'joined_at']
