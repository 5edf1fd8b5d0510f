"""
File views: listing, upload, download and version history.
"""
import logging

from django.http import HttpResponse
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, generics, status
from rest_framework.decorators import api_view, parser_classes, permission_classes
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.exceptions import InvalidInput
from apps.projects.services import get_default_project
from . import services
from .serializers import (
    FileSerializer,
    FileVersionSerializer,
    UploadFileSerializer,
    UploadVersionSerializer,
)
from .utils import detect_file_type

logger = logging.getLogger(__name__)


class FileListView(generics.ListAPIView):
    """All files, newest first. Filterable by type and project, searchable by name."""

    permission_classes = [IsAuthenticated]
    serializer_class = FileSerializer
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['file_type', 'project', 'user']
    search_fields = ['name', 'description']
    ordering_fields = ['created_at', 'updated_at', 'name', 'size']

    def get_queryset(self):
        return services.list_files()


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def recent_files(request):
    """Most recently uploaded files (default 4)."""
    try:
        limit = int(request.query_params.get('limit', 4))
    except ValueError:
        raise InvalidInput("Limit must be a positive integer")

    files = services.list_recent_files(limit)
    return Response(FileSerializer(files, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def file_detail(request, file_id):
    """Get a single file."""
    file = services.get_file(file_id)
    return Response(FileSerializer(file).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
@parser_classes([MultiPartParser, FormParser])
def upload_file(request):
    """Upload a new file into the default project."""
    serializer = UploadFileSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    uploaded = data['file']
    file = services.create_file(
        user_id=request.user.id,
        project_id=get_default_project().id,
        name=data['name'],
        file_type=detect_file_type(uploaded.content_type, data['name']),
        content=uploaded.read(),
        description=data.get('description') or None,
    )

    return Response(FileSerializer(file).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def download_file(request, file_id):
    """Download a file's current content, or a specific ?version=N."""
    version = request.query_params.get('version')
    if version is not None:
        try:
            version = int(version)
        except ValueError:
            raise InvalidInput("Version must be an integer")

    result = services.download_file(file_id, version=version)

    response = HttpResponse(result['content'], content_type=result['content_type'])
    response['Content-Disposition'] = f'attachment; filename="{result["file_name"]}"'
    return response


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
@parser_classes([MultiPartParser, FormParser])
def file_versions(request, file_id):
    """Version history (newest first), or upload the next version."""
    if request.method == 'GET':
        versions = services.get_file_versions(file_id)
        return Response(FileVersionSerializer(versions, many=True).data)

    serializer = UploadVersionSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    version = services.create_file_version(
        file_id=file_id,
        user_id=request.user.id,
        content=serializer.validated_data['file'].read(),
        notes=serializer.validated_data.get('notes') or None,
    )
    return Response(FileVersionSerializer(version).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def download_project(request):
    """Download every file's current content as a zip archive."""
    content = services.download_project()

    response = HttpResponse(content, content_type='application/zip')
    response['Content-Disposition'] = 'attachment; filename="project-files.zip"'
    return response
