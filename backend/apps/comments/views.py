"""
Comment views.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from . import services
from .serializers import CommentSerializer, CreateCommentSerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def comments(request):
    """All comments, newest first."""
    return Response(CommentSerializer(services.list_comments(), many=True).data)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def file_comments(request, file_id):
    """Comments on one file, or post a new one."""
    if request.method == 'GET':
        return Response(CommentSerializer(services.list_file_comments(file_id), many=True).data)

    serializer = CreateCommentSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    comment = services.create_comment(
        user_id=request.user.id,
        file_id=file_id,
        text=serializer.validated_data['text'],
    )
    return Response(CommentSerializer(comment).data, status=status.HTTP_201_CREATED)
