"""
Project views.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.exceptions import InvalidInput
from . import services
from .serializers import ProjectSerializer, ProjectMemberSerializer


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def projects(request):
    """List projects or create a new one."""
    if request.method == 'GET':
        return Response(ProjectSerializer(services.list_projects(), many=True).data)

    serializer = ProjectSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    project = services.create_project(
        name=serializer.validated_data['name'],
        description=serializer.validated_data.get('description'),
    )
    return Response(ProjectSerializer(project).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def project_members(request, project_id):
    """List members of a project, or join it as the current user."""
    if request.method == 'GET':
        members = services.get_project_members(project_id)
        return Response(ProjectMemberSerializer(members, many=True).data)

    member = services.add_project_member(project_id, request.user.id)
    return Response(ProjectMemberSerializer(member).data, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def invite(request):
    """
    Accept a team invitation request.
    Invitations are acknowledged only; no email is sent.
    """
    email = (request.data.get('email') or '').strip()
    if not email:
        raise InvalidInput("Email is required")

    return Response({"message": f"Invitation sent to {email}"})
