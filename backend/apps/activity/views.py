"""
Activity feed views.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.exceptions import InvalidInput
from . import services
from .serializers import ActivitySerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def activities(request):
    """Latest activities (default 50)."""
    try:
        limit = int(request.query_params.get('limit', 50))
    except ValueError:
        raise InvalidInput("Limit must be a positive integer")

    return Response(ActivitySerializer(services.list_activities(limit), many=True).data)
