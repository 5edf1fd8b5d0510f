"""
Statistics views for the dashboard and team pages.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from . import services


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def stats(request):
    return Response(services.get_stats())


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def contributions(request):
    return Response(services.get_contributions())


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def activity_by_day(request):
    """Daily activity buckets; ``windowDays`` overrides the configured window."""
    window_days = request.query_params.get('windowDays', request.query_params.get('window_days'))
    return Response(services.get_activity_by_day(window_days))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def team(request):
    """Project members with their file, comment and contribution stats."""
    return Response(services.get_team_overview())
