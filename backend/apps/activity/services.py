"""
Activity recorder and feed reads.
"""
import logging

from core.exceptions import InvalidInput, NotFound
from .models import Activity

logger = logging.getLogger(__name__)

ACTIVITY_TYPES = {choice for choice, _ in Activity.TYPE_CHOICES}


def record_activity(activity_type, user_id, project_id, file_id=None):
    """Append one activity stamped with the current time."""
    from apps.files.models import File
    from apps.projects.models import Project
    from apps.users.models import User

    if activity_type not in ACTIVITY_TYPES:
        raise InvalidInput(f"Unknown activity type '{activity_type}'")
    if activity_type == Activity.JOIN and file_id is not None:
        raise InvalidInput("Join activities do not reference a file")

    if not User.objects.filter(id=user_id).exists():
        raise NotFound(f"User {user_id} not found")
    if not Project.objects.filter(id=project_id).exists():
        raise NotFound(f"Project {project_id} not found")
    if file_id is not None and not File.objects.filter(id=file_id).exists():
        raise NotFound(f"File {file_id} not found")

    activity = Activity.objects.create(
        type=activity_type,
        user_id=user_id,
        project_id=project_id,
        file_id=file_id,
    )
    logger.debug(f"Recorded {activity_type} activity {activity.id} for user {user_id}")
    return activity


def list_activities(limit=50):
    """Latest activities, newest first."""
    if limit < 1:
        raise InvalidInput("Limit must be a positive integer")
    return list(
        Activity.objects.select_related('user', 'file').order_by('-timestamp', '-id')[:limit]
    )
