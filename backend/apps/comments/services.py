"""
Comment operations.
"""
import logging

from core.exceptions import InvalidInput, NotFound
from apps.files.models import File
from apps.users.services import get_user
from .models import Comment

logger = logging.getLogger(__name__)


def create_comment(user_id, file_id, text):
    """Post a comment; saving it records a ``comment`` activity."""
    text = (text or '').strip()
    if not text:
        raise InvalidInput("Comment text is required")

    try:
        file = File.objects.get(id=file_id)
    except File.DoesNotExist:
        raise NotFound(f"File {file_id} not found")
    user = get_user(user_id)

    comment = Comment.objects.create(file=file, user=user, text=text)
    logger.info(f"User {user.id} commented on file {file.id}")
    return comment


def list_comments():
    return list(Comment.objects.select_related('user', 'file').order_by('-created_at', '-id'))


def list_file_comments(file_id):
    if not File.objects.filter(id=file_id).exists():
        raise NotFound(f"File {file_id} not found")
    return list(
        Comment.objects.filter(file_id=file_id).select_related('user').order_by('-created_at', '-id')
    )
