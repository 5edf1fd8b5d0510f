"""
User account operations.
"""
import logging

from django.db import IntegrityError, transaction

from core.exceptions import AlreadyExists, InvalidInput, NotFound
from .models import User

logger = logging.getLogger(__name__)

UNKNOWN_USER_NAME = 'Unknown'


def create_user(username, password, full_name=None, email=None, avatar_url=None):
    """
    Register a new user.

    The post-save observers add the user to the default project, which in
    turn records a ``join`` activity.
    """
    username = (username or '').strip()
    if not username:
        raise InvalidInput("Username is required")
    if not password:
        raise InvalidInput("Password is required")

    if User.objects.filter(username__iexact=username).exists():
        raise AlreadyExists(f"Username '{username}' is already taken")

    extra = {'full_name': full_name or None}
    if email:
        extra['email'] = email
    if avatar_url:
        extra['avatar_url'] = avatar_url

    try:
        with transaction.atomic():
            user = User.objects.create_user(username, password, **extra)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name
        raise AlreadyExists(f"Username '{username}' is already taken")

    logger.info(f"Created user {user.id} ({user.username})")
    return user


def get_user(user_id):
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise NotFound(f"User {user_id} not found")


def user_summary(user, user_id=None):
    """
    Display identity embedded in joined reads.

    A missing user resolves to an "Unknown" placeholder instead of failing
    the whole listing.
    """
    if user is None:
        return {'id': user_id, 'name': UNKNOWN_USER_NAME, 'avatar_url': None}
    return {
        'id': user.id,
        'name': user.display_name,
        'avatar_url': user.avatar_url,
    }
