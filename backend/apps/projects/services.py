"""
Project and membership operations.
"""
import logging

from django.conf import settings
from django.db import transaction

from core.exceptions import AlreadyExists, InvalidInput, NotFound
from .models import Project, ProjectMember

logger = logging.getLogger(__name__)


def create_project(name, description=None):
    name = (name or '').strip()
    if not name:
        raise InvalidInput("Project name is required")

    project = Project.objects.create(name=name, description=description or None)
    logger.info(f"Created project {project.id} ({project.name})")
    return project


def get_project(project_id):
    try:
        return Project.objects.get(id=project_id)
    except Project.DoesNotExist:
        raise NotFound(f"Project {project_id} not found")


def list_projects():
    return list(Project.objects.order_by('id'))


def get_default_project():
    """Return the default project, creating it if the seed row is missing."""
    with transaction.atomic():
        project = Project.objects.select_for_update().filter(is_default=True).order_by('id').first()
        if project is None:
            project = Project.objects.create(
                name=getattr(settings, 'DEFAULT_PROJECT_NAME', 'Team Project'),
                description='Default project for all team members',
                is_default=True,
            )
            logger.info(f"Created default project {project.id}")
    return project


def add_project_member(project_id, user_id, role='member'):
    """
    Link a user to a project.

    Saving the membership records a ``join`` activity through the
    post-save observers.
    """
    from apps.users.models import User

    if role not in dict(ProjectMember.ROLE_CHOICES):
        raise InvalidInput(f"Unknown role '{role}'")

    project = get_project(project_id)
    if not User.objects.filter(id=user_id).exists():
        raise NotFound(f"User {user_id} not found")

    if ProjectMember.objects.filter(project=project, user_id=user_id).exists():
        raise AlreadyExists(f"User {user_id} is already a member of project {project.id}")

    member = ProjectMember.objects.create(project=project, user_id=user_id, role=role)
    logger.info(f"User {user_id} joined project {project.id} as {role}")
    return member


def get_project_members(project_id):
    project = get_project(project_id)
    return list(
        ProjectMember.objects.filter(project=project).select_related('user')
    )
