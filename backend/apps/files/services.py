"""
File and version bookkeeping.

Creating a file stores its bytes, inserts the File row and its version 1
in one transaction. Each later version takes the next version number under
a row lock on the parent File, so concurrent uploads of the same file can
never produce duplicate or skipped numbers.
"""
import logging
import zipfile
from io import BytesIO

from django.conf import settings
from django.db import transaction
from django.db.models import Max
from django.utils import timezone

from core.exceptions import InvalidInput, NotFound
from core.storage import get_storage_service
from apps.projects.services import get_project
from apps.users.services import get_user
from .models import File, FileVersion
from .utils import content_type_for

logger = logging.getLogger(__name__)

INITIAL_VERSION_ACTION = 'uploaded'
UPDATE_VERSION_ACTION = 'updated'


def _content_prefix(path_type, **kwargs):
    return settings.S3_PATHS[path_type].format(**kwargs)


def _validate_content(content):
    if content is None:
        raise InvalidInput("File content is required")
    if not isinstance(content, (bytes, bytearray)):
        raise InvalidInput("File content must be bytes")


def create_file(user_id, project_id, name, file_type, content, description=None, storage=None):
    """
    Upload a new file.

    Returns the File; its version 1 is created alongside it. Saving the File
    records the ``upload`` activity, version 1 records nothing.
    """
    storage = storage or get_storage_service()

    name = (name or '').strip()
    if not name:
        raise InvalidInput("File name is required")
    _validate_content(content)

    user = get_user(user_id)
    project = get_project(project_id)

    with transaction.atomic():
        key = storage.store(bytes(content), name, prefix=_content_prefix('uploads', project_id=project.id))
        file = File.objects.create(
            project=project,
            user=user,
            name=name,
            file_type=file_type or 'Unknown',
            size=len(content),
            path=key,
            description=description or None,
        )
        FileVersion.objects.create(
            file=file,
            version=1,
            path=key,
            size=len(content),
            user=user,
            action=INITIAL_VERSION_ACTION,
        )

    logger.info(f"User {user.id} uploaded file {file.id} ({file.name}, {file.size} bytes)")
    return file


def create_file_version(file_id, user_id, content, action=UPDATE_VERSION_ACTION, notes=None, storage=None):
    """
    Record new content for an existing file.

    The version number is one above the highest existing version. The parent
    File keeps its name, size and path; only ``updated_at`` moves.
    """
    storage = storage or get_storage_service()
    _validate_content(content)

    with transaction.atomic():
        try:
            file = File.objects.select_for_update().get(id=file_id)
        except File.DoesNotExist:
            raise NotFound(f"File {file_id} not found")

        user = get_user(user_id)

        current = file.versions.aggregate(latest=Max('version'))['latest'] or 0
        version_number = current + 1

        key = storage.store(
            bytes(content),
            f"v{version_number}-{file.name}",
            prefix=_content_prefix('versions', project_id=file.project_id),
        )

        version = FileVersion.objects.create(
            file=file,
            version=version_number,
            path=key,
            size=len(content),
            user=user,
            action=action or UPDATE_VERSION_ACTION,
            notes=notes or None,
        )
        File.objects.filter(id=file.id).update(updated_at=timezone.now())

    logger.info(f"User {user.id} created version {version.version} of file {file.id}")
    return version


def get_file(file_id):
    try:
        return File.objects.select_related('user').get(id=file_id)
    except File.DoesNotExist:
        raise NotFound(f"File {file_id} not found")


def list_files():
    """All files, newest first. Returned as a queryset so views can filter it."""
    return File.objects.select_related('user').order_by('-created_at', '-id')


def list_recent_files(limit=4):
    if limit < 1:
        raise InvalidInput("Limit must be a positive integer")
    return list(File.objects.select_related('user').order_by('-created_at', '-id')[:limit])


def get_file_versions(file_id):
    """Version history, newest first. Index 0 is the current version."""
    if not File.objects.filter(id=file_id).exists():
        raise NotFound(f"File {file_id} not found")
    return list(
        FileVersion.objects.filter(file_id=file_id).select_related('user').order_by('-version')
    )


def _current_path(file):
    latest = file.versions.order_by('-version').first()
    return latest.path if latest else file.path


def download_file(file_id, version=None, storage=None):
    """
    Fetch a file's bytes, by default from its current version.

    Returns a dict with ``content``, ``file_name`` and ``content_type``.
    """
    storage = storage or get_storage_service()
    file = get_file(file_id)

    if version is None:
        path = _current_path(file)
    else:
        try:
            path = file.versions.get(version=version).path
        except FileVersion.DoesNotExist:
            raise NotFound(f"Version {version} of file {file_id} not found")

    try:
        content = storage.retrieve(path)
    except FileNotFoundError:
        raise NotFound(f"Content for file {file_id} is missing from storage")

    return {
        'content': content,
        'file_name': file.name,
        'content_type': content_type_for(file.file_type),
    }


def download_project(project_id=None, storage=None):
    """Zip the current content of every file (optionally of one project)."""
    storage = storage or get_storage_service()

    files = File.objects.order_by('id')
    if project_id is not None:
        files = files.filter(project=get_project(project_id))

    buffer = BytesIO()
    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as archive:
        for file in files:
            try:
                content = storage.retrieve(_current_path(file))
            except FileNotFoundError:
                raise NotFound(f"Content for file {file.id} is missing from storage")
            archive.writestr(f"{file.id}_{file.name}", content)

    return buffer.getvalue()
