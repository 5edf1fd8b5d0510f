"""
File and version history models.
"""
from django.db import models
from django.conf import settings
from django.utils import timezone


class File(models.Model):
    """A shared file. Content lives in the storage backend at ``path``."""

    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.CASCADE,
        related_name='files'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='files'
    )

    # File info
    name = models.CharField(max_length=255)
    file_type = models.CharField(max_length=100)  # Image, PDF, Spreadsheet, ...
    size = models.BigIntegerField(default=0)
    path = models.TextField()
    description = models.TextField(blank=True, null=True)

    # Timestamps; updated_at only moves when a new version is recorded
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'files'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.name


class FileVersion(models.Model):
    """Immutable snapshot of a file's content."""

    file = models.ForeignKey(
        File,
        on_delete=models.CASCADE,
        related_name='versions'
    )
    version = models.PositiveIntegerField()
    path = models.TextField()
    size = models.BigIntegerField(default=0)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='file_versions'
    )
    action = models.CharField(max_length=50)  # uploaded, updated
    notes = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'file_versions'
        ordering = ['file', '-version']
        constraints = [
            models.UniqueConstraint(fields=['file', 'version'], name='file_versions_file_version_unique'),
        ]

    def __str__(self):
        return f"{self.file.name} v{self.version}"
