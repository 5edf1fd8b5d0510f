"""
Activity feed model.
Append-only log of user actions used by the dashboard feed and statistics.
"""
from django.db import models
from django.conf import settings
from django.utils import timezone


class ActivityLogError(Exception):
    """Raised on attempts to rewrite the activity log."""


class Activity(models.Model):
    """
    One user action. Rows are written once and never changed or removed.
    """

    UPLOAD = 'upload'
    COMMENT = 'comment'
    UPDATE = 'update'
    JOIN = 'join'

    TYPE_CHOICES = [
        (UPLOAD, 'Upload'),
        (COMMENT, 'Comment'),
        (UPDATE, 'Update'),
        (JOIN, 'Join'),
    ]

    type = models.CharField(max_length=20, choices=TYPE_CHOICES, db_index=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name='activities'
    )
    file = models.ForeignKey(
        'files.File',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='activities'
    )
    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.PROTECT,
        related_name='activities'
    )

    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'activities'
        ordering = ['-timestamp', '-id']
        verbose_name_plural = 'activities'
        indexes = [
            models.Index(fields=['user', '-timestamp'], name='activities_user_ts_idx'),
            models.Index(fields=['type', '-timestamp'], name='activities_type_ts_idx'),
        ]

    def __str__(self):
        return f"{self.type} by {self.user_id} at {self.timestamp}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ActivityLogError("Activities cannot be modified")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ActivityLogError("Activities cannot be deleted")
