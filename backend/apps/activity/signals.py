"""
Post-save observers that feed the activity log.

Each receiver runs inside the transaction of the write that triggered it,
so a rolled-back upload or comment leaves no activity behind.
"""
from django.db.models.signals import post_save
from django.dispatch import receiver

from apps.comments.models import Comment
from apps.files.models import File, FileVersion
from apps.projects.models import ProjectMember
from .models import Activity
from .services import record_activity


@receiver(post_save, sender=File)
def file_uploaded(sender, instance, created, raw=False, **kwargs):
    if created and not raw:
        record_activity(Activity.UPLOAD, instance.user_id, instance.project_id, instance.id)


@receiver(post_save, sender=FileVersion)
def file_version_created(sender, instance, created, raw=False, **kwargs):
    # Version 1 is covered by the upload activity
    if created and not raw and instance.version > 1:
        record_activity(Activity.UPDATE, instance.user_id, instance.file.project_id, instance.file_id)


@receiver(post_save, sender=Comment)
def comment_posted(sender, instance, created, raw=False, **kwargs):
    if created and not raw:
        record_activity(Activity.COMMENT, instance.user_id, instance.file.project_id, instance.file_id)


@receiver(post_save, sender=ProjectMember)
def member_joined(sender, instance, created, raw=False, **kwargs):
    if created and not raw:
        record_activity(Activity.JOIN, instance.user_id, instance.project_id)
