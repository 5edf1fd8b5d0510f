"""
Membership observers.
"""
from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from . import services


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def join_default_project(sender, instance, created, raw=False, **kwargs):
    """Every new account becomes a member of the default project."""
    if created and not raw:
        project = services.get_default_project()
        services.add_project_member(project.id, instance.id)
