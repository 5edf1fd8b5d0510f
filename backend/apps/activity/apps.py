"""
Activity feed app configuration.
"""
from django.apps import AppConfig


class ActivityConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.activity'
    verbose_name = 'Activity Feed'

    def ready(self):
        from . import signals  # noqa: F401
