# Seeds the project every new user joins.

from django.conf import settings
from django.db import migrations


def create_default_project(apps, schema_editor):
    Project = apps.get_model('projects', 'Project')
    if not Project.objects.filter(is_default=True).exists():
        Project.objects.create(
            name=getattr(settings, 'DEFAULT_PROJECT_NAME', 'Team Project'),
            description='Default project for all team members',
            is_default=True,
        )


class Migration(migrations.Migration):

    dependencies = [
        ('projects', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_default_project, migrations.RunPython.noop),
    ]
