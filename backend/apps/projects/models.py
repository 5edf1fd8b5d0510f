"""
Project and membership models.
"""
from django.db import models
from django.conf import settings


class Project(models.Model):
    """Project that groups files and members."""

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    is_default = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'projects'
        ordering = ['id']

    def __str__(self):
        return self.name


class ProjectMember(models.Model):
    """Project membership with roles."""

    ROLE_CHOICES = [
        ('owner', 'Owner'),
        ('admin', 'Admin'),
        ('member', 'Member'),
    ]

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='members'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='memberships'
    )
    role = models.CharField(max_length=50, choices=ROLE_CHOICES, default='member')

    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'project_members'
        unique_together = ['project', 'user']
        ordering = ['joined_at', 'id']

    def __str__(self):
        return f"{self.user.username} - {self.project.name} ({self.role})"
