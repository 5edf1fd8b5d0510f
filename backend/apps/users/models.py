"""
Custom User model for TeamShare.
"""
from urllib.parse import quote

from django.conf import settings
from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.contrib.auth.hashers import make_password
from django.db import models
from django.db.models.functions import Lower


def default_email(username):
    return f"{username}@example.com"


def placeholder_avatar(username):
    template = getattr(
        settings,
        'AVATAR_PLACEHOLDER_URL',
        'https://ui-avatars.com/api/?name={name}&background=random'
    )
    return template.format(name=quote(username))


class UserManager(BaseUserManager):
    """Manager with case-insensitive username lookups."""

    def get_by_natural_key(self, username):
        return self.get(username__iexact=username)

    def create_user(self, username, password=None, **extra_fields):
        if not username:
            raise ValueError("Username is required")
        extra_fields.setdefault('email', default_email(username))
        extra_fields.setdefault('avatar_url', placeholder_avatar(username))
        user = self.model(username=username, **extra_fields)
        user.password = make_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        return self.create_user(username, password, **extra_fields)


class User(AbstractBaseUser):
    """Team member account. Usernames are unique regardless of case."""

    username = models.CharField(max_length=150, unique=True)
    full_name = models.CharField(max_length=255, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    avatar_url = models.URLField(max_length=500, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    is_superuser = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(Lower('username'), name='users_username_ci_unique'),
        ]

    def __str__(self):
        return self.username

    @property
    def display_name(self):
        return self.full_name or self.username

    @property
    def display_email(self):
        return self.email or default_email(self.username)

    def has_perm(self, perm, obj=None):
        return self.is_superuser

    def has_module_perms(self, app_label):
        return self.is_superuser
