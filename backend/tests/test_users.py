"""Tests for user registration and lookups."""

from django.contrib.auth import authenticate
from django.contrib.auth.hashers import check_password
from django.test import TestCase

from core.exceptions import AlreadyExists, InvalidInput, NotFound
from apps.activity.models import Activity
from apps.projects.models import ProjectMember
from apps.projects.services import get_default_project
from apps.users import services
from apps.users.models import User


class CreateUserTest(TestCase):
    """Test user creation."""

    def test_create_user_hashes_password(self):
        user = services.create_user('alice', 'secret-pass')

        self.assertNotEqual(user.password, 'secret-pass')
        self.assertTrue(check_password('secret-pass', user.password))

    def test_defaults_for_optional_fields(self):
        user = services.create_user('alice', 'secret-pass')

        self.assertEqual(user.email, 'alice@example.com')
        self.assertIn('alice', user.avatar_url)
        self.assertIsNone(user.full_name)
        self.assertEqual(user.display_name, 'alice')

    def test_explicit_fields_are_kept(self):
        user = services.create_user(
            'bob', 'secret-pass',
            full_name='Bob Builder',
            email='bob@team.io',
            avatar_url='https://cdn.example.com/bob.png',
        )

        self.assertEqual(user.email, 'bob@team.io')
        self.assertEqual(user.avatar_url, 'https://cdn.example.com/bob.png')
        self.assertEqual(user.display_name, 'Bob Builder')

    def test_duplicate_username_is_case_insensitive(self):
        services.create_user('Alice', 'secret-pass')

        with self.assertRaises(AlreadyExists):
            services.create_user('alice', 'other-pass')

        self.assertEqual(User.objects.count(), 1)

    def test_blank_username_rejected(self):
        with self.assertRaises(InvalidInput):
            services.create_user('   ', 'secret-pass')

    def test_blank_password_rejected(self):
        with self.assertRaises(InvalidInput):
            services.create_user('alice', '')


class RegistrationSideEffectsTest(TestCase):
    """A new user joins the default project exactly once."""

    def test_new_user_joins_default_project(self):
        user = services.create_user('carol', 'secret-pass')
        project = get_default_project()

        self.assertTrue(
            ProjectMember.objects.filter(project=project, user=user, role='member').exists()
        )

    def test_exactly_one_join_activity(self):
        user = services.create_user('carol', 'secret-pass')

        activities = Activity.objects.filter(user=user)
        self.assertEqual(activities.count(), 1)

        join = activities.get()
        self.assertEqual(join.type, Activity.JOIN)
        self.assertIsNone(join.file_id)
        self.assertEqual(join.project_id, get_default_project().id)

    def test_failed_registration_leaves_no_activity(self):
        services.create_user('dave', 'secret-pass')

        with self.assertRaises(AlreadyExists):
            services.create_user('DAVE', 'secret-pass')

        self.assertEqual(Activity.objects.filter(type=Activity.JOIN).count(), 1)
        self.assertEqual(ProjectMember.objects.count(), 1)


class UserLookupTest(TestCase):

    def setUp(self):
        self.user = services.create_user('Erin', 'secret-pass', full_name='Erin Example')

    def test_get_user(self):
        self.assertEqual(services.get_user(self.user.id), self.user)

    def test_get_user_missing(self):
        with self.assertRaises(NotFound):
            services.get_user(999999)

    def test_authenticate_ignores_username_case(self):
        self.assertEqual(authenticate(username='ERIN', password='secret-pass'), self.user)
        self.assertIsNone(authenticate(username='erin', password='wrong-pass'))

    def test_user_summary(self):
        self.assertEqual(
            services.user_summary(self.user),
            {'id': self.user.id, 'name': 'Erin Example', 'avatar_url': self.user.avatar_url},
        )

    def test_user_summary_for_missing_user(self):
        self.assertEqual(
            services.user_summary(None, 42),
            {'id': 42, 'name': 'Unknown', 'avatar_url': None},
        )
