"""Tests for file creation, version tracking and downloads."""

import io
import zipfile
from datetime import timedelta

from django.db import IntegrityError, transaction
from django.test import TestCase
from django.utils import timezone

from core.exceptions import InvalidInput, NotFound
from apps.activity.models import Activity
from apps.files import services
from apps.files.models import File, FileVersion
from apps.projects.services import create_project, get_default_project
from apps.users.services import create_user
from .fakes import InMemoryContentStore


class FileServiceTestCase(TestCase):
    """Base test case with a user, the default project and a fake store."""

    def setUp(self):
        self.user = create_user('alice', 'secret-pass')
        self.other = create_user('bob', 'secret-pass')
        self.project = get_default_project()
        self.storage = InMemoryContentStore()

    def upload(self, name='notes.txt', content=b'hello', file_type='Text', user=None, **kwargs):
        return services.create_file(
            user_id=(user or self.user).id,
            project_id=self.project.id,
            name=name,
            file_type=file_type,
            content=content,
            storage=self.storage,
            **kwargs
        )

    def new_version(self, file, content=b'changed', user=None, **kwargs):
        return services.create_file_version(
            file_id=file.id,
            user_id=(user or self.user).id,
            content=content,
            storage=self.storage,
            **kwargs
        )


class CreateFileTest(FileServiceTestCase):

    def test_create_file(self):
        file = self.upload(description='Meeting notes')

        self.assertEqual(file.name, 'notes.txt')
        self.assertEqual(file.file_type, 'Text')
        self.assertEqual(file.size, 5)
        self.assertEqual(file.description, 'Meeting notes')
        self.assertEqual(file.user, self.user)
        self.assertEqual(file.project, self.project)
        self.assertEqual(self.storage.retrieve(file.path), b'hello')

    def test_version_one_created_with_file(self):
        file = self.upload()

        versions = list(file.versions.all())
        self.assertEqual(len(versions), 1)
        self.assertEqual(versions[0].version, 1)
        self.assertEqual(versions[0].action, 'uploaded')
        self.assertEqual(versions[0].path, file.path)
        self.assertEqual(versions[0].size, file.size)
        self.assertEqual(versions[0].user, self.user)

    def test_upload_records_upload_but_no_update(self):
        file = self.upload()

        file_activities = Activity.objects.filter(file=file)
        self.assertEqual(file_activities.count(), 1)
        upload = file_activities.get()
        self.assertEqual(upload.type, Activity.UPLOAD)
        self.assertEqual(upload.user_id, self.user.id)
        self.assertEqual(upload.project_id, self.project.id)
        self.assertFalse(Activity.objects.filter(type=Activity.UPDATE).exists())

    def test_name_required(self):
        with self.assertRaises(InvalidInput):
            self.upload(name='   ')
        self.assertEqual(File.objects.count(), 0)

    def test_content_required(self):
        with self.assertRaises(InvalidInput):
            self.upload(content=None)

    def test_missing_user(self):
        with self.assertRaises(NotFound):
            services.create_file(999999, self.project.id, 'a.txt', 'Text', b'x', storage=self.storage)
        self.assertEqual(File.objects.count(), 0)

    def test_missing_project(self):
        with self.assertRaises(NotFound):
            services.create_file(self.user.id, 999999, 'a.txt', 'Text', b'x', storage=self.storage)
        self.assertEqual(File.objects.count(), 0)
        self.assertFalse(Activity.objects.filter(type=Activity.UPLOAD).exists())

    def test_unknown_type_default(self):
        file = self.upload(file_type='')
        self.assertEqual(file.file_type, 'Unknown')

    def test_file_in_other_project(self):
        project = create_project('Design')
        file = services.create_file(
            self.user.id, project.id, 'logo.png', 'Image', b'\x89PNG', storage=self.storage
        )

        self.assertEqual(Activity.objects.get(file=file).project_id, project.id)
        self.assertTrue(file.path.startswith(f'projects/{project.id}/uploads/'))


class FileVersionTest(FileServiceTestCase):

    def test_versions_increment_by_one(self):
        file = self.upload()

        v2 = self.new_version(file, b'second')
        v3 = self.new_version(file, b'third', user=self.other, notes='Fixed typos')

        self.assertEqual(v2.version, 2)
        self.assertEqual(v3.version, 3)
        self.assertEqual(v3.user, self.other)
        self.assertEqual(v3.notes, 'Fixed typos')
        self.assertEqual(v3.action, 'updated')
        self.assertEqual(self.storage.retrieve(v3.path), b'third')

    def test_versions_listed_newest_first(self):
        file = self.upload()
        self.new_version(file)
        self.new_version(file)

        versions = services.get_file_versions(file.id)

        self.assertEqual([v.version for v in versions], [3, 2, 1])

    def test_each_new_version_records_one_update(self):
        file = self.upload()
        self.new_version(file)
        self.new_version(file, user=self.other)

        updates = Activity.objects.filter(type=Activity.UPDATE, file=file).order_by('id')
        self.assertEqual(updates.count(), 2)
        self.assertEqual([a.user_id for a in updates], [self.user.id, self.other.id])
        self.assertEqual(Activity.objects.filter(type=Activity.UPLOAD, file=file).count(), 1)

    def test_version_numbers_follow_highest_existing(self):
        file = self.upload()
        FileVersion.objects.create(file=file, version=7, path='legacy', size=1, user=self.user, action='imported')

        version = self.new_version(file)

        self.assertEqual(version.version, 8)

    def test_new_version_touches_only_updated_at(self):
        file = self.upload(content=b'hello')
        past = timezone.now() - timedelta(days=2)
        File.objects.filter(id=file.id).update(updated_at=past)

        self.new_version(file, b'a much longer body of text')

        file.refresh_from_db()
        self.assertGreater(file.updated_at, past)
        self.assertEqual(file.size, 5)
        self.assertEqual(file.name, 'notes.txt')
        self.assertEqual(self.storage.retrieve(file.path), b'hello')

    def test_updated_at_unchanged_by_comments(self):
        from apps.comments.services import create_comment

        file = self.upload()
        past = timezone.now() - timedelta(days=2)
        File.objects.filter(id=file.id).update(updated_at=past)

        create_comment(self.other.id, file.id, 'Looks good')

        file.refresh_from_db()
        self.assertEqual(file.updated_at, past)

    def test_version_for_missing_file(self):
        with self.assertRaises(NotFound):
            services.create_file_version(999999, self.user.id, b'x', storage=self.storage)
        self.assertFalse(Activity.objects.filter(type=Activity.UPDATE).exists())

    def test_version_by_missing_user(self):
        file = self.upload()

        with self.assertRaises(NotFound):
            services.create_file_version(file.id, 999999, b'x', storage=self.storage)
        self.assertEqual(file.versions.count(), 1)

    def test_versions_of_missing_file(self):
        with self.assertRaises(NotFound):
            services.get_file_versions(999999)


class FileReadTest(FileServiceTestCase):

    def test_get_file(self):
        file = self.upload()
        self.assertEqual(services.get_file(file.id), file)

    def test_get_missing_file(self):
        with self.assertRaises(NotFound):
            services.get_file(999999)

    def test_list_files_newest_first(self):
        first = self.upload('a.txt')
        second = self.upload('b.txt')

        self.assertEqual(list(services.list_files()), [second, first])

    def test_recent_files_limit(self):
        files = [self.upload(f'{i}.txt') for i in range(6)]

        recent = services.list_recent_files()

        self.assertEqual(recent, list(reversed(files))[:4])
        self.assertEqual(len(services.list_recent_files(2)), 2)

    def test_recent_files_invalid_limit(self):
        with self.assertRaises(InvalidInput):
            services.list_recent_files(0)


class DownloadTest(FileServiceTestCase):

    def test_download_current_version(self):
        file = self.upload('report.pdf', b'v1', file_type='PDF')
        self.new_version(file, b'v2')

        result = services.download_file(file.id, storage=self.storage)

        self.assertEqual(result['content'], b'v2')
        self.assertEqual(result['file_name'], 'report.pdf')
        self.assertEqual(result['content_type'], 'application/pdf')

    def test_download_specific_version(self):
        file = self.upload(content=b'v1')
        self.new_version(file, b'v2')

        result = services.download_file(file.id, version=1, storage=self.storage)

        self.assertEqual(result['content'], b'v1')

    def test_download_missing_version(self):
        file = self.upload()

        with self.assertRaises(NotFound):
            services.download_file(file.id, version=5, storage=self.storage)

    def test_download_missing_content(self):
        file = self.upload()
        self.storage.objects.clear()

        with self.assertRaises(NotFound):
            services.download_file(file.id, storage=self.storage)

    def test_download_project_zip(self):
        a = self.upload('a.txt', b'alpha')
        b = self.upload('b.txt', b'beta')
        self.new_version(b, b'beta v2')

        archive = zipfile.ZipFile(io.BytesIO(services.download_project(storage=self.storage)))

        self.assertEqual(
            sorted(archive.namelist()),
            sorted([f'{a.id}_a.txt', f'{b.id}_b.txt']),
        )
        self.assertEqual(archive.read(f'{b.id}_b.txt'), b'beta v2')

    def test_download_project_filters_by_project(self):
        self.upload('a.txt', b'alpha')
        project = create_project('Design')

        archive = zipfile.ZipFile(io.BytesIO(services.download_project(project.id, storage=self.storage)))

        self.assertEqual(archive.namelist(), [])

    def test_download_project_missing_content(self):
        self.upload('a.txt', b'alpha')
        self.storage.objects.clear()

        with self.assertRaises(NotFound):
            services.download_project(storage=self.storage)


class FailingContentStore(InMemoryContentStore):

    def store(self, content, filename='', prefix='uploads'):
        raise OSError("storage unavailable")


class FileIntegrityTest(FileServiceTestCase):

    def test_duplicate_version_number_rejected(self):
        file = self.upload()

        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                FileVersion.objects.create(file=file, version=1, path='dup', size=1, user=self.user, action='updated')

        self.assertEqual(file.versions.count(), 1)

    def test_failed_store_leaves_no_rows(self):
        with self.assertRaises(OSError):
            services.create_file(
                self.user.id, self.project.id, 'a.txt', 'Text', b'x', storage=FailingContentStore()
            )

        self.assertEqual(File.objects.count(), 0)
        self.assertFalse(Activity.objects.filter(type=Activity.UPLOAD).exists())
