"""
S3/Object Storage service for file content.

The database only keeps the location key returned by ``store``; the bytes
live in S3 (or under MEDIA_ROOT when USE_S3 is off).

Key structure (settings.S3_PATHS):
- projects/{project_id}/uploads/
- projects/{project_id}/uploads/versions/
"""
import boto3
from botocore.exceptions import ClientError
from django.conf import settings
import logging
import os
import uuid
from io import BytesIO
from typing import BinaryIO

logger = logging.getLogger(__name__)


class StorageService:
    """
    S3-compatible storage service.

    Exposes the content-store contract used by the file services:
    ``store(content, filename, prefix) -> key`` and ``retrieve(key) -> bytes``.
    """

    def __init__(self):
        self.use_s3 = getattr(settings, 'USE_S3', True)

        if self.use_s3:
            self.client = boto3.client(
                's3',
                endpoint_url=settings.AWS_S3_ENDPOINT_URL,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                region_name=settings.AWS_S3_REGION_NAME,
            )
            self.bucket_name = settings.AWS_STORAGE_BUCKET_NAME

    # =========================================================================
    # Content Store
    # =========================================================================

    def store(self, content: bytes, filename: str = '', prefix: str = 'uploads') -> str:
        """
        Persist raw bytes and return the location key.

        Keys are unique per call, so storing the same filename twice never
        overwrites earlier content.
        """
        safe_name = os.path.basename(filename or '') or 'file'
        key = f"{prefix.rstrip('/')}/{uuid.uuid4().hex}-{safe_name}"
        self.upload_file(BytesIO(content), key)
        logger.info(f"Stored {len(content)} bytes at {key}")
        return key

    def retrieve(self, key: str) -> bytes:
        """Return the bytes stored under ``key``; FileNotFoundError if absent."""
        try:
            return self.download_file(key)
        except ClientError as e:
            if e.response.get('Error', {}).get('Code') in ('NoSuchKey', '404'):
                raise FileNotFoundError(key) from e
            raise

    # =========================================================================
    # Core Upload/Download Operations
    # =========================================================================

    def upload_file(self, file_obj: BinaryIO, key: str):
        """
        Upload a file to S3.

        Args:
            file_obj: File-like object to upload
            key: S3 object key (path)
        """
        if not self.use_s3:
            self._upload_local(file_obj, key)
            return

        try:
            self.client.upload_fileobj(file_obj, self.bucket_name, key)
        except ClientError as e:
            logger.error(f"Failed to upload file to S3: {e}")
            raise

    def download_file(self, key: str) -> bytes:
        """Download a file from S3."""
        if not self.use_s3:
            return self._download_local(key)

        try:
            response = self.client.get_object(
                Bucket=self.bucket_name,
                Key=key
            )
            return response['Body'].read()
        except ClientError as e:
            logger.error(f"Failed to download file from S3: {e}")
            raise

    # =========================================================================
    # Local Storage Fallback
    # =========================================================================

    def _upload_local(self, file_obj: BinaryIO, key: str):
        """Upload to local filesystem (dev fallback)."""
        path = settings.MEDIA_ROOT / key
        os.makedirs(path.parent, exist_ok=True)

        with open(path, 'wb') as f:
            f.write(file_obj.read())

    def _download_local(self, key: str) -> bytes:
        """Download from local filesystem."""
        path = settings.MEDIA_ROOT / key
        with open(path, 'rb') as f:
            return f.read()


_storage_service = None


def get_storage_service() -> StorageService:
    """Return the process-wide storage service, creating it on first use."""
    global _storage_service
    if _storage_service is None:
        _storage_service = StorageService()
    return _storage_service
