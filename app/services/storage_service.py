import boto3
from botocore.config import Config
from app.config import settings
from typing import BinaryIO, Callable, Optional, Union
from datetime import datetime
import io
import logging
import secrets
import string

logger = logging.getLogger(__name__)

BASE36_ALPHABET = string.digits + string.ascii_lowercase


class ImageValidationError(ValueError):
    """Raised for files that must not be uploaded; the message is shown to the user"""


class StorageConfigurationError(RuntimeError):
    pass


class StorageService:
    """Image uploads to an S3-compatible bucket (Cloudflare R2)"""

    def __init__(self, s3_client=None, max_size_mb: Optional[float] = None):
        self._s3_client = s3_client
        self.max_size_mb = max_size_mb if max_size_mb is not None else settings.MAX_IMAGE_SIZE_MB
        self.default_bucket = settings.R2_BUCKET_NAME

    @property
    def s3_client(self):
        if self._s3_client is None:
            if not settings.R2_ENDPOINT_URL:
                raise StorageConfigurationError("R2_ENDPOINT_URL is not set in environment variables")
            if not settings.R2_ACCESS_KEY:
                raise StorageConfigurationError("R2_ACCESS_KEY is not set in environment variables")
            if not settings.R2_SECRET_KEY:
                raise StorageConfigurationError("R2_SECRET_KEY is not set in environment variables")

            logger.info(f"R2 Configuration: Endpoint={settings.R2_ENDPOINT_URL}, Bucket={self.default_bucket}")
            self._s3_client = boto3.client(
                's3',
                endpoint_url=settings.R2_ENDPOINT_URL,
                aws_access_key_id=settings.R2_ACCESS_KEY,
                aws_secret_access_key=settings.R2_SECRET_KEY,
                config=Config(signature_version='s3v4')
            )
        return self._s3_client

    def validate(self, content_type: Optional[str], size: int) -> None:
        if size > self.max_size_mb * 1024 * 1024:
            raise ImageValidationError(
                f"File is too large. The maximum size is {self.max_size_mb:g} MB"
            )
        if not content_type or not content_type.startswith("image/"):
            raise ImageValidationError("The file must be an image")

    @staticmethod
    def generate_filename(original_filename: str) -> str:
        """<epoch ms>-<random base36>[.<original extension>]"""
        timestamp = int(datetime.now().timestamp() * 1000)
        suffix = "".join(secrets.choice(BASE36_ALPHABET) for _ in range(11))
        file_ext = original_filename.rsplit('.', 1)[-1].lower() if '.' in original_filename else ''
        return f"{timestamp}-{suffix}.{file_ext}" if file_ext else f"{timestamp}-{suffix}"

    def public_url(self, bucket: str, key: str) -> str:
        if settings.R2_BUCKET_URL and bucket == self.default_bucket:
            base_url = settings.R2_BUCKET_URL.rstrip('/')
            return f"{base_url}/{key}"
        # Fallback: construct URL from endpoint and bucket
        endpoint_base = settings.R2_ENDPOINT_URL.replace('https://', '').replace('http://', '').split('/')[0]
        return f"https://{endpoint_base}/{bucket}/{key}"

    def upload_image(
        self,
        file: Union[BinaryIO, bytes, io.BytesIO],
        filename: str,
        content_type: Optional[str],
        size: int,
        bucket: Optional[str] = None,
        on_uploaded: Optional[Callable[[str], None]] = None,
    ) -> str:
        """Validate, upload and return the public URL of an image"""
        self.validate(content_type, size)

        bucket = bucket or self.default_bucket
        key = self.generate_filename(filename)

        if isinstance(file, bytes):
            file = io.BytesIO(file)
        if hasattr(file, 'seek'):
            file.seek(0)

        logger.info(f"Uploading image to storage: bucket={bucket}, key={key}")
        try:
            self.s3_client.upload_fileobj(
                file,
                bucket,
                key,
                ExtraArgs={'ContentType': content_type}
            )
        except StorageConfigurationError:
            raise
        except Exception as e:
            logger.error(f"Image upload error: {type(e).__name__}: {e} (bucket={bucket})")
            raise

        url = self.public_url(bucket, key)
        if on_uploaded:
            on_uploaded(url)
        return url


def get_storage_service() -> StorageService:
    return StorageService()
