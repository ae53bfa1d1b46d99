"""
Blob storage adapter for book content files kept in S3.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional, Union

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from botocore.response import StreamingBody

from catalog_api.config.settings import Settings
from catalog_api.content_types import content_type_for, file_extension
from catalog_api.errors import ContentNotFoundError, InternalError
from catalog_api.s3.delete_objects import delete_s3_object
from catalog_api.s3.read_objects import (
    fetch_s3_object,
    generate_presigned_download_url,
    object_exists_in_s3,
)
from catalog_api.s3.write_objects import create_bucket_if_not_exists, upload_s3_object

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...

logger = logging.getLogger(__name__)

AWS_ERRORS = (ClientError, BotoCoreError)


def create_s3_client(settings: Settings) -> "S3Client":
    """Create an S3 client configured from settings."""
    client_kwargs = {
        'region_name': settings.aws_region
    }

    if settings.aws_access_key_id:
        client_kwargs['aws_access_key_id'] = settings.aws_access_key_id
    if settings.aws_secret_access_key:
        client_kwargs['aws_secret_access_key'] = settings.aws_secret_access_key

    # Add endpoint URL for local/mock modes
    if settings.aws_endpoint_url and settings.is_local_mode:
        client_kwargs['endpoint_url'] = settings.aws_endpoint_url

    logger.info(f"Creating S3 client for {settings.deployment_mode} mode in {settings.aws_region}")
    return boto3.client('s3', **client_kwargs)


def blob_name_for(book_id: str, filename: str) -> str:
    """Object key of a book's content: ``{book_id}/content{ext}``."""
    return f"{book_id}/content{file_extension(filename)}"


@dataclass
class BlobContent:
    """An open content stream. Whoever iterates it is responsible for closing it."""

    body: StreamingBody
    content_type: str
    filename: str
    content_length: Optional[int] = None

    def iter_chunks(self, chunk_size: int = 64 * 1024) -> Iterator[bytes]:
        try:
            yield from self.body.iter_chunks(chunk_size)
        finally:
            self.body.close()

    def read(self) -> bytes:
        try:
            return self.body.read()
        finally:
            self.body.close()


class BlobStore:
    """Uploads, downloads, deletes and resolves book content in one S3 bucket."""

    def __init__(self, s3_client: "S3Client", bucket_name: str, url_expiry_seconds: int = 3600):
        self.s3_client = s3_client
        self.bucket_name = bucket_name
        self.url_expiry_seconds = url_expiry_seconds

    def upload(
        self,
        book_id: str,
        filename: str,
        content: Union[bytes, BinaryIO],
        content_type_hint: Optional[str] = None,
    ) -> str:
        """Store content for a book and return its locator.

        The bucket is created on first use and any object already at the
        locator is overwritten. The stored content type comes from the file
        extension; the declared type is only kept as object metadata.
        """
        locator = blob_name_for(book_id, filename)
        content_type = content_type_for(filename)
        metadata = {"declared-content-type": content_type_hint} if content_type_hint else None
        try:
            create_bucket_if_not_exists(self.bucket_name, self.s3_client)
            upload_s3_object(
                bucket_name=self.bucket_name,
                object_key=locator,
                file_content=content,
                s3_client=self.s3_client,
                content_type=content_type,
                metadata=metadata,
            )
        except AWS_ERRORS as e:
            logger.error(f"Error uploading content for book {book_id}: {e}")
            raise InternalError(f"Failed to upload content: {e}") from e
        return locator

    def download(self, locator: str) -> BlobContent:
        """Open the content stored at `locator`."""
        try:
            response = fetch_s3_object(self.bucket_name, locator, self.s3_client)
        except AWS_ERRORS as e:
            logger.error(f"Error downloading {locator}: {e}")
            raise InternalError(f"Failed to download content: {e}") from e

        if response is None:
            raise ContentNotFoundError("Content not found in storage")

        return BlobContent(
            body=response["Body"],
            content_type=content_type_for(locator),
            filename=locator.rsplit("/", 1)[-1],
            content_length=response.get("ContentLength"),
        )

    def exists(self, locator: str) -> bool:
        try:
            return object_exists_in_s3(self.bucket_name, locator, self.s3_client)
        except AWS_ERRORS as e:
            logger.error(f"Error checking {locator}: {e}")
            raise InternalError(f"Failed to check content: {e}") from e

    def delete(self, locator: str) -> bool:
        """Delete the content at `locator`; returns whether it existed."""
        try:
            existed = object_exists_in_s3(self.bucket_name, locator, self.s3_client)
            if existed:
                delete_s3_object(self.bucket_name, locator, self.s3_client)
            else:
                logger.warning(f"No content to delete at {locator}")
            return existed
        except AWS_ERRORS as e:
            logger.error(f"Error deleting {locator}: {e}")
            raise InternalError(f"Failed to delete content: {e}") from e

    def resolve_url(self, locator: str) -> str:
        """Return a presigned GET URL for the content at `locator`."""
        if not self.exists(locator):
            raise ContentNotFoundError(f"Content not found: {locator}")
        try:
            return generate_presigned_download_url(
                bucket_name=self.bucket_name,
                object_key=locator,
                expires_in=self.url_expiry_seconds,
                s3_client=self.s3_client,
            )
        except AWS_ERRORS as e:
            logger.error(f"Error resolving URL for {locator}: {e}")
            raise InternalError(f"Failed to get content URL: {e}") from e
