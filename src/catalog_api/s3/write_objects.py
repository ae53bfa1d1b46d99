"""Functions for writing objects to an S3 bucket--the "C" and "U" in CRUD."""

import logging
from typing import BinaryIO, Dict, Optional, Union

from botocore.exceptions import ClientError

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...

logger = logging.getLogger(__name__)


def create_bucket_if_not_exists(bucket_name: str, s3_client: "S3Client") -> bool:
    """
    Create an S3 bucket unless it already exists.

    :param bucket_name: The name of the S3 bucket.
    :param s3_client: A boto3 S3 client.

    :return: True if the bucket was created by this call, False if it already existed.
    """
    try:
        s3_client.head_bucket(Bucket=bucket_name)
        return False
    except ClientError as err:
        error_code = err.response.get("Error", {}).get("Code")
        if error_code not in ("404", "NoSuchBucket"):
            raise

    region = s3_client.meta.region_name
    if region and region != "us-east-1":
        s3_client.create_bucket(
            Bucket=bucket_name,
            CreateBucketConfiguration={"LocationConstraint": region},
        )
    else:
        s3_client.create_bucket(Bucket=bucket_name)
    logger.info(f"Created S3 bucket: {bucket_name}")
    return True


def upload_s3_object(
    bucket_name: str,
    object_key: str,
    file_content: Union[bytes, BinaryIO],
    s3_client: "S3Client",
    content_type: Optional[str] = None,
    metadata: Optional[Dict[str, str]] = None,
) -> None:
    """
    Upload a file to an S3 bucket, overwriting any object at the same key.

    :param bucket_name: The name of the S3 bucket.
    :param object_key: path to the object in the S3 bucket.
    :param file_content: The content of the file to upload, as bytes or a readable binary stream.
    :param s3_client: A boto3 S3 client.
    :param content_type: The MIME type of the file, e.g. "text/plain" for a text file.
    :param metadata: Optional user metadata stored alongside the object.
    """
    content_type = content_type or "application/octet-stream"
    s3_client.put_object(
        Bucket=bucket_name,
        Key=object_key,
        Body=file_content,
        ContentType=content_type,
        Metadata=metadata or {},
    )
    logger.info(f"Uploaded s3://{bucket_name}/{object_key} ({content_type})")
