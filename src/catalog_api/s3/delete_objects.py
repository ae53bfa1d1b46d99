"""Functions for deleting objects from an S3 bucket--the "D" in CRUD."""

import logging

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...

logger = logging.getLogger(__name__)


def delete_s3_object(bucket_name: str, object_key: str, s3_client: "S3Client") -> None:
    """
    Delete an object from the S3 bucket.

    S3 treats deleting a missing key as success, so this never fails for absent objects.

    :param bucket_name: The name of the S3 bucket.
    :param object_key: The key of the object to delete.
    :param s3_client: A boto3 S3 client.
    """
    s3_client.delete_object(Bucket=bucket_name, Key=object_key)
    logger.info(f"Deleted s3://{bucket_name}/{object_key}")
