"""Functions for reading objects from an S3 bucket--the "R" in CRUD."""

from typing import Optional

from botocore.exceptions import ClientError

try:
    from mypy_boto3_s3 import S3Client
    from mypy_boto3_s3.type_defs import GetObjectOutputTypeDef
except ImportError:
    ...

MISSING_OBJECT_ERROR_CODES = ("404", "NoSuchKey", "NoSuchBucket", "NotFound")


def is_missing_object_error(err: ClientError) -> bool:
    return err.response.get("Error", {}).get("Code") in MISSING_OBJECT_ERROR_CODES


def object_exists_in_s3(bucket_name: str, object_key: str, s3_client: "S3Client") -> bool:
    """
    Check if an object exists in the S3 bucket using head_object.

    :param bucket_name: Name of the S3 bucket.
    :param object_key: Key of the object to check.
    :param s3_client: A boto3 S3 client.

    :return: True if the object exists, False otherwise.
    """
    try:
        s3_client.head_object(Bucket=bucket_name, Key=object_key)
        return True
    except ClientError as err:
        if is_missing_object_error(err):
            return False
        raise


def fetch_s3_object(
    bucket_name: str,
    object_key: str,
    s3_client: "S3Client",
) -> Optional["GetObjectOutputTypeDef"]:
    """
    Fetch an object from the S3 bucket.

    The caller owns the returned ``Body`` stream and must read and close it.

    :return: The get_object response, or None if the object does not exist.
    """
    try:
        return s3_client.get_object(Bucket=bucket_name, Key=object_key)
    except ClientError as err:
        if is_missing_object_error(err):
            return None
        raise


def generate_presigned_download_url(
    bucket_name: str,
    object_key: str,
    expires_in: int,
    s3_client: "S3Client",
) -> str:
    """Generate a time-limited GET URL for an object."""
    return s3_client.generate_presigned_url(
        ClientMethod="get_object",
        Params={"Bucket": bucket_name, "Key": object_key},
        ExpiresIn=expires_in,
    )
