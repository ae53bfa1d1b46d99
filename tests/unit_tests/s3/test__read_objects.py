from catalog_api.s3.delete_objects import delete_s3_object
from catalog_api.s3.read_objects import (
    fetch_s3_object,
    generate_presigned_download_url,
    object_exists_in_s3,
)
from tests.consts import TEST_BUCKET_NAME, TEST_TXT_CONTENT

OBJECT_KEY = "book-1/content.txt"


def put_test_object(s3_client):
    s3_client.create_bucket(Bucket=TEST_BUCKET_NAME)
    s3_client.put_object(Bucket=TEST_BUCKET_NAME, Key=OBJECT_KEY, Body=TEST_TXT_CONTENT)


def test_object_exists_in_s3(s3_client):
    put_test_object(s3_client)

    assert object_exists_in_s3(TEST_BUCKET_NAME, OBJECT_KEY, s3_client) is True
    assert object_exists_in_s3(TEST_BUCKET_NAME, "book-1/other.txt", s3_client) is False


def test_object_exists_in_missing_bucket(s3_client):
    assert object_exists_in_s3(TEST_BUCKET_NAME, OBJECT_KEY, s3_client) is False


def test_fetch_s3_object(s3_client):
    put_test_object(s3_client)

    response = fetch_s3_object(TEST_BUCKET_NAME, OBJECT_KEY, s3_client)
    assert response["Body"].read() == TEST_TXT_CONTENT

    assert fetch_s3_object(TEST_BUCKET_NAME, "book-1/other.txt", s3_client) is None


def test_generate_presigned_download_url(s3_client):
    put_test_object(s3_client)

    url = generate_presigned_download_url(TEST_BUCKET_NAME, OBJECT_KEY, 600, s3_client)

    assert url.startswith("https://")
    assert OBJECT_KEY in url


def test_delete_s3_object(s3_client):
    put_test_object(s3_client)

    delete_s3_object(TEST_BUCKET_NAME, OBJECT_KEY, s3_client)
    assert object_exists_in_s3(TEST_BUCKET_NAME, OBJECT_KEY, s3_client) is False

    # deleting again is not an error
    delete_s3_object(TEST_BUCKET_NAME, OBJECT_KEY, s3_client)
