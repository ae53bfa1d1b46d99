from tests.fixtures.aws_fixtures import aws_credentials, mocked_aws, s3_client  # noqa: F401
from tests.fixtures.db_client import document_store, test_db_path  # noqa: F401
from tests.fixtures.catalog_fixtures import (  # noqa: F401
    blob_store,
    book_service,
    client,
    content_service,
    sample_payloads,
    settings,
)
