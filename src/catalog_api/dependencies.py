"""FastAPI dependencies that build per-request services from the handles on ``app.state``."""

from fastapi import Depends, Request

from catalog_api.adapters.storage import BlobStore
from catalog_api.config.settings import Settings
from catalog_api.services import BookService, ContentService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_book_service(request: Request) -> BookService:
    return BookService(request.app.state.document_store)


def get_blob_store(request: Request) -> BlobStore:
    settings: Settings = request.app.state.settings
    return BlobStore(
        s3_client=request.app.state.s3_client,
        bucket_name=settings.s3_bucket_name,
        url_expiry_seconds=settings.content_url_expiry_seconds,
    )


def get_content_service(
    books: BookService = Depends(get_book_service),
    blob_store: BlobStore = Depends(get_blob_store),
) -> ContentService:
    return ContentService(books, blob_store)
