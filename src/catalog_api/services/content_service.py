"""
Content service: keeps a book's content locator in step with the content bucket.

There is no transaction spanning the document store and S3. Every operation
runs as a guarded sequence within one request, and a failure part way through
(for example the book update failing after the upload succeeded) is not
rolled back.
"""

import logging
from typing import BinaryIO, Optional, Tuple, Union

from catalog_api.adapters.storage import BlobContent, BlobStore
from catalog_api.errors import ContentNotFoundError
from catalog_api.schemas import Book
from catalog_api.services.book_service import BookService
from catalog_api.utils.decorators import log_execution_time

logger = logging.getLogger(__name__)

NO_CONTENT_MESSAGE = "No content available for this book"
NO_CONTENT_TO_DELETE_MESSAGE = "No content to delete"


def describe_expiry(seconds: int) -> str:
    """Render a URL lifetime the way clients display it, e.g. "1 hour"."""
    for unit, size in (("hour", 3600), ("minute", 60)):
        if seconds >= size and seconds % size == 0:
            count = seconds // size
            return f"{count} {unit}" if count == 1 else f"{count} {unit}s"
    return "1 second" if seconds == 1 else f"{seconds} seconds"


class ContentService:
    """Attach, fetch, remove and link the content file of a book."""

    def __init__(self, books: BookService, blob_store: BlobStore):
        self.books = books
        self.blob_store = blob_store

    def _locator_of(self, book_id: str, missing_message: str = NO_CONTENT_MESSAGE) -> str:
        book = self.books.get_book(book_id)
        if not book.content_locator:
            raise ContentNotFoundError(missing_message)
        return book.content_locator

    @log_execution_time
    def attach_content(
        self,
        book_id: str,
        filename: str,
        content: Union[bytes, BinaryIO],
        content_type: Optional[str] = None,
    ) -> str:
        """Upload new content for a book, replacing any previous file.

        The new object is written before the old one is removed, so the book
        never goes without content. Returns the new locator.
        """
        book = self.books.get_book(book_id)

        locator = self.blob_store.upload(book_id, filename, content, content_type)

        old_locator = book.content_locator
        # same extension means the upload already overwrote the old object
        if old_locator and old_locator != locator:
            self.blob_store.delete(old_locator)
            logger.info(f"Replaced content of book {book_id}: {old_locator} -> {locator}")

        self.books.set_content_locator(book_id, locator)
        return locator

    @log_execution_time
    def fetch_content(self, book_id: str) -> BlobContent:
        """Open a book's content; the caller must drain and close the stream."""
        locator = self._locator_of(book_id)
        return self.blob_store.download(locator)

    @log_execution_time
    def remove_content(self, book_id: str) -> Book:
        locator = self._locator_of(book_id, NO_CONTENT_TO_DELETE_MESSAGE)
        self.blob_store.delete(locator)
        return self.books.set_content_locator(book_id, None)

    def get_content_url(self, book_id: str) -> Tuple[str, int]:
        """Return a presigned download URL and its lifetime in seconds."""
        locator = self._locator_of(book_id)
        url = self.blob_store.resolve_url(locator)
        return url, self.blob_store.url_expiry_seconds

    @log_execution_time
    def delete_book_with_content(self, book_id: str) -> None:
        """Delete a book and, if it has one, its content file."""
        book = self.books.get_book(book_id)
        self.books.delete_book(book_id)
        if book.content_locator:
            self.blob_store.delete(book.content_locator)
