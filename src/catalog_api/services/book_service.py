"""
Book service for catalog records kept in the document store.
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Iterator, List, Optional

from database import DocumentAdapter

from catalog_api.errors import BadRequestError, BookNotFoundError, CatalogError, InternalError
from catalog_api.schemas import MUTABLE_BOOK_FIELDS, Book, BookIn

logger = logging.getLogger(__name__)

BOOKS_COLLECTION = 'books'


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Surface any database failure as an InternalError carrying its text."""
    try:
        yield
    except CatalogError:
        raise
    except Exception as e:
        logger.error(f"Error {action}: {e}")
        raise InternalError(f"Internal server error: {e}") from e


class BookService:
    """CRUD for book documents; identifiers are generated here, never by clients."""

    def __init__(self, adapter: DocumentAdapter):
        self.adapter = adapter

    def list_books(self) -> List[Book]:
        with storage_errors("listing books"):
            documents = self.adapter.query_documents(BOOKS_COLLECTION)
            return [Book.from_document(document) for document in documents]

    def get_book(self, book_id: str) -> Book:
        with storage_errors(f"getting book {book_id}"):
            document = self.adapter.get_document(BOOKS_COLLECTION, book_id)
        if document is None:
            raise BookNotFoundError(book_id)
        return Book.from_document(document)

    def create_book(self, data: BookIn) -> Book:
        """Persist a new book under a fresh identifier, ignoring any supplied one."""
        book = Book(
            id=str(uuid.uuid4()),
            **data.model_dump(include=set(MUTABLE_BOOK_FIELDS)),
        )
        with storage_errors("creating book"):
            self.adapter.create_document(BOOKS_COLLECTION, book.to_document())
        logger.info(f"Created book {book.id}: {book.title}")
        return book

    def replace_book(self, book_id: str, data: BookIn) -> Book:
        """Overwrite the descriptive fields of a book; its content locator is kept."""
        if data.id != book_id:
            raise BadRequestError("ID mismatch")

        existing = self.get_book(book_id)
        updated = existing.model_copy(
            update={field: getattr(data, field) for field in MUTABLE_BOOK_FIELDS}
        )
        self._save(updated)
        return updated

    def delete_book(self, book_id: str) -> None:
        with storage_errors(f"deleting book {book_id}"):
            deleted = self.adapter.delete_document(BOOKS_COLLECTION, book_id)
        if not deleted:
            raise BookNotFoundError(book_id)

    def set_content_locator(self, book_id: str, locator: Optional[str]) -> Book:
        """Point a book at a content blob, or detach it with ``None``."""
        book = self.get_book(book_id)
        updated = book.model_copy(update={"content_locator": locator})
        self._save(updated)
        return updated

    def count_books(self) -> int:
        with storage_errors("counting books"):
            return self.adapter.count_documents(BOOKS_COLLECTION)

    def _save(self, book: Book) -> None:
        with storage_errors(f"updating book {book.id}"):
            updated = self.adapter.update_document(BOOKS_COLLECTION, book.id, book.to_document())
        if not updated:
            raise BookNotFoundError(book.id)
