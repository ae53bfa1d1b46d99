"""Sample catalog inserted into an empty document store."""

import logging
from datetime import date
from decimal import Decimal
from typing import List

from catalog_api.schemas import BookIn
from catalog_api.services.book_service import BookService

logger = logging.getLogger(__name__)

SAMPLE_BOOKS: List[BookIn] = [
    BookIn(
        title="The Great Gatsby",
        author="F. Scott Fitzgerald",
        isbn="978-0-7432-7356-5",
        published_date=date(1925, 4, 10),
        genre="Fiction",
        price=Decimal("12.99"),
        description="A classic American novel set in the Jazz Age.",
    ),
    BookIn(
        title="To Kill a Mockingbird",
        author="Harper Lee",
        isbn="978-0-06-112008-4",
        published_date=date(1960, 7, 11),
        genre="Fiction",
        price=Decimal("13.99"),
        description="A gripping tale of racial injustice and childhood innocence.",
    ),
    BookIn(
        title="1984",
        author="George Orwell",
        isbn="978-0-452-28423-4",
        published_date=date(1949, 6, 8),
        genre="Dystopian Fiction",
        price=Decimal("14.99"),
        description="A dystopian social science fiction novel.",
    ),
    BookIn(
        title="Pride and Prejudice",
        author="Jane Austen",
        isbn="978-0-14-143951-8",
        published_date=date(1813, 1, 28),
        genre="Romance",
        price=Decimal("11.99"),
        description="A romantic novel of manners set in Georgian England.",
    ),
    BookIn(
        title="The Catcher in the Rye",
        author="J.D. Salinger",
        isbn="978-0-316-76948-0",
        published_date=date(1951, 7, 16),
        genre="Fiction",
        price=Decimal("13.49"),
        description="A controversial novel about teenage rebellion and alienation.",
    ),
]


def seed_books(books: BookService) -> int:
    """Insert the sample books unless the catalog already has data.

    Returns the number of books inserted.
    """
    if books.count_books() > 0:
        logger.info("Catalog already has books, skipping seed")
        return 0

    for sample in SAMPLE_BOOKS:
        books.create_book(sample)
    logger.info(f"Seeded catalog with {len(SAMPLE_BOOKS)} books")
    return len(SAMPLE_BOOKS)
