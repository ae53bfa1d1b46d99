from catalog_api.schemas import BookIn
from catalog_api.seed import SAMPLE_BOOKS, seed_books
from catalog_api.services import BookService


def test_seed_empty_catalog(book_service: BookService):
    inserted = seed_books(book_service)

    assert inserted == len(SAMPLE_BOOKS) == 5
    titles = [book.title for book in book_service.list_books()]
    assert titles == [sample.title for sample in SAMPLE_BOOKS]


def test_seed_is_skipped_when_catalog_has_books(book_service: BookService):
    book_service.create_book(BookIn(title="1984", author="Orwell", isbn="X", genre="Fiction"))

    assert seed_books(book_service) == 0
    assert book_service.count_books() == 1


def test_seed_twice(book_service: BookService):
    seed_books(book_service)
    seed_books(book_service)

    assert book_service.count_books() == len(SAMPLE_BOOKS)
