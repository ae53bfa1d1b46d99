from typing import List, Type

from fastapi import APIRouter, Depends, Path, Request, Response, status

from catalog_api.config.settings import Settings
from catalog_api.dependencies import get_app_settings, get_book_service, get_content_service
from catalog_api.schemas import Book, BookIn, FrontEndBook
from catalog_api.services import BookService, ContentService

BOOK_NOT_FOUND_RESPONSE = {
    status.HTTP_404_NOT_FOUND: {"description": "No book exists for the given `book_id`."},
}


def create_books_router(book_model: Type[Book] = Book) -> APIRouter:
    """Build the book CRUD routes, rendering books with `book_model`."""
    router = APIRouter()

    def render(book: Book) -> Book:
        return book_model.model_validate(book, from_attributes=True)

    @router.get("", response_model=List[book_model])
    def list_books(books: BookService = Depends(get_book_service)):
        """List every book in the catalog."""
        return [render(book) for book in books.list_books()]

    @router.get("/{book_id}", response_model=book_model, responses=BOOK_NOT_FOUND_RESPONSE)
    def get_book(
        book_id: str = Path(..., description="Identifier of the book"),
        books: BookService = Depends(get_book_service),
    ):
        """Retrieve one book."""
        return render(books.get_book(book_id))

    @router.post("", response_model=book_model, status_code=status.HTTP_201_CREATED)
    def create_book(
        request: Request,
        response: Response,
        book: BookIn,
        books: BookService = Depends(get_book_service),
    ):
        """
        Create a book.

        Any `id` in the body is ignored; the server assigns a new one and
        returns the location of the created resource.
        """
        created = books.create_book(book)
        response.headers["Location"] = f"{request.url.path.rstrip('/')}/{created.id}"
        return render(created)

    @router.put(
        "/{book_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses={
            **BOOK_NOT_FOUND_RESPONSE,
            status.HTTP_400_BAD_REQUEST: {"description": "The body `id` does not match `book_id`."},
        },
    )
    def update_book(
        book: BookIn,
        book_id: str = Path(..., description="Identifier of the book"),
        books: BookService = Depends(get_book_service),
    ):
        """Replace the descriptive fields of a book. Its content is left untouched."""
        books.replace_book(book_id, book)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        "/{book_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses=BOOK_NOT_FOUND_RESPONSE,
    )
    def delete_book(
        book_id: str = Path(..., description="Identifier of the book"),
        settings: Settings = Depends(get_app_settings),
        books: BookService = Depends(get_book_service),
        content: ContentService = Depends(get_content_service),
    ):
        """
        Delete a book.

        The book's content file is only removed when `cascade_content_delete`
        is enabled; otherwise it stays in the bucket.
        """
        if settings.cascade_content_delete:
            content.delete_book_with_content(book_id)
        else:
            books.delete_book(book_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


router = create_books_router()
# the single-page front end reads the content locator as `contentLink`
frontend_router = create_books_router(FrontEndBook)
