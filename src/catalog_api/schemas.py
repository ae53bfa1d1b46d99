####################################
# --- Request/response schemas --- #
####################################

from datetime import date
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# fields a client may change through a full replacement
MUTABLE_BOOK_FIELDS = (
    "title",
    "author",
    "isbn",
    "published_date",
    "genre",
    "price",
    "description",
)

# exact in Python and in storage, a plain number in JSON responses
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire and snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class BookFields(CamelModel):
    """Descriptive fields shared by every book payload."""

    title: str = Field(min_length=1, description="Title of the book.")
    author: str = Field(min_length=1, description="Author of the book.")
    isbn: str = Field(min_length=1, description="ISBN of the book.")
    genre: str = Field(min_length=1, description="Genre of the book.")
    published_date: Optional[date] = Field(None, description="Publication date.")
    price: Price = Field(Decimal("0"), ge=0, description="Price of the book.")
    description: str = Field("", description="Free text description.")


class BookIn(BookFields):
    """Request body for `POST /records` and `PUT /records/:id`.

    `id` is ignored on creation and must match the path on replacement.
    Any client supplied content locator is dropped.
    """

    id: Optional[str] = Field(None, description="Identifier of the book being replaced.")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "title": "1984",
                "author": "George Orwell",
                "isbn": "978-0-452-28423-4",
                "genre": "Dystopian Fiction",
                "publishedDate": "1949-06-08",
                "price": 14.99,
                "description": "A dystopian social science fiction novel.",
            }
        },
    )


class Book(BookFields):
    """A catalog entry as stored and returned by the API."""

    id: str = Field(description="Server generated identifier.")
    content_locator: Optional[str] = Field(
        None,
        description="Object key of the attached content file, if any.",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                "title": "1984",
                "author": "George Orwell",
                "isbn": "978-0-452-28423-4",
                "genre": "Dystopian Fiction",
                "publishedDate": "1949-06-08",
                "price": 14.99,
                "description": "A dystopian social science fiction novel.",
                "contentLocator": "0f8fad5b-d9cb-469f-a165-70867728950e/content.pdf",
            }
        }
    )

    def to_document(self) -> dict:
        """Serialize for the document store (snake_case keys, JSON-safe values)."""
        document = self.model_dump(mode="json")
        document["price"] = str(self.price)
        return document

    @classmethod
    def from_document(cls, document: dict) -> "Book":
        return cls.model_validate(document)


class FrontEndBook(Book):
    """A book as the single-page front end reads it: the locator is `contentLink`."""

    content_locator: Optional[str] = Field(
        None,
        serialization_alias="contentLink",
        description="Object key of the attached content file, if any.",
    )


class UploadContentResponse(CamelModel):
    """Response model for `POST /records/:id/content`."""

    message: str = Field(description="A message about the operation.")
    content_url: str = Field(
        description="Locator of the stored content.",
        json_schema_extra={"example": "0f8fad5b-d9cb-469f-a165-70867728950e/content.pdf"},
    )


class DeleteContentResponse(BaseModel):
    """Response model for `DELETE /records/:id/content`."""

    message: str


class ContentUrlResponse(CamelModel):
    """Response model for `GET /records/:id/content/url`."""

    download_url: str = Field(description="Presigned URL the content can be fetched from.")
    expires_in: str = Field(
        description="How long the URL stays valid.",
        json_schema_extra={"example": "1 hour"},
    )
