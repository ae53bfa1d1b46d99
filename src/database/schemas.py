"""
JSON schemas for NoSQL document validation.
This module defines schemas for validating documents in the NoSQL collections.
"""

from typing import Dict, Any

import jsonschema


BOOK_JSON_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "title": {"type": "string", "minLength": 1},
        "author": {"type": "string", "minLength": 1},
        "isbn": {"type": "string", "minLength": 1},
        "genre": {"type": "string", "minLength": 1},
        "published_date": {"type": ["string", "null"], "format": "date"},
        "price": {"type": ["string", "number"]},
        "description": {"type": "string"},
        "content_locator": {"type": ["string", "null"], "minLength": 1}
    },
    "required": ["id", "title", "author", "isbn", "genre"],
    "additionalProperties": False
}


def validate_book_document(document: Dict[str, Any]) -> None:
    """Validate a book document against the schema"""
    jsonschema.validate(document, BOOK_JSON_SCHEMA)


# Validators by collection name
DOCUMENT_VALIDATORS = {
    'books': validate_book_document,
}
