"""
Catalog service layer

Book records live in the document store; their content files live in S3.
"""

from .book_service import BookService
from .content_service import ContentService

__all__ = ['BookService', 'ContentService']
