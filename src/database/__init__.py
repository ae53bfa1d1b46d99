"""
Document store layer: JSON documents in SQLite or MongoDB behind one interface.
"""

from .local import DocumentAdapter, get_document_adapter, init_db
from .mongo_adapter import MongoAdapter
from .nosql_adapter import NoSQLAdapter

__all__ = [
    'DocumentAdapter', 'get_document_adapter', 'init_db',
    'MongoAdapter', 'NoSQLAdapter',
]
