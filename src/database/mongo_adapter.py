"""
MongoDB adapter for document-based operations.
Provides identical interface to NoSQLAdapter but uses native MongoDB collections.
"""

import logging
from typing import Dict, Any, List, Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure

from .nosql_adapter import COLLECTION_ID_COLUMNS, DOCUMENT_ID_FIELD
from .schemas import DOCUMENT_VALIDATORS

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_NAME = 'BookListDB'


class MongoAdapter:
    """MongoDB adapter for document-based database operations.

    The document ``id`` is stored as Mongo's ``_id`` and mapped back on read,
    so callers see the same documents as with NoSQLAdapter.
    """

    def __init__(
        self,
        connection_string: Optional[str] = None,
        database_name: Optional[str] = None,
        database: Optional[Database] = None,
    ):
        self.connection_string = connection_string
        self.client = None
        if database is not None:
            self.db = database
            return
        if not self.connection_string:
            raise ValueError("MongoDB connection string required. Set MONGODB_URI or pass connection_string")
        self.db = None
        self._connect(database_name)

    def _connect(self, database_name: Optional[str]) -> None:
        """Establish MongoDB connection"""
        try:
            self.client = MongoClient(self.connection_string)
            db_name = database_name or self.connection_string.split('/')[-1].split('?')[0] or DEFAULT_DATABASE_NAME
            self.db = self.client[db_name]

            # Test connection
            self.client.admin.command('ping')
            logger.info(f"Connected to MongoDB database: {db_name}")

        except ConnectionFailure as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    def _collection(self, collection: str):
        if collection not in COLLECTION_ID_COLUMNS:
            raise ValueError(f"Unknown collection: {collection}")
        return self.db[collection]

    def _validate_document(self, collection: str, document: Dict[str, Any]) -> None:
        """Validate document against schema"""
        if collection in DOCUMENT_VALIDATORS:
            try:
                DOCUMENT_VALIDATORS[collection](document)
            except Exception as e:
                logger.error(f"Document validation failed for {collection}: {e}")
                raise ValueError(f"Document validation failed: {e}")

    @staticmethod
    def _to_mongo(document: Dict[str, Any]) -> Dict[str, Any]:
        stored = {k: v for k, v in document.items() if k != DOCUMENT_ID_FIELD}
        stored['_id'] = document[DOCUMENT_ID_FIELD]
        return stored

    @staticmethod
    def _from_mongo(stored: Dict[str, Any]) -> Dict[str, Any]:
        document = {k: v for k, v in stored.items() if k != '_id'}
        document[DOCUMENT_ID_FIELD] = stored['_id']
        return document

    @staticmethod
    def _to_filter(query: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        return {
            ('_id' if key == DOCUMENT_ID_FIELD else key): value
            for key, value in (query or {}).items()
        }

    def init_collections(self) -> None:
        """Initialize MongoDB collections and indexes"""
        books = self._collection('books')
        books.create_index([("genre", ASCENDING)])
        books.create_index([("author", ASCENDING)])
        logger.info("MongoDB collections initialized successfully")

    def create_document(self, collection: str, document: Dict[str, Any]) -> str:
        """Create a new document in the collection"""
        self._validate_document(collection, document)
        try:
            result = self._collection(collection).insert_one(self._to_mongo(document))
            logger.info(f"Created document in {collection} with ID: {result.inserted_id}")
            return result.inserted_id
        except Exception as e:
            logger.error(f"Error creating document in {collection}: {e}")
            raise

    def get_document(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Get a document by ID"""
        try:
            stored = self._collection(collection).find_one({'_id': doc_id})
            return self._from_mongo(stored) if stored else None
        except Exception as e:
            logger.error(f"Error getting document from {collection}: {e}")
            raise

    def update_document(self, collection: str, doc_id: str, document: Dict[str, Any]) -> bool:
        """Replace a document by ID"""
        self._validate_document(collection, document)
        try:
            result = self._collection(collection).replace_one({'_id': doc_id}, self._to_mongo(document))
            success = result.matched_count > 0
            if success:
                logger.info(f"Updated document in {collection} with ID: {doc_id}")
            else:
                logger.warning(f"No document found to update in {collection} with ID: {doc_id}")
            return success
        except Exception as e:
            logger.error(f"Error updating document in {collection}: {e}")
            raise

    def delete_document(self, collection: str, doc_id: str) -> bool:
        """Delete a document by ID"""
        try:
            result = self._collection(collection).delete_one({'_id': doc_id})
            success = result.deleted_count > 0
            if success:
                logger.info(f"Deleted document from {collection} with ID: {doc_id}")
            else:
                logger.warning(f"No document found to delete in {collection} with ID: {doc_id}")
            return success
        except Exception as e:
            logger.error(f"Error deleting document from {collection}: {e}")
            raise

    def query_documents(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Dict[str, Any]]:
        """Query documents with equality filters"""
        try:
            cursor = self._collection(collection).find(self._to_filter(query)).skip(offset)
            if limit is not None:
                cursor = cursor.limit(limit)
            return [self._from_mongo(stored) for stored in cursor]
        except Exception as e:
            logger.error(f"Error querying documents from {collection}: {e}")
            raise

    def count_documents(self, collection: str, query: Optional[Dict[str, Any]] = None) -> int:
        """Count documents matching query"""
        try:
            return self._collection(collection).count_documents(self._to_filter(query))
        except Exception as e:
            logger.error(f"Error counting documents in {collection}: {e}")
            raise

    def ping(self) -> bool:
        self.db.command('ping')
        return True
