"""
NoSQL adapter for document-based operations.
Stores JSON documents in SQLite tables and mirrors the MongoAdapter interface.
"""

import sqlite3
import json
import logging
from typing import Dict, Any, List, Optional
from datetime import date, datetime
from decimal import Decimal
from .schemas import DOCUMENT_VALIDATORS

logger = logging.getLogger(__name__)

# collection name -> primary key column of its backing table
COLLECTION_ID_COLUMNS = {
    'books': 'book_id',
}

DOCUMENT_ID_FIELD = 'id'


class NoSQLAdapter:
    """Adapter for document-based database operations on SQLite"""

    def __init__(self, db_path: str = "catalog.db"):
        self.db_path = db_path

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection with JSON support"""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _table(self, collection: str) -> str:
        if collection not in COLLECTION_ID_COLUMNS:
            raise ValueError(f"Unknown collection: {collection}")
        return f"{collection}_docs"

    def _validate_document(self, collection: str, document: Dict[str, Any]) -> None:
        """Validate document against schema"""
        if collection in DOCUMENT_VALIDATORS:
            try:
                DOCUMENT_VALIDATORS[collection](document)
            except Exception as e:
                logger.error(f"Document validation failed for {collection}: {e}")
                raise ValueError(f"Document validation failed: {e}")

    def _serialize_document(self, document: Dict[str, Any]) -> str:
        """Serialize document to JSON string"""
        def json_serializer(obj):
            if isinstance(obj, (datetime, date)):
                return obj.isoformat()
            if isinstance(obj, Decimal):
                return str(obj)
            raise TypeError(f"Object of type {type(obj)} is not JSON serializable")

        return json.dumps(document, default=json_serializer)

    def _deserialize_document(self, json_str: str) -> Dict[str, Any]:
        """Deserialize JSON string to document"""
        return json.loads(json_str)

    def _build_where(self, collection: str, query: Optional[Dict[str, Any]]):
        where_clauses = []
        params: List[Any] = []
        for key, value in (query or {}).items():
            if key in ('_id', DOCUMENT_ID_FIELD):
                where_clauses.append(f"{COLLECTION_ID_COLUMNS[collection]} = ?")
                params.append(value)
            elif value is None:
                where_clauses.append("json_extract(document, ?) IS NULL")
                params.append(f"$.{key}")
            else:
                where_clauses.append("json_extract(document, ?) = ?")
                params.extend([f"$.{key}", value])
        where = f" WHERE {' AND '.join(where_clauses)}" if where_clauses else ""
        return where, params

    def init_collections(self) -> None:
        """Initialize document collections (tables)"""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            for collection, id_column in COLLECTION_ID_COLUMNS.items():
                cursor.execute(f'''
                    CREATE TABLE IF NOT EXISTS {collection}_docs (
                        {id_column} TEXT PRIMARY KEY,
                        document TEXT NOT NULL,
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                ''')
            self._create_basic_indexes(cursor)
            conn.commit()
            logger.info("NoSQL collections initialized successfully")
        except Exception as e:
            logger.error(f"Error initializing collections: {e}")
            raise
        finally:
            conn.close()

    def _create_basic_indexes(self, cursor: sqlite3.Cursor) -> None:
        """Create basic indexes for document queries"""
        cursor.execute('''
            CREATE INDEX IF NOT EXISTS idx_book_genre
            ON books_docs(json_extract(document, '$.genre'))
        ''')
        cursor.execute('''
            CREATE INDEX IF NOT EXISTS idx_book_author
            ON books_docs(json_extract(document, '$.author'))
        ''')

    def create_document(self, collection: str, document: Dict[str, Any]) -> str:
        """Create a new document in the collection"""
        table = self._table(collection)
        self._validate_document(collection, document)
        doc_id = document[DOCUMENT_ID_FIELD]
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"INSERT INTO {table} ({COLLECTION_ID_COLUMNS[collection]}, document) VALUES (?, ?)",
                (doc_id, self._serialize_document(document)),
            )
            conn.commit()
            logger.info(f"Created document in {collection} with ID: {doc_id}")
            return doc_id
        except Exception as e:
            logger.error(f"Error creating document in {collection}: {e}")
            raise
        finally:
            conn.close()

    def get_document(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Get a document by ID"""
        table = self._table(collection)
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT document FROM {table} WHERE {COLLECTION_ID_COLUMNS[collection]} = ?",
                (doc_id,),
            )
            row = cursor.fetchone()
            if row:
                return self._deserialize_document(row['document'])
            return None
        except Exception as e:
            logger.error(f"Error getting document from {collection}: {e}")
            raise
        finally:
            conn.close()

    def update_document(self, collection: str, doc_id: str, document: Dict[str, Any]) -> bool:
        """Replace a document by ID"""
        table = self._table(collection)
        self._validate_document(collection, document)
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f'''
                UPDATE {table}
                SET document = ?, updated_at = CURRENT_TIMESTAMP
                WHERE {COLLECTION_ID_COLUMNS[collection]} = ?
            ''', (self._serialize_document(document), doc_id))
            success = cursor.rowcount > 0
            conn.commit()

            if success:
                logger.info(f"Updated document in {collection} with ID: {doc_id}")
            else:
                logger.warning(f"No document found to update in {collection} with ID: {doc_id}")
            return success
        except Exception as e:
            logger.error(f"Error updating document in {collection}: {e}")
            raise
        finally:
            conn.close()

    def delete_document(self, collection: str, doc_id: str) -> bool:
        """Delete a document by ID"""
        table = self._table(collection)
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"DELETE FROM {table} WHERE {COLLECTION_ID_COLUMNS[collection]} = ?",
                (doc_id,),
            )
            success = cursor.rowcount > 0
            conn.commit()

            if success:
                logger.info(f"Deleted document from {collection} with ID: {doc_id}")
            else:
                logger.warning(f"No document found to delete in {collection} with ID: {doc_id}")
            return success
        except Exception as e:
            logger.error(f"Error deleting document from {collection}: {e}")
            raise
        finally:
            conn.close()

    def query_documents(
        self,
        collection: str,
        query: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Dict[str, Any]]:
        """Query documents with equality filters, oldest first"""
        table = self._table(collection)
        where, params = self._build_where(collection, query)
        sql = f"SELECT document FROM {table}{where} ORDER BY created_at, rowid"
        if limit is not None:
            sql += " LIMIT ? OFFSET ?"
            params.extend([limit, offset])

        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(sql, params)
            return [self._deserialize_document(row['document']) for row in cursor.fetchall()]
        except Exception as e:
            logger.error(f"Error querying documents from {collection}: {e}")
            raise
        finally:
            conn.close()

    def count_documents(self, collection: str, query: Optional[Dict[str, Any]] = None) -> int:
        """Count documents matching query"""
        table = self._table(collection)
        where, params = self._build_where(collection, query)
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f"SELECT COUNT(*) as count FROM {table}{where}", params)
            return cursor.fetchone()['count']
        except Exception as e:
            logger.error(f"Error counting documents in {collection}: {e}")
            raise
        finally:
            conn.close()

    def ping(self) -> bool:
        """Check the database file can be opened and queried"""
        conn = self._get_connection()
        try:
            conn.execute("SELECT 1")
            return True
        finally:
            conn.close()
