import logging
from typing import Optional, Union

from .mongo_adapter import MongoAdapter
from .nosql_adapter import NoSQLAdapter

logger = logging.getLogger(__name__)

DocumentAdapter = Union[NoSQLAdapter, MongoAdapter]


def get_document_adapter(
    backend: str = "sqlite",
    db_path: str = "catalog.db",
    mongodb_uri: Optional[str] = None,
    mongodb_database: Optional[str] = None,
) -> DocumentAdapter:
    """Build the document store adapter for the configured backend."""
    if backend == "mongodb":
        logger.info("Using MongoDB document store")
        return MongoAdapter(mongodb_uri, database_name=mongodb_database)
    if backend == "sqlite":
        logger.info(f"Using SQLite document store at {db_path}")
        return NoSQLAdapter(db_path)
    raise ValueError(f"Unknown database backend: {backend}")


def init_db(adapter: DocumentAdapter) -> None:
    """Create the collections and indexes the catalog needs."""
    adapter.init_collections()
