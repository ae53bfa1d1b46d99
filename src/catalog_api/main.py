from contextlib import asynccontextmanager
from textwrap import dedent
import logging
from typing import Optional

import pydantic
from fastapi import FastAPI
from fastapi.routing import APIRoute
from fastapi.middleware.cors import CORSMiddleware

from catalog_api.adapters.storage import create_s3_client
from catalog_api.config.settings import Settings
from catalog_api.errors import (
    CatalogError,
    handle_broad_exceptions,
    handle_catalog_errors,
    handle_pydantic_validation_errors,
)
from catalog_api.routers.books import frontend_router as frontend_books_router
from catalog_api.routers.books import router as books_router
from catalog_api.routers.content import router as content_router
from catalog_api.routers.health import router as health_router
from catalog_api.seed import seed_books
from catalog_api.services import BookService
from database import DocumentAdapter, get_document_adapter, init_db

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...

# Set up logging
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    document_store: Optional[DocumentAdapter] = None,
    s3_client: Optional["S3Client"] = None,
) -> FastAPI:
    """Create a FastAPI application.

    Storage handles are built from settings unless passed in, and live on
    ``app.state`` for the request dependencies to pick up.
    """
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.seed_on_startup:
            try:
                seed_books(BookService(app.state.document_store))
            except CatalogError as err:
                logger.warning(f"Seeding the catalog failed, starting without sample data: {err.message}")
        yield

    app = FastAPI(
        title="Book Catalog API",
        summary="Manage books and their content files",
        version="v1",
        description=dedent(
            """\
        Books are stored as documents; each book may carry one content file
        (PDF, EPUB, ...) kept in S3.

        | Helpful Links | Notes |
        | --- | --- |
        | [FastAPI Documentation](https://fastapi.tiangolo.com/) | |
        """
        ),
        docs_url="/",  # its easier to find the docs when they live on the base url
        generate_unique_id_function=custom_generate_unique_id,
        lifespan=lifespan,
    )

    # CORS wraps the broad handler so 500 responses carry CORS headers
    app.middleware("http")(handle_broad_exceptions)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if document_store is None:
        document_store = get_document_adapter(
            backend=settings.database_backend,
            db_path=settings.database_path,
            mongodb_uri=settings.mongodb_uri,
            mongodb_database=settings.mongodb_database,
        )
    logger.info("creating db")
    init_db(document_store)

    app.state.settings = settings
    app.state.document_store = document_store
    app.state.s3_client = s3_client or create_s3_client(settings)

    app.include_router(books_router, prefix="/records", tags=["books"])
    app.include_router(content_router, prefix="/records", tags=["content"])
    # path used by the single-page front end
    app.include_router(frontend_books_router, prefix="/api/books", tags=["books"], include_in_schema=False)
    app.include_router(content_router, prefix="/api/books", tags=["content"], include_in_schema=False)
    app.include_router(health_router, tags=["health"])

    app.add_exception_handler(
        exc_class_or_status_code=CatalogError,
        handler=handle_catalog_errors,
    )
    app.add_exception_handler(
        exc_class_or_status_code=pydantic.ValidationError,
        handler=handle_pydantic_validation_errors,
    )

    return app


def custom_generate_unique_id(route: APIRoute):
    """
    Generate prettier `operationId`s in the OpenAPI schema.

    These become the function names in generated client SDKs.
    """
    return f"{route.tags[0]}-{route.name}"


if __name__ == "__main__":
    import uvicorn

    app = create_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
