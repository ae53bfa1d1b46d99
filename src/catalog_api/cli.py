# cli.py
import logging

import click

from catalog_api.config.settings import get_settings
from catalog_api.seed import seed_books
from catalog_api.services import BookService
from database import get_document_adapter, init_db

# Configure logging
logger = logging.getLogger(__name__)


def _document_store():
    settings = get_settings()
    return get_document_adapter(
        backend=settings.database_backend,
        db_path=settings.database_path,
        mongodb_uri=settings.mongodb_uri,
        mongodb_database=settings.mongodb_database,
    )


@click.group()
def cli():
    """CLI commands for the Book Catalog API"""
    logging.basicConfig(level=get_settings().log_level.upper())


@cli.command()
def show_config():
    """Show current configuration"""
    settings = get_settings()

    click.echo("Current Configuration:")
    click.echo(f"  Deployment Mode: {settings.deployment_mode}")
    click.echo(f"  AWS Region: {settings.aws_region}")
    click.echo(f"  AWS Endpoint: {settings.aws_endpoint_url}")
    click.echo(f"  S3 Bucket: {settings.s3_bucket_name}")
    click.echo(f"  Database Backend: {settings.database_backend}")
    if settings.database_backend == "sqlite":
        click.echo(f"  Database Path: {settings.database_path}")
    else:
        click.echo(f"  MongoDB Database: {settings.mongodb_database}")
    click.echo(f"  Cascade Content Delete: {settings.cascade_content_delete}")


@cli.command(name="init-db")
def init_db_command():
    """Create the document collections and indexes"""
    init_db(_document_store())
    click.echo("Database initialized")


@cli.command()
def seed():
    """Insert the sample books into an empty catalog"""
    store = _document_store()
    init_db(store)
    inserted = seed_books(BookService(store))
    if inserted:
        click.echo(f"Seeded {inserted} books")
    else:
        click.echo("Catalog already has books, nothing to seed")


@cli.command()
@click.option("--host", default="0.0.0.0", show_default=True, help="Interface to bind")
@click.option("--port", default=8000, show_default=True, type=int, help="Port to listen on")
def serve(host, port):
    """Run the API with uvicorn"""
    import uvicorn

    from catalog_api.main import create_app

    uvicorn.run(create_app(get_settings()), host=host, port=port)


if __name__ == "__main__":
    cli()
