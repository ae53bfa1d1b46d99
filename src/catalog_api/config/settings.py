# src/catalog_api/config/settings.py
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOCAL_MODES = ("local-dev", "aws-mock")
VALID_DEPLOYMENT_MODES = ("local-dev", "aws-mock", "aws-prod")
VALID_DATABASE_BACKENDS = ("sqlite", "mongodb")

# moto server started by `moto_server -p 5000` in local modes
MOCK_AWS_ENDPOINT_URL = "http://localhost:5000"


class Settings(BaseSettings):
    """
    Single source of truth for all application settings.

    Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file (if exists)
    3. Default values in this class (lowest priority)

    Usage:
        from catalog_api.config.settings import get_settings
        settings = get_settings()
        bucket_name = settings.s3_bucket_name
    """

    # Application Settings
    app_name: str = Field(
        default="book-catalog-api",
        description="Application name"
    )

    # Deployment Mode
    deployment_mode: str = Field(
        default="local-dev",
        description="Deployment mode: local-dev, aws-mock, or aws-prod"
    )

    # AWS Core Settings
    aws_region: str = Field(
        default="us-east-1",
        alias="AWS_DEFAULT_REGION"
    )

    aws_access_key_id: Optional[str] = Field(
        default=None,
        alias="AWS_ACCESS_KEY_ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default=None,
        alias="AWS_SECRET_ACCESS_KEY"
    )

    aws_endpoint_url: Optional[str] = Field(
        default=None,
        alias="AWS_ENDPOINT_URL"
    )

    # S3 Configuration
    s3_bucket_name: str = Field(
        default="book-content",
        description="S3 bucket holding book content files"
    )

    content_url_expiry_seconds: int = Field(
        default=3600,
        gt=0,
        description="Lifetime of presigned content download URLs"
    )

    # Database Configuration
    database_backend: str = Field(
        default="sqlite",
        description="Document store backend: sqlite or mongodb"
    )

    database_path: str = Field(
        default="catalog.db",
        description="SQLite file used by the sqlite backend"
    )

    mongodb_uri: Optional[str] = Field(
        default=None,
        alias="MONGODB_URI",
        description="Connection string used by the mongodb backend"
    )

    mongodb_database: str = Field(
        default="BookListDB",
        description="MongoDB database name"
    )

    # HTTP
    cors_allow_origins: List[str] = Field(
        default=[
            "http://localhost:4200",
            "http://localhost:4201",
            "http://localhost:80",
            "http://frontend",
        ],
        description="Origins allowed to call the API from a browser"
    )

    # Behavior
    seed_on_startup: bool = Field(
        default=True,
        description="Insert sample books when the catalog is empty"
    )

    cascade_content_delete: bool = Field(
        default=False,
        description="Delete a book's content file together with the book"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    @field_validator("deployment_mode", mode="before")
    @classmethod
    def normalize_deployment_mode(cls, v):
        """Normalize deployment mode values for backwards compatibility."""
        if v:
            mode_mapping = {
                "local-mock": "local-dev",
                "cloud": "aws-prod",
            }
            return mode_mapping.get(v, v)
        return v

    @field_validator("deployment_mode")
    @classmethod
    def validate_deployment_mode(cls, v):
        """Validate deployment mode is one of the allowed values."""
        if v not in VALID_DEPLOYMENT_MODES:
            raise ValueError(f"Invalid deployment_mode: {v}. Must be one of {list(VALID_DEPLOYMENT_MODES)}")
        return v

    @field_validator("database_backend")
    @classmethod
    def validate_database_backend(cls, v):
        v = v.lower()
        if v not in VALID_DATABASE_BACKENDS:
            raise ValueError(f"Invalid database_backend: {v}. Must be one of {list(VALID_DATABASE_BACKENDS)}")
        return v

    @model_validator(mode="after")
    def apply_local_mode_defaults(self):
        """Point AWS clients at the moto server with mock credentials in local modes."""
        if self.deployment_mode in LOCAL_MODES:
            if self.aws_endpoint_url is None:
                self.aws_endpoint_url = MOCK_AWS_ENDPOINT_URL
            if self.aws_access_key_id is None:
                self.aws_access_key_id = "mock"
            if self.aws_secret_access_key is None:
                self.aws_secret_access_key = "mock"
        return self

    @property
    def is_local_mode(self) -> bool:
        return self.deployment_mode in LOCAL_MODES

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one Settings instance per process.
    """
    return Settings()
