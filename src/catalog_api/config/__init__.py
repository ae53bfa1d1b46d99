"""
Configuration management for the Book Catalog API.

Contains Pydantic settings that work across local-dev, aws-mock, and aws-prod
deployment modes.
"""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
