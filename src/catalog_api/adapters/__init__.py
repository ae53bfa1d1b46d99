"""
Adapter layer for the Book Catalog API.

Wraps the S3 content bucket behind a small blob store interface.
"""
