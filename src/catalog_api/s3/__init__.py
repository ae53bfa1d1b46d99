"""Thin functions over the S3 API: the "C", "R" and "D" in CRUD for content files."""
