"""Book Catalog API: books in a document store, their content files in S3."""
