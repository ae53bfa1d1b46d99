"""Extension to MIME type table shared by content upload and download."""

from pathlib import PurePosixPath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES_BY_EXTENSION = {
    ".pdf": "application/pdf",
    ".txt": "text/plain",
    ".html": "text/html",
    ".epub": "application/epub+zip",
    ".mobi": "application/x-mobipocket-ebook",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".doc": "application/msword",
}


def file_extension(filename: str) -> str:
    """Return the extension of `filename` including the dot, or an empty string.

    A leading dot counts, so ".pdf" has the extension ".pdf". A trailing dot
    gives no extension.
    """
    name = PurePosixPath(filename).name
    _, dot, extension = name.rpartition(".")
    if not dot or not extension:
        return ""
    return f".{extension}"


def content_type_for(filename: str) -> str:
    """Classify a file name or object key by its extension."""
    return CONTENT_TYPES_BY_EXTENSION.get(file_extension(filename).lower(), DEFAULT_CONTENT_TYPE)
