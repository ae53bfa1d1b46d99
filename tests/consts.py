"""Constants shared by the test suite."""

TEST_BUCKET_NAME = "test-book-content"
TEST_REGION = "us-east-1"

TEST_PDF_NAME = "report.pdf"
TEST_PDF_CONTENT = b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\ntrailer\n<</Root 1 0 R>>\n%%EOF"
TEST_PDF_CONTENT_TYPE = "application/pdf"

TEST_TXT_NAME = "notes.txt"
TEST_TXT_CONTENT = b"Hello, world!"
TEST_TXT_CONTENT_TYPE = "text/plain"

TEST_EPUB_NAME = "novel.epub"
TEST_EPUB_CONTENT = b"PK\x03\x04mimetypeapplication/epub+zip"
