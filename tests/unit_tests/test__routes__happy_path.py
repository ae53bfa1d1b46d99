from fastapi import status
from fastapi.testclient import TestClient

from catalog_api.adapters.storage import BlobStore
from tests.consts import (
    TEST_BUCKET_NAME,
    TEST_EPUB_CONTENT,
    TEST_EPUB_NAME,
    TEST_PDF_CONTENT,
    TEST_PDF_CONTENT_TYPE,
    TEST_PDF_NAME,
    TEST_TXT_CONTENT,
    TEST_TXT_CONTENT_TYPE,
    TEST_TXT_NAME,
)


def create_book(client: TestClient, payload: dict) -> dict:
    response = client.post("/records", json=payload)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def upload(client: TestClient, book_id: str, filename: str, content: bytes, content_type: str):
    return client.post(
        f"/records/{book_id}/content",
        files={"file": (filename, content, content_type)},
    )


def test_list_books_empty(client: TestClient):
    response = client.get("/records")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_create_and_get_book(client: TestClient):
    response = client.post(
        "/records",
        json={"title": "1984", "author": "Orwell", "isbn": "X", "genre": "Fiction"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    book = response.json()
    assert book["id"]
    assert book["title"] == "1984"
    assert book["contentLocator"] is None
    assert response.headers["location"] == f"/records/{book['id']}"

    response = client.get(f"/records/{book['id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == book


def test_create_book_ignores_client_id_and_locator(client: TestClient, sample_payloads):
    payload = {**sample_payloads[0], "id": "mine", "contentLocator": "elsewhere/content.pdf"}

    book = create_book(client, payload)

    assert book["id"] != "mine"
    assert book["contentLocator"] is None


def test_create_book_optional_fields(client: TestClient, sample_payloads):
    book = create_book(client, sample_payloads[1])

    assert book["publishedDate"] == "1932-01-01"
    assert book["price"] == 10.5
    assert book["description"].startswith("A futuristic")


def test_list_books(client: TestClient, sample_payloads):
    created = [create_book(client, payload) for payload in sample_payloads]

    response = client.get("/records")

    assert response.status_code == status.HTTP_200_OK
    assert [book["id"] for book in response.json()] == [book["id"] for book in created]


def test_update_book(client: TestClient, sample_payloads):
    book = create_book(client, sample_payloads[0])

    response = client.put(
        f"/records/{book['id']}",
        json={**sample_payloads[0], "id": book["id"], "title": "Animal Farm"},
    )

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert response.content == b""
    assert client.get(f"/records/{book['id']}").json()["title"] == "Animal Farm"


def test_update_book_keeps_content(client: TestClient, sample_payloads):
    book = create_book(client, sample_payloads[0])
    upload(client, book["id"], TEST_PDF_NAME, TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)

    client.put(f"/records/{book['id']}", json={**sample_payloads[0], "id": book["id"]})

    assert client.get(f"/records/{book['id']}").json()["contentLocator"] == f"{book['id']}/content.pdf"


def test_delete_book(client: TestClient, sample_payloads):
    book = create_book(client, sample_payloads[0])

    response = client.delete(f"/records/{book['id']}")

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/records/{book['id']}").status_code == status.HTTP_404_NOT_FOUND


def test_delete_book_leaves_content_by_default(client: TestClient, sample_payloads, s3_client):
    book = create_book(client, sample_payloads[0])
    upload(client, book["id"], TEST_PDF_NAME, TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)

    client.delete(f"/records/{book['id']}")

    response = s3_client.list_objects_v2(Bucket=TEST_BUCKET_NAME, Prefix=f"{book['id']}/")
    assert response["KeyCount"] == 1


def test_upload_and_download_pdf(client: TestClient, sample_payloads):
    book = create_book(client, sample_payloads[0])

    response = upload(client, book["id"], TEST_PDF_NAME, TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "message": "Content uploaded successfully",
        "contentUrl": f"{book['id']}/content.pdf",
    }
    assert client.get(f"/records/{book['id']}").json()["contentLocator"] == f"{book['id']}/content.pdf"

    response = client.get(f"/records/{book['id']}/content")

    assert response.status_code == status.HTTP_200_OK
    assert response.content == TEST_PDF_CONTENT
    assert response.headers["content-type"] == TEST_PDF_CONTENT_TYPE
    assert response.headers["content-disposition"] == 'attachment; filename="content.pdf"'
    assert response.headers["content-length"] == str(len(TEST_PDF_CONTENT))


def test_download_text_content(client: TestClient, sample_payloads):
    book = create_book(client, sample_payloads[0])
    upload(client, book["id"], TEST_TXT_NAME, TEST_TXT_CONTENT, TEST_TXT_CONTENT_TYPE)

    response = client.get(f"/records/{book['id']}/content")

    assert response.content == TEST_TXT_CONTENT
    assert response.headers["content-type"].startswith(TEST_TXT_CONTENT_TYPE)


def test_content_type_follows_extension(client: TestClient, sample_payloads):
    book = create_book(client, sample_payloads[0])
    upload(client, book["id"], TEST_PDF_NAME, TEST_PDF_CONTENT, "application/octet-stream")

    response = client.get(f"/records/{book['id']}/content")

    assert response.headers["content-type"] == TEST_PDF_CONTENT_TYPE


def test_replace_content(client: TestClient, sample_payloads, s3_client):
    book = create_book(client, sample_payloads[0])
    upload(client, book["id"], TEST_PDF_NAME, TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)

    response = upload(client, book["id"], TEST_EPUB_NAME, TEST_EPUB_CONTENT, "application/epub+zip")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["contentUrl"] == f"{book['id']}/content.epub"

    listing = s3_client.list_objects_v2(Bucket=TEST_BUCKET_NAME, Prefix=f"{book['id']}/")
    assert listing["KeyCount"] == 1
    assert listing["Contents"][0]["Key"] == f"{book['id']}/content.epub"

    response = client.get(f"/records/{book['id']}/content")
    assert response.content == TEST_EPUB_CONTENT
    assert response.headers["content-type"] == "application/epub+zip"


def test_delete_content(client: TestClient, sample_payloads, s3_client):
    book = create_book(client, sample_payloads[0])
    upload(client, book["id"], TEST_PDF_NAME, TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)

    response = client.delete(f"/records/{book['id']}/content")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Content deleted successfully"}
    assert client.get(f"/records/{book['id']}").json()["contentLocator"] is None
    listing = s3_client.list_objects_v2(Bucket=TEST_BUCKET_NAME, Prefix=f"{book['id']}/")
    assert listing["KeyCount"] == 0


def test_get_content_url(client: TestClient, sample_payloads):
    book = create_book(client, sample_payloads[0])
    upload(client, book["id"], TEST_PDF_NAME, TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)

    response = client.get(f"/records/{book['id']}/content/url")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert f"{book['id']}/content.pdf" in body["downloadUrl"]
    assert body["expiresIn"] == "1 hour"


def test_front_end_path(client: TestClient, sample_payloads):
    response = client.post("/api/books", json=sample_payloads[0])

    assert response.status_code == status.HTTP_201_CREATED
    book = response.json()
    assert response.headers["location"] == f"/api/books/{book['id']}"
    assert client.get(f"/records/{book['id']}").json()["title"] == book["title"]
    assert [b["id"] for b in client.get("/api/books").json()] == [book["id"]]


def test_front_end_book_shape(client: TestClient, sample_payloads):
    book = client.post("/api/books", json=sample_payloads[2]).json()
    assert book["contentLink"] is None
    assert "contentLocator" not in book

    client.post(
        f"/api/books/{book['id']}/content",
        files={"file": (TEST_PDF_NAME, TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)},
    )

    book = client.get(f"/api/books/{book['id']}").json()
    assert book["contentLink"] == f"{book['id']}/content.pdf"
    assert book["price"] == 9.99
    assert book["publishedDate"] == "1965-08-01"
    assert "contentLocator" not in book

    listed = client.get("/api/books").json()
    assert listed[0]["contentLink"] == book["contentLink"]

    record = client.get(f"/records/{book['id']}").json()
    assert record["contentLocator"] == book["contentLink"]
    assert record["price"] == 9.99


def test_upload_dot_named_file(client: TestClient, sample_payloads):
    book = create_book(client, sample_payloads[0])

    response = upload(client, book["id"], ".pdf", TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)

    assert response.json()["contentUrl"] == f"{book['id']}/content.pdf"
    download = client.get(f"/records/{book['id']}/content")
    assert download.headers["content-type"] == TEST_PDF_CONTENT_TYPE


def test_error_responses_carry_cors_headers(client: TestClient, sample_payloads, monkeypatch):
    book = create_book(client, sample_payloads[0])
    upload(client, book["id"], TEST_PDF_NAME, TEST_PDF_CONTENT, TEST_PDF_CONTENT_TYPE)

    def fail(self, locator):
        raise RuntimeError("signer unavailable")

    monkeypatch.setattr(BlobStore, "resolve_url", fail)

    response = client.get(
        f"/records/{book['id']}/content/url",
        headers={"Origin": "http://localhost:4200"},
    )

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "Internal server error: signer unavailable"}
    assert response.headers["access-control-allow-origin"] == "http://localhost:4200"


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["status"] == "ok"
    assert body["ready"] is True
    assert body["deployment_mode"] == "aws-prod"
    assert body["components"] == {"api": "ready", "database": "ready", "storage": "ready"}
