from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Path, UploadFile, status
from fastapi.responses import StreamingResponse

from catalog_api.dependencies import get_content_service
from catalog_api.schemas import ContentUrlResponse, DeleteContentResponse, UploadContentResponse
from catalog_api.services import ContentService
from catalog_api.services.content_service import describe_expiry

router = APIRouter()

CONTENT_NOT_FOUND_RESPONSE = {
    status.HTTP_404_NOT_FOUND: {"description": "The book does not exist or has no content."},
}


@router.post(
    "/{book_id}/content",
    response_model=UploadContentResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "No file was uploaded."},
        status.HTTP_404_NOT_FOUND: {"description": "No book exists for the given `book_id`."},
    },
)
def upload_content(
    book_id: str = Path(..., description="Identifier of the book"),
    file: Optional[UploadFile] = File(None, description="The content file, e.g. a PDF or EPUB"),
    content: ContentService = Depends(get_content_service),
) -> UploadContentResponse:
    """
    Attach a content file to a book, replacing any previous one.

    The file is stored as `{book_id}/content{extension}` and its content type
    is derived from the extension.
    """
    if file is None or not file.filename or file.size == 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded"
        )

    locator = content.attach_content(
        book_id,
        filename=file.filename,
        content=file.file,
        content_type=file.content_type,
    )
    return UploadContentResponse(message="Content uploaded successfully", content_url=locator)


@router.get(
    "/{book_id}/content",
    response_class=StreamingResponse,
    responses={
        **CONTENT_NOT_FOUND_RESPONSE,
        status.HTTP_200_OK: {"description": "The content file as a binary stream."},
    },
)
def download_content(
    book_id: str = Path(..., description="Identifier of the book"),
    content: ContentService = Depends(get_content_service),
):
    """Download the content file of a book."""
    blob = content.fetch_content(book_id)
    headers = {"Content-Disposition": f'attachment; filename="{blob.filename}"'}
    if blob.content_length is not None:
        headers["Content-Length"] = str(blob.content_length)
    return StreamingResponse(
        blob.iter_chunks(),
        media_type=blob.content_type,
        headers=headers,
    )


@router.delete(
    "/{book_id}/content",
    response_model=DeleteContentResponse,
    responses=CONTENT_NOT_FOUND_RESPONSE,
)
def delete_content(
    book_id: str = Path(..., description="Identifier of the book"),
    content: ContentService = Depends(get_content_service),
) -> DeleteContentResponse:
    """Delete the content file of a book and detach it."""
    content.remove_content(book_id)
    return DeleteContentResponse(message="Content deleted successfully")


@router.get(
    "/{book_id}/content/url",
    response_model=ContentUrlResponse,
    responses=CONTENT_NOT_FOUND_RESPONSE,
)
def get_content_url(
    book_id: str = Path(..., description="Identifier of the book"),
    content: ContentService = Depends(get_content_service),
) -> ContentUrlResponse:
    """Get a time-limited URL the content file can be downloaded from directly."""
    url, expires_in_seconds = content.get_content_url(book_id)
    return ContentUrlResponse(download_url=url, expires_in=describe_expiry(expires_in_seconds))
