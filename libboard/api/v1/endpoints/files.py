"""Attachment download endpoint."""

from urllib.parse import quote

from fastapi import APIRouter, Depends, status
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from libboard.api.deps import get_board_service, get_db
from libboard.database import unit_of_work
from libboard.services.board_service import BoardService

router = APIRouter(
    prefix="/files",
    tags=["Files"],
)


def content_disposition(filename: str) -> str:
    """
    ``attachment`` header value carrying the original filename.

    Every non-unreserved character is percent-encoded, so names with spaces,
    quotes or non-ASCII characters survive every browser.
    """
    encoded = quote(filename, safe="")
    return f"attachment; filename=\"{encoded}\"; filename*=UTF-8''{encoded}"


@router.get(
    "/download/{attachment_id}",
    status_code=status.HTTP_200_OK,
    summary="Download attachment",
    description="""
    Stream an attachment of an ACTIVE post under its original filename.
    Each successful call counts one download.

    **Access:** Public
    """,
)
def download_file(
    attachment_id: int,
    service: BoardService = Depends(get_board_service),
    db: Session = Depends(get_db),
) -> FileResponse:
    """Download an attachment."""
    with unit_of_work(db):
        attachment, path = service.get_attachment_for_download(db, attachment_id)
        filename = attachment.original_filename

    return FileResponse(
        path,
        media_type="application/octet-stream",
        headers={"Content-Disposition": content_disposition(filename)},
    )
