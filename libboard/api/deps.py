"""FastAPI dependency injection functions for authentication, storage and database access."""

import logging
from functools import lru_cache

from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer

from libboard.config import settings
from libboard.core.security import member_email_from_token
from libboard.database import get_db
from libboard.services.attachment_store import AttachmentStore
from libboard.services.board_service import BoardService

logger = logging.getLogger(__name__)

# OAuth2 Bearer token scheme. Tokens are issued by the member service.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


def get_current_member_email(token: str = Depends(oauth2_scheme)) -> str:
    """
    Dependency to get the acting member's email from the bearer token.

    Args:
        token: JWT token from Authorization header

    Returns:
        str: Member email (``sub`` claim)

    Raises:
        HTTPException: 401 if token is invalid or has no subject
    """
    try:
        return member_email_from_token(token)
    except HTTPException:
        logger.warning("[AUTH] Rejected bearer token")
        raise


@lru_cache
def get_attachment_store() -> AttachmentStore:
    """Attachment store configured from settings, created once per process."""
    return AttachmentStore(
        settings.UPLOAD_DIR,
        max_upload_bytes=settings.MAX_UPLOAD_SIZE,
        allowed_extensions=settings.allowed_extensions,
        verify_signature=settings.VERIFY_FILE_SIGNATURE,
    )


def get_board_service(store: AttachmentStore = Depends(get_attachment_store)) -> BoardService:
    return BoardService(store)


__all__ = [
    "get_db",
    "oauth2_scheme",
    "get_current_member_email",
    "get_attachment_store",
    "get_board_service",
]
