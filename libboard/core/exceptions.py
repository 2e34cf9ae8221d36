"""Custom exceptions for the Library Board application.

Every domain error is an ``HTTPException`` so FastAPI can answer it directly,
and carries a stable ``code`` so callers can tell the failures apart without
parsing the human readable ``detail``.
"""

from typing import Optional

from fastapi import HTTPException, status


class BoardException(HTTPException):
    """Base exception for the board subsystem."""

    code = "BOARD_ERROR"
    status_code_default = status.HTTP_400_BAD_REQUEST
    detail_default = "Request could not be processed."

    def __init__(self, detail: Optional[str] = None):
        super().__init__(
            status_code=self.status_code_default,
            detail=detail or self.detail_default,
        )


# ============================================
# VALIDATION ERRORS (reported before any write)
# ============================================

class ValidationException(BoardException):
    """Bad input from the caller."""

    code = "VALIDATION_ERROR"
    detail_default = "Invalid request."


class EmptyUploadException(ValidationException):
    """Raised when the upload has no file or zero bytes."""

    code = "EMPTY_UPLOAD"
    detail_default = "The uploaded file is empty."


class OversizedUploadException(ValidationException):
    """Raised when the upload exceeds the configured ceiling."""

    code = "OVERSIZED_UPLOAD"
    status_code_default = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    detail_default = "The uploaded file is too large."


class MissingExtensionException(ValidationException):
    """Raised when the filename has no extension."""

    code = "MISSING_EXTENSION"
    detail_default = "The uploaded file has no extension."


class DisallowedExtensionException(ValidationException):
    """Raised when the extension is not in the allow-list."""

    code = "DISALLOWED_EXTENSION"
    detail_default = "This file type is not allowed."


class ContentMismatchException(ValidationException):
    """Raised when the leading bytes do not match the extension."""

    code = "CONTENT_MISMATCH"
    detail_default = "The file content does not match its extension."


class InvalidPageSizeException(ValidationException):
    code = "INVALID_PAGE_SIZE"
    detail_default = "Page size must be greater than zero."


class InvalidPageNumberException(ValidationException):
    code = "INVALID_PAGE_NUMBER"
    detail_default = "Page number must be 1 or greater."


# ============================================
# LOOKUP / STATE / PERMISSION ERRORS
# ============================================

class NotFoundException(BoardException):
    """
    Referenced post, comment, attachment or member is absent or not ACTIVE.

    Deleted content is reported exactly like content that never existed.
    """

    code = "NOT_FOUND"
    status_code_default = status.HTTP_404_NOT_FOUND
    detail_default = "The requested resource was not found."


class AlreadyDeletedException(BoardException):
    """Raised when modifying soft-deleted content."""

    code = "ALREADY_DELETED"
    status_code_default = status.HTTP_409_CONFLICT
    detail_default = "Deleted content cannot be modified."


class ForbiddenException(BoardException):
    """Raised when a non-owner tries to mutate content."""

    code = "FORBIDDEN"
    status_code_default = status.HTTP_403_FORBIDDEN
    detail_default = "You do not have permission to modify this content."


# ============================================
# SYSTEM ERRORS (detail never leaks internals)
# ============================================

class StorageIOException(BoardException):
    """Filesystem failure while storing or loading an attachment."""

    code = "STORAGE_IO_ERROR"
    status_code_default = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail_default = "The file could not be saved. Please try again."


class SystemFailureException(BoardException):
    code = "SYSTEM_ERROR"
    status_code_default = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail_default = "A temporary error occurred. Please try again later."


__all__ = [
    "BoardException",
    "ValidationException",
    "EmptyUploadException",
    "OversizedUploadException",
    "MissingExtensionException",
    "DisallowedExtensionException",
    "ContentMismatchException",
    "InvalidPageSizeException",
    "InvalidPageNumberException",
    "NotFoundException",
    "AlreadyDeletedException",
    "ForbiddenException",
    "StorageIOException",
    "SystemFailureException",
]
