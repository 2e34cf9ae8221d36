"""Filesystem storage for board attachments with security checks"""
import logging
import mimetypes
import os
import shutil
import uuid
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, NamedTuple, Optional

from fastapi import UploadFile

from libboard.core.exceptions import (
    ContentMismatchException,
    DisallowedExtensionException,
    EmptyUploadException,
    MissingExtensionException,
    NotFoundException,
    OversizedUploadException,
    StorageIOException,
)

# Setup logging
logger = logging.getLogger(__name__)

# ============================================
# FILE TYPE DEFINITIONS WITH SIGNATURE VALIDATION
# ============================================

# Magic bytes signatures for file type validation
MAGIC_BYTES = {
    # PDF: %PDF
    "pdf": [b"%PDF"],
    # JPEG: FFD8FF
    "jpeg": [b"\xff\xd8\xff"],
    # PNG: 89504E47
    "png": [b"\x89PNG\r\n\x1a\n"],
    # GIF: GIF87a or GIF89a
    "gif": [b"GIF87a", b"GIF89a"],
}

# Extension to magic type mapping
EXTENSION_TO_TYPE = {
    "pdf": "pdf",
    "jpg": "jpeg",
    "jpeg": "jpeg",
    "png": "png",
    "gif": "gif",
}

DEFAULT_MIME_TYPE = "application/octet-stream"


class StoredFile(NamedTuple):
    """Where and how an upload ended up on disk."""
    stored_name: str
    relative_path: str
    size: int
    extension: str
    mime_type: str


def validate_magic_bytes(file_content: bytes, expected_type: str) -> bool:
    """
    Validate file content by checking magic bytes (file signature).

    Args:
        file_content: First few bytes of the file
        expected_type: Expected file type (pdf, jpeg, png, gif)

    Returns:
        True if magic bytes match expected type
    """
    if expected_type not in MAGIC_BYTES:
        return False

    return any(file_content.startswith(signature) for signature in MAGIC_BYTES[expected_type])


def _base_name(filename: str) -> str:
    """Last path component of a client-supplied filename (either separator)."""
    return filename.replace("\\", "/").rsplit("/", 1)[-1]


def extension_of(filename: Optional[str], *, lower: bool = True) -> str:
    """
    Extension after the last dot of the file's base name, without the dot.

    Returns "" when there is no dot or the name ends with one.
    """
    if not filename or not filename.strip():
        return ""
    name = _base_name(filename.strip())
    dot_index = name.rfind(".")
    if dot_index == -1 or dot_index == len(name) - 1:
        return ""
    extension = name[dot_index + 1:]
    return extension.lower() if lower else extension


def upload_size(upload: Optional[UploadFile]) -> int:
    """Size in bytes of the upload stream, leaving it rewound."""
    if upload is None or upload.file is None:
        return 0
    stream = upload.file
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


class AttachmentStore:
    """
    Validates, persists, loads and purges uploaded files under one root.

    Files live at ``<root>/<category>/<yyyy-MM-dd>/<uuid><.ext>``. The
    user-supplied filename is never used to address storage.
    """

    def __init__(
        self,
        root: str,
        *,
        max_upload_bytes: int,
        allowed_extensions: Iterable[str],
        verify_signature: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.root = Path(root).expanduser().resolve()
        self.max_upload_bytes = max_upload_bytes
        self.allowed_extensions = {ext.lstrip(".").lower() for ext in allowed_extensions}
        self.verify_signature = verify_signature
        self._clock = clock

        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create upload directory {self.root}: {e}")
            raise

        logger.info(
            f"Attachment store ready: root={self.root}, "
            f"max={self.max_upload_bytes} bytes ({self.max_upload_bytes // 1024 // 1024} MB), "
            f"allowed={sorted(self.allowed_extensions)}"
        )

    # ============================================
    # VALIDATION
    # ============================================

    def validate(self, upload: Optional[UploadFile]) -> int:
        """
        Check an upload against the store's rules without touching the disk.

        Returns:
            Size of the upload in bytes

        Raises:
            EmptyUploadException: no file or zero bytes
            OversizedUploadException: larger than max_upload_bytes
            MissingExtensionException: filename has no extension
            DisallowedExtensionException: extension not in the allow-list
            ContentMismatchException: signature check enabled and bytes do not match
        """
        size = upload_size(upload)
        if size == 0:
            raise EmptyUploadException()

        if size > self.max_upload_bytes:
            raise OversizedUploadException(
                f"The file is too large (max {self.max_upload_bytes / 1024 / 1024:.1f} MB, "
                f"got {size / 1024 / 1024:.2f} MB)."
            )

        extension = extension_of(upload.filename)
        if not extension:
            raise MissingExtensionException()

        if extension not in self.allowed_extensions:
            raise DisallowedExtensionException(
                f"File type '.{extension}' is not allowed. "
                f"Allowed: {', '.join(sorted(self.allowed_extensions))}"
            )

        if self.verify_signature:
            expected_type = EXTENSION_TO_TYPE.get(extension)
            if expected_type:
                head = upload.file.read(16)
                upload.file.seek(0)
                if not validate_magic_bytes(head, expected_type):
                    logger.warning(
                        f"Magic bytes mismatch - filename: {upload.filename!r}, "
                        f"expected_type: {expected_type}"
                    )
                    raise ContentMismatchException()

        logger.debug(f"File validated: {upload.filename!r} ({size} bytes, .{extension})")
        return size

    # ============================================
    # STORAGE
    # ============================================

    def store(self, upload: UploadFile, category: str) -> StoredFile:
        """
        Validate an upload and write it below ``<category>/<today>/``.

        Returns:
            StoredFile with the generated name and the relative directory

        Raises:
            ValueError: category is not a single plain path segment
            StorageIOException: the file could not be written
        """
        if not category or category in (".", "..") or "/" in category or "\\" in category:
            raise ValueError(f"Invalid storage category: {category!r}")

        size = self.validate(upload)

        original_extension = extension_of(upload.filename, lower=False)
        stored_name = f"{uuid.uuid4()}.{original_extension}"
        relative_path = f"{category}/{self._clock().strftime('%Y-%m-%d')}/"

        target_dir = self.root / relative_path
        target = target_dir / stored_name

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            upload.file.seek(0)
            with open(target, "wb") as out:
                shutil.copyfileobj(upload.file, out)
        except OSError as e:
            logger.error(f"Failed to save file {upload.filename!r} to {target}: {e}")
            try:
                target.unlink(missing_ok=True)
            except OSError:
                logger.error(f"Failed to clean up partial file {target}")
            raise StorageIOException() from e

        logger.info(
            f"File saved: {stored_name} (original: {upload.filename!r}, size: {size} bytes, path: {target})"
        )

        return StoredFile(
            stored_name=stored_name,
            relative_path=relative_path,
            size=size,
            extension=original_extension.lower(),
            mime_type=self.mime_type_of(upload),
        )

    def load(self, relative_path: str, stored_name: str) -> Path:
        """
        Resolve a stored file for reading.

        Returns:
            Absolute path of an existing, readable regular file inside the root

        Raises:
            NotFoundException: outside the root, missing, or unreadable
        """
        resolved = self._resolve(relative_path, stored_name)
        if resolved is None:
            raise NotFoundException("File not found.")

        if not resolved.is_file() or not os.access(resolved, os.R_OK):
            logger.error(f"File missing or unreadable: {stored_name} (path: {resolved})")
            raise NotFoundException("File not found.")

        logger.info(f"File loaded: {stored_name} (path: {resolved})")
        return resolved

    def delete(self, relative_path: str, stored_name: str) -> bool:
        """
        Best-effort physical delete. Never raises.

        Returns:
            True if a file was removed, False otherwise
        """
        resolved = self._resolve(relative_path, stored_name)
        if resolved is None:
            return False

        try:
            resolved.unlink()
        except FileNotFoundError:
            logger.info(f"File already absent: {resolved}")
            return False
        except OSError as e:
            logger.error(f"Error deleting file {resolved}: {e}")
            return False

        logger.info(f"File deleted: {resolved}")
        return True

    # ============================================
    # HELPERS
    # ============================================

    @staticmethod
    def mime_type_of(upload: UploadFile) -> str:
        """Declared content type, else a guess from the filename."""
        if upload.content_type:
            return upload.content_type
        guessed, _ = mimetypes.guess_type(_base_name(upload.filename or ""))
        return guessed or DEFAULT_MIME_TYPE

    def _resolve(self, relative_path: str, stored_name: str) -> Optional[Path]:
        """Absolute normalized location, or None when it escapes the root."""
        resolved = (self.root / (relative_path or "") / (stored_name or "")).resolve()
        if resolved == self.root or not resolved.is_relative_to(self.root):
            logger.warning(
                f"Path traversal blocked: {relative_path!r} + {stored_name!r} -> {resolved}"
            )
            return None
        return resolved
