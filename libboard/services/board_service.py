"""Service layer for board posts and their attachments."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from fastapi import UploadFile
from sqlalchemy.orm import Session

from libboard.core.exceptions import ForbiddenException, NotFoundException
from libboard.crud import crud_attachment, crud_member, crud_post
from libboard.models.attachment import Attachment
from libboard.models.member import Member
from libboard.models.post import Post
from libboard.schemas.pagination import PageWindow
from libboard.schemas.post import PostCreate, PostUpdate
from libboard.services.attachment_store import AttachmentStore, StoredFile, upload_size
from libboard.services.pagination import compute_page_window, page_offset

logger = logging.getLogger(__name__)

# Storage category for board attachments
BOARD_CATEGORY = "boards"


def _non_empty(uploads: Optional[Iterable[UploadFile]]) -> List[UploadFile]:
    """Drop the blank entries browsers send when no file was chosen."""
    return [
        upload for upload in (uploads or [])
        if upload is not None and upload.filename and upload_size(upload) > 0
    ]


class BoardService:
    """
    Lifecycle of board posts: ACTIVE on create, DELETED on delete, nothing after.

    Methods flush through the repositories but never commit; the caller wraps
    each call in ``unit_of_work`` so an operation persists completely or not
    at all.
    """

    def __init__(self, store: AttachmentStore):
        self.store = store

    # ----- Read -----
    def list_posts(self, db: Session, *, page: int, size: int) -> Tuple[List[Post], PageWindow]:
        """ACTIVE posts of one page, newest first, with the pager window."""
        # Validates page and size before touching the repository
        compute_page_window(page, size, 0)

        posts, total = crud_post.get_active_page(
            db, offset=page_offset(page, size), limit=size, newest_first=True
        )
        return posts, compute_page_window(page, size, total)

    def get_post_detail(self, db: Session, post_id: int) -> Tuple[Post, List[Attachment]]:
        """
        Read a post as a viewer.

        Every successful read counts as exactly one view.
        """
        post = self._get_active_post(db, post_id)
        post.increase_view_count()
        crud_post.save(db, post)
        return post, crud_attachment.get_by_post(db, post_id=post.id)

    def get_post_for_edit(
        self, db: Session, post_id: int, author_email: str
    ) -> Tuple[Post, List[Attachment]]:
        """Read a post for its edit form. Not counted as a view."""
        post = self._get_owned_post(db, post_id, author_email, action="edit")
        return post, crud_attachment.get_by_post(db, post_id=post.id)

    def get_attachment_for_download(self, db: Session, attachment_id: int) -> Tuple[Attachment, Path]:
        """
        Resolve an attachment of an ACTIVE post and count the download.

        Returns:
            (attachment, absolute path of the stored file)
        """
        attachment = crud_attachment.get(db, attachment_id)
        if attachment is None or crud_post.get_active(db, post_id=attachment.post_id) is None:
            raise NotFoundException("File not found.")

        path = self.store.load(attachment.file_path, attachment.stored_filename)
        attachment.increase_download_count()
        crud_attachment.save(db, attachment)
        return attachment, path

    # ----- Write -----
    def create_post(
        self,
        db: Session,
        post_in: PostCreate,
        uploads: Optional[Sequence[UploadFile]],
        author_email: str,
    ) -> int:
        """
        Create a post with its attachments.

        Returns:
            ID of the new post
        """
        files = _non_empty(uploads)
        for upload in files:
            self.store.validate(upload)

        author = self._get_member(db, author_email)

        post = crud_post.save(
            db,
            Post(
                title=post_in.title,
                content=post_in.content,
                category=post_in.category,
                author_id=author.id,
            ),
        )

        stored = self._store_all(files)
        try:
            self._save_attachments(db, post.id, files, stored)
        except Exception:
            self._discard(stored)
            raise

        logger.info(f"Post created: id={post.id}, author={author_email}, attachments={len(stored)}")
        return post.id

    def update_post(
        self,
        db: Session,
        post_id: int,
        author_email: str,
        post_in: PostUpdate,
        uploads: Optional[Sequence[UploadFile]] = None,
        delete_attachment_ids: Optional[Iterable[int]] = None,
    ) -> Post:
        """
        Edit a post's fields, drop selected attachments and add new ones.

        Attachment ids that do not belong to the post are ignored. The physical
        delete of a dropped attachment always runs before its metadata is
        removed, and its failure does not stop the removal.
        """
        post = self._get_owned_post(db, post_id, author_email, action="update")

        files = _non_empty(uploads)
        for upload in files:
            self.store.validate(upload)

        for field, value in post_in.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(post, field, value)

        stored = self._store_all(files)
        try:
            removed = self._remove_attachments(db, post.id, delete_attachment_ids)
            self._save_attachments(db, post.id, files, stored)
            post = crud_post.save(db, post)
        except Exception:
            self._discard(stored)
            raise

        logger.info(
            f"Post updated: id={post.id}, author={author_email}, "
            f"attachments added={len(stored)}, removed={removed}"
        )
        return post

    def delete_post(self, db: Session, post_id: int, author_email: str) -> None:
        """Soft delete. Attachment records and files are kept."""
        post = self._get_owned_post(db, post_id, author_email, action="delete")
        post.mark_deleted()
        crud_post.save(db, post)
        logger.info(f"Post deleted: id={post.id}, author={author_email}")

    # ----- Helpers -----
    def _get_active_post(self, db: Session, post_id: int) -> Post:
        post = crud_post.get_active(db, post_id=post_id)
        if post is None:
            raise NotFoundException("Post not found.")
        return post

    def _get_owned_post(self, db: Session, post_id: int, author_email: str, *, action: str) -> Post:
        post = self._get_active_post(db, post_id)
        if post.author.email != author_email:
            logger.warning(
                f"Forbidden post {action}: post_id={post_id}, "
                f"author={post.author.email}, requested_by={author_email}"
            )
            raise ForbiddenException(f"You do not have permission to {action} this post.")
        return post

    @staticmethod
    def _get_member(db: Session, email: str) -> Member:
        member = crud_member.get_by_email(db, email)
        if member is None:
            raise NotFoundException("Member not found.")
        return member

    def _store_all(self, files: List[UploadFile]) -> List[StoredFile]:
        """Store every upload, removing this call's files again if one fails."""
        stored: List[StoredFile] = []
        try:
            for upload in files:
                stored.append(self.store.store(upload, BOARD_CATEGORY))
        except Exception:
            self._discard(stored)
            raise
        return stored

    def _discard(self, stored: List[StoredFile]) -> None:
        """Remove files written by the current call."""
        for stored_file in stored:
            self.store.delete(stored_file.relative_path, stored_file.stored_name)

    def _remove_attachments(
        self,
        db: Session,
        post_id: int,
        attachment_ids: Optional[Iterable[int]],
    ) -> int:
        """Physical delete first, then the record, for ids owned by the post."""
        removed = 0
        for attachment_id in dict.fromkeys(attachment_ids or []):
            attachment = crud_attachment.get_for_post(db, post_id=post_id, attachment_id=attachment_id)
            if attachment is None:
                continue
            self.store.delete(attachment.file_path, attachment.stored_filename)
            crud_attachment.remove(db, attachment)
            removed += 1
        return removed

    def _save_attachments(
        self,
        db: Session,
        post_id: int,
        files: List[UploadFile],
        stored: List[StoredFile],
    ) -> None:
        for upload, stored_file in zip(files, stored):
            crud_attachment.save(db, self._attachment_for(post_id, upload, stored_file))

    @staticmethod
    def _attachment_for(post_id: int, upload: UploadFile, stored_file: StoredFile) -> Attachment:
        return Attachment(
            post_id=post_id,
            original_filename=upload.filename,
            stored_filename=stored_file.stored_name,
            file_path=stored_file.relative_path,
            file_size=stored_file.size,
            file_extension=stored_file.extension,
            mime_type=stored_file.mime_type,
            download_count=0,
        )
