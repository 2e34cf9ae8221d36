"""Attachment metadata for files stored on disk."""

from sqlalchemy import Column, Integer, String, BigInteger, ForeignKey
from ..database import Base
from .timestamps import TimestampMixin


class Attachment(TimestampMixin, Base):
    """
    Metadata of one uploaded file, owned by exactly one post.

    The post side has no collection attribute; attachments of a post are
    looked up by ``post_id`` through ``crud_attachment``.
    """

    __tablename__ = "attachments"

    id = Column(Integer, primary_key=True, index=True)

    post_id = Column(
        Integer,
        ForeignKey("posts.id"),
        nullable=False,
        index=True
    )

    # File info
    original_filename = Column(String(255), nullable=False)  # untrusted, display only
    stored_filename = Column(String(255), nullable=False)    # uuid + extension
    file_path = Column(String(500), nullable=False)          # <category>/<yyyy-MM-dd>/
    file_size = Column(BigInteger, nullable=False)
    file_extension = Column(String(10), nullable=False)      # lower-case, no dot
    mime_type = Column(String(100), nullable=False)

    download_count = Column(Integer, nullable=False, default=0)

    def increase_download_count(self) -> None:
        self.download_count = (self.download_count or 0) + 1

    def __repr__(self):
        return f"<Attachment(id={self.id}, original_filename='{self.original_filename}')>"
