"""Comment model for board posts."""

from sqlalchemy import Column, Integer, String, ForeignKey, Index, Enum as SQLEnum
from sqlalchemy.orm import relationship
from ..database import Base
from .post import ContentStatus
from .timestamps import TimestampMixin


class Comment(TimestampMixin, Base):
    """Comment on a post. Not cascaded when the parent post is soft-deleted."""

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    post_id = Column(
        Integer,
        ForeignKey("posts.id"),
        nullable=False,
        index=True
    )
    author_id = Column(
        Integer,
        ForeignKey("members.id"),
        nullable=False,
        index=True
    )

    content = Column(String(100), nullable=False)
    like_count = Column(Integer, nullable=False, default=0)

    status = Column(
        SQLEnum(ContentStatus, name="comment_status"),
        nullable=False,
        default=ContentStatus.ACTIVE,
        index=True
    )

    __table_args__ = (
        Index('idx_comment_post_status', 'post_id', 'status', 'created_at'),
    )

    # Relationships
    author = relationship("Member", foreign_keys=[author_id])

    @property
    def is_active(self) -> bool:
        return self.status == ContentStatus.ACTIVE

    def mark_deleted(self) -> None:
        self.status = ContentStatus.DELETED
