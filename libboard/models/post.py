"""Post model for the community board."""

from enum import Enum
from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index, Enum as SQLEnum
from sqlalchemy.orm import relationship
from ..database import Base
from .timestamps import TimestampMixin


class ContentStatus(str, Enum):
    """Soft-delete status shared by posts and comments."""
    ACTIVE = "ACTIVE"
    DELETED = "DELETED"


class PostCategory(str, Enum):
    """Board categories."""
    NOTICE = "NOTICE"
    FREE = "FREE"
    QNA = "QNA"
    REVIEW = "REVIEW"

    @property
    def display_name(self) -> str:
        return CATEGORY_DISPLAY_NAMES[self]


CATEGORY_DISPLAY_NAMES = {
    PostCategory.NOTICE: "공지사항",
    PostCategory.FREE: "자유 게시판",
    PostCategory.QNA: "질문 답변",
    PostCategory.REVIEW: "리뷰",
}


class Post(TimestampMixin, Base):
    """Board post. Never physically removed; deletion flips ``status``."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    author_id = Column(
        Integer,
        ForeignKey("members.id"),
        nullable=False,
        index=True
    )

    # Post Content
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(
        SQLEnum(PostCategory, name="post_category"),
        nullable=False,
        default=PostCategory.FREE,
        index=True
    )

    # Counters
    view_count = Column(Integer, nullable=False, default=0)
    like_count = Column(Integer, nullable=False, default=0)

    # Soft delete
    status = Column(
        SQLEnum(ContentStatus, name="post_status"),
        nullable=False,
        default=ContentStatus.ACTIVE,
        index=True
    )

    # Constraints & Indexes
    __table_args__ = (
        # ACTIVE posts listed newest first
        Index('idx_post_status_created', 'status', 'created_at'),
    )

    # Relationships
    author = relationship("Member", foreign_keys=[author_id])

    @property
    def is_active(self) -> bool:
        return self.status == ContentStatus.ACTIVE

    def increase_view_count(self) -> None:
        self.view_count = (self.view_count or 0) + 1

    def mark_deleted(self) -> None:
        self.status = ContentStatus.DELETED
