"""Repository operations for Comment."""

from typing import List, Optional
from sqlalchemy import select, and_, func
from sqlalchemy.orm import Session, joinedload

from libboard.crud.base import CRUDBase
from libboard.models.comment import Comment
from libboard.models.post import ContentStatus


class CRUDComment(CRUDBase[Comment]):
    """Repository operations for Comment."""

    def get_with_author(self, db: Session, *, comment_id: int) -> Optional[Comment]:
        """Get a comment by ID in any status."""
        stmt = (
            select(Comment)
            .options(joinedload(Comment.author))
            .where(Comment.id == comment_id)
        )
        return db.scalars(stmt).first()

    def get_active_by_post(self, db: Session, *, post_id: int) -> List[Comment]:
        """Get ACTIVE comments of a post, oldest first."""
        stmt = (
            select(Comment)
            .options(joinedload(Comment.author))
            .where(
                and_(
                    Comment.post_id == post_id,
                    Comment.status == ContentStatus.ACTIVE
                )
            )
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        return list(db.scalars(stmt).all())

    def count_active_by_post(self, db: Session, *, post_id: int) -> int:
        """Get total count of ACTIVE comments for a post."""
        stmt = select(func.count(Comment.id)).where(
            and_(
                Comment.post_id == post_id,
                Comment.status == ContentStatus.ACTIVE
            )
        )
        return db.scalar(stmt) or 0


# Singleton instance
crud_comment = CRUDComment(Comment)
