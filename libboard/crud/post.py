"""Repository operations for Post."""

from typing import List, Optional, Tuple
from sqlalchemy import select, func, desc
from sqlalchemy.orm import Session, joinedload

from libboard.crud.base import CRUDBase
from libboard.models.post import Post, ContentStatus


class CRUDPost(CRUDBase[Post]):
    """Repository operations for Post."""

    def get_active(self, db: Session, *, post_id: int) -> Optional[Post]:
        """Get an ACTIVE post by ID together with its author."""
        stmt = (
            select(Post)
            .options(joinedload(Post.author))
            .where(Post.id == post_id, Post.status == ContentStatus.ACTIVE)
        )
        return db.scalars(stmt).first()

    def get_active_page(
        self,
        db: Session,
        *,
        offset: int = 0,
        limit: int = 10,
        newest_first: bool = True
    ) -> Tuple[List[Post], int]:
        """Get one page of ACTIVE posts and the total count of ACTIVE posts.

        The count is taken first; a page that starts past the end is answered
        without querying, so OFFSET and LIMIT never exceed the row count.
        """
        total = self.count_active(db)
        if offset >= total:
            return [], total

        stmt = (
            select(Post)
            .options(joinedload(Post.author))
            .where(Post.status == ContentStatus.ACTIVE)
        )
        if newest_first:
            stmt = stmt.order_by(desc(Post.created_at), desc(Post.id))
        else:
            stmt = stmt.order_by(Post.created_at.asc(), Post.id.asc())

        stmt = stmt.offset(offset).limit(min(limit, total - offset))
        items = list(db.scalars(stmt).all())
        return items, total

    def count_active(self, db: Session) -> int:
        """Get total count of ACTIVE posts."""
        stmt = select(func.count(Post.id)).where(Post.status == ContentStatus.ACTIVE)
        return db.scalar(stmt) or 0


# Singleton instance
crud_post = CRUDPost(Post)
