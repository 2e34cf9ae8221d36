"""Repository operations for Attachment metadata."""

from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from libboard.crud.base import CRUDBase
from libboard.models.attachment import Attachment


class CRUDAttachment(CRUDBase[Attachment]):
    """Repository operations for Attachment."""

    def get_by_post(self, db: Session, *, post_id: int) -> List[Attachment]:
        """Get all attachments of a post in upload order."""
        stmt = (
            select(Attachment)
            .where(Attachment.post_id == post_id)
            .order_by(Attachment.id.asc())
        )
        return list(db.scalars(stmt).all())

    def get_for_post(
        self,
        db: Session,
        *,
        post_id: int,
        attachment_id: int
    ) -> Optional[Attachment]:
        """Get an attachment only if it belongs to the given post."""
        stmt = select(Attachment).where(
            Attachment.id == attachment_id,
            Attachment.post_id == post_id
        )
        return db.scalars(stmt).first()


# Singleton instance
crud_attachment = CRUDAttachment(Attachment)
