"""Repository operations for `Member` model."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from libboard.crud.base import CRUDBase
from libboard.models.member import Member


class CRUDMember(CRUDBase[Member]):
    def get_by_email(self, db: Session, email: Optional[str]) -> Optional[Member]:
        if not email:
            return None
        return self.get_by_field(db, "email", email)

    def create_member(self, db: Session, *, email: str, name: str) -> Member:
        return self.save(db, Member(email=email, name=name))


crud_member = CRUDMember(Member)
