from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from ..database import Base


class Member(Base):
    __tablename__ = "members"

    # Primary Key
    id = Column(Integer, primary_key=True, index=True)

    # Account identifier (matched against the authenticated principal)
    email = Column(String(100), unique=True, nullable=False, index=True)
    name = Column(String(50), nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Member(id={self.id}, email='{self.email}')>"
