"""
SQLAlchemy Models for Library Board
"""

from ..database import Base
from .member import Member
from .post import Post, PostCategory, ContentStatus
from .comment import Comment
from .attachment import Attachment

# Export all models
__all__ = [
    "Base",
    "Member",
    "Post",
    "PostCategory",
    "ContentStatus",
    "Comment",
    "Attachment",
]
