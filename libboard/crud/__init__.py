"""Repository package - exports singleton instances for all models."""

from .base import CRUDBase
from .member import crud_member
from .post import crud_post
from .comment import crud_comment
from .attachment import crud_attachment


__all__ = [
    # Base
    "CRUDBase",
    # CRUD instances
    "crud_member",
    "crud_post",
    "crud_comment",
    "crud_attachment",
]
