"""Pydantic schemas package."""

from .pagination import PageWindow
from .post import (
    PostBase,
    PostCreate,
    PostUpdate,
    AttachmentResponse,
    PostResponse,
    PostListResponse,
    PostDetailResponse,
    PostCreatedResponse,
)
from .comment import (
    CommentCreate,
    CommentUpdate,
    CommentResponse,
    CommentListResponse,
)

__all__ = [
    "PageWindow",
    "PostBase",
    "PostCreate",
    "PostUpdate",
    "AttachmentResponse",
    "PostResponse",
    "PostListResponse",
    "PostDetailResponse",
    "PostCreatedResponse",
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    "CommentListResponse",
]
