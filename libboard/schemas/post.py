"""Pydantic schemas for Post (Community Board)."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from libboard.models.post import PostCategory, ContentStatus
from libboard.schemas.pagination import PageWindow


class PostBase(BaseModel):
    """Base schema for Post."""
    title: str = Field(..., min_length=1, max_length=200, description="Post title")
    content: str = Field(..., min_length=1, description="Post body")
    category: PostCategory = Field(PostCategory.FREE, description="Board category")


class PostCreate(PostBase):
    """Schema for creating a new post."""
    pass


class PostUpdate(BaseModel):
    """Schema for updating a post. Only provided fields are applied."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[PostCategory] = None


class AttachmentResponse(BaseModel):
    """Attachment metadata exposed to clients (never the storage location)."""
    id: int
    post_id: int
    original_filename: str
    file_size: int
    formatted_file_size: str
    file_extension: str
    file_type: str
    mime_type: str
    download_count: int
    created_at: datetime

    class Config:
        from_attributes = True


class PostResponse(BaseModel):
    """Schema for Post in listings."""
    id: int
    title: str
    category: PostCategory
    category_display_name: str
    author_id: int
    author_name: Optional[str] = None  # Will be populated from member relationship
    status: ContentStatus
    view_count: int
    like_count: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PostListResponse(BaseModel):
    """Response for listing posts."""
    posts: List[PostResponse]
    window: PageWindow


class PostDetailResponse(PostResponse):
    """Detailed post response with body and attachments."""
    content: str
    attachments: List[AttachmentResponse] = []
    comment_count: int = 0


class PostCreatedResponse(BaseModel):
    id: int
    message: str
