"""Pydantic schemas for Comment."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    """Schema for creating a comment."""
    content: str = Field(..., min_length=1, max_length=100, description="Comment content")


class CommentUpdate(BaseModel):
    """Schema for updating a comment."""
    content: str = Field(..., min_length=1, max_length=100, description="Comment content")


class CommentResponse(BaseModel):
    """Schema for Comment response."""
    id: int
    post_id: int
    author_id: int
    author_name: Optional[str] = None
    content: str
    like_count: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CommentListResponse(BaseModel):
    """Response for listing comments."""
    comments: List[CommentResponse]
    total: int
