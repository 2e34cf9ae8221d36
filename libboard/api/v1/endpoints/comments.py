"""Comment endpoints."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from libboard.api.deps import get_current_member_email, get_db
from libboard.database import unit_of_work
from libboard.models.comment import Comment
from libboard.schemas.comment import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentUpdate,
)
from libboard.services.comment_service import comment_service

router = APIRouter(
    prefix="/comments",
    tags=["Comments"],
)


def _comment_response(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        post_id=comment.post_id,
        author_id=comment.author_id,
        author_name=comment.author.name if comment.author else None,
        content=comment.content,
        like_count=comment.like_count,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


@router.get(
    "/boards/{post_id}",
    response_model=CommentListResponse,
    status_code=status.HTTP_200_OK,
    summary="List comments of a post",
    description="""
    Get ACTIVE comments of an ACTIVE post, oldest first.

    **Access:** Public
    """,
)
def list_comments(
    post_id: int,
    db: Session = Depends(get_db),
) -> CommentListResponse:
    """List comments of a post."""
    comments = comment_service.list_comments(db, post_id)
    return CommentListResponse(
        comments=[_comment_response(c) for c in comments],
        total=len(comments),
    )


@router.post(
    "/boards/{post_id}",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create comment",
    description="""
    Add a comment (1 to 100 characters) to an ACTIVE post.

    **Access:** Authenticated members
    """,
)
def create_comment(
    post_id: int,
    comment_in: CommentCreate,
    author_email: str = Depends(get_current_member_email),
    db: Session = Depends(get_db),
) -> CommentResponse:
    """Create a comment."""
    with unit_of_work(db):
        comment = comment_service.create_comment(db, post_id, comment_in.content, author_email)
        response = _comment_response(comment)

    return response


@router.put(
    "/{comment_id}",
    response_model=CommentResponse,
    status_code=status.HTTP_200_OK,
    summary="Update comment",
    description="""
    Replace the content of a comment.

    **Access:** Comment author only
    """,
)
def update_comment(
    comment_id: int,
    comment_in: CommentUpdate,
    author_email: str = Depends(get_current_member_email),
    db: Session = Depends(get_db),
) -> CommentResponse:
    """Update a comment."""
    with unit_of_work(db):
        comment = comment_service.update_comment(db, comment_id, comment_in.content, author_email)
        response = _comment_response(comment)

    return response


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete comment",
    description="""
    Soft delete a comment.

    **Access:** Comment author only
    """,
)
def delete_comment(
    comment_id: int,
    author_email: str = Depends(get_current_member_email),
    db: Session = Depends(get_db),
) -> Response:
    """Delete a comment."""
    with unit_of_work(db):
        comment_service.delete_comment(db, comment_id, author_email)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
