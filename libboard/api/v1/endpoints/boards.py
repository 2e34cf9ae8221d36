"""Community board endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from libboard.api.deps import get_board_service, get_current_member_email, get_db
from libboard.config import settings
from libboard.database import unit_of_work
from libboard.models.attachment import Attachment
from libboard.models.post import Post, PostCategory
from libboard.schemas.post import (
    AttachmentResponse,
    PostCreate,
    PostCreatedResponse,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
    PostUpdate,
)
from libboard.services.board_service import BoardService
from libboard.services.comment_service import comment_service
from libboard.utils.formatting import file_type_of, format_file_size

router = APIRouter(
    prefix="/boards",
    tags=["Community Board"],
)


def _attachment_response(attachment: Attachment) -> AttachmentResponse:
    return AttachmentResponse(
        id=attachment.id,
        post_id=attachment.post_id,
        original_filename=attachment.original_filename,
        file_size=attachment.file_size,
        formatted_file_size=format_file_size(attachment.file_size),
        file_extension=attachment.file_extension,
        file_type=file_type_of(attachment.file_extension),
        mime_type=attachment.mime_type,
        download_count=attachment.download_count,
        created_at=attachment.created_at,
    )


def _post_response(post: Post) -> PostResponse:
    """Listing row with author name and category display name."""
    return PostResponse(
        id=post.id,
        title=post.title,
        category=post.category,
        category_display_name=post.category.display_name,
        author_id=post.author_id,
        author_name=post.author.name if post.author else None,
        status=post.status,
        view_count=post.view_count,
        like_count=post.like_count,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def _post_detail_response(
    db: Session,
    post: Post,
    attachments: List[Attachment],
) -> PostDetailResponse:
    return PostDetailResponse(
        **_post_response(post).model_dump(),
        content=post.content,
        attachments=[_attachment_response(a) for a in attachments],
        comment_count=comment_service.count_comments(db, post.id),
    )


@router.get(
    "",
    response_model=PostListResponse,
    status_code=status.HTTP_200_OK,
    summary="List posts",
    description="""
    Get one page of ACTIVE posts, newest first, with the page-group window
    (10 page buttons per group).

    **Access:** Public
    """,
)
def list_posts(
    page: int = Query(1, description="Page number, 1-based"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, description="Posts per page"),
    service: BoardService = Depends(get_board_service),
    db: Session = Depends(get_db),
) -> PostListResponse:
    """List ACTIVE posts."""
    posts, window = service.list_posts(db, page=page, size=size)
    return PostListResponse(
        posts=[_post_response(post) for post in posts],
        window=window,
    )


@router.post(
    "",
    response_model=PostCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new post",
    description="""
    Create a post with optional attachments (multipart form).

    Every file is validated before anything is written; if any step fails,
    no post, no attachment record and no stored file remains.

    **Access:** Authenticated members
    """,
)
def create_post(
    title: str = Form(..., min_length=1, max_length=200),
    content: str = Form(..., min_length=1),
    category: PostCategory = Form(PostCategory.FREE),
    files: Optional[List[UploadFile]] = File(None),
    author_email: str = Depends(get_current_member_email),
    service: BoardService = Depends(get_board_service),
    db: Session = Depends(get_db),
) -> PostCreatedResponse:
    """Create a new post."""
    post_in = PostCreate(title=title, content=content, category=category)
    with unit_of_work(db):
        post_id = service.create_post(db, post_in, files, author_email)

    return PostCreatedResponse(id=post_id, message="Post created.")


@router.get(
    "/{post_id}",
    response_model=PostDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Get post detail",
    description="""
    Get an ACTIVE post with its attachments. Each call counts one view.

    **Access:** Public
    """,
)
def get_post_detail(
    post_id: int,
    service: BoardService = Depends(get_board_service),
    db: Session = Depends(get_db),
) -> PostDetailResponse:
    """Get post detail."""
    with unit_of_work(db):
        post, attachments = service.get_post_detail(db, post_id)
        response = _post_detail_response(db, post, attachments)

    return response


@router.get(
    "/{post_id}/edit",
    response_model=PostDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Get post for editing",
    description="""
    Get a post for its edit form. Not counted as a view.

    **Access:** Post author only
    """,
)
def get_post_for_edit(
    post_id: int,
    author_email: str = Depends(get_current_member_email),
    service: BoardService = Depends(get_board_service),
    db: Session = Depends(get_db),
) -> PostDetailResponse:
    """Get post for its edit form."""
    post, attachments = service.get_post_for_edit(db, post_id, author_email)
    return _post_detail_response(db, post, attachments)


@router.put(
    "/{post_id}",
    response_model=PostDetailResponse,
    status_code=status.HTTP_200_OK,
    summary="Update post",
    description="""
    Update title, content or category, drop attachments listed in
    `delete_attachment_ids` and add new `files`. Omitted fields keep their
    current value.

    **Access:** Post author only
    """,
)
def update_post(
    post_id: int,
    title: Optional[str] = Form(None, min_length=1, max_length=200),
    content: Optional[str] = Form(None, min_length=1),
    category: Optional[PostCategory] = Form(None),
    delete_attachment_ids: Optional[List[int]] = Form(None),
    files: Optional[List[UploadFile]] = File(None),
    author_email: str = Depends(get_current_member_email),
    service: BoardService = Depends(get_board_service),
    db: Session = Depends(get_db),
) -> PostDetailResponse:
    """Update a post."""
    post_in = PostUpdate(title=title, content=content, category=category)
    with unit_of_work(db):
        post = service.update_post(
            db,
            post_id,
            author_email,
            post_in,
            uploads=files,
            delete_attachment_ids=delete_attachment_ids,
        )
        _, attachments = service.get_post_for_edit(db, post.id, author_email)
        response = _post_detail_response(db, post, attachments)

    return response


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete post",
    description="""
    Soft delete a post. Its attachments stay on disk.

    **Access:** Post author only
    """,
)
def delete_post(
    post_id: int,
    author_email: str = Depends(get_current_member_email),
    service: BoardService = Depends(get_board_service),
    db: Session = Depends(get_db),
) -> dict:
    """Delete a post."""
    with unit_of_work(db):
        service.delete_post(db, post_id, author_email)

    return {"message": "Post deleted."}
