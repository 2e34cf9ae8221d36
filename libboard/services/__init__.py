"""Services package for Library Board application."""

from .attachment_store import AttachmentStore, StoredFile
from .board_service import BoardService
from .comment_service import comment_service, CommentService
from .pagination import compute_page_window, PAGE_GROUP_SIZE

__all__ = [
    "AttachmentStore",
    "StoredFile",
    "BoardService",
    "comment_service",
    "CommentService",
    "compute_page_window",
    "PAGE_GROUP_SIZE",
]
