"""Service layer for comments on board posts."""

import logging
from typing import List

from sqlalchemy.orm import Session

from libboard.core.exceptions import AlreadyDeletedException, ForbiddenException, NotFoundException
from libboard.crud import crud_comment, crud_member, crud_post
from libboard.models.comment import Comment
from libboard.models.post import Post, ContentStatus

logger = logging.getLogger(__name__)


class CommentService:
    """
    Comment lifecycle with the same ownership and soft-delete rules as posts.

    Comments stay ACTIVE when their post is deleted; they just stop being
    reachable because listing requires an ACTIVE post.
    """

    def list_comments(self, db: Session, post_id: int) -> List[Comment]:
        """ACTIVE comments of an ACTIVE post, oldest first."""
        self._get_active_post(db, post_id)
        comments = crud_comment.get_active_by_post(db, post_id=post_id)
        logger.info(f"Comments listed: post_id={post_id}, count={len(comments)}")
        return comments

    def count_comments(self, db: Session, post_id: int) -> int:
        return crud_comment.count_active_by_post(db, post_id=post_id)

    def create_comment(self, db: Session, post_id: int, content: str, author_email: str) -> Comment:
        post = self._get_active_post(db, post_id)
        author = crud_member.get_by_email(db, author_email)
        if author is None:
            raise NotFoundException("Member not found.")

        comment = crud_comment.save(
            db,
            Comment(post_id=post.id, author_id=author.id, content=content),
        )
        logger.info(f"Comment created: id={comment.id}, post_id={post_id}, author={author_email}")
        return comment

    def update_comment(self, db: Session, comment_id: int, content: str, author_email: str) -> Comment:
        comment = self._get_owned_comment(db, comment_id, author_email, action="update")
        if comment.status == ContentStatus.DELETED:
            raise AlreadyDeletedException("Deleted comments cannot be edited.")

        comment.content = content
        comment = crud_comment.save(db, comment)
        logger.info(f"Comment updated: id={comment_id}, author={author_email}")
        return comment

    def delete_comment(self, db: Session, comment_id: int, author_email: str) -> None:
        """Soft delete. Deleting twice fails like deleting something that never existed."""
        comment = crud_comment.get_with_author(db, comment_id=comment_id)
        if comment is None or comment.status == ContentStatus.DELETED:
            raise NotFoundException("Comment not found.")
        self._check_owner(comment, author_email, action="delete")

        comment.mark_deleted()
        crud_comment.save(db, comment)
        logger.info(f"Comment deleted: id={comment_id}, author={author_email}")

    @staticmethod
    def _get_active_post(db: Session, post_id: int) -> Post:
        post = crud_post.get_active(db, post_id=post_id)
        if post is None:
            raise NotFoundException("Post not found.")
        return post

    def _get_owned_comment(self, db: Session, comment_id: int, author_email: str, *, action: str) -> Comment:
        comment = crud_comment.get_with_author(db, comment_id=comment_id)
        if comment is None:
            raise NotFoundException("Comment not found.")
        self._check_owner(comment, author_email, action=action)
        return comment

    @staticmethod
    def _check_owner(comment: Comment, author_email: str, *, action: str) -> None:
        if comment.author.email != author_email:
            logger.warning(
                f"Forbidden comment {action}: comment_id={comment.id}, "
                f"author={comment.author.email}, requested_by={author_email}"
            )
            raise ForbiddenException(f"Only the comment author can {action} this comment.")


# Singleton instance
comment_service = CommentService()
