"""Tests for the comment lifecycle."""

import pytest
from pydantic import ValidationError

from libboard.core.exceptions import AlreadyDeletedException, ForbiddenException, NotFoundException
from libboard.crud import crud_comment
from libboard.database import unit_of_work
from libboard.models.post import ContentStatus
from libboard.schemas.comment import CommentCreate
from libboard.schemas.post import PostCreate
from libboard.services.comment_service import comment_service


@pytest.fixture
def post_id(db, board_service, alice):
    with unit_of_work(db):
        return board_service.create_post(db, PostCreate(title="Topic", content="Body"), [], alice.email)


@pytest.fixture
def comment(db, post_id, bob):
    with unit_of_work(db):
        return comment_service.create_comment(db, post_id, "First!", bob.email)


class TestCreateComment:

    def test_creates_active_comment(self, db, comment, post_id, bob):
        assert comment.post_id == post_id
        assert comment.author_id == bob.id
        assert comment.status == ContentStatus.ACTIVE

    def test_post_must_be_active(self, db, board_service, post_id, alice, bob):
        with unit_of_work(db):
            board_service.delete_post(db, post_id, alice.email)

        with pytest.raises(NotFoundException):
            comment_service.create_comment(db, post_id, "Too late", bob.email)

    def test_unknown_member(self, db, post_id):
        with pytest.raises(NotFoundException):
            comment_service.create_comment(db, post_id, "Hi", "ghost@example.com")

    @pytest.mark.parametrize("content", ["", "x" * 101])
    def test_content_length_validated(self, content):
        with pytest.raises(ValidationError):
            CommentCreate(content=content)

    def test_hundred_characters_allowed(self):
        assert CommentCreate(content="x" * 100).content == "x" * 100


class TestListComments:

    def test_oldest_first_active_only(self, db, post_id, alice, bob):
        with unit_of_work(db):
            first = comment_service.create_comment(db, post_id, "one", bob.email)
            second = comment_service.create_comment(db, post_id, "two", alice.email)
            third = comment_service.create_comment(db, post_id, "three", bob.email)
        with unit_of_work(db):
            comment_service.delete_comment(db, second.id, alice.email)

        comments = comment_service.list_comments(db, post_id)

        assert [c.id for c in comments] == [first.id, third.id]
        assert comment_service.count_comments(db, post_id) == 2

    def test_deleted_post_is_not_found(self, db, board_service, post_id, comment, alice):
        with unit_of_work(db):
            board_service.delete_post(db, post_id, alice.email)

        with pytest.raises(NotFoundException):
            comment_service.list_comments(db, post_id)
        # comments of a deleted post are left as they were
        assert crud_comment.get(db, comment.id).status == ContentStatus.ACTIVE


class TestUpdateComment:

    def test_author_can_update(self, db, comment, bob):
        with unit_of_work(db):
            updated = comment_service.update_comment(db, comment.id, "Edited", bob.email)
        assert updated.content == "Edited"

    def test_non_author_forbidden(self, db, comment, alice):
        with pytest.raises(ForbiddenException):
            comment_service.update_comment(db, comment.id, "Hijack", alice.email)

    def test_missing_comment(self, db, bob):
        with pytest.raises(NotFoundException):
            comment_service.update_comment(db, 999, "x", bob.email)

    def test_deleted_comment(self, db, comment, bob):
        with unit_of_work(db):
            comment_service.delete_comment(db, comment.id, bob.email)

        with pytest.raises(AlreadyDeletedException):
            comment_service.update_comment(db, comment.id, "Back", bob.email)


class TestDeleteComment:

    def test_soft_delete(self, db, comment, bob):
        with unit_of_work(db):
            comment_service.delete_comment(db, comment.id, bob.email)
        assert crud_comment.get(db, comment.id).status == ContentStatus.DELETED

    def test_second_delete_is_not_found(self, db, comment, bob):
        with unit_of_work(db):
            comment_service.delete_comment(db, comment.id, bob.email)

        with pytest.raises(NotFoundException):
            comment_service.delete_comment(db, comment.id, bob.email)

    def test_non_author_forbidden(self, db, comment, alice):
        with pytest.raises(ForbiddenException):
            comment_service.delete_comment(db, comment.id, alice.email)
        assert crud_comment.get(db, comment.id).status == ContentStatus.ACTIVE
