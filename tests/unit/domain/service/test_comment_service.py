"""Unit tests for CommentService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from agora.domain.error import BusinessRuleViolationError, ForbiddenError, NotFoundError
from agora.domain.repository import CommentRepository, PostRepository
from agora.domain.service import CommentService, NotificationService
from agora.domain.value import CommentId, NotificationType, UserId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_top_level_comment_bumps_post_count(self, unit_env):
        """Commenting on a post should increment its comment count."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        comment = await comment_service.create_comment(
            post.id, UserId("alice"), "First!"
        )

        # Assert
        assert comment.parent_comment_id is None
        assert (await post_repo.find_by_id(post.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_reply_notifies_parent_author(self, unit_env):
        """Replying to someone else should send them a reply notification."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        notification_service = await unit_env.get(NotificationService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        parent = await comment_service.create_comment(post.id, UserId("alice"), "Hi")

        # Act
        reply = await comment_service.create_comment(
            post.id, UserId("bob"), "Hello", parent_id=parent.id
        )

        # Assert
        assert reply.parent_comment_id == parent.id
        notifications = await notification_service.list_for_user(UserId("alice"))
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.REPLY

    @pytest.mark.asyncio
    async def test_self_reply_sends_no_notification(self, unit_env):
        """Replying to your own comment should not notify you."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        notification_service = await unit_env.get(NotificationService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        parent = await comment_service.create_comment(post.id, UserId("alice"), "Hi")

        # Act
        await comment_service.create_comment(
            post.id, UserId("alice"), "Also", parent_id=parent.id
        )

        # Assert
        assert await notification_service.list_for_user(UserId("alice")) == []

    @pytest.mark.asyncio
    async def test_unknown_parent_is_rejected(self, unit_env):
        """A reply to a missing comment should be a rule violation."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            await comment_service.create_comment(
                post.id, UserId("bob"), "Reply", parent_id=CommentId(uuid4())
            )
        assert exc_info.value.field == "parentCommentId"

    @pytest.mark.asyncio
    async def test_parent_on_other_post_is_rejected(self, unit_env):
        """A reply must stay on the parent's post."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        other = await post_repo.save(make_post())
        parent = await comment_service.create_comment(other.id, UserId("alice"), "Hi")

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="does not belong"):
            await comment_service.create_comment(
                post.id, UserId("bob"), "Reply", parent_id=parent.id
            )


class TestListComments:
    """Tests for cursor pagination of a comment level."""

    @pytest.mark.asyncio
    async def test_pages_follow_cursor_oldest_first(self, unit_env):
        """Walking the cursor should visit every sibling once, oldest first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = make_post().id
        start = datetime(2024, 1, 1)
        comments = [
            await comment_repo.save(
                make_comment(post_id, created_at=start + timedelta(minutes=i))
            )
            for i in range(3)
        ]

        # Act
        first, _, cursor, total = await comment_service.list_comments(post_id, limit=2)
        second, _, last_cursor, _ = await comment_service.list_comments(
            post_id, limit=2, cursor=cursor
        )

        # Assert
        assert total == 3
        assert [c.id for c in first] == [comments[0].id, comments[1].id]
        assert cursor == comments[1].id
        assert [c.id for c in second] == [comments[2].id]
        assert last_cursor is None

    @pytest.mark.asyncio
    async def test_reply_counts_cover_page(self, unit_env):
        """Each listed comment should come with its direct reply count."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = make_post().id
        parent = await comment_repo.save(make_comment(post_id))
        for _ in range(3):
            await comment_repo.save(make_comment(post_id, parent_comment_id=parent.id))

        # Act
        page, reply_counts, _, total = await comment_service.list_comments(post_id)

        # Assert
        assert [c.id for c in page] == [parent.id]
        assert total == 1
        assert reply_counts[parent.id] == 3


class TestModifyComment:
    """Tests for edit, delete and moderator removal."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """The author should be able to replace the text."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(
            make_comment(make_post().id, author_id=UserId("alice"))
        )

        # Act
        edited = await comment_service.edit_comment(
            comment.id, UserId("alice"), "Edited"
        )

        # Assert
        assert edited.content == "Edited"
        assert (await comment_repo.find_by_id(comment.id)).content == "Edited"

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        """Someone else's comment should be off limits."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(
            make_comment(make_post().id, author_id=UserId("alice"))
        )

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await comment_service.edit_comment(comment.id, UserId("bob"), "Mine now")

    @pytest.mark.asyncio
    async def test_moderator_can_delete_and_comment_disappears(self, unit_env):
        """The moderator account may delete any comment; it is then gone."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = make_post().id
        comment = await comment_repo.save(
            make_comment(post_id, author_id=UserId("alice"))
        )

        # Act
        await comment_service.delete_comment(comment.id, UserId("mod"))

        # Assert
        assert (await comment_repo.find_by_id(comment.id)).is_deleted
        assert await comment_repo.find_children(post_id) == []
        with pytest.raises(NotFoundError):
            await comment_service.edit_comment(comment.id, UserId("mod"), "Back")

    @pytest.mark.asyncio
    async def test_remove_unknown_comment_returns_none(self, unit_env):
        """Moderator removal of a missing comment should be a no-op."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act
        removed = await comment_service.remove_comment(CommentId(uuid4()))

        # Assert
        assert removed is None
