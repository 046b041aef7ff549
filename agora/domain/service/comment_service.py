"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from agora.domain.error import BusinessRuleViolationError, ForbiddenError, NotFoundError
from agora.domain.model.comment import Comment
from agora.domain.repository import CommentRepository, PostRepository
from agora.domain.value import CommentId, NotificationType, PostId, UserId

from .base import Service
from .notification_service import NotificationService

# Acting user allowed to edit and delete anybody's comments
MODERATOR_ID = UserId("mod")


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository, for comment counts
            notification_service: Notification service, for reply notices
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.notification_service = notification_service

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            BusinessRuleViolationError: If the parent comment is unknown or
                belongs to a different post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=author_id,
            parent_id=str(parent_id) if parent_id else None,
        ):
            parent = None
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error("Parent comment not found", parent_id=str(parent_id))
                    raise BusinessRuleViolationError(
                        "parentCommentId", "Parent comment not found"
                    )
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise BusinessRuleViolationError(
                        "parentCommentId",
                        "Parent comment does not belong to this post",
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_comment_id=parent_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            await self.post_repository.increment_comment_count(post_id)

            if parent and parent.author_id != author_id:
                await self.notification_service.notify(
                    parent.author_id,
                    NotificationType.REPLY,
                    "Someone replied to your comment",
                )

            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def list_comments(
        self,
        post_id: PostId,
        parent_id: CommentId | None = None,
        limit: int = 2,
        cursor: CommentId | None = None,
    ) -> tuple[list[Comment], dict[CommentId, int], CommentId | None, int]:
        """List one page of a post's comments under a parent.

        The cursor is the ID of the last comment of the previous page; an
        unknown cursor starts from the beginning.

        Returns:
            The page, reply counts for each comment on it, the next cursor
            (set only when the page is full) and the total number of siblings
        """
        siblings = await self.comment_repository.find_children(post_id, parent_id)

        start = 0
        if cursor is not None:
            for index, comment in enumerate(siblings):
                if comment.id == cursor:
                    start = index + 1
                    break

        page = siblings[start : start + limit]
        next_cursor = page[-1].id if page and len(page) == limit else None
        reply_counts = await self.comment_repository.count_replies(
            [c.id for c in page]
        )
        return page, reply_counts, next_cursor, len(siblings)

    async def edit_comment(
        self, comment_id: CommentId, user_id: UserId | None, content: str
    ) -> Comment:
        """Replace the text of a comment.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the user is neither the author nor a moderator
        """
        comment = await self._get_modifiable(comment_id, user_id)
        updated = Comment.model_validate(
            comment.model_dump() | {"content": content, "updated_at": datetime.now()}
        )
        return await self.comment_repository.save(updated)

    async def delete_comment(self, comment_id: CommentId, user_id: UserId | None) -> None:
        """Soft-delete a comment.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the user is neither the author nor a moderator
        """
        comment = await self._get_modifiable(comment_id, user_id)
        await self.comment_repository.save(
            comment.model_copy(update={"deleted_at": datetime.now()})
        )
        logfire.info("Comment deleted", comment_id=str(comment_id), user_id=user_id)

    async def remove_comment(self, comment_id: CommentId) -> Comment | None:
        """Soft-delete a comment on a moderator's behalf.

        Returns:
            The removed comment, None if it does not exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            return None
        if not comment.is_deleted:
            comment = await self.comment_repository.save(
                comment.model_copy(update={"deleted_at": datetime.now()})
            )
        return comment

    async def _get_modifiable(
        self, comment_id: CommentId, user_id: UserId | None
    ) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.is_deleted:
            raise NotFoundError("Comment", str(comment_id))
        if user_id != comment.author_id and user_id != MODERATOR_ID:
            logfire.warn(
                "Comment modification forbidden",
                comment_id=str(comment_id),
                user_id=user_id,
            )
            raise ForbiddenError("comment", str(comment_id), user_id)
        return comment
