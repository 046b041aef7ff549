"""In-memory comment repository."""

from collections import Counter
from datetime import datetime
from typing import Optional, Sequence

from agora.domain.model.comment import Comment
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentId, PostId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def find_children(
        self, post_id: PostId, parent_id: Optional[CommentId] = None
    ) -> list[Comment]:
        """Find direct children of a parent, oldest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id
            and c.parent_comment_id == parent_id
            and not c.is_deleted
        ]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def count_replies(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count direct replies for several comments."""
        counts = {cid: 0 for cid in comment_ids}
        for comment in self._comments.values():
            parent = comment.parent_comment_id
            if parent in counts and not comment.is_deleted:
                counts[parent] += 1
        return counts

    async def find_by_author(self, author_id: UserId) -> list[Comment]:
        """Find comments by a specific author."""
        comments = [
            c
            for c in self._comments.values()
            if c.author_id == author_id and not c.is_deleted
        ]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def search(
        self,
        text: str,
        author_id: Optional[UserId] = None,
        since: Optional[datetime] = None,
    ) -> list[Comment]:
        """Find comments whose content contains text."""
        needle = text.lower()
        comments = [
            c
            for c in self._comments.values()
            if not c.is_deleted and needle in c.content.lower()
        ]
        if author_id is not None:
            comments = [c for c in comments if c.author_id == author_id]
        if since is not None:
            comments = [c for c in comments if c.created_at >= since]
        return comments

    async def adjust_votes(
        self, comment_id: CommentId, upvotes_delta: int, downvotes_delta: int
    ) -> None:
        """Shift vote tallies."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={
                    "upvotes": max(0, comment.upvotes + upvotes_delta),
                    "downvotes": max(0, comment.downvotes + downvotes_delta),
                }
            )

    async def count_by_author(self) -> dict[UserId, int]:
        """Count comments per author."""
        return dict(
            Counter(c.author_id for c in self._comments.values() if not c.is_deleted)
        )
