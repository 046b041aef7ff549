"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from agora.domain.model.comment import Comment
from agora.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def find_children(
        self, post_id: PostId, parent_id: Optional[CommentId] = None
    ) -> List[Comment]:
        """Find the direct children of a parent, oldest first.

        Args:
            post_id: Post the comments belong to
            parent_id: Parent comment, None for top-level comments

        Returns:
            Non-deleted comments
        """
        pass

    @abstractmethod
    async def count_replies(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, int]:
        """Count direct replies for several comments (batch query).

        Args:
            comment_ids: Comments to count replies for

        Returns:
            Mapping of every requested ID to its reply count
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Comment]:
        """Find all comments written by a user, newest first."""
        pass

    @abstractmethod
    async def search(
        self,
        text: str,
        author_id: Optional[UserId] = None,
        since: Optional[datetime] = None,
    ) -> List[Comment]:
        """Find comments whose content contains text, ignoring case."""
        pass

    @abstractmethod
    async def adjust_votes(
        self, comment_id: CommentId, upvotes_delta: int, downvotes_delta: int
    ) -> None:
        """Atomically shift the comment's vote tallies."""
        pass

    @abstractmethod
    async def count_by_author(self) -> Dict[UserId, int]:
        """Count non-deleted items written by every author."""
        pass
