"""List comments use case."""

from uuid import UUID

from pydantic import Field

from agora.application.usecase.dto import CommentItem, WireModel
from agora.domain.service import CommentService
from agora.domain.value import CommentId, PostId

# Replies shown inline under a comment before "more replies" is offered
INLINE_REPLIES = 2


class ListCommentsRequest(WireModel):
    """List comments request."""

    post_id: UUID
    parent_id: UUID | None = None
    limit: int = Field(default=2, ge=1, le=100)
    cursor: UUID | None = None


class ThreadedCommentItem(CommentItem):
    """Comment with reply metadata."""

    reply_count: int
    has_more_replies: bool


class ListCommentsResponse(WireModel):
    """List comments response."""

    comments: list[ThreadedCommentItem]
    next_cursor: UUID | None
    total: int


class ListCommentsUseCase:
    """Use case for paging through one level of a comment thread."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Args:
            request: Post, parent (None for top level), page size and cursor

        Returns:
            One page of comments, oldest first
        """
        page, reply_counts, next_cursor, total = (
            await self.comment_service.list_comments(
                post_id=PostId(request.post_id),
                parent_id=CommentId(request.parent_id) if request.parent_id else None,
                limit=request.limit,
                cursor=CommentId(request.cursor) if request.cursor else None,
            )
        )

        comments = []
        for comment in page:
            replies = reply_counts.get(comment.id, 0)
            comments.append(
                ThreadedCommentItem(
                    **CommentItem.model_validate(comment).model_dump(),
                    reply_count=replies,
                    has_more_replies=replies > INLINE_REPLIES,
                )
            )

        return ListCommentsResponse(
            comments=comments, next_cursor=next_cursor, total=total
        )
