"""Create comment use case."""

from uuid import UUID

from pydantic import Field

from agora.application.usecase.dto import CommentItem, WireModel
from agora.domain.service import CommentService
from agora.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(WireModel):
    """Create comment request."""

    content: str = Field(min_length=1, max_length=10000)
    post_id: UUID
    parent_comment_id: UUID | None = None
    author_id: str = Field(default="anonymous", min_length=1)


class CreateCommentResponse(WireModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            BusinessRuleViolationError: If the parent comment is invalid
        """
        comment = await self.comment_service.create_comment(
            post_id=PostId(request.post_id),
            author_id=UserId(request.author_id),
            content=request.content,
            parent_id=(
                CommentId(request.parent_comment_id)
                if request.parent_comment_id
                else None
            ),
        )
        return CreateCommentResponse(comment=CommentItem.model_validate(comment))
