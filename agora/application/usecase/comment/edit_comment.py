"""Edit and delete comment use cases."""

from uuid import UUID

from pydantic import Field

from agora.application.usecase.dto import CommentItem, WireModel
from agora.domain.error import NotFoundError
from agora.domain.service import CommentService
from agora.domain.value import CommentId, UserId


class EditCommentRequest(WireModel):
    """Edit comment request."""

    content: str = Field(min_length=1, max_length=10000)


class EditCommentResponse(WireModel):
    """Edit comment response."""

    comment: CommentItem


class DeleteCommentResponse(WireModel):
    """Delete comment response."""

    success: bool


def _parse_comment_id(raw: str) -> CommentId:
    try:
        return CommentId(UUID(raw))
    except ValueError:
        raise NotFoundError("Comment", raw) from None


class EditCommentUseCase:
    """Use case for changing a comment's text.

    Only the author, or the moderator account, may edit.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, comment_id: str, user_id: str | None, request: EditCommentRequest
    ) -> EditCommentResponse:
        """Execute edit comment flow.

        Args:
            comment_id: Comment UUID string from the path
            user_id: Acting user, from the x-user-id header
            request: New content

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the user may not edit it
        """
        comment = await self.comment_service.edit_comment(
            _parse_comment_id(comment_id),
            UserId(user_id) if user_id else None,
            request.content,
        )
        return EditCommentResponse(comment=CommentItem.model_validate(comment))


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, comment_id: str, user_id: str | None) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the user may not delete it
        """
        await self.comment_service.delete_comment(
            _parse_comment_id(comment_id), UserId(user_id) if user_id else None
        )
        return DeleteCommentResponse(success=True)
