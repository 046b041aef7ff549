"""Moderation domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from agora.domain.model.moderation import ModerationAction
from agora.domain.repository import ModerationRepository
from agora.domain.value import (
    CommentId,
    ModerationActionId,
    ModerationKind,
    NotificationType,
    UserId,
    VoteTarget,
)

from .base import Service
from .comment_service import CommentService
from .notification_service import NotificationService


class ModerationService(Service):
    """Domain service for flags, bans, mutes and comment removal.

    Every action is appended to the moderation log. Targets are opaque
    strings, so actions against content this service cannot resolve are
    still recorded.
    """

    def __init__(
        self,
        moderation_repository: ModerationRepository,
        comment_service: CommentService,
        notification_service: NotificationService,
    ) -> None:
        self.moderation_repository = moderation_repository
        self.comment_service = comment_service
        self.notification_service = notification_service

    async def flag(
        self, target_id: str, target_type: VoteTarget, user_id: UserId, reason: str
    ) -> ModerationAction:
        """Record a user's report against a post or comment."""
        action = self._action(
            ModerationKind.FLAG,
            actor_id=user_id,
            target_id=target_id,
            target_type=target_type,
            reason=reason,
        )
        logfire.info(
            "Content flagged",
            target_id=target_id,
            target_type=target_type.value,
            user_id=user_id,
        )
        return await self.moderation_repository.save(action)

    async def restrict_user(
        self,
        kind: ModerationKind,
        user_id: UserId,
        moderator_id: UserId,
        reason: str,
        expires_at: datetime | None = None,
        is_permanent: bool = False,
    ) -> ModerationAction:
        """Ban or mute a user.

        Args:
            kind: BAN or MUTE
            user_id: User being restricted
            moderator_id: Acting moderator
            reason: Why the user is restricted
            expires_at: When the restriction lapses
            is_permanent: Whether the restriction never lapses

        Raises:
            ValueError: If kind is not a user restriction
        """
        if kind not in (ModerationKind.BAN, ModerationKind.MUTE):
            raise ValueError(f"{kind.value} is not a user restriction")

        action = self._action(
            kind,
            actor_id=moderator_id,
            target_id=user_id,
            reason=reason,
            expires_at=None if is_permanent else expires_at,
            is_permanent=is_permanent,
        )
        logfire.info(
            "User restricted",
            kind=kind.value,
            user_id=user_id,
            moderator_id=moderator_id,
            is_permanent=is_permanent,
        )
        return await self.moderation_repository.save(action)

    async def remove_comment(
        self, comment_id: str, moderator_id: UserId, reason: str | None = None
    ) -> ModerationAction:
        """Remove a comment and let its author know."""
        with logfire.span(
            "moderation_service.remove_comment",
            comment_id=comment_id,
            moderator_id=moderator_id,
        ):
            removed = None
            try:
                known_id = CommentId(UUID(comment_id))
            except ValueError:
                logfire.info("Comment id is not a UUID", comment_id=comment_id)
            else:
                removed = await self.comment_service.remove_comment(known_id)

            if removed is not None:
                await self.notification_service.notify(
                    removed.author_id,
                    NotificationType.MOD,
                    "Your comment was removed by a moderator",
                )

            action = self._action(
                ModerationKind.REMOVE_COMMENT,
                actor_id=moderator_id,
                target_id=comment_id,
                target_type=VoteTarget.COMMENT,
                reason=reason,
            )
            return await self.moderation_repository.save(action)

    @staticmethod
    def _action(kind: ModerationKind, **fields) -> ModerationAction:
        return ModerationAction(
            id=ModerationActionId(uuid4()),
            kind=kind,
            created_at=datetime.now(),
            **fields,
        )
