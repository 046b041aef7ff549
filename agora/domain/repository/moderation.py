"""Moderation repository interface."""

from abc import ABC, abstractmethod
from typing import List

from agora.domain.model.moderation import ModerationAction
from agora.domain.value import ModerationKind


class ModerationRepository(ABC):
    """Repository for moderation actions (append-only log)."""

    @abstractmethod
    async def save(self, action: ModerationAction) -> ModerationAction:
        """Record a moderation action.

        Args:
            action: The action to record

        Returns:
            The recorded action
        """
        pass

    @abstractmethod
    async def find_by_target(
        self, kind: ModerationKind, target_id: str
    ) -> List[ModerationAction]:
        """Find actions of one kind taken against a target, newest first."""
        pass
