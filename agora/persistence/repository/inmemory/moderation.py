"""In-memory moderation repository."""

from agora.domain.model.moderation import ModerationAction
from agora.domain.repository.moderation import ModerationRepository
from agora.domain.value import ModerationKind


class InMemoryModerationRepository(ModerationRepository):
    """In-memory implementation of ModerationRepository."""

    def __init__(self) -> None:
        self._actions: list[ModerationAction] = []

    async def save(self, action: ModerationAction) -> ModerationAction:
        """Append an action to the log."""
        self._actions.append(action)
        return action

    async def find_by_target(
        self, kind: ModerationKind, target_id: str
    ) -> list[ModerationAction]:
        """Find actions of one kind against a target."""
        actions = [
            a for a in self._actions if a.kind == kind and a.target_id == target_id
        ]
        actions.sort(key=lambda a: a.created_at, reverse=True)
        return actions
