"""PostgreSQL implementation of Moderation repository."""

from typing import List

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import ModerationAction
from agora.domain.repository import ModerationRepository
from agora.domain.value import ModerationKind
from agora.persistence.mappers import (
    moderation_action_to_dict,
    row_to_moderation_action,
)
from agora.persistence.tables import moderation_actions_table


class PostgresModerationRepository(ModerationRepository):
    """PostgreSQL implementation of ModerationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, action: ModerationAction) -> ModerationAction:
        """Append an action to the log."""
        stmt = moderation_actions_table.insert().values(
            **moderation_action_to_dict(action)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return action

    async def find_by_target(
        self, kind: ModerationKind, target_id: str
    ) -> List[ModerationAction]:
        """Find actions of one kind against a target."""
        stmt = (
            select(moderation_actions_table)
            .where(moderation_actions_table.c.kind == kind.value)
            .where(moderation_actions_table.c.target_id == target_id)
            .order_by(desc(moderation_actions_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_moderation_action(row._asdict()) for row in result.fetchall()]
