"""Moderation action entity.

One record type covers every moderator or community action taken against
content or users: flags raised by users, bans, mutes and comment removals.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import ModerationActionId, ModerationKind, UserId, VoteTarget


class ModerationAction(DomainModel):
    """Moderation action.

    - FLAG: actor_id is the reporting user, target is a post or comment
    - BAN / MUTE: actor_id is the moderator, target_id is the user
    - REMOVE_COMMENT: actor_id is the moderator, target_id is the comment
    """

    id: ModerationActionId
    kind: ModerationKind
    actor_id: UserId
    target_id: str
    target_type: Optional[VoteTarget] = None
    reason: Optional[str] = Field(default=None, max_length=500)
    expires_at: Optional[datetime] = None
    is_permanent: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
