"""Vote entity.

Each user holds at most one vote per item (post or comment). Casting the
same vote again removes it; casting the opposite vote switches it.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import UserId, VoteId, VoteTarget, VoteType


class Vote(DomainModel):
    """Vote entity.

    Polymorphic reference to the voted item through target_type/target_id.
    """

    id: VoteId
    user_id: UserId
    target_type: VoteTarget
    target_id: UUID  # PostId or CommentId (both are UUIDs)
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
