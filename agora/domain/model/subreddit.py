"""Subreddit aggregate root.

A subreddit is a named community that posts are submitted to and users
subscribe to.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import SubredditId, UserId


class Subreddit(DomainModel):
    """Subreddit aggregate root.

    Business rules:
    - Names are 3-21 characters of letters, digits and underscores
    - Names are unique ignoring case (checked by the service, enforced by the store)
    - The creator counts as the first subscriber
    """

    id: SubredditId
    name: str = Field(min_length=3, max_length=21, pattern=r"^[a-zA-Z0-9_]+$")
    description: str = Field(default="", max_length=500)
    creator_id: UserId
    subscriber_count: int = Field(default=1, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
