"""User aggregate root.

Users are provisioned by an external identity provider; Agora only keeps
the profile it needs to attribute content and accumulate karma.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: str = Field(min_length=3, max_length=20, pattern=r"^[a-zA-Z0-9_]+$")
    email: Optional[str] = None
    karma: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
