"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.user import User
from agora.domain.value import UserId


class UserRepository(ABC):
    """Profiles of users known to Agora, keyed by their external user ID."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Look up a profile; None when the user never reached Agora."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or replace a profile."""
        pass
