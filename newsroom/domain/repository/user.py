"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable

from newsroom.domain.model.user import User
from newsroom.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity.

    Read-only: accounts are written by the auth service.
    """

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find several users in one call.

        Unknown ids are skipped.

        Args:
            user_ids: User identifiers

        Returns:
            The users that exist
        """
        pass
