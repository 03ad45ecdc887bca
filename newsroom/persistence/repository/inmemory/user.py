"""In-memory user repository for testing and local runs."""

from typing import Iterable

from newsroom.domain.model.user import User
from newsroom.domain.repository.user import UserRepository
from newsroom.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find several users, skipping unknown ids."""
        return [self._users[uid] for uid in user_ids if uid in self._users]

    async def save(self, user: User) -> User:
        """Store a user, standing in for the auth service's writes."""
        self._users[user.id] = user
        return user
