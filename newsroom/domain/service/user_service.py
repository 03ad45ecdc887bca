"""User domain service."""

from collections.abc import Iterable

import logfire

from newsroom.domain.repository import UserRepository
from newsroom.domain.value import DisplayName, UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_display_names(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, DisplayName]:
        """Resolve display names for a batch of users.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to display name; unknown users are absent
        """
        unique_ids = set(user_ids)
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_display_names", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            names = {user.id: user.name for user in users}
            missing = len(unique_ids) - len(names)
            if missing:
                logfire.info("Some comment authors not found", missing=missing)
            return names
