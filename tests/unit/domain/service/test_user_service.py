"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from newsroom.domain.repository import UserRepository
from newsroom.domain.service import UserService
from newsroom.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_get_display_names(self, unit_env):
        """Names are resolved in one batch and unknown users are left out."""
        # Arrange
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        alice = make_user("Alice")
        bob = make_user("Bob")
        await repo.save(alice)
        await repo.save(bob)
        stranger = UserId(uuid4())

        # Act
        names = await service.get_display_names([alice.id, bob.id, alice.id, stranger])

        # Assert
        assert names == {alice.id: alice.name, bob.id: bob.name}

    @pytest.mark.asyncio
    async def test_get_display_names_empty(self, unit_env):
        """No ids means no lookup and an empty mapping."""
        # Arrange
        service = await unit_env.get(UserService)

        # Act
        names = await service.get_display_names([])

        # Assert
        assert names == {}
