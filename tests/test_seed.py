"""
Tests for demo data seeding and the application lifespan.
"""

import pytest

from kv_user_service.app import create_app
from kv_user_service.config import Settings
from kv_user_service.domain.entities import User
from kv_user_service.domain.exceptions import StoreError
from kv_user_service.repositories.user_repository import USER_ID_COUNTER_KEY
from kv_user_service.seed import seed_demo_users


class TestSeedDemoUsers:
    """Test seed_demo_users."""

    @pytest.mark.asyncio
    async def test_writes_demo_users(self, repository):
        await seed_demo_users(repository)

        assert await repository.list_all_users() == [
            User(id=1, name="John", age=31, city="New York"),
            User(id=2, name="Doe", age=22, city="Vancouver"),
        ]

    @pytest.mark.asyncio
    async def test_next_creation_does_not_overwrite(self, repository):
        """Counter is moved past the seeded ids."""
        await seed_demo_users(repository)

        user = User(name="New", age=5, city="Lima")
        await repository.create_or_update_user(user)

        assert user.id == 3
        assert (await repository.find_user_by_id(1)).name == "John"

    @pytest.mark.asyncio
    async def test_counter_ahead_is_kept(self, repository, gateway):
        await gateway.set(USER_ID_COUNTER_KEY, "40")

        await seed_demo_users(repository)

        assert await gateway.get(USER_ID_COUNTER_KEY) == "40"

    @pytest.mark.asyncio
    async def test_corrupt_counter(self, repository, gateway):
        await gateway.set(USER_ID_COUNTER_KEY, "abc")

        with pytest.raises(StoreError):
            await seed_demo_users(repository)


class TestLifespan:
    """Test startup and shutdown."""

    @pytest.mark.asyncio
    async def test_startup_seeds_when_enabled(self, gateway):
        app = create_app(Settings(SEED_DEMO_USERS=True), gateway=gateway)

        async with app.router.lifespan_context(app):
            assert "user:1" in gateway.data
            assert "user:2" in gateway.data

    @pytest.mark.asyncio
    async def test_startup_skips_seed_when_disabled(self, gateway):
        app = create_app(Settings(SEED_DEMO_USERS=False), gateway=gateway)

        async with app.router.lifespan_context(app):
            assert gateway.data == {}

    @pytest.mark.asyncio
    async def test_seed_failure_does_not_block_startup(self, gateway):
        await gateway.set(USER_ID_COUNTER_KEY, "abc")
        app = create_app(Settings(SEED_DEMO_USERS=True), gateway=gateway)

        async with app.router.lifespan_context(app):
            assert app.state.user_repository.gateway is gateway
