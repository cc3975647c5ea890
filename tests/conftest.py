"""
Test configuration and fixtures
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from kv_user_service.app import create_app
from kv_user_service.config import Settings
from kv_user_service.repositories.user_repository import UserRepository
from kv_user_service.store.memory_gateway import InMemoryGateway


@pytest.fixture
def gateway():
    """Empty in-memory store."""
    return InMemoryGateway()


@pytest.fixture
def sample_users_data():
    """The two demo users as stored hashes."""
    return {
        "user:1": {"id": "1", "name": "John", "age": "31", "city": "New York"},
        "user:2": {"id": "2", "name": "Doe", "age": "22", "city": "Vancouver"},
    }


@pytest.fixture
def seeded_gateway(gateway, sample_users_data):
    """In-memory store holding user:1 and user:2."""
    for key, mapping in sample_users_data.items():
        gateway.data[key] = dict(mapping)
    return gateway


@pytest.fixture
def repository(gateway):
    """User repository over the empty store."""
    return UserRepository(gateway)


@pytest.fixture
def test_settings():
    """Settings that do not seed demo data."""
    return Settings(SEED_DEMO_USERS=False)


@pytest.fixture
def app(test_settings, gateway):
    """Application wired to the in-memory store."""
    return create_app(test_settings, gateway=gateway)


@pytest_asyncio.fixture
async def client(app):
    """Async HTTP client bound to the application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client
