"""
Tests for the in-memory gateway.

The in-memory store must fail the same way Redis does for the cases
the repository relies on.
"""

import pytest

from kv_user_service.domain.exceptions import StoreError


class TestInMemoryGateway:
    """Test InMemoryGateway."""

    @pytest.mark.asyncio
    async def test_get_hash_absent_is_empty(self, gateway):
        assert await gateway.get_hash("user:1") == {}

    @pytest.mark.asyncio
    async def test_set_hash_merges_fields(self, gateway):
        await gateway.set_hash("user:1", {"name": "John", "age": "31"})
        await gateway.set_hash("user:1", {"age": "32"})

        assert await gateway.get_hash("user:1") == {"name": "John", "age": "32"}

    @pytest.mark.asyncio
    async def test_get_hash_wrong_type(self, gateway):
        await gateway.set("user:1", "scalar")

        with pytest.raises(StoreError) as exc_info:
            await gateway.get_hash("user:1")
        assert "WRONGTYPE" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_set_hash_wrong_type(self, gateway):
        await gateway.set("user:1", "scalar")

        with pytest.raises(StoreError):
            await gateway.set_hash("user:1", {"name": "John"})
        assert gateway.data["user:1"] == "scalar"
        assert list(gateway.data) == ["user:1"]

    @pytest.mark.asyncio
    async def test_set_hash_absent_key_creates_hash(self, gateway):
        await gateway.set_hash("user:3", {"name": "Ann", "age": 40})

        assert gateway.data == {"user:3": {"name": "Ann", "age": "40"}}

    @pytest.mark.asyncio
    async def test_increment_absent_counter_starts_at_one(self, gateway):
        assert await gateway.increment_counter("userIncrID") == 1
        assert await gateway.increment_counter("userIncrID") == 2

    @pytest.mark.asyncio
    async def test_increment_non_integer(self, gateway):
        await gateway.set("userIncrID", "abc")

        with pytest.raises(StoreError):
            await gateway.increment_counter("userIncrID")

    @pytest.mark.asyncio
    async def test_exists(self, gateway):
        await gateway.set("k", "v")

        assert await gateway.exists("k") is True
        assert await gateway.exists("missing") is False

    @pytest.mark.asyncio
    async def test_list_keys_matching(self, seeded_gateway):
        await seeded_gateway.set_hash("user:10", {"name": "x"})
        await seeded_gateway.set("userIncrID", "10")

        keys = await seeded_gateway.list_keys_matching("user:[0-9]*")

        assert sorted(keys) == ["user:1", "user:10", "user:2"]

    @pytest.mark.asyncio
    async def test_get_absent(self, gateway):
        assert await gateway.get("missing") is None

    @pytest.mark.asyncio
    async def test_ping(self, gateway):
        assert await gateway.ping() is True
