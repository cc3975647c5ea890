"""
Store layer - Key-value gateway abstractions.

The repository talks to the store only through KeyValueGateway, so the
Redis implementation can be swapped for the in-memory one in tests.
"""

from .gateway import KeyValueGateway
from .memory_gateway import InMemoryGateway
from .redis_gateway import RedisGateway

__all__ = ["KeyValueGateway", "InMemoryGateway", "RedisGateway"]
