"""
Redis implementation of the key-value gateway.

Every command is issued once; any redis-py error is logged and
re-raised as StoreError so callers see a single failure type.
"""

import time
from typing import Any, Awaitable, Callable, Dict, List, Optional

import structlog
from redis.asyncio import Redis
from redis.exceptions import RedisError

from ..domain.exceptions import StoreError
from ..metrics import track_store_operation
from .gateway import KeyValueGateway

logger = structlog.get_logger(__name__)


class RedisGateway(KeyValueGateway):
    """Key-value gateway backed by an async Redis client."""

    def __init__(self, redis_client: Redis):
        """
        Initialize Redis gateway.

        Args:
            redis_client: Async Redis client created with decode_responses=True
        """
        self.redis = redis_client

    async def _execute(
        self,
        operation: str,
        key: Optional[str],
        command: Callable[..., Awaitable[Any]],
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        """Run one Redis command, translating client errors into StoreError."""
        start_time = time.time()
        try:
            result = await command(*args, **kwargs)
        except RedisError as e:
            track_store_operation(operation, False, time.time() - start_time)
            logger.error("Redis command failed", operation=operation, key=key, error=str(e))
            raise StoreError(operation, key, str(e)) from e

        track_store_operation(operation, True, time.time() - start_time)
        return result

    async def exists(self, key: str) -> bool:
        count = await self._execute("exists", key, self.redis.exists, key)
        return count > 0

    async def get_hash(self, key: str) -> Dict[str, str]:
        # WRONGTYPE replies surface as ResponseError and become StoreError
        return await self._execute("hgetall", key, self.redis.hgetall, key)

    async def set_hash(self, key: str, mapping: Dict[str, str]) -> None:
        await self._execute("hset", key, self.redis.hset, key, mapping=mapping)

    async def increment_counter(self, key: str) -> int:
        return int(await self._execute("incr", key, self.redis.incr, key))

    async def list_keys_matching(self, pattern: str) -> List[str]:
        return list(await self._execute("keys", pattern, self.redis.keys, pattern))

    async def get(self, key: str) -> Optional[str]:
        return await self._execute("get", key, self.redis.get, key)

    async def set(self, key: str, value: str) -> None:
        await self._execute("set", key, self.redis.set, key, value)

    async def ping(self) -> bool:
        try:
            return bool(await self.redis.ping())
        except RedisError as e:
            logger.error("Redis health check failed", error=str(e))
            return False

    async def close(self) -> None:
        await self.redis.aclose()
        logger.info("Redis client closed")
