"""
In-memory implementation of the key-value gateway.

Keeps scalars and hashes in one dict and mirrors the Redis behaviour
the repository depends on: WRONGTYPE errors for mixed value kinds,
INCR on an absent key starting from zero, and glob key matching.
Runs on a single event loop without awaiting inside an operation,
so every operation is atomic.
"""

from fnmatch import fnmatchcase
from typing import Dict, List, Optional, Union

import structlog

from ..domain.exceptions import StoreError
from .gateway import KeyValueGateway

logger = structlog.get_logger(__name__)

WRONG_TYPE = "WRONGTYPE Operation against a key holding the wrong kind of value"


class InMemoryGateway(KeyValueGateway):
    """
    Dict-backed gateway for tests and local runs without Redis.

    Attributes:
        data: Key to value mapping; hashes are dicts, scalars are strings
    """

    def __init__(self) -> None:
        self.data: Dict[str, Union[str, Dict[str, str]]] = {}

    async def exists(self, key: str) -> bool:
        return key in self.data

    async def get_hash(self, key: str) -> Dict[str, str]:
        value = self.data.get(key)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise StoreError("hgetall", key, WRONG_TYPE)
        return dict(value)

    async def set_hash(self, key: str, mapping: Dict[str, str]) -> None:
        value = self.data.get(key)
        if value is not None and not isinstance(value, dict):
            raise StoreError("hset", key, WRONG_TYPE)
        fields = {field: str(v) for field, v in mapping.items()}
        self.data[key] = {**(value or {}), **fields}

    async def increment_counter(self, key: str) -> int:
        value = self.data.get(key, "0")
        if isinstance(value, dict):
            raise StoreError("incr", key, WRONG_TYPE)
        try:
            counter = int(value) + 1
        except ValueError as e:
            raise StoreError("incr", key, "value is not an integer or out of range") from e
        self.data[key] = str(counter)
        return counter

    async def list_keys_matching(self, pattern: str) -> List[str]:
        return [key for key in self.data if fnmatchcase(key, pattern)]

    async def get(self, key: str) -> Optional[str]:
        value = self.data.get(key)
        if isinstance(value, dict):
            raise StoreError("get", key, WRONG_TYPE)
        return value

    async def set(self, key: str, value: str) -> None:
        self.data[key] = str(value)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        logger.debug("In-memory store closed", keys=len(self.data))
