"""
Key-value gateway interface (Abstract Base Class).

Defines the store primitives the user repository relies on,
independent of the underlying store client.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class KeyValueGateway(ABC):
    """
    Abstract gateway over a key-value store.

    Every method performs I/O against shared state and raises
    StoreError on connectivity, protocol or wrong-type failures.
    Nothing is cached locally and nothing is retried.
    """

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """
        Check whether a key is present.

        Args:
            key: Store key

        Returns:
            True if the key exists
        """
        pass

    @abstractmethod
    async def get_hash(self, key: str) -> Dict[str, str]:
        """
        Read every field of a hash (HGETALL).

        Args:
            key: Store key

        Returns:
            Field mapping, empty when the key does not exist

        Raises:
            StoreError: If the key holds a value that is not a hash
        """
        pass

    @abstractmethod
    async def set_hash(self, key: str, mapping: Dict[str, str]) -> None:
        """
        Write the given fields of a hash (HSET with several fields).

        Args:
            key: Store key
            mapping: Fields to write
        """
        pass

    @abstractmethod
    async def increment_counter(self, key: str) -> int:
        """
        Atomically increment an integer counter (INCR).

        An absent counter counts as zero, so the first call returns 1.

        Args:
            key: Counter key

        Returns:
            Counter value after the increment
        """
        pass

    @abstractmethod
    async def list_keys_matching(self, pattern: str) -> List[str]:
        """
        List keys matching a glob-style pattern (KEYS).

        Args:
            pattern: Glob pattern, e.g. ``user:[0-9]*``

        Returns:
            Matching keys in store enumeration order
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Read a scalar value (GET), None when absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Write a scalar value (SET)."""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Return True when the store answers, False otherwise."""
        pass

    async def close(self) -> None:
        """Release connections held by the gateway."""
        return None
