"""
Redis client construction.

Builds an async Redis client with its own connection pool from the
service settings. The client is created explicitly and handed to the
gateway; there is no module-level client.
"""

from typing import Any, Dict, Optional
from urllib.parse import urlparse

import structlog
from redis.asyncio import ConnectionPool, Redis
from redis.asyncio.connection import SSLConnection
from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff

from ..config import Settings

logger = structlog.get_logger(__name__)

DEFAULT_REDIS_PORT = 6379


class RedisConfig:
    """Redis connection parameters derived from settings."""

    def __init__(self, settings: Settings) -> None:
        """
        Parse REDIS_URL and copy pool options from settings.

        REDIS_URL may be a bare ``host:port`` address or a full
        ``redis://[user:password@]host:port/db`` URL. An explicit
        REDIS_PASSWORD wins over a password embedded in the URL.
        """
        redis_url = settings.REDIS_URL.strip()
        if "://" not in redis_url:
            redis_url = f"redis://{redis_url}"

        parsed = urlparse(redis_url)
        self.host: str = parsed.hostname or "localhost"
        self.port: int = parsed.port or DEFAULT_REDIS_PORT
        self.username: Optional[str] = parsed.username
        self.password: Optional[str] = settings.REDIS_PASSWORD or parsed.password
        path_db = parsed.path.lstrip("/")
        self.db: int = int(path_db) if path_db else settings.REDIS_DB
        self.ssl: bool = parsed.scheme == "rediss"

        self.max_connections: int = settings.REDIS_MAX_CONNECTIONS
        self.socket_timeout: int = settings.REDIS_SOCKET_TIMEOUT
        self.socket_connect_timeout: int = settings.REDIS_CONNECT_TIMEOUT
        self.health_check_interval: int = settings.REDIS_HEALTH_CHECK_INTERVAL

    def pool_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ConnectionPool."""
        kwargs: Dict[str, Any] = {
            "host": self.host,
            "port": self.port,
            "db": self.db,
            "password": self.password,
            "max_connections": self.max_connections,
            "socket_timeout": self.socket_timeout,
            "socket_connect_timeout": self.socket_connect_timeout,
            "health_check_interval": self.health_check_interval,
            "decode_responses": True,
            # A failed command surfaces immediately
            "retry_on_timeout": False,
            "retry": Retry(NoBackoff(), 0),
        }
        if self.username:
            kwargs["username"] = self.username
        if self.ssl:
            kwargs["connection_class"] = SSLConnection
        return kwargs


def create_redis_client(settings: Settings) -> Redis:
    """
    Create an async Redis client backed by a fresh connection pool.

    No connection is opened until the first command is issued.

    Args:
        settings: Service settings

    Returns:
        Async Redis client
    """
    config = RedisConfig(settings)
    pool = ConnectionPool(**config.pool_kwargs())
    client = Redis(connection_pool=pool)

    logger.info(
        "Redis client created",
        host=config.host,
        port=config.port,
        db=config.db,
        max_connections=config.max_connections,
    )
    return client
