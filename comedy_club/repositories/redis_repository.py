"""
Redis repository for data access.

Sandi Metz Principles:
- Single Responsibility: Redis data access
- Small methods: Each operation isolated
- Dependency Injection: Redis pool injected
"""

from typing import Optional

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError

from comedy_club.config import AppConfig
from comedy_club.exceptions import CacheUnavailableError
from comedy_club.utils.logger import get_logger

logger = get_logger(__name__)


async def create_redis_pool(config: AppConfig) -> ConnectionPool:
    """
    Create Redis connection pool.

    Args:
        config: Application configuration

    Returns:
        Redis connection pool
    """
    return ConnectionPool.from_url(
        config.redis_url,
        max_connections=config.redis_max_connections,
        socket_timeout=config.redis_socket_timeout_seconds,
        socket_connect_timeout=config.redis_socket_connect_timeout_seconds,
        decode_responses=True,
    )


class RedisRepository:
    """
    Repository for Redis operations.

    Handles low-level Redis interactions. Failures surface as
    CacheUnavailableError; the caller decides whether they matter.
    """

    def __init__(self, pool: ConnectionPool):
        """
        Initialize repository.

        Args:
            pool: Redis connection pool
        """
        self._pool = pool

    async def fetch(self, key: str) -> Optional[str]:
        """
        Fetch raw value by key.

        Args:
            key: Cache key

        Returns:
            Stored value, None if absent or expired

        Raises:
            CacheUnavailableError: If Redis cannot be reached
        """
        try:
            async with Redis(connection_pool=self._pool) as client:
                return await client.get(key)
        except RedisError as e:
            logger.warning("Redis fetch failed", key=key, error=str(e))
            raise CacheUnavailableError(str(e)) from e

    async def store(self, key: str, value: str, ttl_seconds: int) -> None:
        """
        Store value with expiry, replacing any previous value and expiry.

        Args:
            key: Cache key
            value: Serialized value
            ttl_seconds: Time-to-live in seconds

        Raises:
            CacheUnavailableError: If Redis cannot be reached
        """
        try:
            async with Redis(connection_pool=self._pool) as client:
                await client.set(key, value, ex=ttl_seconds)
        except RedisError as e:
            logger.warning("Redis store failed", key=key, error=str(e))
            raise CacheUnavailableError(str(e)) from e

    async def ping(self) -> bool:
        """
        Ping Redis server.

        Returns:
            True if connected, False otherwise
        """
        try:
            async with Redis(connection_pool=self._pool) as client:
                await client.ping()
                return True
        except (RedisError, OSError) as e:
            logger.error("Redis ping failed", error=str(e))
            return False
