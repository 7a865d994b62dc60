"""Test Redis repository."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from comedy_club.exceptions import CacheUnavailableError
from comedy_club.repositories.redis_repository import RedisRepository, create_redis_pool


@pytest.fixture
def mock_pool():
    """Create mock Redis connection pool."""
    return MagicMock()


@pytest.fixture
def redis_repository(mock_pool):
    """Create Redis repository with mock pool."""
    return RedisRepository(pool=mock_pool)


class TestCreateRedisPool:
    """Test pool construction."""

    @pytest.mark.asyncio
    async def test_should_build_pool_from_config(self, test_config):
        """Test pool uses configured URL and size."""
        with patch(
            "comedy_club.repositories.redis_repository.ConnectionPool"
        ) as mock_pool_class:
            await create_redis_pool(test_config)

            mock_pool_class.from_url.assert_called_once_with(
                "redis://localhost:6379/0",
                max_connections=test_config.redis_max_connections,
                socket_timeout=2.0,
                socket_connect_timeout=2.0,
                decode_responses=True,
            )


class TestRedisRepository:
    """Test Redis repository implementation."""

    @pytest.mark.asyncio
    async def test_should_fetch_value(self, redis_repository):
        """Test fetching a stored value."""
        mock_redis = AsyncMock()
        mock_redis.get.return_value = '{"id": "1"}'

        with patch("comedy_club.repositories.redis_repository.Redis") as mock_redis_class:
            mock_redis_class.return_value.__aenter__.return_value = mock_redis

            result = await redis_repository.fetch("joke:1")

            assert result == '{"id": "1"}'
            mock_redis.get.assert_called_once_with("joke:1")

    @pytest.mark.asyncio
    async def test_should_return_none_when_not_found(self, redis_repository):
        """Test fetching a missing or expired key."""
        mock_redis = AsyncMock()
        mock_redis.get.return_value = None

        with patch("comedy_club.repositories.redis_repository.Redis") as mock_redis_class:
            mock_redis_class.return_value.__aenter__.return_value = mock_redis

            result = await redis_repository.fetch("joke:missing")

            assert result is None

    @pytest.mark.asyncio
    async def test_should_raise_on_fetch_error(self, redis_repository):
        """Test fetch failures become CacheUnavailableError."""
        mock_redis = AsyncMock()
        mock_redis.get.side_effect = RedisTimeoutError("timed out")

        with patch("comedy_club.repositories.redis_repository.Redis") as mock_redis_class:
            mock_redis_class.return_value.__aenter__.return_value = mock_redis

            with pytest.raises(CacheUnavailableError):
                await redis_repository.fetch("joke:1")

    @pytest.mark.asyncio
    async def test_should_store_value_with_ttl(self, redis_repository):
        """Test storing sets the value with an expiry."""
        mock_redis = AsyncMock()

        with patch("comedy_club.repositories.redis_repository.Redis") as mock_redis_class:
            mock_redis_class.return_value.__aenter__.return_value = mock_redis

            await redis_repository.store("joke:1", "{}", 300)

            mock_redis.set.assert_called_once_with("joke:1", "{}", ex=300)

    @pytest.mark.asyncio
    async def test_should_raise_on_store_error(self, redis_repository):
        """Test store failures become CacheUnavailableError."""
        mock_redis = AsyncMock()
        mock_redis.set.side_effect = RedisConnectionError("Connection refused")

        with patch("comedy_club.repositories.redis_repository.Redis") as mock_redis_class:
            mock_redis_class.return_value.__aenter__.return_value = mock_redis

            with pytest.raises(CacheUnavailableError):
                await redis_repository.store("joke:1", "{}", 300)

    @pytest.mark.asyncio
    async def test_should_ping_successfully(self, redis_repository):
        """Test successful Redis ping."""
        mock_redis = AsyncMock()
        mock_redis.ping.return_value = True

        with patch("comedy_club.repositories.redis_repository.Redis") as mock_redis_class:
            mock_redis_class.return_value.__aenter__.return_value = mock_redis

            result = await redis_repository.ping()

            assert result is True
            mock_redis.ping.assert_called_once()

    @pytest.mark.asyncio
    async def test_should_handle_ping_failure(self, redis_repository):
        """Test handling Redis ping failure."""
        mock_redis = AsyncMock()
        mock_redis.ping.side_effect = RedisConnectionError("Connection failed")

        with patch("comedy_club.repositories.redis_repository.Redis") as mock_redis_class:
            mock_redis_class.return_value.__aenter__.return_value = mock_redis

            result = await redis_repository.ping()

            assert result is False

    @pytest.mark.asyncio
    async def test_should_raise_on_store_timeout(self, redis_repository):
        """Test an unresponsive Redis surfaces as CacheUnavailableError."""
        mock_redis = AsyncMock()
        mock_redis.set.side_effect = RedisTimeoutError("Timeout reading from socket")

        with patch("comedy_club.repositories.redis_repository.Redis") as mock_redis_class:
            mock_redis_class.return_value.__aenter__.return_value = mock_redis

            with pytest.raises(CacheUnavailableError):
                await redis_repository.store("joke:1", "{}", 300)

    @pytest.mark.asyncio
    async def test_should_report_unhealthy_on_ping_timeout(self, redis_repository):
        """Test ping timeout reports unhealthy."""
        mock_redis = AsyncMock()
        mock_redis.ping.side_effect = RedisTimeoutError("Timeout connecting to server")

        with patch("comedy_club.repositories.redis_repository.Redis") as mock_redis_class:
            mock_redis_class.return_value.__aenter__.return_value = mock_redis

            assert await redis_repository.ping() is False
