"""
Joke cache service.

Sandi Metz Principles:
- Single Responsibility: Cache key and TTL policy for jokes
- Small methods: Each operation < 10 lines
- Dependency Injection: Repository injected
"""

from typing import Optional

from pydantic import ValidationError

from comedy_club.models.joke import Joke
from comedy_club.repositories.redis_repository import RedisRepository
from comedy_club.utils.logger import get_logger, log_cache_write

logger = get_logger(__name__)

DEFAULT_TTL_SECONDS = 300
DEFAULT_KEY_PREFIX = "joke"


class JokeCache:
    """
    Joke snapshot cache.

    Holds disposable copies of served jokes under ``<prefix>:<id>``. Nothing
    is ever written back to the store.
    """

    def __init__(
        self,
        repository: RedisRepository,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ):
        """
        Initialize cache service.

        Args:
            repository: Redis repository
            ttl_seconds: Entry time-to-live in seconds
            key_prefix: Namespace for joke keys
        """
        self._repository = repository
        self._ttl = ttl_seconds
        self._prefix = key_prefix

    @property
    def ttl_seconds(self) -> int:
        """Entry time-to-live in seconds."""
        return self._ttl

    def key_for(self, joke_id: str) -> str:
        """Build the cache key for a joke."""
        return f"{self._prefix}:{joke_id}"

    async def put(self, joke: Joke) -> None:
        """
        Store a joke snapshot, resetting its expiry.

        Args:
            joke: Joke to cache

        Raises:
            CacheUnavailableError: If the cache cannot be reached
        """
        key = self.key_for(joke.id)
        await self._repository.store(key, joke.model_dump_json(), self._ttl)
        log_cache_write(key, self._ttl)

    async def get(self, joke_id: str) -> Optional[Joke]:
        """
        Get a cached joke snapshot.

        Args:
            joke_id: Joke identifier

        Returns:
            Cached joke, None on miss

        Raises:
            CacheUnavailableError: If the cache cannot be reached
        """
        key = self.key_for(joke_id)
        data = await self._repository.fetch(key)
        if data is None:
            return None

        try:
            return Joke.model_validate_json(data)
        except ValidationError as e:
            logger.warning("Discarding unreadable cache entry", key=key, error=str(e))
            return None

    async def health_check(self) -> bool:
        """
        Check Redis health.

        Returns:
            True if healthy, False otherwise
        """
        return await self._repository.ping()
