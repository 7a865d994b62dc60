"""
Joke serving service.

Orchestrates the joke store and the snapshot cache.

Sandi Metz Principles:
- Single Responsibility: Joke orchestration
- Small methods: Each method < 10 lines
- Dependency Injection: Store and cache injected
"""

from comedy_club.cache.joke_cache import JokeCache
from comedy_club.exceptions import (
    CacheUnavailableError,
    NoJokesAvailableError,
    StoreUnavailableError,
)
from comedy_club.models.joke import Joke
from comedy_club.models.response import (
    HealthResponse,
    RandomJokeResponse,
    StatsResponse,
)
from comedy_club.repositories.joke_repository import JokeRepository
from comedy_club.utils.logger import get_logger, log_error, log_joke_served

logger = get_logger(__name__)


class JokeService:
    """
    Main joke service.

    The only component that changes display counts and the only consumer
    of both the store and the cache.
    """

    def __init__(
        self,
        store: JokeRepository,
        cache: JokeCache,
        top_jokes_limit: int = 5,
    ):
        """
        Initialize service.

        Args:
            store: Joke store
            cache: Snapshot cache, best-effort
            top_jokes_limit: Number of jokes listed in statistics
        """
        self._store = store
        self._cache = cache
        self._top_limit = top_jokes_limit

    async def serve_random_joke(self) -> RandomJokeResponse:
        """
        Serve a random joke.

        Order: sample -> increment -> cache snapshot -> respond

        Returns:
            The joke with its post-increment display count

        Raises:
            NoJokesAvailableError: If the store is empty
            StoreUnavailableError: If the store cannot be reached
        """
        joke = await self._sample_one()
        times_displayed = await self._store.increment_display_count(joke.id)
        await self._cache_snapshot(joke)

        log_joke_served(joke.id, times_displayed)
        return RandomJokeResponse.from_joke(joke, times_displayed)

    async def get_joke_by_id(self, joke_id: str) -> Joke:
        """
        Look up a joke without touching its counter or the cache.

        Args:
            joke_id: Joke identifier

        Returns:
            The joke

        Raises:
            InvalidIdentifierError: If the id is malformed
            JokeNotFoundError: If no joke has this id
        """
        return await self._store.find_by_id(joke_id)

    async def list_all_jokes(self) -> list[Joke]:
        """List every stored joke."""
        return await self._store.find_all()

    async def get_statistics(self) -> StatsResponse:
        """
        Compute display statistics.

        Returns:
            Totals and the most displayed jokes
        """
        total_jokes = await self._store.count_all()
        total_displays = await self._store.sum_display_counts()
        top_jokes = await self._store.top_by_display_count(self._top_limit)

        return StatsResponse(
            total_jokes=total_jokes,
            total_displays=total_displays,
            top_jokes=top_jokes,
        )

    async def check_health(self) -> HealthResponse:
        """
        Ping the store and the cache.

        Returns:
            Healthy status when both respond

        Raises:
            StoreUnavailableError: If MongoDB does not answer
            CacheUnavailableError: If Redis does not answer
        """
        if not await self._store.ping():
            raise StoreUnavailableError("MongoDB ping failed")
        if not await self._cache.health_check():
            raise CacheUnavailableError("Redis ping failed")
        return HealthResponse()

    async def _sample_one(self) -> Joke:
        """
        Sample a single joke.

        Returns:
            Random joke

        Raises:
            NoJokesAvailableError: If the store is empty
        """
        jokes = await self._store.sample_random(1)
        if not jokes:
            raise NoJokesAvailableError("No jokes found")
        return jokes[0]

    async def _cache_snapshot(self, joke: Joke) -> None:
        """
        Write the sampled joke to the cache, ignoring failures.

        Args:
            joke: Joke as sampled, before the increment
        """
        try:
            await self._cache.put(joke)
        except CacheUnavailableError as e:
            logger.warning("Cache unavailable, snapshot skipped", joke_id=joke.id, error=str(e))
        except Exception as e:
            log_error(e, "cache_snapshot", joke_id=joke.id)
