"""
Main FastAPI application.

Following Sandi Metz:
- Single Responsibility: Application setup and configuration
- Small methods: Each lifecycle stage isolated
- Clear naming: Descriptive function names
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo import AsyncMongoClient
from redis.asyncio import ConnectionPool

from comedy_club import __version__
from comedy_club.api.middleware import LoggingConfig, RequestLoggingMiddleware
from comedy_club.api.routes import health, jokes, stats
from comedy_club.cache.joke_cache import JokeCache
from comedy_club.config import AppConfig, config
from comedy_club.exceptions import StoreUnavailableError
from comedy_club.repositories.joke_repository import JokeRepository, create_mongo_client
from comedy_club.repositories.redis_repository import RedisRepository, create_redis_pool
from comedy_club.services.joke_service import JokeService
from comedy_club.services.seeder import seed_database
from comedy_club.utils.logger import get_logger, setup_logging

setup_logging(config.log_level)
logger = get_logger(__name__)


class ApplicationState:
    """
    Manages application-wide state.

    Single Responsibility: Lifecycle management of shared resources.
    """

    def __init__(self, app_config: AppConfig) -> None:
        self.config = app_config
        self.mongo_client: Optional[AsyncMongoClient] = None
        self.redis_pool: Optional[ConnectionPool] = None
        self.joke_service: Optional[JokeService] = None

    async def startup(self) -> None:
        """
        Initialize application resources.

        Raises:
            StoreUnavailableError: If MongoDB cannot be reached
        """
        logger.info("Starting joke service", env=self.config.app_env)
        try:
            store = await self._connect_store()
            cache = await self._connect_cache()

            if self.config.auto_seed:
                await seed_database(store)
            else:
                logger.info("Skipping auto-seed", auto_seed=False)

            self.joke_service = JokeService(
                store=store,
                cache=cache,
                top_jokes_limit=self.config.top_jokes_limit,
            )
            logger.info("Joke service started successfully")
        except Exception as e:
            logger.error("Failed to initialize joke service", error=str(e))
            await self.shutdown()
            raise

    async def shutdown(self) -> None:
        """Cleanup application resources."""
        logger.info("Shutting down joke service")
        try:
            if self.mongo_client:
                await self.mongo_client.close()
                self.mongo_client = None
                logger.info("MongoDB client closed")
            if self.redis_pool:
                await self.redis_pool.disconnect()
                self.redis_pool = None
                logger.info("Redis pool closed")
        except Exception as e:
            logger.error("Error during shutdown", error=str(e))

    async def _connect_store(self) -> JokeRepository:
        """
        Connect to MongoDB and confirm it answers.

        Returns:
            Joke store

        Raises:
            StoreUnavailableError: If the ping fails
        """
        logger.info(
            "Connecting to MongoDB",
            uri=self.config.masked_mongodb_uri,
            database=self.config.mongodb_database,
            atlas=self.config.is_atlas_deployment,
        )
        self.mongo_client = create_mongo_client(self.config)
        store = JokeRepository(
            self.mongo_client[self.config.mongodb_database],
            self.config.mongodb_collection,
        )
        if not await store.ping():
            raise StoreUnavailableError("Failed to connect to MongoDB")

        logger.info("MongoDB connected", collection=self.config.mongodb_collection)
        return store

    async def _connect_cache(self) -> JokeCache:
        """
        Create the Redis pool and cache.

        An unreachable Redis is logged, not fatal.

        Returns:
            Joke cache
        """
        self.redis_pool = await create_redis_pool(self.config)
        cache = JokeCache(
            RedisRepository(self.redis_pool),
            ttl_seconds=self.config.cache_ttl_seconds,
            key_prefix=self.config.cache_key_prefix,
        )
        if await cache.health_check():
            logger.info("Redis ready", ttl_seconds=self.config.cache_ttl_seconds)
        else:
            logger.warning("Redis unreachable, serving without cache")
        return cache


def create_application(app_config: Optional[AppConfig] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        app_config: Configuration, defaults to the environment-derived one

    Returns:
        Configured FastAPI application instance.
    """
    app_config = app_config or config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        state = ApplicationState(app_config)
        await state.startup()
        app.state.app_state = state

        yield

        await state.shutdown()

    app = FastAPI(
        title=app_config.app_name,
        description="Random jokes with display counters, backed by MongoDB and Redis",
        version=__version__,
        docs_url="/docs" if app_config.is_development else None,
        redoc_url="/redoc" if app_config.is_development else None,
        lifespan=lifespan,
    )

    # Request logging
    app.add_middleware(
        RequestLoggingMiddleware,
        config=LoggingConfig.from_app_config(app_config),
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.allowed_origins_list,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(jokes.router, prefix="/api", tags=["jokes"])
    app.include_router(stats.router, prefix="/api", tags=["stats"])

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "comedy_club.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=config.is_development,
    )
