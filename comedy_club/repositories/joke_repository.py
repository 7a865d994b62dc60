"""
MongoDB repository for jokes.

Sandi Metz Principles:
- Single Responsibility: Joke persistence and queries
- Small methods: Each operation isolated
- Dependency Injection: Database handle injected
"""

from contextlib import contextmanager
from typing import Any, Iterator, Sequence

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING, AsyncMongoClient, ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from comedy_club.config import AppConfig
from comedy_club.exceptions import (
    InvalidIdentifierError,
    JokeNotFoundError,
    StoreUnavailableError,
)
from comedy_club.models.joke import Joke, JokeInput
from comedy_club.utils.logger import get_logger

logger = get_logger(__name__)


def create_mongo_client(config: AppConfig) -> AsyncMongoClient:
    """
    Create MongoDB client.

    The client connects lazily; call ``JokeRepository.ping`` to confirm the
    server is reachable.

    Args:
        config: Application configuration

    Returns:
        Async MongoDB client
    """
    options: dict[str, Any] = {
        "serverSelectionTimeoutMS": config.mongodb_server_selection_timeout_ms,
        "connectTimeoutMS": config.mongodb_connect_timeout_ms,
        "socketTimeoutMS": config.mongodb_socket_timeout_ms,
        "maxPoolSize": config.mongodb_max_pool_size,
        "minPoolSize": config.mongodb_min_pool_size,
        "retryWrites": True,
        "retryReads": True,
    }
    if config.is_atlas_deployment:
        options["tls"] = True
        options["tlsAllowInvalidCertificates"] = False

    return AsyncMongoClient(config.mongodb_uri, **options)


def parse_object_id(joke_id: str) -> ObjectId:
    """
    Parse a joke id into an ObjectId.

    Args:
        joke_id: 24-character hex string

    Returns:
        Parsed ObjectId

    Raises:
        InvalidIdentifierError: If the id is malformed
    """
    try:
        return ObjectId(joke_id)
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifierError(joke_id) from e


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Translate driver failures into StoreUnavailableError."""
    try:
        yield
    except PyMongoError as e:
        logger.error("MongoDB operation failed", operation=operation, error=str(e))
        raise StoreUnavailableError(f"{operation} failed") from e


class JokeRepository:
    """
    Repository for joke documents.

    Counter updates go through ``$inc`` so concurrent serves never lose an
    increment.
    """

    def __init__(self, database: AsyncDatabase, collection_name: str = "jokes"):
        """
        Initialize repository.

        Args:
            database: MongoDB database handle
            collection_name: Name of the jokes collection
        """
        self._database = database
        self._collection = database[collection_name]

    async def count_all(self) -> int:
        """
        Count stored jokes.

        Returns:
            Number of jokes
        """
        with _store_errors("count_all"):
            return await self._collection.count_documents({})

    async def insert_many(self, jokes: Sequence[JokeInput]) -> int:
        """
        Insert jokes in bulk.

        Args:
            jokes: Jokes to insert

        Returns:
            Number of inserted jokes
        """
        if not jokes:
            return 0

        with _store_errors("insert_many"):
            result = await self._collection.insert_many(
                [joke.to_document() for joke in jokes]
            )
        return len(result.inserted_ids)

    async def sample_random(self, n: int = 1) -> list[Joke]:
        """
        Pick jokes at random.

        Args:
            n: Number of jokes to sample

        Returns:
            Sampled jokes, empty when the store is empty
        """
        with _store_errors("sample_random"):
            cursor = await self._collection.aggregate([{"$sample": {"size": n}}])
            documents = await cursor.to_list()
        return [Joke.from_document(doc) for doc in documents]

    async def find_by_id(self, joke_id: str) -> Joke:
        """
        Find joke by id.

        Args:
            joke_id: Joke identifier

        Returns:
            The joke

        Raises:
            InvalidIdentifierError: If the id is malformed
            JokeNotFoundError: If no joke has this id
        """
        object_id = parse_object_id(joke_id)
        with _store_errors("find_by_id"):
            document = await self._collection.find_one({"_id": object_id})
        if document is None:
            raise JokeNotFoundError(joke_id)
        return Joke.from_document(document)

    async def increment_display_count(self, joke_id: str) -> int:
        """
        Atomically add one to a joke's display count.

        Args:
            joke_id: Joke identifier

        Returns:
            Display count after the increment

        Raises:
            InvalidIdentifierError: If the id is malformed
            JokeNotFoundError: If no joke has this id
        """
        object_id = parse_object_id(joke_id)
        with _store_errors("increment_display_count"):
            document = await self._collection.find_one_and_update(
                {"_id": object_id},
                {"$inc": {"times_displayed": 1}},
                projection={"times_displayed": 1},
                return_document=ReturnDocument.AFTER,
            )
        if document is None:
            raise JokeNotFoundError(joke_id)
        return document["times_displayed"]

    async def find_all(self) -> list[Joke]:
        """
        List every joke.

        Returns:
            All stored jokes
        """
        with _store_errors("find_all"):
            documents = await self._collection.find({}).to_list()
        return [Joke.from_document(doc) for doc in documents]

    async def top_by_display_count(self, n: int) -> list[Joke]:
        """
        List the most displayed jokes.

        Args:
            n: Maximum number of jokes

        Returns:
            Jokes ordered by display count, highest first
        """
        with _store_errors("top_by_display_count"):
            cursor = (
                self._collection.find({})
                .sort([("times_displayed", DESCENDING), ("_id", ASCENDING)])
                .limit(n)
            )
            documents = await cursor.to_list()
        return [Joke.from_document(doc) for doc in documents]

    async def sum_display_counts(self) -> int:
        """
        Sum display counts over all jokes.

        Returns:
            Total displays, 0 when the store is empty
        """
        pipeline = [{"$group": {"_id": None, "total": {"$sum": "$times_displayed"}}}]
        with _store_errors("sum_display_counts"):
            cursor = await self._collection.aggregate(pipeline)
            results = await cursor.to_list()
        if not results:
            return 0
        return results[0].get("total", 0)

    async def ensure_indexes(self) -> None:
        """Create the display count index used by the stats queries."""
        with _store_errors("ensure_indexes"):
            await self._collection.create_index([("times_displayed", ASCENDING)])
        logger.info("Index ensured", field="times_displayed")

    async def ping(self) -> bool:
        """
        Ping MongoDB server.

        Returns:
            True if connected, False otherwise
        """
        try:
            await self._database.command("ping")
            return True
        except PyMongoError as e:
            logger.error("MongoDB ping failed", error=str(e))
            return False
