"""
Repositories module.

Data access for the joke store (MongoDB) and the cache (Redis).
"""

from comedy_club.repositories.joke_repository import (
    JokeRepository,
    create_mongo_client,
)
from comedy_club.repositories.redis_repository import RedisRepository, create_redis_pool

__all__ = [
    "JokeRepository",
    "RedisRepository",
    "create_mongo_client",
    "create_redis_pool",
]
