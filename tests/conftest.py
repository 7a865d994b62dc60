"""
Pytest configuration and fixtures.

Provides common fixtures for testing.
"""

import pytest

from comedy_club.config import AppConfig
from comedy_club.models.joke import Joke, JokeInput
from tests.mocks.store_mocks import InMemoryJokeCache, InMemoryJokeStore


@pytest.fixture
def test_config() -> AppConfig:
    """
    Create test configuration.

    Returns:
        Test configuration instance
    """
    return AppConfig(
        app_env="development",
        mongodb_uri="mongodb://localhost:27017/test-chuckles",
        mongodb_database="test-chuckles",
        redis_host="localhost",
        redis_port=6379,
        cache_ttl_seconds=60,
        auto_seed=False,
    )


@pytest.fixture
def sample_joke() -> Joke:
    """
    Sample stored joke.

    Returns:
        Joke with a valid ObjectId
    """
    return Joke(
        id="65a1f0c2e4b0a1b2c3d4e5f6",
        setup="Why don't containers ever get lost?",
        punchline="They always know their port!",
        times_displayed=4,
    )


@pytest.fixture
def sample_inputs() -> list[JokeInput]:
    """
    Sample jokes to insert.

    Returns:
        Three joke inputs
    """
    return [
        JokeInput(setup="Q1", punchline="A1"),
        JokeInput(setup="Q2", punchline="A2"),
        JokeInput(setup="Q3", punchline="A3"),
    ]


@pytest.fixture
def memory_store() -> InMemoryJokeStore:
    """Empty in-memory joke store."""
    return InMemoryJokeStore()


@pytest.fixture
def memory_cache() -> InMemoryJokeCache:
    """Empty in-memory joke cache."""
    return InMemoryJokeCache()
