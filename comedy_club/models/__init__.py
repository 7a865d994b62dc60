"""
Models package for the joke service.

Exports all model classes for easy imports throughout the application.
"""

# Error models
from comedy_club.models.error import ErrorResponse, UnhealthyResponse

# Joke models
from comedy_club.models.joke import Joke, JokeInput

# Response models
from comedy_club.models.response import (
    HealthResponse,
    RandomJokeResponse,
    ServiceInfo,
    StatsResponse,
)

__all__ = [
    # Error
    "ErrorResponse",
    "UnhealthyResponse",
    # Joke
    "Joke",
    "JokeInput",
    # Response
    "HealthResponse",
    "RandomJokeResponse",
    "ServiceInfo",
    "StatsResponse",
]
