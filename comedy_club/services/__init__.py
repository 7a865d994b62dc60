"""
Services module.

Contains business logic services for the application.
"""

from comedy_club.services.joke_service import JokeService
from comedy_club.services.seeder import DEFAULT_JOKES, seed_database

__all__ = ["JokeService", "DEFAULT_JOKES", "seed_database"]
