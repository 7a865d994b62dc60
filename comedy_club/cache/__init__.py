"""
Cache module.

Best-effort Redis snapshots of served jokes.
"""

from comedy_club.cache.joke_cache import JokeCache

__all__ = ["JokeCache"]
