"""
API Routes module.

Contains all API endpoint routers.
"""

from comedy_club.api.routes import health, jokes, stats

__all__ = ["health", "jokes", "stats"]
