"""
API dependency injection.

Sandi Metz Principles:
- Single Responsibility: Dependency lookup and injection
- Dependency Inversion: Routes receive services, never build clients
"""

from fastapi import Request

from comedy_club.services.joke_service import JokeService


def get_joke_service(request: Request) -> JokeService:
    """
    Get joke service from application state.

    Args:
        request: FastAPI request

    Returns:
        Joke service built during startup

    Raises:
        RuntimeError: If the service is not initialized
    """
    app_state = getattr(request.app.state, "app_state", None)
    service = getattr(app_state, "joke_service", None)
    if service is None:
        raise RuntimeError("JokeService not initialized. Check lifespan setup.")
    return service
