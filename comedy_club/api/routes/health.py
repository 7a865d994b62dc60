"""
Health check endpoints.

Sandi Metz Principles:
- Single Responsibility: Health check logic only
- Small functions: Each check isolated
- Clear naming: Descriptive endpoint names
"""

from typing import Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from comedy_club import __version__
from comedy_club.api.deps import get_joke_service
from comedy_club.exceptions import AppError
from comedy_club.models.error import UnhealthyResponse
from comedy_club.models.response import HealthResponse, ServiceInfo
from comedy_club.services.joke_service import JokeService
from comedy_club.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={500: {"model": UnhealthyResponse, "description": "Dependency down"}},
)
async def health_check(
    service: JokeService = Depends(get_joke_service),  # noqa: B008
) -> Union[HealthResponse, JSONResponse]:
    """
    Liveness check of MongoDB and Redis.

    Returns:
        Healthy status, or 500 naming the failing dependency
    """
    try:
        return await service.check_health()
    except AppError as e:
        logger.error("Health check failed", error=str(e))
        return JSONResponse(
            status_code=500, content=UnhealthyResponse(error=str(e)).model_dump()
        )


@router.get("/", response_model=ServiceInfo)
async def root(request: Request) -> ServiceInfo:
    """Root endpoint with API information."""
    return ServiceInfo(
        name=request.app.title,
        version=__version__,
        endpoints={
            "random_joke": "/api/jokes/random",
            "jokes": "/api/jokes",
            "stats": "/api/stats",
            "health": "/health",
        },
    )
