"""
Statistics endpoint.
"""

from typing import Union

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from comedy_club.api.deps import get_joke_service
from comedy_club.api.routes.jokes import error_response
from comedy_club.models.error import ErrorResponse
from comedy_club.models.response import StatsResponse
from comedy_club.services.joke_service import JokeService
from comedy_club.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get(
    "/stats",
    response_model=StatsResponse,
    responses={500: {"model": ErrorResponse, "description": "Server error"}},
)
async def get_stats(
    service: JokeService = Depends(get_joke_service),  # noqa: B008
) -> Union[StatsResponse, JSONResponse]:
    """
    Get display statistics, computed fresh on every call.

    Args:
        service: Joke service (injected)

    Returns:
        Totals and top jokes, or an error payload
    """
    try:
        return await service.get_statistics()
    except Exception as e:
        logger.error("Unexpected error fetching stats", error=str(e))
        return error_response(500, ErrorResponse.internal_error())
