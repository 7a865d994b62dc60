"""
Joke endpoints.

Sandi Metz Principles:
- Single Responsibility: HTTP request handling
- Small functions: Minimal logic in endpoints
- Dependency Injection: Service injected
"""

from typing import List, Union

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from comedy_club.api.deps import get_joke_service
from comedy_club.exceptions import (
    InvalidIdentifierError,
    JokeNotFoundError,
    NoJokesAvailableError,
    StoreUnavailableError,
)
from comedy_club.models.error import ErrorResponse
from comedy_club.models.joke import Joke
from comedy_club.models.response import RandomJokeResponse
from comedy_club.services.joke_service import JokeService
from comedy_club.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)

ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Joke not found"},
    500: {"model": ErrorResponse, "description": "Server error"},
}


def error_response(status_code: int, error: ErrorResponse) -> JSONResponse:
    """Render an error payload."""
    return JSONResponse(status_code=status_code, content=error.model_dump())


@router.get(
    "/jokes/random", response_model=RandomJokeResponse, responses=ERROR_RESPONSES
)
async def serve_random_joke(
    service: JokeService = Depends(get_joke_service),  # noqa: B008
) -> Union[RandomJokeResponse, JSONResponse]:
    """
    Serve a random joke and count the display.

    Args:
        service: Joke service (injected)

    Returns:
        Joke with its updated display count, or an error payload
    """
    try:
        return await service.serve_random_joke()
    except NoJokesAvailableError:
        return error_response(404, ErrorResponse.no_jokes())
    except StoreUnavailableError as e:
        logger.error("Store unavailable", error=str(e))
        return error_response(500, ErrorResponse.serve_failed())
    except Exception as e:
        logger.error("Unexpected error serving joke", error=str(e))
        return error_response(500, ErrorResponse.serve_failed())


@router.get("/jokes/{joke_id}", response_model=Joke, responses=ERROR_RESPONSES)
async def get_joke(
    joke_id: str,
    service: JokeService = Depends(get_joke_service),  # noqa: B008
) -> Union[Joke, JSONResponse]:
    """
    Get a joke by id.

    Args:
        joke_id: Joke identifier
        service: Joke service (injected)

    Returns:
        The joke, or an error payload
    """
    try:
        return await service.get_joke_by_id(joke_id)
    except (JokeNotFoundError, InvalidIdentifierError) as e:
        logger.info("Joke lookup missed", joke_id=joke_id, reason=type(e).__name__)
        return error_response(404, ErrorResponse.joke_not_found())
    except Exception as e:
        logger.error("Unexpected error fetching joke", joke_id=joke_id, error=str(e))
        return error_response(500, ErrorResponse.internal_error())


@router.get("/jokes", response_model=List[Joke], responses={500: ERROR_RESPONSES[500]})
async def list_jokes(
    service: JokeService = Depends(get_joke_service),  # noqa: B008
) -> Union[List[Joke], JSONResponse]:
    """
    List all jokes.

    Args:
        service: Joke service (injected)

    Returns:
        Every stored joke, or an error payload
    """
    try:
        return await service.list_all_jokes()
    except Exception as e:
        logger.error("Unexpected error listing jokes", error=str(e))
        return error_response(500, ErrorResponse.internal_error())
