"""Manual refresh trigger."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from fng.application.api.v1.errors import error_response
from fng.domain.reading.model.value import ReadingSource
from fng.domain.reading.service.refresh import ReadingContext, refresh_reading
from fng.domain.shared.error import FNGError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/refresh",
    tags=["refresh"],
    route_class=DishkaRoute,
)


class RefreshResponse(BaseModel):
    """Result of a completed pipeline run."""

    ok: bool = True
    score: int | float
    timestamp: str
    source: ReadingSource


class RefreshFailure(BaseModel):
    ok: bool = False
    error: str


@router.api_route(
    "",
    methods=["GET", "POST"],
    response_model=RefreshResponse,
    responses={500: {"model": RefreshFailure}},
)
async def refresh(ctx: FromDishka[ReadingContext]) -> RefreshResponse | JSONResponse:
    """Run fetch, persist and broadcast now and return the reading.

    Blocks until the whole pipeline has finished. Any method other than GET
    or POST is answered with 405 by the router before anything runs.
    """
    try:
        reading = await refresh_reading(ctx)
    except FNGError as e:
        logger.error("Manual refresh failed: %s", e.message)
        return error_response(e)

    return RefreshResponse(
        score=reading.score,
        timestamp=reading.timestamp,
        source=reading.source,
    )
