"""Read access to the stored reading."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from fng.domain.reading.model.value import ReadingSource
from fng.domain.reading.port.repository import ReadingRepository

router = APIRouter(
    prefix="/readings",
    tags=["readings"],
    route_class=DishkaRoute,
)


class ReadingResponse(BaseModel):
    score: int | float
    timestamp: str
    source: ReadingSource
    updated_at: datetime | None


@router.get("/latest")
async def get_latest_reading(repo: FromDishka[ReadingRepository]) -> ReadingResponse:
    """The most recently stored reading."""
    reading = await repo.get_latest()
    if reading is None:
        raise HTTPException(status_code=404, detail="No reading stored yet")

    return ReadingResponse(
        score=reading.score,
        timestamp=reading.timestamp,
        source=reading.source,
        updated_at=reading.updated_at,
    )
