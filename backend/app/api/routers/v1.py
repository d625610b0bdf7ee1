from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.schemas.holiday import ErrorOut, HolidayOut
from app.services import holiday_queries as queries
from app.services.holiday_store import RecordStore


router = APIRouter(responses={404: {"model": ErrorOut}})


@router.get("/{year}", response_model=list[HolidayOut])
async def by_year(year: str, store: RecordStore = Depends(get_store)) -> list[dict[str, Any]]:
    return await queries.legacy_holidays_by_year(store, year)


@router.get("/{year}/{state}", response_model=list[HolidayOut])
async def by_year_and_state(year: str, state: str, store: RecordStore = Depends(get_store)) -> list[dict[str, Any]]:
    # Legacy clients rely on the case-sensitive state match.
    return await queries.legacy_holidays_by_year_and_state(store, year, state)
