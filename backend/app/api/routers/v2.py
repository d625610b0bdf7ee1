from __future__ import annotations

from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_now, get_store
from app.schemas.holiday import DateLookupOut, ErrorOut, HolidayStatisticsOut, SearchOut, YearComparisonOut
from app.services import holiday_queries as queries
from app.services.holiday_store import RecordStore


router = APIRouter(responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}})


# Named routes come first so "/current" is never read as a year.
@router.get("/current", response_model=list[dict[str, Any]])
async def current(
    states: str | None = None,
    fields: str | None = None,
    store: RecordStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> list[dict[str, Any]]:
    return await queries.current_holidays(store, now=now, states=states, fields=fields)


@router.get("/next/{days}", response_model=list[dict[str, Any]])
async def next_days(
    days: str,
    states: str | None = None,
    fields: str | None = None,
    store: RecordStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> list[dict[str, Any]]:
    return await queries.upcoming_holidays(store, days, now=now, states=states, fields=fields)


@router.get("/date/{date}", response_model=DateLookupOut)
async def on_date(
    date: str,
    states: str | None = None,
    fields: str | None = None,
    store: RecordStore = Depends(get_store),
) -> dict[str, Any]:
    return await queries.holidays_on_date(store, date, states=states, fields=fields)


@router.get("/search", response_model=SearchOut)
async def search(
    q: str | None = None,
    states: str | None = None,
    year: str | None = None,
    fields: str | None = None,
    store: RecordStore = Depends(get_store),
) -> dict[str, Any]:
    return await queries.search_holidays(store, q, year=year, states=states, fields=fields)


@router.get("/stats/{year}", response_model=HolidayStatisticsOut)
async def stats(year: str, store: RecordStore = Depends(get_store)) -> dict[str, Any]:
    return await queries.holiday_statistics(store, year)


@router.get("/compare/{year_a}/{year_b}", response_model=YearComparisonOut)
async def compare(year_a: str, year_b: str, store: RecordStore = Depends(get_store)) -> dict[str, Any]:
    return await queries.compare_years(store, year_a, year_b)


@router.get("/{year}", response_model=list[dict[str, Any]])
async def by_year(
    year: str,
    from_: str | None = Query(None, alias="from"),
    to: str | None = None,
    type_: str | None = Query(None, alias="type"),
    states: str | None = None,
    fields: str | None = None,
    store: RecordStore = Depends(get_store),
) -> list[dict[str, Any]]:
    return await queries.holidays_by_year(
        store, year, from_=from_, to=to, types=type_, states=states, fields=fields
    )


@router.get("/{year}/{state}", response_model=list[dict[str, Any]])
async def by_year_and_state(
    year: str,
    state: str,
    from_: str | None = Query(None, alias="from"),
    to: str | None = None,
    type_: str | None = Query(None, alias="type"),
    fields: str | None = None,
    store: RecordStore = Depends(get_store),
) -> list[dict[str, Any]]:
    return await queries.holidays_by_year_and_state(
        store, year, state, from_=from_, to=to, types=type_, fields=fields
    )
