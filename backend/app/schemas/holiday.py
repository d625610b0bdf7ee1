from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class HolidayOut(BaseModel):
    start: str
    end: str
    year: int
    stateCode: str
    name: str
    slug: str


class HolidayWithDurationOut(HolidayOut):
    duration: int


class DateLookupOut(BaseModel):
    date: str
    isHoliday: bool
    # Entries may be projected down to a subset of HolidayOut's fields.
    holidays: list[dict[str, Any]]


class SearchOut(BaseModel):
    query: str
    results: int
    holidays: list[dict[str, Any]]


class HolidayStatisticsOut(BaseModel):
    year: int
    totalHolidays: int
    byState: dict[str, int]
    byType: dict[str, int]
    averageDuration: float
    longestHoliday: HolidayWithDurationOut | None = None
    shortestHoliday: HolidayWithDurationOut | None = None


class CountComparisonOut(BaseModel):
    countA: int
    countB: int
    difference: int


class YearComparisonOut(BaseModel):
    yearA: int
    yearB: int
    totalHolidaysA: int
    totalHolidaysB: int
    difference: int
    byState: dict[str, CountComparisonOut]
    byType: dict[str, CountComparisonOut]


class ErrorBody(BaseModel):
    kind: str
    message: str


class ErrorOut(BaseModel):
    error: ErrorBody
