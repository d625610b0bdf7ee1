from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Sequence

from app.models.holiday import HolidayRecord
from app.services import holiday_filters as filters
from app.services.holiday_errors import InvalidYear, MissingParameter, NotFound
from app.services.holiday_stats import compare_collections, compute_statistics
from app.services.holiday_store import RecordStore


MIN_YEAR = 1900
MAX_YEAR = 2100

NO_MATCH_MESSAGE = "No holidays found matching the specified criteria"
LEGACY_NO_MATCH_MESSAGE = (
    "No vacations found for this filter settings. Please check documentation. "
    "Example route would be /v1/2022/BY"
)


class Step(str, enum.Enum):
    EXACT_STATE = "exact_state"
    LEGACY_STATE = "legacy_state"
    EXACT_YEAR = "exact_year"
    DATE_RANGE = "date_range"
    TYPE = "type"
    STATE = "state"
    SEARCH = "search"
    CURRENT = "current"
    UPCOMING = "upcoming"
    ON_DATE = "on_date"
    FIELDS = "fields"


Pipeline = tuple[Step, ...]

BY_YEAR_PIPELINE: Pipeline = (Step.DATE_RANGE, Step.TYPE, Step.STATE, Step.FIELDS)
BY_YEAR_AND_STATE_PIPELINE: Pipeline = (Step.EXACT_STATE, Step.DATE_RANGE, Step.TYPE, Step.FIELDS)
CURRENT_PIPELINE: Pipeline = (Step.CURRENT, Step.STATE, Step.FIELDS)
UPCOMING_PIPELINE: Pipeline = (Step.UPCOMING, Step.STATE, Step.FIELDS)
ON_DATE_PIPELINE: Pipeline = (Step.ON_DATE, Step.STATE, Step.FIELDS)
SEARCH_PIPELINE: Pipeline = (Step.SEARCH, Step.EXACT_YEAR, Step.STATE, Step.FIELDS)
LEGACY_BY_YEAR_PIPELINE: Pipeline = ()
LEGACY_BY_YEAR_AND_STATE_PIPELINE: Pipeline = (Step.LEGACY_STATE,)


@dataclass(frozen=True)
class QueryParams:
    from_: str | None = None
    to: str | None = None
    types: str | None = None
    states: str | None = None
    fields: str | None = None
    query: str | None = None
    year: int | str | None = None
    state: str | None = None
    date: str | None = None
    days: int | str | None = None
    now: datetime | None = None


def parse_year(value: int | str | None) -> int:
    message = f"Year must be a valid number between {MIN_YEAR} and {MAX_YEAR}"
    if isinstance(value, bool) or value is None:
        raise InvalidYear(message)
    if isinstance(value, str):
        value = value.strip()
        if not filters.INTEGER_RE.fullmatch(value):
            raise InvalidYear(message)
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise InvalidYear(message)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidYear(message)
    return year


def _validate_date_range(params: QueryParams) -> None:
    if params.from_ or params.to:
        filters.parse_date_range(params.from_, params.to)


def _validate_csv(parser: Callable[[str], Any], value: str | None) -> None:
    if value:
        parser(value)


def _validate_exact_year(params: QueryParams) -> None:
    if params.year:
        parse_year(params.year)


def _validate_noop(params: QueryParams) -> None:
    return None


_VALIDATORS: dict[Step, Callable[[QueryParams], None]] = {
    Step.EXACT_STATE: lambda p: parse_year(p.year),
    Step.LEGACY_STATE: lambda p: parse_year(p.year),
    Step.EXACT_YEAR: _validate_exact_year,
    Step.DATE_RANGE: _validate_date_range,
    Step.TYPE: lambda p: _validate_csv(filters.parse_types, p.types),
    Step.STATE: lambda p: _validate_csv(filters.parse_states, p.states),
    Step.SEARCH: _validate_noop,
    Step.CURRENT: _validate_noop,
    Step.UPCOMING: lambda p: filters.parse_days(p.days),
    Step.ON_DATE: lambda p: filters.parse_date(p.date),
    Step.FIELDS: lambda p: _validate_csv(filters.parse_fields, p.fields),
}


def _exact_state(records: Sequence[HolidayRecord], params: QueryParams) -> list[HolidayRecord]:
    state = (params.state or "").upper()
    year = parse_year(params.year)
    return [record for record in records if record.stateCode == state and record.year == year]


def _legacy_state(records: Sequence[HolidayRecord], params: QueryParams) -> list[HolidayRecord]:
    year = parse_year(params.year)
    return [record for record in records if record.stateCode == params.state and record.year == year]


def _exact_year(records: Sequence[HolidayRecord], params: QueryParams) -> list[HolidayRecord]:
    if not params.year:
        return list(records)
    year = parse_year(params.year)
    return [record for record in records if record.year == year]


_TRANSFORMS: dict[Step, Callable[[Sequence[HolidayRecord], QueryParams], list[HolidayRecord]]] = {
    Step.EXACT_STATE: _exact_state,
    Step.LEGACY_STATE: _legacy_state,
    Step.EXACT_YEAR: _exact_year,
    Step.DATE_RANGE: lambda records, p: filters.filter_by_date_range(records, p.from_, p.to),
    Step.TYPE: lambda records, p: filters.filter_by_types(records, p.types),
    Step.STATE: lambda records, p: filters.filter_by_states(records, p.states),
    Step.SEARCH: lambda records, p: filters.search(records, p.query),
    Step.CURRENT: lambda records, p: filters.current(records, p.now),
    Step.UPCOMING: lambda records, p: filters.upcoming(records, p.days, p.now),
    Step.ON_DATE: lambda records, p: filters.on_date(records, p.date),
}


def validate_params(pipeline: Pipeline, params: QueryParams) -> None:
    """
    Validate every parameter the pipeline consumes, in pipeline order.

    The first invalid parameter raises; later parameters are not inspected.
    """
    for step in pipeline:
        _VALIDATORS[step](params)


def apply_pipeline(
    records: Sequence[HolidayRecord],
    pipeline: Pipeline,
    params: QueryParams,
    sort_key: Callable[[HolidayRecord], Any] | None = None,
) -> list[dict[str, Any]]:
    """
    Run ``records`` through ``pipeline`` and return plain dicts.

    Record filters run in pipeline order, then the optional sort, then field
    selection. ``Step.FIELDS`` must be the last step when present.
    """
    if Step.FIELDS in pipeline and pipeline[-1] is not Step.FIELDS:
        raise ValueError("field selection must be the last pipeline step")

    result: list[HolidayRecord] = list(records)
    for step in pipeline:
        if step is Step.FIELDS:
            continue
        result = _TRANSFORMS[step](result, params)

    if sort_key is not None:
        result.sort(key=sort_key)

    if Step.FIELDS in pipeline:
        return filters.select_fields(result, params.fields)
    return [record.to_dict() for record in result]


def _by_start(record: HolidayRecord) -> datetime:
    return record.start_at


def _by_year_and_start(record: HolidayRecord) -> tuple[int, datetime]:
    return record.year, record.start_at


async def holidays_by_year(
    store: RecordStore,
    year: int | str,
    *,
    from_: str | None = None,
    to: str | None = None,
    types: str | None = None,
    states: str | None = None,
    fields: str | None = None,
) -> list[dict[str, Any]]:
    year_num = parse_year(year)
    params = QueryParams(from_=from_, to=to, types=types, states=states, fields=fields)
    validate_params(BY_YEAR_PIPELINE, params)

    records = await store.load_year(year_num)
    holidays = apply_pipeline(records, BY_YEAR_PIPELINE, params)
    if not holidays:
        raise NotFound(NO_MATCH_MESSAGE)
    return holidays


async def holidays_by_year_and_state(
    store: RecordStore,
    year: int | str,
    state: str,
    *,
    from_: str | None = None,
    to: str | None = None,
    types: str | None = None,
    fields: str | None = None,
) -> list[dict[str, Any]]:
    year_num = parse_year(year)
    params = QueryParams(year=year_num, state=state, from_=from_, to=to, types=types, fields=fields)
    validate_params(BY_YEAR_AND_STATE_PIPELINE, params)

    records = await store.load_year(year_num)
    holidays = apply_pipeline(records, BY_YEAR_AND_STATE_PIPELINE, params)
    if not holidays:
        raise NotFound(NO_MATCH_MESSAGE)
    return holidays


async def current_holidays(
    store: RecordStore,
    *,
    now: datetime,
    states: str | None = None,
    fields: str | None = None,
) -> list[dict[str, Any]]:
    params = QueryParams(now=now, states=states, fields=fields)
    validate_params(CURRENT_PIPELINE, params)
    return apply_pipeline(await store.all_records(), CURRENT_PIPELINE, params)


async def upcoming_holidays(
    store: RecordStore,
    days: int | str,
    *,
    now: datetime,
    states: str | None = None,
    fields: str | None = None,
) -> list[dict[str, Any]]:
    params = QueryParams(days=days, now=now, states=states, fields=fields)
    validate_params(UPCOMING_PIPELINE, params)
    return apply_pipeline(await store.all_records(), UPCOMING_PIPELINE, params, sort_key=_by_start)


async def holidays_on_date(
    store: RecordStore,
    date: str,
    *,
    states: str | None = None,
    fields: str | None = None,
) -> dict[str, Any]:
    params = QueryParams(date=date, states=states, fields=fields)
    validate_params(ON_DATE_PIPELINE, params)
    holidays = apply_pipeline(await store.all_records(), ON_DATE_PIPELINE, params)
    return {"date": date, "isHoliday": len(holidays) > 0, "holidays": holidays}


async def search_holidays(
    store: RecordStore,
    query: str | None,
    *,
    year: int | str | None = None,
    states: str | None = None,
    fields: str | None = None,
) -> dict[str, Any]:
    if not query:
        raise MissingParameter('Query parameter "q" is required')
    params = QueryParams(query=query, year=year, states=states, fields=fields)
    validate_params(SEARCH_PIPELINE, params)
    holidays = apply_pipeline(
        await store.all_records(), SEARCH_PIPELINE, params, sort_key=_by_year_and_start
    )
    return {"query": query, "results": len(holidays), "holidays": holidays}


async def holiday_statistics(store: RecordStore, year: int | str) -> dict[str, Any]:
    year_num = parse_year(year)
    return compute_statistics(year_num, await store.load_year(year_num))


async def compare_years(store: RecordStore, year_a: int | str, year_b: int | str) -> dict[str, Any]:
    year_a_num = parse_year(year_a)
    year_b_num = parse_year(year_b)
    records_a = await store.load_year(year_a_num)
    records_b = await store.load_year(year_b_num)
    return compare_collections(year_a_num, records_a, year_b_num, records_b)


async def legacy_holidays_by_year(store: RecordStore, year: int | str) -> list[dict[str, Any]]:
    year_num = parse_year(year)
    records = await store.load_year(year_num)
    return apply_pipeline(records, LEGACY_BY_YEAR_PIPELINE, QueryParams())


async def legacy_holidays_by_year_and_state(
    store: RecordStore, year: int | str, state: str
) -> list[dict[str, Any]]:
    year_num = parse_year(year)
    params = QueryParams(year=year_num, state=state)
    validate_params(LEGACY_BY_YEAR_AND_STATE_PIPELINE, params)

    records = await store.load_year(year_num)
    holidays = apply_pipeline(records, LEGACY_BY_YEAR_AND_STATE_PIPELINE, params)
    if not holidays:
        raise NotFound(LEGACY_NO_MATCH_MESSAGE)
    return holidays
