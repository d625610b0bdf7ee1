from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterable, Sequence

from app.models.enums import HOLIDAY_FIELDS, HOLIDAY_TYPES, STATE_CODES, HolidayField
from app.models.holiday import HolidayRecord
from app.services.holiday_errors import (
    InvalidDate,
    InvalidField,
    InvalidRange,
    InvalidState,
    InvalidType,
)


_ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
INTEGER_RE = re.compile(r"[+-]?[0-9]+")

RANGE_FLOOR = datetime(1900, 1, 1, tzinfo=timezone.utc)
RANGE_CEILING = datetime(2100, 12, 31, tzinfo=timezone.utc)

MIN_LOOKAHEAD_DAYS = 1
MAX_LOOKAHEAD_DAYS = 365


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",")]


def parse_date(value: str | None) -> datetime:
    """
    Parse a strict ``YYYY-MM-DD`` string into midnight UTC.

    Rejects anything that is not a real calendar date, e.g. ``2023-02-29``.
    """
    if not value or not isinstance(value, str):
        raise InvalidDate("Date must be a non-empty string")
    candidate = value.strip()
    if not _ISO_DATE_RE.match(candidate):
        raise InvalidDate("Date must be in YYYY-MM-DD format")
    year, month, day = (int(part) for part in candidate.split("-"))
    try:
        parsed = date(year, month, day)
    except ValueError:
        raise InvalidDate(f"Invalid date: {candidate}")
    return datetime(parsed.year, parsed.month, parsed.day, tzinfo=timezone.utc)


def parse_date_range(from_: str | None, to: str | None) -> tuple[datetime, datetime]:
    from_at = parse_date(from_) if from_ else RANGE_FLOOR
    to_at = parse_date(to) if to else RANGE_CEILING
    if from_at > to_at:
        raise InvalidRange("From date must be before or equal to to date")
    return from_at, to_at


def parse_types(value: str) -> set[str]:
    types = [item.lower() for item in _split_csv(value)]
    invalid = [item for item in types if item not in HOLIDAY_TYPES]
    if invalid:
        raise InvalidType(
            f"Invalid holiday types: {', '.join(invalid)}. Valid types are: {', '.join(HOLIDAY_TYPES)}"
        )
    return set(types)


def parse_states(value: str) -> set[str]:
    states = [item.upper() for item in _split_csv(value)]
    invalid = [item for item in states if item not in STATE_CODES]
    if invalid:
        raise InvalidState(
            f"Invalid state codes: {', '.join(invalid)}. Valid codes are: {', '.join(STATE_CODES)}"
        )
    return set(states)


def parse_fields(value: str) -> list[HolidayField]:
    fields = _split_csv(value)
    invalid = [item for item in fields if item not in HOLIDAY_FIELDS]
    if invalid:
        raise InvalidField(
            f"Invalid fields: {', '.join(invalid)}. Valid fields are: {', '.join(HOLIDAY_FIELDS)}"
        )
    return [HolidayField(item) for item in fields]


def parse_days(value: int | str | None) -> int:
    message = f"Days must be a number between {MIN_LOOKAHEAD_DAYS} and {MAX_LOOKAHEAD_DAYS}"
    if isinstance(value, bool):
        raise InvalidRange(message)
    if isinstance(value, str):
        value = value.strip()
        if not INTEGER_RE.fullmatch(value):
            raise InvalidRange(message)
    try:
        days = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidRange(message)
    if days < MIN_LOOKAHEAD_DAYS or days > MAX_LOOKAHEAD_DAYS:
        raise InvalidRange(message)
    return days


def overlaps(record: HolidayRecord, from_at: datetime, to_at: datetime) -> bool:
    return record.start_at <= to_at and record.end_at >= from_at


def filter_by_date_range(
    records: Sequence[HolidayRecord], from_: str | None = None, to: str | None = None
) -> list[HolidayRecord]:
    if not from_ and not to:
        return list(records)
    from_at, to_at = parse_date_range(from_, to)
    return [record for record in records if overlaps(record, from_at, to_at)]


def filter_by_types(records: Sequence[HolidayRecord], types: str | None = None) -> list[HolidayRecord]:
    if not types:
        return list(records)
    wanted = parse_types(types)
    return [record for record in records if record.name.lower() in wanted]


def filter_by_states(records: Sequence[HolidayRecord], states: str | None = None) -> list[HolidayRecord]:
    if not states:
        return list(records)
    wanted = parse_states(states)
    return [record for record in records if record.stateCode.upper() in wanted]


def search(records: Sequence[HolidayRecord], query: str | None = None) -> list[HolidayRecord]:
    term = (query or "").strip().lower()
    if not term:
        return list(records)
    return [
        record
        for record in records
        if term in record.name.lower() or term in record.slug.lower() or term in record.stateCode.lower()
    ]


def _field_value(record: HolidayRecord, field: HolidayField) -> Any:
    if field is HolidayField.start:
        return record.start
    if field is HolidayField.end:
        return record.end
    if field is HolidayField.year:
        return record.year
    if field is HolidayField.stateCode:
        return record.stateCode
    if field is HolidayField.name:
        return record.name
    if field is HolidayField.slug:
        return record.slug
    raise InvalidField(f"Invalid fields: {field}")


def project(records: Iterable[HolidayRecord], fields: list[HolidayField]) -> list[dict[str, Any]]:
    return [{field.value: _field_value(record, field) for field in fields} for record in records]


def select_fields(records: Sequence[HolidayRecord], fields: str | None = None) -> list[dict[str, Any]]:
    if not fields:
        return [record.to_dict() for record in records]
    return project(records, parse_fields(fields))


def on_date(records: Sequence[HolidayRecord], date_str: str) -> list[HolidayRecord]:
    target = parse_date(date_str)
    return [record for record in records if record.start_at <= target <= record.end_at]


def upcoming(records: Sequence[HolidayRecord], days: int | str, now: datetime) -> list[HolidayRecord]:
    horizon = now + timedelta(days=parse_days(days))
    return [record for record in records if now <= record.start_at <= horizon]


def current(records: Sequence[HolidayRecord], now: datetime) -> list[HolidayRecord]:
    return [record for record in records if record.start_at <= now <= record.end_at]
