from __future__ import annotations

import math
from datetime import timedelta
from typing import Any, Sequence

from app.models.holiday import HolidayRecord


ONE_DAY = timedelta(days=1)


def holiday_duration(record: HolidayRecord) -> int:
    """Inclusive day count: a holiday starting and ending on the same day lasts 1 day."""
    return math.ceil((record.end_at - record.start_at) / ONE_DAY) + 1


def _count_by(records: Sequence[HolidayRecord], attr: str) -> dict[str, int]:
    counts: dict[str, int] = {}
    for record in records:
        key = getattr(record, attr)
        counts[key] = counts.get(key, 0) + 1
    return counts


def _with_duration(record: HolidayRecord, duration: int) -> dict[str, Any]:
    data = record.to_dict()
    data["duration"] = duration
    return data


def compute_statistics(year: int, records: Sequence[HolidayRecord]) -> dict[str, Any]:
    total_days = 0
    longest: tuple[HolidayRecord, int] | None = None
    shortest: tuple[HolidayRecord, int] | None = None

    for record in records:
        duration = holiday_duration(record)
        total_days += duration
        # Strict comparisons keep the first record on ties.
        if longest is None or duration > longest[1]:
            longest = (record, duration)
        if shortest is None or duration < shortest[1]:
            shortest = (record, duration)

    # Halves round up: 2.125 -> 2.13.
    average = math.floor(total_days / len(records) * 100 + 0.5) / 100 if records else 0.0

    return {
        "year": year,
        "totalHolidays": len(records),
        "byState": _count_by(records, "stateCode"),
        "byType": _count_by(records, "name"),
        "averageDuration": average,
        "longestHoliday": _with_duration(*longest) if longest else None,
        "shortestHoliday": _with_duration(*shortest) if shortest else None,
    }


def _breakdown(
    records_a: Sequence[HolidayRecord], records_b: Sequence[HolidayRecord], attr: str
) -> dict[str, dict[str, int]]:
    counts_a = _count_by(records_a, attr)
    counts_b = _count_by(records_b, attr)
    keys = list(dict.fromkeys([*counts_a, *counts_b]))
    return {
        key: {
            "countA": counts_a.get(key, 0),
            "countB": counts_b.get(key, 0),
            "difference": counts_b.get(key, 0) - counts_a.get(key, 0),
        }
        for key in keys
    }


def compare_collections(
    year_a: int,
    records_a: Sequence[HolidayRecord],
    year_b: int,
    records_b: Sequence[HolidayRecord],
) -> dict[str, Any]:
    return {
        "yearA": year_a,
        "yearB": year_b,
        "totalHolidaysA": len(records_a),
        "totalHolidaysB": len(records_b),
        "difference": len(records_b) - len(records_a),
        "byState": _breakdown(records_a, records_b, "stateCode"),
        "byType": _breakdown(records_a, records_b, "name"),
    }
