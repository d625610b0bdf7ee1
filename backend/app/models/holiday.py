from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def parse_timestamp(value: str) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MMZ`` (seconds optional) into an aware UTC datetime."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class HolidayRecord:
    start: str
    end: str
    year: int
    stateCode: str
    name: str
    slug: str
    start_at: datetime = field(repr=False, compare=False)
    end_at: datetime = field(repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HolidayRecord":
        if not isinstance(data, dict):
            raise ValueError("holiday entry must be an object")
        for key in ("start", "end", "stateCode", "name", "slug"):
            if not isinstance(data.get(key), str):
                raise ValueError(f"holiday entry field {key!r} must be a string")
        year = data.get("year")
        if not isinstance(year, int) or isinstance(year, bool):
            raise ValueError("holiday entry field 'year' must be an integer")

        start_at = parse_timestamp(data["start"])
        end_at = parse_timestamp(data["end"])
        if end_at < start_at:
            raise ValueError(f"holiday {data['slug']!r} ends before it starts")

        return cls(
            start=data["start"],
            end=data["end"],
            year=year,
            stateCode=data["stateCode"],
            name=data["name"],
            slug=data["slug"],
            start_at=start_at,
            end_at=end_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "year": self.year,
            "stateCode": self.stateCode,
            "name": self.name,
            "slug": self.slug,
        }
