from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from pathlib import Path

import orjson

from app.models.holiday import HolidayRecord
from app.services.holiday_errors import DataUnavailable


logger = logging.getLogger(__name__)

YearCollection = tuple[HolidayRecord, ...]


def _discover_years(data_dir: Path) -> list[int]:
    try:
        candidates = [path.stem for path in data_dir.glob("*.json") if path.is_file()]
    except OSError:
        logger.exception("Could not list holiday data directory %s", data_dir)
        return []
    return sorted(int(stem) for stem in candidates if stem.isascii() and stem.isdigit())


def _parse_year_file(raw: bytes, year: int) -> YearCollection:
    payload = orjson.loads(raw)
    if not isinstance(payload, list):
        raise ValueError(f"{year}.json must contain a JSON array")
    return tuple(HolidayRecord.from_dict(entry) for entry in payload)


class RecordStore:
    """
    Read-only access to the per-year holiday files in ``data_dir``.

    Available years are discovered once on construction. Each year file is read
    at most once and then served from the in-memory cache until
    :meth:`clear_cache` is called.
    """

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)
        self._available_years = _discover_years(self.data_dir)
        self._cache: dict[int, YearCollection] = {}
        self._locks: dict[int, asyncio.Lock] = defaultdict(asyncio.Lock)

    def available_years(self) -> list[int]:
        return list(self._available_years)

    def cached_years(self) -> list[int]:
        return sorted(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()

    def _read_year_file(self, year: int) -> bytes:
        return (self.data_dir / f"{year}.json").read_bytes()

    async def load_year(self, year: int) -> YearCollection:
        cached = self._cache.get(year)
        if cached is not None:
            return cached

        if year not in self._available_years:
            raise DataUnavailable(f"Data for year {year} not found", year=year, missing=True)

        async with self._locks[year]:
            # Another request may have finished the load while we waited.
            cached = self._cache.get(year)
            if cached is not None:
                return cached

            try:
                raw = await asyncio.to_thread(self._read_year_file, year)
            except OSError as exc:
                raise DataUnavailable(f"Data for year {year} not found", year=year, missing=True) from exc

            try:
                records = _parse_year_file(raw, year)
            except (orjson.JSONDecodeError, ValueError, TypeError) as exc:
                logger.exception("Holiday data for %s is malformed", year)
                raise DataUnavailable(f"Data for year {year} is invalid", year=year, missing=False) from exc

            logger.debug("Loaded %d holidays for %s", len(records), year)
            self._cache[year] = records
            return records

    async def all_records(self) -> list[HolidayRecord]:
        records: list[HolidayRecord] = []
        for year in self._available_years:
            try:
                records.extend(await self.load_year(year))
            except DataUnavailable as exc:
                logger.warning("Skipping holidays for %s: %s", year, exc.message)
        return records

    async def is_healthy(self) -> bool:
        if not self._available_years:
            return False
        try:
            await self.load_year(self._available_years[0])
        except DataUnavailable:
            return False
        return True
