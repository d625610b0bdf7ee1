import unittest
from datetime import timezone

import orjson

from app.config import DEFAULT_DATA_DIR
from app.models.enums import HOLIDAY_TYPES, STATE_CODES
from app.models.holiday import HolidayRecord


class TestBundledYearFiles(unittest.TestCase):
    """Checks every committed year file, not the fixtures."""

    def setUp(self) -> None:
        self.files = sorted(DEFAULT_DATA_DIR.glob("*.json"))

    def test_files_present(self) -> None:
        self.assertTrue(self.files, f"No year files found in {DEFAULT_DATA_DIR}")
        for path in self.files:
            with self.subTest(file=path.name):
                self.assertTrue(path.stem.isdigit())

    def test_entries_are_well_formed(self) -> None:
        for path in self.files:
            year = int(path.stem)
            payload = orjson.loads(path.read_bytes())
            self.assertIsInstance(payload, list)
            self.assertTrue(payload)
            for entry in payload:
                with self.subTest(file=path.name, slug=entry.get("slug")):
                    self.assertEqual(set(entry), {"start", "end", "year", "stateCode", "name", "slug"})
                    record = HolidayRecord.from_dict(entry)
                    self.assertEqual(record.year, year)
                    self.assertIn(record.stateCode, STATE_CODES)
                    self.assertIn(record.name, HOLIDAY_TYPES)
                    self.assertEqual(record.slug, f"{record.name}-{record.year}-{record.stateCode}")
                    self.assertLessEqual(record.start_at, record.end_at)
                    self.assertEqual(record.start_at.tzinfo, timezone.utc)

    def test_slugs_are_unique_per_year(self) -> None:
        for path in self.files:
            slugs = [entry["slug"] for entry in orjson.loads(path.read_bytes())]
            with self.subTest(file=path.name):
                self.assertEqual(len(slugs), len(set(slugs)))


if __name__ == "__main__":
    unittest.main()
