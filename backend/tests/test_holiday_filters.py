import unittest
from datetime import datetime, timezone

from app.services.holiday_errors import (
    ErrorKind,
    InvalidDate,
    InvalidField,
    InvalidRange,
    InvalidState,
    InvalidType,
)
from app.services.holiday_filters import (
    current,
    filter_by_date_range,
    filter_by_states,
    filter_by_types,
    on_date,
    parse_date,
    parse_days,
    search,
    select_fields,
    upcoming,
)
from holiday_fixtures import make_record


class TestDateParsing(unittest.TestCase):
    def test_valid_date_is_utc_midnight(self) -> None:
        self.assertEqual(parse_date("2024-08-15"), datetime(2024, 8, 15, tzinfo=timezone.utc))

    def test_leap_day(self) -> None:
        self.assertEqual(parse_date("2024-02-29").day, 29)
        with self.assertRaises(InvalidDate):
            parse_date("2023-02-29")

    def test_rejects_malformed(self) -> None:
        for value in ["", "2024-1-01", "2024/01/01", "20240101", "2024-13-01", "2024-04-31", "2024-00-10", "abcd-ef-gh", "２０２４-01-01", "2024-٠١-01"]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidDate) as ctx:
                    parse_date(value)
                self.assertEqual(ctx.exception.kind, ErrorKind.INVALID_DATE)


class TestDateRange(unittest.TestCase):
    def setUp(self) -> None:
        self.records = [make_record()]

    def test_overlap_inside_range(self) -> None:
        self.assertEqual(filter_by_date_range(self.records, "2024-08-01", "2024-08-31"), self.records)

    def test_no_overlap(self) -> None:
        self.assertEqual(filter_by_date_range(self.records, "2024-01-01", "2024-06-30"), [])

    def test_touching_boundaries_overlap(self) -> None:
        self.assertEqual(len(filter_by_date_range(self.records, "2024-09-08", "2024-12-31")), 1)
        self.assertEqual(len(filter_by_date_range(self.records, "2024-01-01", "2024-07-25")), 1)

    def test_entirely_after_to_is_excluded(self) -> None:
        self.assertEqual(filter_by_date_range(self.records, "2024-01-01", "2024-07-24"), [])

    def test_open_ended_bounds(self) -> None:
        self.assertEqual(len(filter_by_date_range(self.records, from_="2024-09-01")), 1)
        self.assertEqual(filter_by_date_range(self.records, from_="2024-09-09"), [])
        self.assertEqual(len(filter_by_date_range(self.records, to="2024-07-25")), 1)

    def test_no_bounds_returns_copy(self) -> None:
        result = filter_by_date_range(self.records)
        self.assertEqual(result, self.records)
        self.assertIsNot(result, self.records)

    def test_from_after_to(self) -> None:
        with self.assertRaises(InvalidRange):
            filter_by_date_range(self.records, "2024-09-01", "2024-08-01")

    def test_invalid_bound(self) -> None:
        with self.assertRaises(InvalidDate):
            filter_by_date_range(self.records, "2024-02-30", None)


class TestVocabularyFilters(unittest.TestCase):
    def setUp(self) -> None:
        self.records = [
            make_record(),
            make_record(state="HH", name="fruehjahrsferien", start="2024-03-04T00:00Z", end="2024-03-15T00:00Z"),
            make_record(state="BE", name="herbstferien", start="2024-10-21T00:00Z", end="2024-11-02T00:00Z"),
        ]

    def test_types_case_insensitive(self) -> None:
        self.assertEqual(filter_by_types(self.records, "SOMMERFERIEN"), [self.records[0]])

    def test_types_ignore_whitespace(self) -> None:
        result = filter_by_types(self.records, " sommerferien , Herbstferien ")
        self.assertEqual([r.name for r in result], ["sommerferien", "herbstferien"])

    def test_invalid_types_lists_every_offender(self) -> None:
        with self.assertRaises(InvalidType) as ctx:
            filter_by_types(self.records, "invalidferien,sommerferien,badferien")
        self.assertIn("invalidferien", ctx.exception.message)
        self.assertIn("badferien", ctx.exception.message)

    def test_states_case_insensitive(self) -> None:
        result = filter_by_states(self.records, "by, hh")
        self.assertEqual([r.stateCode for r in result], ["BY", "HH"])

    def test_invalid_states_lists_every_offender(self) -> None:
        with self.assertRaises(InvalidState) as ctx:
            filter_by_states(self.records, "XX,BY,YY")
        self.assertIn("XX", ctx.exception.message)
        self.assertIn("YY", ctx.exception.message)

    def test_empty_parameter_is_no_filter(self) -> None:
        self.assertEqual(filter_by_types(self.records, ""), self.records)
        self.assertEqual(filter_by_states(self.records, None), self.records)


class TestSearch(unittest.TestCase):
    def setUp(self) -> None:
        self.records = [
            make_record(),
            make_record(state="BE", name="herbstferien", start="2024-10-21T00:00Z", end="2024-11-02T00:00Z"),
        ]

    def test_matches_name_slug_and_state(self) -> None:
        self.assertEqual(search(self.records, "SOMMER"), [self.records[0]])
        self.assertEqual(search(self.records, "2024-be"), [self.records[1]])
        self.assertEqual(search(self.records, "be"), [self.records[1]])

    def test_blank_query_returns_input(self) -> None:
        self.assertEqual(search(self.records, "   "), self.records)
        self.assertEqual(search(self.records, None), self.records)


class TestSelectFields(unittest.TestCase):
    def test_projection_keeps_requested_order(self) -> None:
        result = select_fields([make_record()], "name,stateCode")
        self.assertEqual(result, [{"name": "sommerferien", "stateCode": "BY"}])
        self.assertEqual(list(result[0]), ["name", "stateCode"])

    def test_reversed_order(self) -> None:
        result = select_fields([make_record()], "slug, year")
        self.assertEqual(list(result[0]), ["slug", "year"])
        self.assertEqual(result[0]["year"], 2024)

    def test_invalid_fields_lists_every_offender(self) -> None:
        with self.assertRaises(InvalidField) as ctx:
            select_fields([make_record()], "name,foo,bar")
        self.assertIn("foo", ctx.exception.message)
        self.assertIn("bar", ctx.exception.message)

    def test_without_fields_returns_full_records(self) -> None:
        self.assertEqual(
            select_fields([make_record()]),
            [
                {
                    "start": "2024-07-25T00:00Z",
                    "end": "2024-09-08T00:00Z",
                    "year": 2024,
                    "stateCode": "BY",
                    "name": "sommerferien",
                    "slug": "sommerferien-2024-BY",
                }
            ],
        )

    def test_timestamp_precision_is_preserved(self) -> None:
        record = make_record(start="2024-07-25T00:00:00Z", end="2024-09-08T00:00:00Z")
        self.assertEqual(select_fields([record], "start,end"), [{"start": "2024-07-25T00:00:00Z", "end": "2024-09-08T00:00:00Z"}])


class TestPointInTime(unittest.TestCase):
    def setUp(self) -> None:
        self.records = [make_record()]

    def test_on_date(self) -> None:
        self.assertEqual(on_date(self.records, "2024-01-15"), [])
        self.assertEqual(on_date(self.records, "2024-08-15"), self.records)
        self.assertEqual(on_date(self.records, "2024-07-25"), self.records)

    def test_on_date_invalid(self) -> None:
        with self.assertRaises(InvalidDate):
            on_date(self.records, "15.08.2024")

    def test_current(self) -> None:
        inside = datetime(2024, 8, 1, 12, 0, tzinfo=timezone.utc)
        outside = datetime(2024, 9, 9, 0, 0, tzinfo=timezone.utc)
        self.assertEqual(current(self.records, inside), self.records)
        self.assertEqual(current(self.records, outside), [])

    def test_upcoming_window(self) -> None:
        now = datetime(2024, 7, 20, tzinfo=timezone.utc)
        self.assertEqual(upcoming(self.records, 5, now), self.records)
        self.assertEqual(upcoming(self.records, 4, now), [])
        # Already started holidays are not upcoming.
        self.assertEqual(upcoming(self.records, 30, datetime(2024, 8, 1, tzinfo=timezone.utc)), [])

    def test_days_bounds(self) -> None:
        self.assertEqual(parse_days("365"), 365)
        self.assertEqual(parse_days(1), 1)
        for value in [0, 366, "-3", "abc", "", "1.5", None, True, "３０", "1_0"]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidRange):
                    parse_days(value)


class TestInputIsNotMutated(unittest.TestCase):
    def test_filters_return_new_lists(self) -> None:
        records = [make_record(), make_record(state="BE")]
        snapshot = list(records)
        filter_by_states(records, "BE")
        filter_by_types(records, "herbstferien")
        select_fields(records, "name")
        self.assertEqual(records, snapshot)


if __name__ == "__main__":
    unittest.main()
