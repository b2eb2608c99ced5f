"""
Tests for timestamp parsing and formatting.
"""

import unittest
from datetime import datetime, timedelta

import pytz

from src.climacell.core.date_utils import DateUtils, ZERO_TIME


class TestDateUtils(unittest.TestCase):
    """Test DateUtils."""

    def test_parse_rfc3339_utc(self):
        self.assertEqual(
            DateUtils.parse_rfc3339("2021-03-01T11:00:00Z"),
            datetime(2021, 3, 1, 11, tzinfo=pytz.UTC)
        )

    def test_parse_rfc3339_offset(self):
        parsed = DateUtils.parse_rfc3339("2021-03-01T11:00:00.5-03:30")

        self.assertEqual(parsed.utcoffset(), -timedelta(hours=3, minutes=30))
        self.assertEqual(parsed.microsecond, 500000)

    def test_parse_rfc3339_rejects_bad_input(self):
        for text in ("2021-03-01", "2021-03-01T11:00Z", "2021-03-01T11:00:00+0500", "2021-03-01T11:00:00+05:75"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    DateUtils.parse_rfc3339(text)

    def test_parse_time_or_date_prefers_datetime(self):
        self.assertEqual(
            DateUtils.parse_time_or_date("2021-03-01T00:00:00Z").tzinfo,
            pytz.UTC
        )
        self.assertIsNone(DateUtils.parse_time_or_date("2021-03-01").tzinfo)

    def test_parse_time_or_date_error(self):
        with self.assertRaises(ValueError):
            DateUtils.parse_time_or_date("March 1st")

    def test_trailing_newline_and_wide_digits_rejected(self):
        for text in ("2021-03-01T11:00:00Z\n", "2021-03-01\n", "2021-03-01T11:00:00+01:00\n", "２021-03-01"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    DateUtils.parse_time_or_date(text)

    def test_format_round_trip(self):
        text = "2021-03-01T11:00:00+05:30"
        self.assertEqual(DateUtils.format_rfc3339(DateUtils.parse_rfc3339(text)), text)

    def test_format_utc_uses_z(self):
        self.assertEqual(
            DateUtils.format_rfc3339(datetime(2021, 3, 1, 11, 0, 0, 999, tzinfo=pytz.UTC)),
            "2021-03-01T11:00:00Z"
        )

    def test_format_naive_as_utc(self):
        self.assertEqual(DateUtils.format_rfc3339(datetime(2021, 3, 1)), "2021-03-01T00:00:00Z")

    def test_to_utc(self):
        local = pytz.FixedOffset(60).localize(datetime(2021, 3, 1, 12))
        self.assertEqual(DateUtils.to_utc(local), datetime(2021, 3, 1, 11, tzinfo=pytz.UTC))
        self.assertEqual(DateUtils.to_utc(datetime(2021, 3, 1)).tzinfo, pytz.UTC)

    def test_zero_time(self):
        self.assertEqual(ZERO_TIME.year, 1)
        self.assertEqual(ZERO_TIME.tzinfo, pytz.UTC)


if __name__ == "__main__":
    unittest.main()
