import unittest
from datetime import date, timedelta

from vnbank_fx.utils.date_range import (
    INVERTED_RANGE_MESSAGE,
    MISSING_DATES_MESSAGE,
    DateRange,
    build_range,
    daily_dates,
    parse_date,
    to_bidv_date,
)


class DateRangeTests(unittest.TestCase):
    def test_daily_dates_is_inclusive_and_contiguous(self) -> None:
        days = daily_dates("2024-02-27", "2024-03-02")
        self.assertEqual(len(days), (date(2024, 3, 2) - date(2024, 2, 27)).days + 1)
        self.assertEqual(days[0], date(2024, 2, 27))
        self.assertEqual(days[-1], date(2024, 3, 2))
        self.assertIn(date(2024, 2, 29), days)
        for previous, current in zip(days, days[1:]):
            self.assertEqual(current - previous, timedelta(days=1))

    def test_single_day_range(self) -> None:
        date_range = build_range("2024-01-01", "2024-01-01")
        self.assertEqual(list(date_range.days()), [date(2024, 1, 1)])
        self.assertEqual(len(date_range), 1)

    def test_range_crosses_year_boundary(self) -> None:
        days = daily_dates(date(2023, 12, 30), date(2024, 1, 2))
        self.assertEqual(
            days,
            [date(2023, 12, 30), date(2023, 12, 31), date(2024, 1, 1), date(2024, 1, 2)],
        )

    def test_invalid_input(self) -> None:
        with self.assertRaisesRegex(ValueError, INVERTED_RANGE_MESSAGE):
            build_range("2024-02-01", "2024-01-01")
        with self.assertRaisesRegex(ValueError, INVERTED_RANGE_MESSAGE):
            DateRange(start=date(2024, 2, 1), end=date(2024, 1, 1))
        with self.assertRaisesRegex(ValueError, MISSING_DATES_MESSAGE):
            build_range("", "2024-01-01")
        with self.assertRaisesRegex(ValueError, MISSING_DATES_MESSAGE):
            build_range("2024-01-01", None)
        with self.assertRaises(ValueError):
            parse_date("01/02/2024")

    def test_bidv_date_format(self) -> None:
        self.assertEqual(to_bidv_date(date(2024, 1, 5)), "05/01/2024")
        self.assertEqual(parse_date(" 2024-01-05 "), date(2024, 1, 5))


if __name__ == "__main__":
    unittest.main()
