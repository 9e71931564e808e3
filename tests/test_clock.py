import unittest
from datetime import datetime, timezone
from unittest.mock import patch

from zone_clock.clock import format_time_in_timezone, utc_now
from zone_clock.timezone_utils import InvalidTimezoneError

INSTANT = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class FormatTimeInTimezoneTests(unittest.TestCase):
    def test_fixed_offset(self):
        self.assertEqual(format_time_in_timezone('UTC+3', now=INSTANT), '2024-06-01 15:00:00 +03')

    def test_region_uses_dst_abbreviation(self):
        self.assertEqual(format_time_in_timezone('America/New_York', now=INSTANT), '2024-06-01 08:00:00 EDT')

        winter = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        self.assertEqual(format_time_in_timezone('America/New_York', now=winter), '2024-01-15 07:00:00 EST')

    def test_utc(self):
        self.assertEqual(format_time_in_timezone('UTC', now=INSTANT), '2024-06-01 12:00:00 UTC')

    def test_date_rolls_over(self):
        self.assertEqual(format_time_in_timezone('Pacific/Kiritimati', now=INSTANT), '2024-06-02 02:00:00 +14')
        self.assertEqual(format_time_in_timezone('GMT-10:30', now=INSTANT), '2024-06-01 01:30:00 -1030')

    def test_naive_instant_is_treated_as_utc(self):
        naive = datetime(2024, 6, 1, 12, 0, 0)

        self.assertEqual(format_time_in_timezone('Asia/Tokyo', now=naive), '2024-06-01 21:00:00 JST')

    def test_defaults_to_present_instant(self):
        with patch('zone_clock.clock.utc_now', return_value=INSTANT):
            self.assertEqual(format_time_in_timezone('Europe/Paris'), '2024-06-01 14:00:00 CEST')

    def test_invalid_timezone_raises(self):
        with self.assertRaises(InvalidTimezoneError):
            format_time_in_timezone('Nowhere/Special', now=INSTANT)


class UtcNowTests(unittest.TestCase):
    def test_is_aware_utc(self):
        now = utc_now()

        self.assertEqual(now.utcoffset().total_seconds(), 0)


if __name__ == '__main__':
    unittest.main()
