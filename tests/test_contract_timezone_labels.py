from __future__ import annotations

import datetime as dt
import unittest

from datefilter.demo import BASE_MS, FILTER_START_MS
from datefilter.util.tz import format_ms, normalize_tz_name, resolve_tz


class TestTimezoneLabelsContract(unittest.TestCase):
    def test_normalize_names(self) -> None:
        self.assertEqual(normalize_tz_name(None), "UTC")
        self.assertEqual(normalize_tz_name(""), "UTC")
        self.assertEqual(normalize_tz_name("z"), "UTC")
        self.assertEqual(normalize_tz_name("System"), "local")
        self.assertEqual(normalize_tz_name("Europe/Bucharest"), "Europe/Bucharest")

    def test_fixed_offsets(self) -> None:
        self.assertEqual(resolve_tz("+02:00").utcoffset(None), dt.timedelta(hours=2))
        self.assertEqual(resolve_tz("-0530").utcoffset(None), dt.timedelta(hours=-5, minutes=-30))
        with self.assertRaises(ValueError):
            resolve_tz("+24:00")

    def test_invalid_identifier(self) -> None:
        with self.assertRaises(ValueError):
            resolve_tz("Not/AZone")

    def test_format_is_locale_independent(self) -> None:
        self.assertEqual(format_ms(FILTER_START_MS), "Jan 15, 09:00")
        self.assertEqual(format_ms(BASE_MS - 1), "Jan 14, 23:59")
        self.assertEqual(format_ms(FILTER_START_MS, resolve_tz("-10:00")), "Jan 14, 23:00")


if __name__ == "__main__":
    unittest.main(verbosity=2)
