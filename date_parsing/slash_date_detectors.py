"""Detectors for US-style slash dates like 11/27/2017 or 12/1/99."""

import re
from date_parsing.strategy import FormatDetector


class MonthDayYearDetector(FormatDetector):
    """Parses MM/DD/YYYY and MM/DD/YYY dates.

    Examples:
    - 11/27/2017 → 2017-11-27
    - 6/18/938 → 0938-06-18
    """

    name = "mm_dd_yyyy"
    PATTERN = re.compile(r"(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{3,4})")

    def normalize(self, text: str) -> str:
        m = self.match(text)
        return f"{m.group('year').rjust(4, '0')}-{m.group('month').rjust(2, '0')}-{m.group('day').rjust(2, '0')}"


class MonthDayShortYearDetector(FormatDetector):
    """Parses MM/DD/YY dates, inferring the century.

    A two-digit year that would land in the future is read as the previous
    century: with a current year of 2026, 12/1/99 → 1999-12-01 and
    12/1/17 → 2017-12-01.
    """

    name = "mm_dd_yy"
    PATTERN = re.compile(r"(?P<month>\d{1,2})/(?P<day>\d{1,2})/(?P<year>\d{2})")

    def __init__(self, current_year: int):
        self.current_year = current_year

    def normalize(self, text: str) -> str:
        m = self.match(text)
        year = self.expand_year(m.group("year"))
        return f"{year}-{m.group('month').rjust(2, '0')}-{m.group('day').rjust(2, '0')}"

    def expand_year(self, year: str) -> str:
        if int(year) > self.current_year - 2000:
            return f"19{year}"
        return f"20{year}"
