"""Detector for bare one- or two-digit years."""

import re
from date_parsing.strategy import FormatDetector


class OneOrTwoDigitYearDetector(FormatDetector):
    """Parses a value that is only a one- or two-digit year.

    Example: 22 → 0022
    """

    name = "one_or_two_digit_year"
    PATTERN = re.compile(r"^(?P<year>\d{1,2})$")

    def normalize(self, text: str) -> str:
        return self.match(text).group("year").rjust(4, "0")
