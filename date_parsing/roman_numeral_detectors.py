"""Detectors for years and centuries written as Roman numerals."""

import re
from date_parsing.strategy import FormatDetector

_ROMAN_VALUES = [
    ("M", 1000), ("CM", 900), ("D", 500), ("CD", 400),
    ("C", 100), ("XC", 90), ("L", 50), ("XL", 40),
    ("X", 10), ("IX", 9), ("V", 5), ("IV", 4), ("I", 1),
]


def roman_to_int(numeral: str) -> int:
    """Convert a Roman numeral to an integer, ignoring dots (M.DC.LXXXI)."""
    value = numeral.upper().replace(".", "")
    result = 0
    for symbol, amount in _ROMAN_VALUES:
        while value.startswith(symbol):
            result += amount
            value = value[len(symbol):]
    return result


class RomanNumeralYearDetector(FormatDetector):
    """Parses uppercase Roman numeral years.

    Examples:
    - MDLXXVIII → 1578
    - Anno M.DC.LXXXI. → 1681
    """

    name = "roman_numeral_year"
    PATTERN = re.compile(r"(?<![A-Za-z.])(?P<year>[MCDLXVI.]+)(?![A-Za-z])")

    def normalize(self, text: str) -> str | None:
        year = roman_to_int(self.match(text).group("year"))
        # A bare run of dots matches the pattern but holds no numeral
        return str(year).rjust(4, "0") if year else None


class RomanNumeralCenturyDetector(FormatDetector):
    """Parses lowercase Roman numeral centuries.

    Centuries sometimes carry an ordinal suffix ("xvith"), so a trailing "t"
    is allowed while any other letter rejects the match.

    Examples:
    - xvi → 15xx
    - cent. xvi → 15xx
    """

    name = "roman_numeral_century"
    PATTERN = re.compile(r"(?<![a-z])(?P<century>[xvi]+)(?![a-su-z])")

    def normalize(self, text: str) -> str | None:
        century = roman_to_int(self.match(text).group("century"))
        if century < 1:
            return None
        return f"{str(century - 1).rjust(2, '0')}xx"
