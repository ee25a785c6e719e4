"""Detectors that pull a year out of surrounding free text."""

import re
from date_parsing.strategy import FormatDetector


class EmbeddedBCYearDetector(FormatDetector):
    """Picks a BC year out of the text.

    Example: 250 B.C. → -0249 (astronomical numbering: 1 BC is year 0)
    """

    name = "embedded_bc_year"
    PATTERN = re.compile(r"(?P<year>\d{3,4})\s?B\.?C\.?", flags=re.IGNORECASE)

    def normalize(self, text: str) -> str:
        year = int(self.match(text).group("year")) - 1
        return f"-{str(year).rjust(4, '0')}"


class EmbeddedYearDetector(FormatDetector):
    """Picks the first free-standing four-digit year.

    Examples:
    - Minguo 19 [1930] → 1930
    - 1745 mag. 14 → 1745
    - [ca 1834] → 1834
    """

    name = "embedded_year"
    PATTERN = re.compile(r"(?<!\d)(?P<year>\d{4})(?!\d)")

    def normalize(self, text: str) -> str:
        return self.match(text).group("year")


class EmbeddedThreeDigitYearDetector(FormatDetector):
    """Picks the first free-standing three-digit year.

    Example: about 933 → 0933
    """

    name = "embedded_three_digit_year"
    PATTERN = re.compile(r"(?<!\d)(?P<year>\d{3})(?!\d)")

    def normalize(self, text: str) -> str:
        return self.match(text).group("year").rjust(4, "0")


class BracketedYearDetector(FormatDetector):
    """Picks a year with some digits in brackets.

    Matches any of [YYY]Y, Y[YYY], [YY]YY, Y[YY]Y, YY[YY], YYY[Y], YY[Y]Y,
    Y[Y]YY and [Y]YYY.
    Example: [18]74 → 1874
    """

    name = "bracketed_year"
    PATTERN = re.compile(r"(?P<year>[\d\[\]]{6})(?!\d)")

    def normalize(self, text: str) -> str:
        return self.match(text).group("year").replace("[", "").replace("]", "")
