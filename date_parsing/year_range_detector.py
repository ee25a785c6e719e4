"""Detector for year ranges written with a dash."""

import re
from date_parsing.strategy import FormatDetector


class YearRangeDetector(FormatDetector):
    """Parses YYYY-YYYY and YYY-YYY ranges into an EDTF interval.

    Examples:
    - [1670-1684] → 1670/1684
    - 455-496 → 0455/0496
    """

    name = "year_range"
    PATTERN = re.compile(r"(?P<start>\d{3,4})-(?P<end>\d{3,4})")

    def normalize(self, text: str) -> str:
        m = self.match(text)
        return f"{m.group('start').rjust(4, '0')}/{m.group('end').rjust(4, '0')}"
