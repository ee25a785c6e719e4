"""Detectors for centuries written with digits."""

import re
from date_parsing.strategy import FormatDetector


class MysteryCenturyDetector(FormatDetector):
    """Parses the NN-- century marker found in some catalog data.

    Example: [19--?]- → 19xx
    """

    name = "mystery_century"
    PATTERN = re.compile(r"(?P<century>\d{2})--")

    def normalize(self, text: str) -> str:
        return f"{self.match(text).group('century')}xx"


class CenturyDetector(FormatDetector):
    """Parses ordinal centuries anywhere in the text.

    Matches patterns like:
    - 19th century → 18xx
    - 19th c.
    - mid to 2nd half of 13th century → 12xx
    - 1st century → 00xx
    """

    name = "century"
    PATTERN = re.compile(r"(?P<century>\d{1,2})(?:st|nd|rd|th) C(?:entury)?", flags=re.IGNORECASE)

    def normalize(self, text: str) -> str:
        century = int(self.match(text).group("century"))
        return f"{str(century - 1).rjust(2, '0')}xx"
