"""Detectors for decades written as 193- or 1960s."""

import re
from date_parsing.strategy import FormatDetector


class DecadeAsYearDashDetector(FormatDetector):
    """Parses a three-digit year followed by a placeholder character.

    Matches patterns like:
    - 193-
    - 196_
    - 196x / 196u
    - 186?
    """

    name = "decade_as_year_dash"
    PATTERN = re.compile(r"(?<!\d)(?P<year>\d{3})[-_xu?](?!\d)")

    def normalize(self, text: str) -> str:
        return f"{self.match(text).group('year')}x"


class DecadeStringDetector(FormatDetector):
    """Parses decade strings like 1960s or 'early 1730s'."""

    name = "decade_string"
    PATTERN = re.compile(r"(?<!\d)(?P<year>\d{3})0s(?!\d)")

    def normalize(self, text: str) -> str:
        return f"{self.match(text).group('year')}x"
