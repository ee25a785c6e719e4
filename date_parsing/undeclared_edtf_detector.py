"""Detector for well-formed EDTF dates that did not declare an encoding."""

import re
from date_parsing.strategy import FormatDetector


class UndeclaredEdtfDetector(FormatDetector):
    """Matches YYYY, YYYY-MM and YYYY-MM-DD; no normalization needed.

    Example: 2019-08-10
    """

    name = "undeclared_edtf"
    PATTERN = re.compile(r"^(?P<year>\d{4})(?:-(?P<month>\d{2}))?(?:-(?P<day>\d{2}))?$")

    def normalize(self, text: str) -> str:
        return text
