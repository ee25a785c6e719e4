"""Detector for values that should not be run through any pattern."""

import re
from date_parsing.strategy import FormatDetector


class UnparseableDetector(FormatDetector):
    """Claims text in Hebrew script and undeclared values with a leading '-'.

    Both are too ambiguous to guess at ("-745", "‏4264681 או 368"), so they
    never resolve to a value.
    """

    name = "unparseable"
    PATTERN = re.compile(r"[\u0590-\u05FF\uFB1D-\uFB4F]|^-")

    def normalize(self, text: str) -> None:
        return None
