"""Picks the format strategy for a date that declared no encoding."""

from __future__ import annotations

import re
from typing import List

from date_parsing.config import load_date_parsing_config
from date_parsing.factory import DateFormatFactory, DateFormats
from date_parsing.log import log_debug
from date_parsing.strategy import DateFormatStrategy


class DetectionOrchestrator:
    """Tries format detectors in a fixed order and returns the first match.

    Several patterns overlap on purpose (an embedded four-digit year also
    matches a year range), so the order runs from most to least specific.
    """

    _DASH_RE = re.compile(r"[–—―−]")

    def __init__(self, current_year: int | None = None):
        if current_year is None:
            current_year = load_date_parsing_config().current_year
        self.current_year = current_year

    def get_detector_steps(self) -> List[DateFormats]:
        """Return the ordered list of formats to try."""
        return [
            DateFormats.UNDECLARED_EDTF,
            DateFormats.MM_DD_YYYY,
            DateFormats.MM_DD_YY,
            DateFormats.YEAR_RANGE,
            DateFormats.DECADE_AS_YEAR_DASH,
            DateFormats.DECADE_STRING,
            DateFormats.EMBEDDED_BC_YEAR,
            DateFormats.EMBEDDED_YEAR,
            DateFormats.EMBEDDED_THREE_DIGIT_YEAR,
            DateFormats.BRACKETED_YEAR,
            DateFormats.MYSTERY_CENTURY,
            DateFormats.CENTURY,
            DateFormats.ROMAN_NUMERAL_CENTURY,
            DateFormats.ROMAN_NUMERAL_YEAR,
            DateFormats.ONE_OR_TWO_DIGIT_YEAR,
        ]

    @classmethod
    def sanitize(cls, text: str) -> str:
        """Trim whitespace and normalize dash variants to a hyphen-minus."""
        return cls._DASH_RE.sub("-", text.strip())

    def detect(self, text: str) -> DateFormatStrategy:
        """Return the strategy that should normalize ``text``.

        Hebrew script and leading hyphens go to the unparseable detector
        before any pattern is tried; text nothing recognizes gets the
        fallback strategy.
        """
        unparseable = DateFormatFactory.get_detector(DateFormats.UNPARSEABLE)
        if unparseable.supports(text):
            log_debug(f"{text!r} treated as unparseable")
            return unparseable

        for step in self.get_detector_steps():
            detector = DateFormatFactory.get_detector(step, current_year=self.current_year)
            if detector.supports(text):
                log_debug(f"{text!r} detected as {detector.name}")
                return detector

        return DateFormatFactory.get_detector(DateFormats.FALLBACK)
