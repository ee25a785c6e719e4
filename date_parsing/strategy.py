"""Abstract base classes for date format strategies."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from date_parsing.calendar_values import CalendricalValue, Day, InvalidCalendarValue
from date_parsing.edtf import parse_edtf
from date_parsing.log import log_debug


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one date statement."""
    normalized: str | None
    value: CalendricalValue | None


class DateFormatStrategy:
    """Normalizes text of one format to EDTF and parses it.

    This base class is also the fallback used when no specific format
    matches: it strips bracket and trailing punctuation noise and pads
    three-digit years.
    """

    name = "fallback"

    _LEADING_BRACKETS_RE = re.compile(r"^\[+")
    _TRAILING_NOISE_RE = re.compile(r"[.\]]+$")

    def normalize(self, text: str) -> str | None:
        """Turn raw text into an EDTF string, or None if that is impossible."""
        if re.fullmatch(r"\d{3}", text):
            return text.rjust(4, "0")
        sanitized = self._LEADING_BRACKETS_RE.sub("", text)
        return self._TRAILING_NOISE_RE.sub("", sanitized)

    def parse(self, normalized: str) -> CalendricalValue:
        """Parse a normalized string; raises InvalidCalendarValue."""
        return parse_edtf(normalized)

    def boundary_override(self, text: str) -> tuple[Day, Day] | None:
        """Fixed earliest/latest days for special values, if any."""
        return None

    def resolve(self, text: str) -> Resolution:
        """Normalize and parse, absorbing invalid calendar values."""
        normalized = self.normalize(text)
        if not normalized:
            return Resolution(normalized=None, value=None)
        try:
            value = self.parse(normalized)
        except InvalidCalendarValue as exc:
            log_debug(f"{self.name}: could not parse {text!r} as {normalized!r}: {exc}")
            return Resolution(normalized=normalized, value=None)
        return Resolution(normalized=normalized, value=value)


class FormatDetector(DateFormatStrategy, ABC):
    """Recognizes one undeclared date notation by pattern.

    Subclasses set ``PATTERN`` and implement ``normalize`` over texts the
    pattern matches.
    """

    PATTERN: re.Pattern

    def supports(self, text: str) -> bool:
        return self.PATTERN.search(text) is not None

    def match(self, text: str) -> re.Match:
        m = self.PATTERN.search(text)
        if m is None:
            raise ValueError(f"{self.name} does not support {text!r}")
        return m

    @abstractmethod
    def normalize(self, text: str) -> str | None:
        pass
