"""Resolvers for dates that declare their encoding."""

from __future__ import annotations

import re
from enum import Enum

from date_parsing.calendar_values import CalendricalValue, Day
from date_parsing.detection_orchestrator import DetectionOrchestrator
from date_parsing.edtf import parse_iso8601
from date_parsing.strategy import DateFormatStrategy


class Encoding(Enum):
    """Date encodings a statement can declare."""
    ISO8601 = "iso8601"
    W3CDTF = "w3cdtf"
    MARC = "marc"
    EDTF = "edtf"

    @classmethod
    def from_code(cls, code: str | None) -> Encoding | None:
        """Look up an encoding code; unknown or missing codes give None."""
        if not code:
            return None
        try:
            return cls(code.strip().lower())
        except ValueError:
            return None


class Iso8601Resolver(DateFormatStrategy):
    """Strict ISO 8601 calendar dates, e.g. 20131114161429."""

    name = "iso8601"

    def parse(self, normalized: str) -> CalendricalValue:
        return parse_iso8601(normalized)


class W3cdtfResolver(DateFormatStrategy):
    """W3CDTF dates; "-00" month/day placeholders are dropped.

    Example: 2013-08-00 → 2013-08
    """

    name = "w3cdtf"
    _PLACEHOLDER_RE = re.compile(r"-00(?=-|$)")

    def normalize(self, text: str) -> str | None:
        return self._PLACEHOLDER_RE.sub("", super().normalize(text))


class MarcResolver(DateFormatStrategy):
    """MARC dates: EDTF-like with 'u' placeholders and a few sentinels."""

    name = "marc"
    UNPARSABLE = ("9999", "uuuu", "||||")

    def normalize(self, text: str) -> str | None:
        if text in self.UNPARSABLE:
            return None
        return super().normalize(text)

    def boundary_override(self, text: str) -> tuple[Day, Day] | None:
        # "1uuu" is catalogued as "some time in the second millennium"
        if text == "1uuu":
            return Day(1000, 1, 1), Day(1999, 12, 31)
        return None


class EdtfResolver(DateFormatStrategy):
    """Strict EDTF; short bare years are zero-padded, keeping the sign."""

    name = "edtf"

    def normalize(self, text: str) -> str:
        if text == "0":
            return "0000"
        if re.fullmatch(r"\d{1,3}", text):
            return text.rjust(4, "0")
        if re.fullmatch(r"-\d{1,3}", text):
            return f"-{text[1:].rjust(4, '0')}"
        return text


RESOLVERS = {
    Encoding.ISO8601: Iso8601Resolver,
    Encoding.W3CDTF: W3cdtfResolver,
    Encoding.MARC: MarcResolver,
    Encoding.EDTF: EdtfResolver,
}


def select_strategy(text: str, encoding_code: str | None, *, current_year: int | None = None) -> DateFormatStrategy:
    """Strategy for a date: its declared encoding, else format detection."""
    encoding = Encoding.from_code(encoding_code)
    if encoding is not None:
        return RESOLVERS[encoding]()
    return DetectionOrchestrator(current_year=current_year).detect(text)
