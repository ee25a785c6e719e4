"""A single date statement and everything derived from it."""

from __future__ import annotations

import re
from functools import cached_property
from typing import List, Sequence

from date_parsing.calendar_values import (
    CalendricalValue,
    Century,
    DateSet,
    Day,
    Decade,
    InvalidCalendarValue,
    Interval,
    Precision,
    iter_days,
)
from date_parsing.config import load_date_parsing_config
from date_parsing.decoder import DEFAULT_ALLOWED_PRECISIONS, decode
from date_parsing.detection_orchestrator import DetectionOrchestrator
from date_parsing.edtf import parse_edtf
from date_parsing.log import notify
from date_parsing.qualifiers import Qualifier, qualify
from date_parsing.resolvers import select_strategy
from date_parsing.sort_key import sort_key
from date_parsing.statement import DateStatement
from date_parsing.strategy import DateFormatStrategy, Resolution

# Values we shouldn't even attempt to parse
UNPARSABLE_VALUES = ("0000-00-00", "9999", "uuuu", "[uuuu]")

_BARE_NUMBER_RE = re.compile(r"^-?\d+$")
_SIMPLE_YEAR_RE = re.compile(r"^[\dXxu?-]{4}$")
_ABBREVIATED_RANGE_RE = re.compile(r"^\[?1\d{3}-\d{2}\??\]?$")
_PLACEHOLDER_DIGITS_RE = re.compile(r"(?<!\d)(\d{1,3})([xu-]{1,3})(?!\d)", flags=re.IGNORECASE)


def as_precisions(values: Sequence[Precision | str]) -> List[Precision]:
    """Accept precisions as enum members or their names ("day", "year", ...)."""
    return [v if isinstance(v, Precision) else Precision(v.strip().lower()) for v in values]


class SortKeyOrdering:
    """Orders date objects by their ``sort_key``.

    Comparing with anything that is not a date returns NotImplemented, so
    ``sorted()`` over mixed types raises TypeError.
    """

    sort_key: str

    def __lt__(self, other):
        if not isinstance(other, SortKeyOrdering):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other):
        if not isinstance(other, SortKeyOrdering):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other):
        if not isinstance(other, SortKeyOrdering):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other):
        if not isinstance(other, SortKeyOrdering):
            return NotImplemented
        return self.sort_key >= other.sort_key


class DateValue(SortKeyOrdering):
    """One date statement resolved to a calendrical value.

    Resolution happens once, on first access, and every derived property is
    memoized on the instance. Bad data never raises: a value that cannot be
    understood is reported as ``parsed == False`` and keeps its original
    text for display.

    Example:
        >>> date = DateValue(DateStatement(value="2019-08-10"))
        >>> date.decoded_value(prefer_original_text=False)
        'August 10, 2019'
    """

    def __init__(self, statement: DateStatement, event_type: str | None = None, current_year: int | None = None):
        self.statement = statement
        # Range endpoints carry their role in "type"; their semantic type comes from the range
        self.type = statement.event_type or event_type
        # Two-digit year pivot; a malformed DATE_PARSING_CURRENT_YEAR fails here
        if current_year is None:
            current_year = load_date_parsing_config().current_year
        self.current_year = current_year

    def __repr__(self) -> str:
        return f"DateValue(value={self.value!r}, encoding={self.encoding!r}, type={self.type!r})"

    # --- statement accessors ---

    @property
    def value(self) -> str | None:
        return self.statement.value

    @property
    def encoding(self) -> str | None:
        return self.statement.encoding_code

    @property
    def has_encoding(self) -> bool:
        return bool(self.encoding)

    @property
    def qualifier(self) -> str | None:
        return self.statement.qualifier

    @property
    def qualified(self) -> bool:
        return bool(self.qualifier)

    @property
    def approximate(self) -> bool:
        return self.qualifier == Qualifier.APPROXIMATE.value

    @property
    def questionable(self) -> bool:
        return self.qualifier == Qualifier.QUESTIONABLE.value

    @property
    def inferred(self) -> bool:
        return self.qualifier == Qualifier.INFERRED.value

    @property
    def primary(self) -> bool:
        """In MODS XML this is the keyDate attribute."""
        return self.statement.status == "primary"

    @property
    def role(self) -> str | None:
        return self.statement.role

    @property
    def is_start(self) -> bool:
        return self.role == "start"

    @property
    def is_end(self) -> bool:
        return self.role == "end"

    # --- resolution ---

    @cached_property
    def _text(self) -> str:
        return DetectionOrchestrator.sanitize(self.value or "")

    @cached_property
    def strategy(self) -> DateFormatStrategy:
        """Resolver for the declared encoding, or the detected format."""
        return select_strategy(self._text, self.encoding, current_year=self.current_year)

    @cached_property
    def _resolution(self) -> Resolution:
        if not self._text:
            notify(f"Invalid date value: {self.value!r}")
            return Resolution(normalized=None, value=None)
        if self._text in UNPARSABLE_VALUES:
            return Resolution(normalized=None, value=None)
        return self.strategy.resolve(self._text)

    @property
    def normalized(self) -> str | None:
        """The EDTF string the value was normalized to, if any."""
        return self._resolution.normalized

    @property
    def resolved(self) -> CalendricalValue | None:
        return self._resolution.value

    @property
    def parsed(self) -> bool:
        """Did we get a calendrical value out of the text?"""
        return self.resolved is not None

    @property
    def parsable(self) -> bool:
        """Is the value present and not a known unparsable value like "9999"?"""
        return bool(self._text) and self._text not in UNPARSABLE_VALUES

    @cached_property
    def _boundary_value(self) -> CalendricalValue | None:
        """Value used for boundaries and century/decade precision.

        Legacy "u" placeholders parse as a year with unknown digits; reading
        them as "x" turns "19uu" into a century and "196u" into a decade.
        """
        if self.resolved is None:
            return None
        normalized = self.normalized or ""
        if "u" not in normalized:
            return self.resolved
        try:
            return parse_edtf(normalized.replace("u", "x").replace("X", "x"))
        except InvalidCalendarValue:
            return self.resolved

    @cached_property
    def precision(self) -> Precision:
        if self.resolved is None:
            return Precision.UNKNOWN
        if isinstance(self._boundary_value, (Century, Decade)):
            return self._boundary_value.precision
        return self.resolved.precision

    # --- derived values ---

    @cached_property
    def sort_key(self) -> str:
        """Sortable key respecting BCE/CE ordering and precision; "" if unparsed."""
        return sort_key(self.resolved, self.precision)

    @cached_property
    def earliest_date(self) -> Day | None:
        """Earliest day the data could refer to."""
        if self.resolved is None:
            return None
        override = self.strategy.boundary_override(self._text)
        if override:
            return override[0]
        return self._boundary_value.earliest()

    @cached_property
    def latest_date(self) -> Day | None:
        """Latest day the data could refer to."""
        if self.resolved is None:
            return None
        override = self.strategy.boundary_override(self._text)
        if override:
            return override[1]
        return self._boundary_value.latest()

    def as_range(self) -> tuple[Day, Day] | None:
        """(earliest, latest) days, or None when either is unknown.

        Sets can be disjoint, so this can be less exact than ``to_list``.
        """
        if self.earliest_date is None or self.latest_date is None:
            return None
        return self.earliest_date, self.latest_date

    def to_list(self) -> List[Day]:
        """Every day the data describes.

        Set members are listed individually (ranges inside a set step at the
        precision of their lower bound), so gaps in a set are respected.
        """
        if isinstance(self.resolved, DateSet):
            days = []
            for member in self.resolved.members:
                start, stop = member.earliest(), member.latest()
                if start is None:
                    continue
                if isinstance(member, Interval) and stop is not None:
                    days.extend(iter_days(start, stop, member.lower.precision))
                else:
                    days.append(start)
            return days

        bounds = self.as_range()
        if bounds is None:
            return []
        return list(iter_days(*bounds))

    @cached_property
    def base_value(self) -> str:
        """Value reduced to digits and hyphens, for spotting duplicate dates.

        "1950-53" expands to "1950-1953"; placeholder digits become zeros
        ("19uu" → "1900", "193-" → "1930").
        """
        text = self.value or ""
        if _ABBREVIATED_RANGE_RE.match(text):
            return re.sub(r"(\d{2})(\d{2})-(\d{2})", r"\1\2-\1\3", text, count=1)

        expanded = _PLACEHOLDER_DIGITS_RE.sub(lambda m: m.group(1) + "0" * len(m.group(2)), text)
        return "".join(re.findall(r"[\d-]", expanded))

    def decoded_value(
        self,
        allowed_precisions: Sequence[Precision | str] = DEFAULT_ALLOWED_PRECISIONS,
        ignore_unparseable: bool = False,
        prefer_original_text: bool = True,
    ) -> str | None:
        """Display text for the date, with "BCE"/"CE" where needed.

        Args:
            allowed_precisions: precisions the output may use, most specific
                first
            ignore_unparseable: return None instead of the original text when
                nothing was parsed
            prefer_original_text: for dates without a declared encoding,
                return the original text unless it is a bare number or a
                simple four-character year
        """
        text = (self.value or "").strip()
        if not self.parsed:
            return None if ignore_unparseable else text

        if prefer_original_text and not self.has_encoding:
            if not (_BARE_NUMBER_RE.match(text) or _SIMPLE_YEAR_RE.match(text)):
                return text

        decoded = decode(self.resolved, self.precision, as_precisions(allowed_precisions))
        return decoded if decoded is not None else text

    @property
    def qualified_value(self) -> str:
        """Decoded value with qualifier markup, e.g. "[ca. 1920]"."""
        return qualify(self.decoded_value(), self.qualifier)
