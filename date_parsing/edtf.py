"""Parsers for EDTF and ISO 8601 strings.

Both parsers raise InvalidCalendarValue for anything they cannot turn into a
calendrical value; callers at the resolver boundary decide what to do with
that.
"""

from __future__ import annotations

import re

from date_parsing.calendar_values import (
    SEASONS,
    CalendricalValue,
    Century,
    DateSet,
    Day,
    Decade,
    InvalidCalendarValue,
    Interval,
    Month,
    Season,
    Unknown,
    Year,
)

# X/x is the current EDTF spelling for an unspecified digit, u the legacy one
_UNSPECIFIED_CHARS = "Xxu"

_EDTF_DATE_RE = re.compile(
    r"^(?P<year>-?[\dXxu]{4})"
    r"(?:-(?P<month>[\dXxu]{2})"
    r"(?:-(?P<day>[\dXxu]{2})"
    r"(?:T(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.\d+)?)?"
    r"(?:Z|[+-]\d{2}(?::?\d{2})?)?)?"
    r")?)?"
    r"[?~%]?$"
)

_LONG_YEAR_RE = re.compile(r"^Y(?P<year>-?\d{5,})[?~%]?$")

_ISO8601_RE = re.compile(
    r"^(?P<year>[+-]?\d{4})"
    r"(?:(?P<sep>-?)(?P<month>\d{2})"
    r"(?:(?P=sep)(?P<day>\d{2})"
    r"(?:[T ]?(?P<hour>\d{2})(?::?(?P<minute>\d{2})(?::?(?P<second>\d{2})(?:[.,]\d+)?)?)?"
    r"(?:Z|[+-]\d{2}(?::?\d{2})?)?)?"
    r")?)?$"
)

_OPEN_ENDS = {"..", "open"}
_UNKNOWN_ENDS = {"", "unknown"}


def parse_edtf(text: str) -> CalendricalValue:
    """Parse an EDTF string into a calendrical value.

    Supports dates down to the day (with an optional time part that is
    ignored), unspecified digits, seasons, ``Y``-prefixed long years,
    intervals with open/unknown ends and one-of/all-of sets.

    Raises:
        InvalidCalendarValue: if the text is not valid EDTF.
    """
    text = (text or "").strip()
    if not text:
        raise InvalidCalendarValue("Empty EDTF value")

    if text[0] in "[{":
        return _parse_set(text)

    if "/" in text:
        lower_text, _, upper_text = text.partition("/")
        if "/" in upper_text:
            raise InvalidCalendarValue(f"Too many interval separators: {text!r}")
        return Interval(_parse_interval_end(lower_text), _parse_interval_end(upper_text))

    return _parse_date(text)


def parse_iso8601(text: str) -> CalendricalValue:
    """Strict ISO 8601 calendar date parse.

    Accepts basic (``20131114``) and extended (``2013-11-14``) forms with an
    optional time of day, as well as reduced precision ``YYYY-MM`` and
    ``YYYY``.

    Raises:
        InvalidCalendarValue: if the text is not an ISO 8601 date.
    """
    m = _ISO8601_RE.match((text or "").strip())
    if not m:
        raise InvalidCalendarValue(f"Not an ISO 8601 date: {text!r}")

    _check_time(m.group("hour"), m.group("minute"), m.group("second"))
    year = int(m.group("year"))
    if m.group("month") is None:
        return Year(year)
    month = int(m.group("month"))
    if m.group("day") is None:
        return Month(year, month)
    return Day(year, month, int(m.group("day")))


def _parse_interval_end(text: str) -> CalendricalValue:
    text = text.strip()
    if text in _OPEN_ENDS:
        return Unknown(open=True)
    if text in _UNKNOWN_ENDS:
        return Unknown(open=False)
    return _parse_date(text)


def _parse_set(text: str) -> DateSet:
    closing = "]" if text[0] == "[" else "}"
    if not text.endswith(closing):
        raise InvalidCalendarValue(f"Unterminated set: {text!r}")

    members = []
    for item in text[1:-1].split(","):
        item = item.strip()
        if not item:
            raise InvalidCalendarValue(f"Empty set member in {text!r}")
        if ".." in item:
            lower, _, upper = item.partition("..")
            members.append(Interval(
                _parse_date(lower) if lower else Unknown(open=True),
                _parse_date(upper) if upper else Unknown(open=True),
            ))
        else:
            members.append(_parse_date(item))

    return DateSet(tuple(members), all_of=closing == "}")


def _parse_date(text: str) -> CalendricalValue:
    m = _LONG_YEAR_RE.match(text)
    if m:
        return Year(int(m.group("year")))

    m = _EDTF_DATE_RE.match(text)
    if not m:
        raise InvalidCalendarValue(f"Not an EDTF date: {text!r}")

    _check_time(m.group("hour"), m.group("minute"), m.group("second"))
    year_text, month_text, day_text = m.group("year", "month", "day")

    negative = year_text.startswith("-")
    digits = year_text.lstrip("-")
    year_mask = None
    if any(c in _UNSPECIFIED_CHARS for c in digits):
        mask = "".join("X" if c in _UNSPECIFIED_CHARS else c for c in digits)
        if "X" * len(mask) == mask:
            raise InvalidCalendarValue(f"Year is entirely unspecified: {text!r}")
        year = int(mask.replace("X", "0")) * (-1 if negative else 1)
        # Only the X spelling reads as a decade/century; legacy "u" stays a
        # year with unspecified digits.
        if month_text is None and "u" not in digits:
            if re.fullmatch(r"\d\dXX", mask):
                return Century(year)
            if re.fullmatch(r"\d{3}X", mask):
                return Decade(year)
        year_mask = ("-" if negative else "") + mask
    else:
        year = int(year_text)

    if month_text is None:
        return Year(year, year_mask=year_mask)

    unspecified = set()
    month = _component(month_text, text)
    if month is None:
        month = 1
        unspecified.add("month")
    elif month in SEASONS and day_text is None:
        if year_mask:
            raise InvalidCalendarValue(f"Season with unspecified year: {text!r}")
        return Season(year, month)

    if day_text is None:
        return Month(year, month, unspecified=frozenset(unspecified), year_mask=year_mask)

    day = _component(day_text, text)
    if day is None:
        day = 1
        unspecified.add("day")
    return Day(year, month, day, unspecified=frozenset(unspecified), year_mask=year_mask)


def _component(value: str, text: str) -> int | None:
    """Month or day digits; None when fully unspecified."""
    masked = [c in _UNSPECIFIED_CHARS for c in value]
    if all(masked):
        return None
    if any(masked):
        raise InvalidCalendarValue(f"Partially unspecified month/day in {text!r}")
    return int(value)


def _check_time(hour: str | None, minute: str | None, second: str | None) -> None:
    if hour is not None and int(hour) > 24:
        raise InvalidCalendarValue(f"Hour out of range: {hour}")
    if minute is not None and int(minute) > 59:
        raise InvalidCalendarValue(f"Minute out of range: {minute}")
    if second is not None and int(second) > 60:
        raise InvalidCalendarValue(f"Second out of range: {second}")
