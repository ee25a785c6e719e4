"""Calendrical values produced by the date resolvers.

Every value knows its precision and can report the earliest and latest day
it could refer to. Years use astronomical numbering, so year 0 is 1 BCE and
year -1 is 2 BCE.

The set of value types is closed: ``CalendricalValue`` lists all of them and
the sort key encoder and decoder dispatch over exactly these classes.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class InvalidCalendarValue(ValueError):
    """Raised when text or numbers do not describe a real calendar date."""


class Precision(Enum):
    """Finest calendar unit a value specifies, most specific first."""
    DAY = "day"
    MONTH = "month"
    YEAR = "year"
    DECADE = "decade"
    CENTURY = "century"
    UNKNOWN = "unknown"

    @property
    def rank(self) -> int:
        """0 for day precision, growing as the unit gets coarser."""
        return _PRECISION_ORDER.index(self)


_PRECISION_ORDER = [
    Precision.DAY,
    Precision.MONTH,
    Precision.YEAR,
    Precision.DECADE,
    Precision.CENTURY,
    Precision.UNKNOWN,
]

MONTH_NAMES = [
    None, "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# EDTF season codes -> (name, first month, last month)
SEASONS = {
    21: ("Spring", 3, 5),
    22: ("Summer", 6, 8),
    23: ("Autumn", 9, 11),
    24: ("Winter", 12, 2),
}


def days_in_month(month: int, year: int) -> int:
    """Number of days in a month, accounting for leap years.

    Uses the proleptic Gregorian rule, which also holds for year 0 and
    negative years.
    """
    if not 1 <= month <= 12:
        raise InvalidCalendarValue(f"Month out of range: {month}")
    if month == 2 and calendar.isleap(year):
        return 29
    return [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31][month - 1]


def year_bounds(year: int, year_mask: str | None) -> tuple[int, int]:
    """Smallest and largest year consistent with a masked year like ``19XX``."""
    if not year_mask:
        return year, year
    low = int(year_mask.replace("X", "0"))
    high = int(year_mask.replace("X", "9"))
    return min(low, high), max(low, high)


def iter_days(start: Day, stop: Day, step: Precision = Precision.DAY):
    """Yield days from ``start`` through ``stop``.

    ``step`` advances by one day, one month (to the 1st) or, for any coarser
    precision, one year (to January 1st).
    """
    current = start
    while current <= stop:
        yield current
        if step == Precision.DAY:
            if current.day < days_in_month(current.month, current.year):
                current = Day(current.year, current.month, current.day + 1)
            elif current.month < 12:
                current = Day(current.year, current.month + 1, 1)
            else:
                current = Day(current.year + 1, 1, 1)
        elif step == Precision.MONTH and current.month < 12:
            current = Day(current.year, current.month + 1, 1)
        else:
            current = Day(current.year + 1, 1, 1)


def _year_edtf(year: int, year_mask: str | None = None) -> str:
    if year_mask:
        return year_mask
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}"


@dataclass(frozen=True, order=True)
class Day:
    """A single day, possibly with unspecified month or day.

    Unspecified fields hold a placeholder of 1. Comparisons use the calendar
    position only.
    """
    year: int
    month: int
    day: int
    unspecified: frozenset = field(default=frozenset(), compare=False)
    year_mask: str | None = field(default=None, compare=False)

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidCalendarValue(f"Month out of range: {self.month}")
        if "month" in self.unspecified:
            limit = 31
        else:
            # Feb 29 is allowed when the year itself is masked
            limit = days_in_month(self.month, 2000 if self.year_mask else self.year)
        if not 1 <= self.day <= limit:
            raise InvalidCalendarValue(f"Day out of range: {self.year}-{self.month}-{self.day}")

    @property
    def precision(self) -> Precision:
        if "month" in self.unspecified:
            return Precision.YEAR
        if "day" in self.unspecified:
            return Precision.MONTH
        return Precision.DAY

    def earliest(self) -> Day:
        low, _ = year_bounds(self.year, self.year_mask)
        month = 1 if "month" in self.unspecified else self.month
        day = 1 if "day" in self.unspecified else self.day
        return Day(low, month, day)

    def latest(self) -> Day:
        _, high = year_bounds(self.year, self.year_mask)
        month = 12 if "month" in self.unspecified else self.month
        day = days_in_month(month, high) if "day" in self.unspecified else self.day
        return Day(high, month, day)

    def sort_parts(self) -> tuple[int, int | None, int | None]:
        return self.year, self.month, self.day

    def edtf(self) -> str:
        month = "XX" if "month" in self.unspecified else f"{self.month:02d}"
        day = "XX" if "day" in self.unspecified else f"{self.day:02d}"
        return f"{_year_edtf(self.year, self.year_mask)}-{month}-{day}"


@dataclass(frozen=True)
class Month:
    year: int
    month: int
    unspecified: frozenset = frozenset()
    year_mask: str | None = None

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidCalendarValue(f"Month out of range: {self.month}")

    @property
    def precision(self) -> Precision:
        return Precision.YEAR if "month" in self.unspecified else Precision.MONTH

    def earliest(self) -> Day:
        low, _ = year_bounds(self.year, self.year_mask)
        return Day(low, 1 if "month" in self.unspecified else self.month, 1)

    def latest(self) -> Day:
        _, high = year_bounds(self.year, self.year_mask)
        month = 12 if "month" in self.unspecified else self.month
        return Day(high, month, days_in_month(month, high))

    def sort_parts(self) -> tuple[int, int | None, int | None]:
        return self.year, self.month, None

    def edtf(self) -> str:
        month = "XX" if "month" in self.unspecified else f"{self.month:02d}"
        return f"{_year_edtf(self.year, self.year_mask)}-{month}"


@dataclass(frozen=True)
class Year:
    year: int
    year_mask: str | None = None

    @property
    def precision(self) -> Precision:
        return Precision.YEAR

    def earliest(self) -> Day:
        low, _ = year_bounds(self.year, self.year_mask)
        return Day(low, 1, 1)

    def latest(self) -> Day:
        _, high = year_bounds(self.year, self.year_mask)
        return Day(high, 12, 31)

    def sort_parts(self) -> tuple[int, int | None, int | None]:
        return self.year, None, None

    def edtf(self) -> str:
        if abs(self.year) > 9999 and not self.year_mask:
            return f"Y{self.year}"
        return _year_edtf(self.year, self.year_mask)


@dataclass(frozen=True)
class Decade:
    """Ten years starting at ``year`` (e.g. 1960 for the 1960s)."""
    year: int

    @property
    def precision(self) -> Precision:
        return Precision.DECADE

    def _span(self) -> tuple[int, int]:
        return (self.year, self.year + 9) if self.year >= 0 else (self.year - 9, self.year)

    def earliest(self) -> Day:
        return Day(self._span()[0], 1, 1)

    def latest(self) -> Day:
        return Day(self._span()[1], 12, 31)

    def sort_parts(self) -> tuple[int, int | None, int | None]:
        return self.year, None, None

    def edtf(self) -> str:
        return _year_edtf(self.year)[:-1] + "X"


@dataclass(frozen=True)
class Century:
    """A hundred years starting at ``year`` (e.g. 1900 for ``19XX``)."""
    year: int

    @property
    def precision(self) -> Precision:
        return Precision.CENTURY

    def _span(self) -> tuple[int, int]:
        return (self.year, self.year + 99) if self.year >= 0 else (self.year - 99, self.year)

    def earliest(self) -> Day:
        return Day(self._span()[0], 1, 1)

    def latest(self) -> Day:
        return Day(self._span()[1], 12, 31)

    def sort_parts(self) -> tuple[int, int | None, int | None]:
        return self.year, None, None

    def edtf(self) -> str:
        return _year_edtf(self.year)[:-2] + "XX"


@dataclass(frozen=True)
class Season:
    year: int
    season: int

    def __post_init__(self):
        if self.season not in SEASONS:
            raise InvalidCalendarValue(f"Unknown season code: {self.season}")

    @property
    def name(self) -> str:
        return SEASONS[self.season][0]

    @property
    def precision(self) -> Precision:
        return Precision.MONTH

    def earliest(self) -> Day:
        return Day(self.year, SEASONS[self.season][1], 1)

    def latest(self) -> Day:
        last_month = SEASONS[self.season][2]
        # winter runs into the following year
        year = self.year + 1 if last_month < SEASONS[self.season][1] else self.year
        return Day(year, last_month, days_in_month(last_month, year))

    def sort_parts(self) -> tuple[int, int | None, int | None]:
        return self.year, SEASONS[self.season][1], None

    def edtf(self) -> str:
        return f"{_year_edtf(self.year)}-{self.season}"


@dataclass(frozen=True)
class Unknown:
    """An open (``..``) or unknown (empty) interval end."""
    open: bool = False

    @property
    def precision(self) -> Precision:
        return Precision.UNKNOWN

    def earliest(self) -> None:
        return None

    def latest(self) -> None:
        return None

    def sort_parts(self) -> None:
        return None

    def edtf(self) -> str:
        return ".." if self.open else ""


@dataclass(frozen=True)
class Interval:
    lower: CalendricalValue
    upper: CalendricalValue

    def __post_init__(self):
        start = self.lower.earliest()
        stop = self.upper.latest()
        if start is not None and stop is not None and start > stop:
            raise InvalidCalendarValue(f"Interval ends before it starts: {self.edtf()}")

    @property
    def precision(self) -> Precision:
        if isinstance(self.lower, Unknown):
            return self.upper.precision
        return self.lower.precision

    def earliest(self) -> Day | None:
        return self.lower.earliest()

    def latest(self) -> Day | None:
        return self.upper.latest()

    def sort_parts(self) -> tuple[int, int | None, int | None] | None:
        if isinstance(self.lower, Unknown):
            return self.upper.sort_parts()
        return self.lower.sort_parts()

    def includes(self, value: CalendricalValue) -> bool:
        """True if every day of ``value`` falls inside this interval.

        Open or unknown ends are unbounded.
        """
        start, stop = value.earliest(), value.latest()
        if start is None or stop is None:
            return False
        lower, upper = self.earliest(), self.latest()
        if lower is not None and start < lower:
            return False
        if upper is not None and stop > upper:
            return False
        return True

    def edtf(self) -> str:
        return f"{self.lower.edtf()}/{self.upper.edtf()}"


@dataclass(frozen=True)
class DateSet:
    """EDTF set: one of the members (``[...]``) or all of them (``{...}``)."""
    members: tuple
    all_of: bool = False

    def __post_init__(self):
        if not self.members:
            raise InvalidCalendarValue("Empty date set")

    @property
    def precision(self) -> Precision:
        return self.members[0].precision

    def earliest(self) -> Day | None:
        return self.members[0].earliest()

    def latest(self) -> Day | None:
        return self.members[-1].latest()

    def sort_parts(self) -> tuple[int, int | None, int | None] | None:
        return self.members[0].sort_parts()

    def edtf(self) -> str:
        body = ", ".join(_set_member_edtf(m) for m in self.members)
        return f"{{{body}}}" if self.all_of else f"[{body}]"


def _set_member_edtf(member) -> str:
    if not isinstance(member, Interval):
        return member.edtf()
    lower = "" if isinstance(member.lower, Unknown) else member.lower.edtf()
    upper = "" if isinstance(member.upper, Unknown) else member.upper.edtf()
    return f"{lower}..{upper}"


CalendricalValue = Union[Day, Month, Year, Decade, Century, Season, Interval, DateSet, Unknown]
