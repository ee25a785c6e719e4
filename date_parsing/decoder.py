"""Human-readable rendering of calendrical values.

Output is chosen from a list of allowed precisions ordered most specific
first, e.g. a day-precision date rendered with ``[YEAR, DECADE]`` comes out
as a bare year.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from date_parsing.calendar_values import (
    MONTH_NAMES,
    CalendricalValue,
    DateSet,
    Interval,
    Precision,
    Season,
    Unknown,
)

DEFAULT_ALLOWED_PRECISIONS = (
    Precision.DAY,
    Precision.MONTH,
    Precision.YEAR,
    Precision.DECADE,
    Precision.CENTURY,
)


def choose_precision(resolved: Precision, allowed: Sequence[Precision]) -> Precision:
    """Most specific allowed precision that is not finer than ``resolved``.

    Falls back to the first allowed precision when none qualifies.
    """
    for precision in allowed:
        if precision.rank >= resolved.rank:
            return precision
    return allowed[0]


def ordinalize(number: int) -> str:
    """1 → '1st', 22 → '22nd', 113 → '113th'."""
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def format_year(year: int) -> str:
    """Astronomical year as display text; years before 1000 get an era."""
    if year < 1:
        return f"{1 - year} BCE"
    if year < 1000:
        return f"{year} CE"
    return str(year)


def format_decade(year: int) -> str:
    if year < 0:
        return f"{abs(year) // 10 * 10}s BCE"
    return f"{year // 10 * 10}s"


def format_century(year: int) -> str:
    if year < 0:
        return f"{ordinalize(abs(year // 100) + 1)} century BCE"
    return f"{ordinalize(year // 100 + 1)} century"


def format_value(value: CalendricalValue, precision: Precision) -> str | None:
    """Render a single (non-interval, non-set) value at ``precision``."""
    if isinstance(value, Unknown):
        return None

    year = value.sort_parts()[0]
    if precision == Precision.DAY:
        day = value.earliest()
        return f"{MONTH_NAMES[day.month]} {day.day}, {format_year(day.year)}"
    if precision == Precision.MONTH:
        if isinstance(value, Season):
            return f"{value.name} {format_year(value.year)}"
        day = value.earliest()
        return f"{MONTH_NAMES[day.month]} {format_year(day.year)}"
    if precision == Precision.YEAR:
        return format_year(year)
    if precision == Precision.DECADE:
        return format_decade(year)
    if precision == Precision.CENTURY:
        return format_century(year)
    return None


def decode(
    value: CalendricalValue | None,
    precision: Precision,
    allowed_precisions: Sequence[Precision] = DEFAULT_ALLOWED_PRECISIONS,
) -> str | None:
    """Display text for ``value``, or None if nothing can be rendered.

    Interval bounds are rendered at their own precision and joined with
    " - " (identical renders collapse to one). Set members are joined with
    ", ".
    """
    if value is None:
        return None
    allowed = list(allowed_precisions) or list(DEFAULT_ALLOWED_PRECISIONS)

    if isinstance(value, Interval):
        parts = [
            format_value(bound, choose_precision(bound.precision, allowed))
            for bound in (value.lower, value.upper)
        ]
        return _join_distinct(parts, " - ")

    if isinstance(value, DateSet):
        return _join_distinct(
            (decode(member, member.precision, allowed) for member in value.members),
            ", ",
        )

    return format_value(value, choose_precision(precision, allowed))


def _join_distinct(parts: Iterable[str | None], separator: str) -> str | None:
    distinct = []
    for part in parts:
        if part and part not in distinct:
            distinct.append(part)
    return separator.join(distinct) or None
