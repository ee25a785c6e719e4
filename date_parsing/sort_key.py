"""Lexicographically sortable keys for calendrical values.

Keys are plain strings so they can also be handed to external sorts such as
a search index. Comparing two keys byte by byte gives chronological order,
including BCE years, and coarse (decade/century) dates sort before more
precise dates that share their leading digits.
"""

from __future__ import annotations

from date_parsing.calendar_values import CalendricalValue, Precision

# Inverting each digit makes larger BCE magnitudes sort first
BCE_CHAR_SORT_MAP = str.maketrans("0123456789", "9876543210")


def encode_year(year: int) -> str:
    """Sortable year string.

    CE years are zero-padded to four digits. Years <= 0 become "-", the
    inverted digit count, then the inverted digits: "-" sorts before any
    digit, and the inverted length puts longer magnitudes (further in the
    past) first.

    >>> encode_year(1999)
    '1999'
    >>> encode_year(-35)
    '-764'
    """
    if year > 0:
        return str(year).rjust(4, "0")
    inverted_year = str(abs(year)).translate(BCE_CHAR_SORT_MAP)
    length_prefix = str(len(inverted_year)).translate(BCE_CHAR_SORT_MAP)
    return f"-{length_prefix}{inverted_year}"


def sort_key(value: CalendricalValue | None, precision: Precision) -> str:
    """Key for ``value`` at the given precision; "" when there is no value."""
    if value is None:
        return ""
    parts = value.sort_parts()
    if parts is None:
        return ""

    year, month, day = parts
    year_str = encode_year(year)
    month_str = str(month).rjust(2, "0") if month else "00"
    day_str = str(day).rjust(2, "0") if day else "00"

    if precision in (Precision.DECADE, Precision.CENTURY) and year >= 0:
        # The decade/century starting at year 0 lies in CE
        year_str = str(year).rjust(4, "0")
    if precision == Precision.DECADE:
        return f"{year_str[:-1]}-{month_str}{day_str}"
    if precision == Precision.CENTURY:
        return f"{year_str[:-2]}--{month_str}{day_str}"
    return f"{year_str}{month_str}{day_str}"
