"""Choosing a single best date among competing statements."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from date_parsing.builder import DateLike, build_date
from date_parsing.config import load_date_parsing_config

PREFERRED_EVENT_TYPES = ("publication", "creation", "capture")


def earliest_preferred_date(dates: Iterable[DateLike], ignore_qualified: bool = False) -> Optional[DateLike]:
    """Choose the earliest, best date from a list of dates of one type.

    Rules, in order:
    1. Drop dates that were not parsed.
    2. If ``ignore_qualified`` is set, drop qualified dates.
    3. If any dates are primary, keep only those.
    4. If any dates declare an encoding, keep only those.
    5. Return the earliest remaining date by sort key (first wins on ties).
    """
    candidates = [d for d in dates if d.parsed]
    if ignore_qualified:
        candidates = [d for d in candidates if not d.qualified]
    candidates = [d for d in candidates if d.primary] or candidates
    candidates = [d for d in candidates if d.has_encoding] or candidates
    if not candidates:
        return None
    return min(candidates, key=lambda d: d.sort_key)


def dates_of_type(dates: Iterable[DateLike], date_type: str) -> List[DateLike]:
    return [d for d in dates if d.type == date_type]


def event_dates(event: dict, current_year: int | None = None) -> List[DateLike]:
    """All dates of an event, skipping known unparsable values like "9999".

    Untyped dates take the event's type.
    """
    event_type = event.get("type")
    if current_year is None:
        current_year = load_date_parsing_config().current_year
    dates = []
    for attributes in event.get("date") or []:
        date = build_date(attributes, event_type=event_type, current_year=current_year)
        if date is not None and date.parsable:
            dates.append(date)
    return dates


def preferred_date(
    dates: Sequence[DateLike],
    types: Sequence[str] = PREFERRED_EVENT_TYPES,
    ignore_qualified: bool = False,
) -> Optional[DateLike]:
    """Best date of the first type in ``types`` that yields one.

    By default publication dates win over creation dates, which win over
    capture dates.
    """
    for date_type in types:
        date = earliest_preferred_date(dates_of_type(dates, date_type), ignore_qualified=ignore_qualified)
        if date is not None:
            return date
    return None
