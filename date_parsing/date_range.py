"""Date ranges assembled from structured start/end statements."""

from __future__ import annotations

from functools import cached_property
from typing import List, Optional, Sequence

from date_parsing.calendar_values import (
    Day,
    InvalidCalendarValue,
    Interval,
    Precision,
    Unknown,
    iter_days,
)
from date_parsing.config import load_date_parsing_config
from date_parsing.date_value import DateValue, SortKeyOrdering
from date_parsing.decoder import DEFAULT_ALLOWED_PRECISIONS
from date_parsing.qualifiers import qualify
from date_parsing.statement import DateStatement


class DateRange(SortKeyOrdering):
    """A range whose endpoints are separate date statements.

    At least one endpoint is always present; an open-ended range has only a
    start or only a stop.
    """

    def __init__(
        self,
        statement: DateStatement,
        start: Optional[DateValue] = None,
        stop: Optional[DateValue] = None,
        event_type: str | None = None,
    ):
        if start is None and stop is None:
            raise ValueError("DateRange needs a start or a stop date")
        self.statement = statement
        self.start = start
        self.stop = stop
        self.type = statement.event_type or event_type

    def __repr__(self) -> str:
        return f"DateRange(value={self.value!r}, encoding={self.encoding!r}, type={self.type!r})"

    @classmethod
    def from_statement(
        cls,
        statement: DateStatement,
        event_type: str | None = None,
        current_year: int | None = None,
    ) -> DateRange | None:
        """Build a range from a statement's structured values.

        Endpoints without an encoding take the range's encoding, and all
        endpoints take the range's type. Entries tagged neither start nor end
        are ignored; if two share a role the first one wins.

        Returns:
            The range, or None if no start or end was found.
        """
        range_type = statement.event_type or event_type
        if current_year is None:
            current_year = load_date_parsing_config().current_year
        start = stop = None
        for child in statement.structured_value:
            if child.encoding_code is None and statement.encoding is not None:
                child = child.model_copy(update={"encoding": statement.encoding})
            date = DateValue(child, event_type=range_type, current_year=current_year)
            if date.is_start and start is None:
                start = date
            elif date.is_end and stop is None:
                stop = date

        if start is None and stop is None:
            return None
        return cls(statement, start=start, stop=stop, event_type=range_type)

    @property
    def endpoints(self) -> List[DateValue]:
        return [d for d in (self.start, self.stop) if d is not None]

    @property
    def value(self) -> tuple[str | None, str | None]:
        return (
            self.start.value if self.start else None,
            self.stop.value if self.stop else None,
        )

    @cached_property
    def sort_key(self) -> str:
        """Sorts by start, then stop."""
        start_key = self.start.sort_key if self.start else ""
        stop_key = self.stop.sort_key if self.stop else ""
        return f"{start_key} - {stop_key}"

    @cached_property
    def base_value(self) -> str:
        start_base = self.start.base_value if self.start else ""
        stop_base = self.stop.base_value if self.stop else ""
        return f"{start_base}-{stop_base}"

    @property
    def encoding(self) -> str | None:
        """Start encoding, else stop encoding, else the range's own."""
        for date in self.endpoints:
            if date.encoding:
                return date.encoding
        return self.statement.encoding_code

    @property
    def has_encoding(self) -> bool:
        return bool(self.encoding)

    @property
    def qualifier(self) -> str | None:
        """Shared endpoint qualifier; None when the endpoints disagree.

        When neither endpoint is qualified the range's own qualifier is used.
        """
        start_qualifier = self.start.qualifier if self.start else None
        stop_qualifier = self.stop.qualifier if self.stop else None
        if start_qualifier != stop_qualifier:
            return None
        return start_qualifier or self.statement.qualifier

    @property
    def qualified(self) -> bool:
        return any(d.qualified for d in self.endpoints) or bool(self.statement.qualifier)

    @property
    def primary(self) -> bool:
        return any(d.primary for d in self.endpoints) or self.statement.status == "primary"

    @property
    def parsed(self) -> bool:
        return any(d.parsed for d in self.endpoints)

    @property
    def parsable(self) -> bool:
        """False if every endpoint is missing or a known unparsable value."""
        return any(d.parsable for d in self.endpoints)

    @property
    def precision(self) -> Precision:
        for date in self.endpoints:
            if date.parsed:
                return date.precision
        return Precision.UNKNOWN

    @property
    def earliest_date(self) -> Day | None:
        return self.start.earliest_date if self.start else None

    @property
    def latest_date(self) -> Day | None:
        return self.stop.latest_date if self.stop else None

    def as_range(self) -> tuple[Day, Day] | None:
        if self.earliest_date is None or self.latest_date is None:
            return None
        return self.earliest_date, self.latest_date

    def as_interval(self) -> Interval | None:
        """The range as an Interval, open on any side without a parsed date.

        Returns None when the endpoints are out of order.
        """
        lower = self.start.resolved if self.start and self.start.parsed else Unknown(open=True)
        upper = self.stop.resolved if self.stop and self.stop.parsed else Unknown(open=True)
        try:
            return Interval(lower, upper)
        except InvalidCalendarValue:
            return None

    def to_list(self) -> List[Day]:
        """Every day described by the endpoints.

        Two single-day endpoints (or a start alone) expand to the full span;
        otherwise the endpoints' own days are merged.
        """
        start_days = self.start.to_list() if self.start else []
        stop_days = self.stop.to_list() if self.stop else []

        if not start_days and not stop_days:
            return []
        if (len(start_days) == 1 and len(stop_days) == 1) or not stop_days:
            bounds = self.as_range()
            return list(iter_days(*bounds)) if bounds else []
        return sorted(set(start_days + stop_days))

    def _endpoint_text(self, date: DateValue | None, **kwargs) -> str:
        if date is None:
            return ""
        if not date.parsable:
            return "Unknown"
        return date.decoded_value(**kwargs) or ""

    def decoded_value(
        self,
        allowed_precisions: Sequence[Precision | str] = DEFAULT_ALLOWED_PRECISIONS,
        ignore_unparseable: bool = False,
        prefer_original_text: bool = True,
    ) -> str:
        """Distinct endpoint decodes joined with " - ".

        An endpoint holding a known unparsable value such as "uuuu" shows as
        "Unknown".
        """
        kwargs = dict(
            allowed_precisions=allowed_precisions,
            ignore_unparseable=ignore_unparseable,
            prefer_original_text=prefer_original_text,
        )
        parts = []
        for date in (self.start, self.stop):
            text = self._endpoint_text(date, **kwargs)
            if text not in parts:
                parts.append(text)
        return " - ".join(parts).strip()

    @property
    def qualified_value(self) -> str:
        """Qualifier markup around the whole range when the endpoints agree.

        Otherwise each endpoint is qualified on its own, e.g.
        "[ca. 1920] - [1925?]".
        """
        if self.qualifier:
            return qualify(self.decoded_value(), self.qualifier)
        start_text = self.start.qualified_value if self.start else ""
        stop_text = self.stop.qualified_value if self.stop else ""
        return f"{start_text} - {stop_text}"
