"""Entry point turning a raw date attribute map into a date object."""

from __future__ import annotations

from typing import Union

from date_parsing.date_range import DateRange
from date_parsing.date_value import DateValue
from date_parsing.statement import DateStatement

DateLike = Union[DateValue, DateRange]


def build_date(
    attributes: dict | DateStatement,
    event_type: str | None = None,
    current_year: int | None = None,
) -> DateLike | None:
    """Build a DateValue, or a DateRange when structured values are present.

    Args:
        attributes: the date's attribute map, or an already validated statement
        event_type: type to use when the statement declares none
        current_year: pivot year for two-digit years; configuration when omitted

    Returns:
        The date, or None for a structured value with no start or end.

    Raises:
        pydantic.ValidationError: if the attribute map is malformed
    """
    statement = attributes if isinstance(attributes, DateStatement) else DateStatement.from_attributes(attributes)
    if statement.structured_value:
        return DateRange.from_statement(statement, event_type=event_type, current_year=current_year)
    return DateValue(statement, event_type=event_type, current_year=current_year)
