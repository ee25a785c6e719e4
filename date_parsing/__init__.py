"""Date parsing for bibliographic and archival metadata.

This package turns free-text and encoded date statements (ISO 8601, W3CDTF,
MARC, EDTF and a dozen informal catalog notations) into calendrical values
that can be sorted chronologically, decoded for display at a chosen
precision, and compared to pick a single best date for a record.
"""

from date_parsing.builder import build_date
from date_parsing.calendar_values import InvalidCalendarValue, Precision
from date_parsing.date_range import DateRange
from date_parsing.date_value import DateValue
from date_parsing.factory import DateFormatFactory, DateFormats
from date_parsing.log import set_notifier
from date_parsing.selection import dates_of_type, earliest_preferred_date, event_dates, preferred_date
from date_parsing.statement import DateStatement

__all__ = [
    "DateFormatFactory",
    "DateFormats",
    "DateRange",
    "DateStatement",
    "DateValue",
    "InvalidCalendarValue",
    "Precision",
    "build_date",
    "dates_of_type",
    "earliest_preferred_date",
    "event_dates",
    "preferred_date",
    "set_notifier",
]
