"""Factory for creating date format detectors."""

from enum import Enum, auto
from date_parsing.strategy import DateFormatStrategy


class DateFormats(Enum):
    """Enumeration of available undeclared date formats."""
    UNDECLARED_EDTF = auto()
    MM_DD_YYYY = auto()
    MM_DD_YY = auto()
    YEAR_RANGE = auto()
    DECADE_AS_YEAR_DASH = auto()
    DECADE_STRING = auto()
    EMBEDDED_BC_YEAR = auto()
    EMBEDDED_YEAR = auto()
    EMBEDDED_THREE_DIGIT_YEAR = auto()
    BRACKETED_YEAR = auto()
    MYSTERY_CENTURY = auto()
    CENTURY = auto()
    ROMAN_NUMERAL_CENTURY = auto()
    ROMAN_NUMERAL_YEAR = auto()
    ONE_OR_TWO_DIGIT_YEAR = auto()
    UNPARSEABLE = auto()
    FALLBACK = auto()


class DateFormatFactory:
    """Factory for creating DateFormatStrategy instances."""

    @staticmethod
    def get_detector(date_format: DateFormats, *, current_year: int | None = None) -> DateFormatStrategy:
        """Get a detector instance for the specified format.

        Args:
            date_format: The format to create a detector for
            current_year: Pivot year for two-digit year inference; required
                for MM_DD_YY

        Returns:
            An instance of the requested detector

        Raises:
            ValueError: If the format is unknown, or MM_DD_YY is requested
                without a current_year
        """
        # Import here to avoid circular dependencies
        from date_parsing.undeclared_edtf_detector import UndeclaredEdtfDetector
        from date_parsing.slash_date_detectors import MonthDayYearDetector, MonthDayShortYearDetector
        from date_parsing.year_range_detector import YearRangeDetector
        from date_parsing.decade_detectors import DecadeAsYearDashDetector, DecadeStringDetector
        from date_parsing.embedded_year_detectors import (
            BracketedYearDetector,
            EmbeddedBCYearDetector,
            EmbeddedThreeDigitYearDetector,
            EmbeddedYearDetector,
        )
        from date_parsing.century_detectors import CenturyDetector, MysteryCenturyDetector
        from date_parsing.roman_numeral_detectors import RomanNumeralCenturyDetector, RomanNumeralYearDetector
        from date_parsing.short_year_detector import OneOrTwoDigitYearDetector
        from date_parsing.unparseable_detector import UnparseableDetector

        if date_format == DateFormats.UNDECLARED_EDTF:
            return UndeclaredEdtfDetector()
        elif date_format == DateFormats.MM_DD_YYYY:
            return MonthDayYearDetector()
        elif date_format == DateFormats.MM_DD_YY:
            if current_year is None:
                raise ValueError("MM_DD_YY detection needs a current_year")
            return MonthDayShortYearDetector(current_year)
        elif date_format == DateFormats.YEAR_RANGE:
            return YearRangeDetector()
        elif date_format == DateFormats.DECADE_AS_YEAR_DASH:
            return DecadeAsYearDashDetector()
        elif date_format == DateFormats.DECADE_STRING:
            return DecadeStringDetector()
        elif date_format == DateFormats.EMBEDDED_BC_YEAR:
            return EmbeddedBCYearDetector()
        elif date_format == DateFormats.EMBEDDED_YEAR:
            return EmbeddedYearDetector()
        elif date_format == DateFormats.EMBEDDED_THREE_DIGIT_YEAR:
            return EmbeddedThreeDigitYearDetector()
        elif date_format == DateFormats.BRACKETED_YEAR:
            return BracketedYearDetector()
        elif date_format == DateFormats.MYSTERY_CENTURY:
            return MysteryCenturyDetector()
        elif date_format == DateFormats.CENTURY:
            return CenturyDetector()
        elif date_format == DateFormats.ROMAN_NUMERAL_CENTURY:
            return RomanNumeralCenturyDetector()
        elif date_format == DateFormats.ROMAN_NUMERAL_YEAR:
            return RomanNumeralYearDetector()
        elif date_format == DateFormats.ONE_OR_TWO_DIGIT_YEAR:
            return OneOrTwoDigitYearDetector()
        elif date_format == DateFormats.UNPARSEABLE:
            return UnparseableDetector()
        elif date_format == DateFormats.FALLBACK:
            return DateFormatStrategy()
        else:
            raise ValueError(f"Unknown date format: {date_format}")
