"""Tests for DateRange."""

import pytest
from date_parsing.builder import build_date
from date_parsing.calendar_values import Day, Interval, Precision, Unknown, Year
from date_parsing.date_range import DateRange
from date_parsing.date_value import DateValue
from date_parsing.statement import DateStatement


def make_range(*endpoints, **attributes):
    """Range attribute map from (value, role, extra attributes) tuples."""
    structured = []
    for value, role, extra in endpoints:
        structured.append({"value": value, "type": role, **extra})
    attributes["structuredValue"] = structured
    return build_date(attributes, current_year=2026)


def iso(value, role, **extra):
    return (value, role, {"encoding": {"code": "iso8601"}, **extra})


def plain(value, role, **extra):
    return (value, role, extra)


class TestConstruction:
    """Test cases for building ranges from structured values."""

    def test_builds_a_range(self):
        date_range = make_range(plain("2023-01-01", "start"), plain("2023-12-31", "end"))
        assert isinstance(date_range, DateRange)
        assert date_range.value == ("2023-01-01", "2023-12-31")

    def test_endpoints_inherit_the_range_type(self):
        date_range = make_range(plain("2023-01-01", "start"), plain("2023-12-31", "end"), type="publication")
        assert date_range.type == "publication"
        assert date_range.start.type == "publication"
        assert date_range.stop.type == "publication"

    def test_endpoints_inherit_the_range_encoding(self):
        date_range = make_range(plain("2023-01-01", "start"), plain("2023-12-31", "end"), encoding={"code": "edtf"})
        assert date_range.encoding == "edtf"
        assert date_range.start.encoding == "edtf"
        assert date_range.stop.encoding == "edtf"

    def test_declared_endpoint_encoding_is_kept(self):
        date_range = make_range(iso("2023-01-01", "start"), plain("2023-12-31", "end"), encoding={"code": "marc"})
        assert date_range.start.encoding == "iso8601"
        assert date_range.stop.encoding == "marc"

    def test_untagged_entries_are_dropped(self):
        date_range = make_range(plain("2023-01-01", "start"), plain("2023-06-01", None), plain("2023-12-31", "end"))
        assert date_range.value == ("2023-01-01", "2023-12-31")

    def test_first_entry_for_a_role_wins(self):
        date_range = make_range(plain("2023-01-01", "start"), plain("2022-01-01", "start"))
        assert date_range.start.value == "2023-01-01"
        assert date_range.stop is None

    def test_no_start_or_end(self):
        assert make_range(plain("2023-01-01", None)) is None

    def test_endpoints_without_values(self):
        date_range = build_date({
            "structuredValue": [{"type": "start", "status": "primary"}, {"type": "end"}],
            "type": "creation",
            "encoding": {"code": "w3cdtf"},
        })
        assert isinstance(date_range, DateRange)
        assert not date_range.parsed
        assert date_range.primary

    def test_needs_an_endpoint(self):
        with pytest.raises(ValueError):
            DateRange(DateStatement())


class TestSortKey:
    """Ranges sort by start, then stop."""

    def test_ranges_sort_chronologically(self):
        pairs = [
            ("2023-01-01", "2023-01-02"),
            ("2022-10-30", "2023-01-01"),
            ("2023", "2023-01-01"),
            ("1902", "2045"),
            ("2022-10-30", "unparseable"),
            ("0455", "0496"),
        ]
        ranges = [
            make_range(plain(start, "start"), plain(stop, "end"), encoding={"code": "edtf"})
            for start, stop in pairs
        ]
        assert [r.value for r in sorted(ranges)] == [
            ("0455", "0496"),
            ("1902", "2045"),
            ("2022-10-30", "unparseable"),
            ("2022-10-30", "2023-01-01"),
            ("2023", "2023-01-01"),
            ("2023-01-01", "2023-01-02"),
        ]

    def test_ranges_and_single_dates_compare(self):
        date_range = make_range(plain("1902", "start"), plain("2045", "end"), encoding={"code": "edtf"})
        date = build_date({"value": "1950", "encoding": {"code": "edtf"}})
        assert date_range < date


class TestEncoding:
    def test_prefers_start_encoding(self):
        date_range = make_range(iso("2023-01-01", "start"), plain("2023-12-31", "end", encoding={"code": "marc"}))
        assert date_range.encoding == "iso8601"

    def test_uses_stop_encoding_without_start(self):
        date_range = make_range(plain("2023-12-31", "end", encoding={"code": "marc"}))
        assert date_range.encoding == "marc"


class TestQualifier:
    """Test cases for range qualifiers."""

    def test_shared_qualifier(self):
        date_range = make_range(
            plain("2023-01-01", "start", qualifier="inferred"),
            plain("2023-12-31", "end", qualifier="inferred"),
        )
        assert date_range.qualifier == "inferred"

    def test_different_qualifiers(self):
        date_range = make_range(
            plain("2023-01-01", "start", qualifier="approximate"),
            plain("2023-12-31", "end", qualifier="inferred"),
        )
        assert date_range.qualifier is None
        assert date_range.qualified

    def test_range_level_qualifier(self):
        date_range = make_range(plain("2023-01-01", "start"), plain("2023-12-31", "end"), qualifier="inferred")
        assert date_range.qualifier == "inferred"
        assert date_range.qualified

    @pytest.mark.parametrize("start_qualifier,stop_qualifier,expected", [
        ("questionable", None, True),
        (None, "inferred", True),
        (None, None, False),
    ])
    def test_qualified(self, start_qualifier, stop_qualifier, expected):
        date_range = make_range(
            plain("2023-01-01", "start", qualifier=start_qualifier),
            plain("2023-12-31", "end", qualifier=stop_qualifier),
        )
        assert date_range.qualified is expected


class TestFlags:
    """primary/parsed/parsable combine both endpoints."""

    @pytest.mark.parametrize("start_status,stop_status,range_status,expected", [
        ("primary", None, None, True),
        (None, "primary", None, True),
        (None, None, "primary", True),
        (None, None, None, False),
    ])
    def test_primary(self, start_status, stop_status, range_status, expected):
        date_range = make_range(
            plain("2023-01-01", "start", status=start_status),
            plain("2023-12-31", "end", status=stop_status),
            status=range_status,
        )
        assert date_range.primary is expected

    @pytest.mark.parametrize("start,stop,expected", [
        ("2023-01-01", "unparseable", True),
        ("unparseable", "2023-12-31", True),
        ("unparseable", "unparseable", False),
    ])
    def test_parsed(self, start, stop, expected):
        date_range = make_range(plain(start, "start"), plain(stop, "end"))
        assert date_range.parsed is expected

    def test_parsable(self):
        date_range = make_range(plain("9999", "start"), plain("uuuu", "end"), encoding={"code": "marc"})
        assert not date_range.parsable


class TestDecodedValue:
    """Test cases for range display text."""

    def test_joined_endpoints(self):
        date_range = make_range(iso("2023-01-01", "start"), iso("2023-12-31", "end"))
        assert date_range.decoded_value() == "January 1, 2023 - December 31, 2023"

    def test_year_precision_deduplicates(self):
        date_range = make_range(
            plain("2020-01-01", "start"), plain("2021-10-31", "end"), encoding={"code": "w3cdtf"},
        )
        assert date_range.decoded_value(allowed_precisions=[Precision.YEAR]) == "2020 - 2021"

    def test_identical_endpoints_collapse(self):
        date_range = make_range(
            plain("2020-01-01", "start"), plain("2020-10-31", "end"), encoding={"code": "w3cdtf"},
        )
        assert date_range.decoded_value(allowed_precisions=["year"]) == "2020"

    def test_unknown_end(self):
        date_range = make_range(
            plain("1758", "start"), plain("uuuu", "end"),
            type="publication", encoding={"code": "marc"}, qualifier="questionable",
        )
        assert date_range.decoded_value() == "1758 - Unknown"
        assert date_range.qualified_value == "[1758 - Unknown?]"

    def test_open_end(self):
        date_range = make_range(plain("1758", "start"), encoding={"code": "marc"})
        assert date_range.decoded_value() == "1758 -"


class TestQualifiedValue:
    """Test cases for range qualifier markup."""

    @pytest.mark.parametrize("qualifier,expected", [
        ("inferred", "[January 1, 2023 - December 31, 2023]"),
        ("approximate", "[ca. January 1, 2023 - December 31, 2023]"),
        (None, "January 1, 2023 - December 31, 2023"),
    ])
    def test_shared_qualifier(self, qualifier, expected):
        date_range = make_range(
            iso("2023-01-01", "start", qualifier=qualifier),
            iso("2023-12-31", "end", qualifier=qualifier),
        )
        assert date_range.qualified_value == expected

    def test_different_qualifiers_are_applied_per_endpoint(self):
        date_range = make_range(
            iso("2023-01-01", "start", qualifier="approximate"),
            iso("2023-12-31", "end", qualifier="inferred"),
        )
        assert date_range.qualified_value == "[ca. January 1, 2023] - [December 31, 2023]"

    def test_range_level_qualifier(self):
        date_range = make_range(
            plain("1200", "start"), plain("1299", "end"),
            encoding={"code": "marc"}, qualifier="questionable",
        )
        assert date_range.qualified_value == "[1200 - 1299?]"


class TestBoundaries:
    """Test cases for range boundaries and intervals."""

    def setup_method(self):
        """Set up test fixtures."""
        self.date_range = make_range(plain("1856", "start"), plain("1876", "end"), encoding={"code": "edtf"})

    def test_earliest_and_latest(self):
        assert self.date_range.earliest_date == Day(1856, 1, 1)
        assert self.date_range.latest_date == Day(1876, 12, 31)
        assert self.date_range.as_range() == (Day(1856, 1, 1), Day(1876, 12, 31))
        assert self.date_range.precision == Precision.YEAR

    def test_as_interval(self):
        assert self.date_range.as_interval() == Interval(Year(1856), Year(1876))

    def test_open_interval_contains_later_dates(self):
        date_range = make_range(plain("1856", "start"), encoding={"code": "edtf"})
        interval = date_range.as_interval()
        assert interval == Interval(Year(1856), Unknown(open=True))
        assert interval.includes(Year(1999))
        assert not interval.includes(Year(1800))
        assert date_range.latest_date is None

    def test_reversed_endpoints_give_no_interval(self):
        date_range = make_range(plain("1900", "start"), plain("1800", "end"), encoding={"code": "edtf"})
        assert date_range.as_interval() is None

    def test_base_value(self):
        date_range = make_range(plain("19uu", "start"), plain("193-", "end"))
        assert date_range.base_value == "1900-1930"

    def test_to_list_of_single_days_spans_the_range(self):
        date_range = make_range(iso("2023-01-30", "start"), iso("2023-02-02", "end"))
        assert date_range.to_list() == [Day(2023, 1, 30), Day(2023, 1, 31), Day(2023, 2, 1), Day(2023, 2, 2)]

    def test_endpoints_are_date_values(self):
        assert isinstance(self.date_range.start, DateValue)
        assert self.date_range.endpoints == [self.date_range.start, self.date_range.stop]
