"""Tests for picking a preferred date."""

import pytest
from date_parsing.builder import build_date
from date_parsing.date_range import DateRange
from date_parsing.selection import dates_of_type, earliest_preferred_date, event_dates, preferred_date


def make_dates(*attribute_maps):
    return [build_date(a, current_year=2026) for a in attribute_maps]


class TestEarliestPreferredDate:
    """Test cases for choosing among dates of one type."""

    def test_primary_date_wins_over_earlier_dates(self):
        dates = make_dates(
            {"value": "2019", "type": "creation"},
            {"value": "2020", "type": "publication", "status": "primary"},
            {"value": "2021", "type": "publication"},
        )
        assert earliest_preferred_date(dates).value == "2020"

    def test_earliest_date_without_primary(self):
        dates = make_dates({"value": "1900"}, {"value": "1850"}, {"value": "1875"})
        assert earliest_preferred_date(dates).value == "1850"

    def test_unparsed_dates_are_skipped(self):
        dates = make_dates(
            {"value": "unknown", "status": "primary"},
            {"value": "1900"},
        )
        assert earliest_preferred_date(dates).value == "1900"

    def test_encoded_dates_preferred(self):
        dates = make_dates(
            {"value": "1850"},
            {"value": "1900", "encoding": {"code": "w3cdtf"}},
        )
        assert earliest_preferred_date(dates).value == "1900"

    def test_ignore_qualified(self):
        dates = make_dates(
            {"value": "1850", "qualifier": "approximate"},
            {"value": "1900"},
        )
        assert earliest_preferred_date(dates).value == "1850"
        assert earliest_preferred_date(dates, ignore_qualified=True).value == "1900"

    def test_first_wins_on_ties(self):
        dates = make_dates({"value": "1900", "type": "a"}, {"value": "1900", "type": "b"})
        assert earliest_preferred_date(dates).type == "a"

    def test_ranges_compete_with_single_dates(self):
        dates = make_dates(
            {"value": "1900", "encoding": {"code": "edtf"}},
            {
                "structuredValue": [{"value": "1850", "type": "start"}, {"value": "1860", "type": "end"}],
                "encoding": {"code": "edtf"},
            },
        )
        assert isinstance(earliest_preferred_date(dates), DateRange)

    @pytest.mark.parametrize("dates", [[], make_dates({"value": "unknown"}), make_dates({"value": ""})])
    def test_nothing_to_choose(self, dates):
        assert earliest_preferred_date(dates) is None


class TestEventDates:
    """Test cases for reading dates off an event."""

    def test_dates_take_the_event_type(self):
        event = {
            "type": "publication",
            "date": [
                {"value": "1920", "encoding": {"code": "marc"}},
                {"value": "1921", "type": "copyright"},
            ],
        }
        dates = event_dates(event)
        assert [d.type for d in dates] == ["publication", "copyright"]

    def test_unparsable_values_are_dropped(self):
        event = {
            "type": "publication",
            "date": [
                {"value": "9999", "encoding": {"code": "marc"}},
                {"value": "uuuu", "encoding": {"code": "marc"}},
                {"value": "1920", "encoding": {"code": "marc"}},
            ],
        }
        assert [d.value for d in event_dates(event)] == ["1920"]

    def test_event_without_dates(self):
        assert event_dates({"type": "publication"}) == []

    def test_range_takes_the_event_type(self):
        event = {
            "type": "creation",
            "date": [{"structuredValue": [{"value": "1900", "type": "start"}, {"value": "1910", "type": "end"}]}],
        }
        (date_range,) = event_dates(event)
        assert date_range.type == "creation"
        assert date_range.start.type == "creation"


class TestPreferredDate:
    """Test cases for choosing across event types."""

    def setup_method(self):
        """Set up test fixtures."""
        self.dates = make_dates(
            {"value": "2019", "type": "creation"},
            {"value": "2020", "type": "publication", "status": "primary"},
            {"value": "2021", "type": "publication"},
            {"value": "2018", "type": "capture"},
        )

    def test_publication_first(self):
        assert preferred_date(self.dates).value == "2020"

    def test_custom_type_order(self):
        assert preferred_date(self.dates, types=["capture", "publication"]).value == "2018"

    def test_falls_through_missing_types(self):
        assert preferred_date(self.dates, types=["copyright", "creation"]).value == "2019"

    def test_no_matching_type(self):
        assert preferred_date(self.dates, types=["copyright"]) is None

    def test_dates_of_type(self):
        assert [d.value for d in dates_of_type(self.dates, "publication")] == ["2020", "2021"]
