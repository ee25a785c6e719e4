"""Tests for sortable date keys."""

import pytest
from date_parsing.builder import build_date
from date_parsing.calendar_values import Century, Day, Decade, Interval, Month, Precision, Unknown, Year
from date_parsing.sort_key import encode_year, sort_key


class TestEncodeYear:
    """Test cases for year encoding."""

    @pytest.mark.parametrize("year,expected", [
        (2023, "2023"),
        (966, "0966"),
        (22, "0022"),
        (0, "-89"),
        (-1, "-88"),
        (-35, "-764"),
        (-1000, "-58999"),
    ])
    def test_encode_year(self, year, expected):
        assert encode_year(year) == expected

    def test_bce_years_sort_chronologically(self):
        years = [-1000, -999, -35, -9, -1, 0, 1, 999, 1000]
        keys = [encode_year(y) for y in years]
        assert keys == sorted(keys)


class TestSortKey:
    """Test cases for full keys."""

    @pytest.mark.parametrize("value,precision,expected", [
        (Day(2023, 1, 2), Precision.DAY, "20230102"),
        (Month(2023, 1), Precision.MONTH, "20230100"),
        (Year(2023), Precision.YEAR, "20230000"),
        (Decade(1960), Precision.DECADE, "196-0000"),
        (Century(1900), Precision.CENTURY, "19--0000"),
        (Interval(Day(2022, 10, 30), Day(2023, 1, 1)), Precision.DAY, "20221030"),
        (Interval(Unknown(open=True), Year(1985)), Precision.YEAR, "19850000"),
    ])
    def test_sort_key(self, value, precision, expected):
        assert sort_key(value, precision) == expected

    def test_missing_value(self):
        assert sort_key(None, Precision.UNKNOWN) == ""

    @pytest.mark.parametrize("value,precision,expected", [
        (Century(0), Precision.CENTURY, "00--0000"),
        (Decade(0), Precision.DECADE, "000-0000"),
    ])
    def test_first_decade_and_century_are_ce(self, value, precision, expected):
        assert sort_key(value, precision) == expected


class TestDateOrdering:
    """Dates sort chronologically by their keys."""

    def test_edtf_dates_sort_chronologically(self):
        values = [
            "2023-01-01",
            "2023-01-02",
            "2023",
            "2022-10-30/2023-01-01",
            "966",
            "22",
            "19xx",
            "196x",
            "0",
            "-1",
            "-35",
        ]
        dates = [build_date({"value": v, "encoding": {"code": "edtf"}}) for v in values]
        assert [d.value for d in sorted(dates)] == [
            "-35",
            "-1",
            "0",
            "22",
            "966",
            "19xx",
            "196x",
            "2022-10-30/2023-01-01",
            "2023",
            "2023-01-01",
            "2023-01-02",
        ]

    def test_first_century_sorts_after_bce_years(self):
        bce = build_date({"value": "-35", "encoding": {"code": "edtf"}})
        first_century = build_date({"value": "1st century"}, current_year=2026)
        assert first_century.precision == Precision.CENTURY
        assert bce < first_century

    def test_first_decade_sorts_after_bce_years(self):
        bce = build_date({"value": "-1", "encoding": {"code": "edtf"}})
        first_decade = build_date({"value": "000X", "encoding": {"code": "edtf"}})
        later = build_date({"value": "0015", "encoding": {"code": "edtf"}})
        assert bce < first_decade < later

    def test_unparsed_dates_sort_first(self):
        dates = [build_date({"value": v, "encoding": {"code": "edtf"}}) for v in ("1900", "invalid-date")]
        assert [d.value for d in sorted(dates)] == ["invalid-date", "1900"]

    def test_sort_key_is_stable(self):
        date = build_date({"value": "-35", "encoding": {"code": "edtf"}})
        assert date.sort_key == date.sort_key == "-7640000"
