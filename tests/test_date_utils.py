"""Tests for date parsing and place normalization."""

import pytest

from record_sourcer.utils.date_utils import (
    compare_date_strings,
    convert_ddmmyyyy_to_date_string,
    get_quarter_from_month_name,
    parse_date,
    quarter_name,
)
from record_sourcer.utils.place_utils import normalize_place_string, split_place_string


class TestParseDate:
    """Tests for parse_date."""

    def test_gedcom_date(self):
        parsed = parse_date("9 JUN 1932")
        assert (parsed.day, parsed.month, parsed.year) == (9, 6, 1932)
        assert parsed.precision == "exact"

    def test_iso_date(self):
        parsed = parse_date("1932-06-09")
        assert (parsed.year, parsed.month, parsed.day) == (1932, 6, 9)

    def test_us_dates(self):
        """Test month-first dates with and without a comma."""
        assert parse_date("June 9, 1932").day == 9
        parsed = parse_date("Aug 22 1822")
        assert (parsed.month, parsed.day, parsed.year) == (8, 22, 1822)

    def test_quarter_date(self):
        parsed = parse_date("Jan-Feb-Mar 1881")
        assert parsed.quarter == 1
        assert parsed.year == 1881
        assert parsed.precision == "quarter"

    def test_qualified_year(self):
        parsed = parse_date("ABT 1850")
        assert parsed.year == 1850
        assert parsed.precision == "year"

    def test_year_anywhere(self):
        assert parse_date("sometime in 1799 or so").year == 1799

    def test_empty(self):
        assert parse_date("").precision == "unknown"


class TestCompareDateStrings:
    """Tests for chronological comparison."""

    def test_year_order(self):
        assert compare_date_strings("Jan-Feb-Mar 1881", "1880") == 1
        assert compare_date_strings("1880", "Jan-Feb-Mar 1881") == -1

    def test_year_before_quarter_of_same_year(self):
        assert compare_date_strings("1881", "Apr-May-Jun 1881") == -1

    def test_equal_dates_in_different_formats(self):
        assert compare_date_strings("9 Jun 1932", "1932-06-09") == 0


class TestQuarters:
    @pytest.mark.parametrize(
        "name,expected",
        [("Mar", 1), ("Jun", 2), ("September", 3), ("Dec", 4), ("", 1), ("Xyz", 1)],
    )
    def test_quarter_from_month_name(self, name, expected):
        assert get_quarter_from_month_name(name) == expected

    def test_quarter_name(self):
        assert quarter_name(2) == "Apr-May-Jun"
        assert quarter_name(5) == ""


class TestDdmmyyyy:
    """Tests for dd-mm-yyyy conversion."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("09-06-1932", "9 Jun 1932"),
            ("00-06-1932", "Jun 1932"),
            ("00-00-1932", "1932"),
            ("around 1932", "around 1932"),
        ],
    )
    def test_convert(self, text, expected):
        assert convert_ddmmyyyy_to_date_string(text, "-") == expected


class TestPlaceStrings:
    def test_normalize(self):
        assert normalize_place_string("Kensington ,, London,England") == "Kensington, London, England"

    def test_split(self):
        assert split_place_string("Leeds,  Yorkshire") == ["Leeds", "Yorkshire"]
        assert split_place_string("") == []
