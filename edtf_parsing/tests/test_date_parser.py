"""Unit tests for CalendarDateProduction."""

import pytest
from edtf_parsing.date_parser import CalendarDateProduction
from edtf_parsing.errors import ParseErrorKind
from edtf_parsing.grammar import Failure, Match
from edtf_parsing.model import (
    Certainty,
    Date,
    DayMasked,
    MonthDayMasked,
    MonthMasked,
    Season,
    Year,
    YearMasked,
    YearMonth,
    YearMonthDay,
    YearSeason,
)


class TestCalendarDateProduction:
    """Test cases for CalendarDateProduction."""

    def setup_method(self):
        """Set up test fixtures."""
        self.production = CalendarDateProduction()

    @pytest.mark.parametrize("text,precision", [
        ("2019", Year(2019)),
        ("0000", Year(0)),
        ("-0043", Year(-43)),
        ("2019-07", YearMonth(2019, 7)),
        ("2019-07-09", YearMonthDay(2019, 7, 9)),
        ("2020-02-29", YearMonthDay(2020, 2, 29)),
        ("2019-22", YearSeason(2019, Season.SUMMER)),
        ("201X", YearMasked(2010, 1)),
        ("19XX", YearMasked(1900, 2)),
        ("XXXX", YearMasked(0, 4)),
        ("-19XX", YearMasked(-1900, 2)),
        ("2019-XX", MonthMasked(2019)),
        ("2004-07-XX", DayMasked(2004, 7)),
        ("2019-XX-XX", MonthDayMasked(2019)),
    ])
    def test_precisions(self, text, precision):
        result = self.production.parse(text)
        assert result == Match(Date(precision), 0, len(text))

    @pytest.mark.parametrize("suffix,certainty", [
        ("?", Certainty.UNCERTAIN),
        ("~", Certainty.APPROXIMATE),
        ("%", Certainty.APPROXIMATE_UNCERTAIN),
    ])
    def test_qualifier_applies_to_whole_date(self, suffix, certainty):
        result = self.production.parse("2019-01-XX" + suffix)
        assert result.value == Date(DayMasked(2019, 1), certainty)
        assert result.end == 11

    def test_qualifier_mid_date_stops_the_match(self):
        # The caller sees trailing text and rejects it
        result = self.production.parse("2019-01?-XX")
        assert result.value == Date(YearMonth(2019, 1), Certainty.UNCERTAIN)
        assert result.end == 8

    def test_dangling_dash_not_consumed(self):
        result = self.production.parse("2019-")
        assert result.end == 4

    def test_parses_from_offset(self):
        result = self.production.parse("x/2019-07", 2)
        assert result == Match(Date.from_ym(2019, 7), 2, 9)

    @pytest.mark.parametrize("text,position", [
        ("2021-02-29", 8),
        ("2019-04-31", 8),
        ("2019-07-00", 8),
        ("2021-25", 5),
        ("2021-00", 5),
        ("2019-13-01", 5),
        ("2019-22-01", 5),
    ])
    def test_out_of_range(self, text, position):
        result = self.production.parse(text)
        assert isinstance(result, Failure)
        assert result.kind == ParseErrorKind.OUT_OF_RANGE
        assert result.position == position

    @pytest.mark.parametrize("text", [
        "201X-07",
        "XXXX-XX",
        "2019-1X",
        "2019-07-1X",
        "2019-XX-09",
    ])
    def test_structural(self, text):
        result = self.production.parse(text)
        assert isinstance(result, Failure)
        assert result.kind == ParseErrorKind.STRUCTURAL

    @pytest.mark.parametrize("text", ["2019-X7", "20X9", "-0000"])
    def test_malformed(self, text):
        result = self.production.parse(text)
        assert isinstance(result, Failure)
        assert result.kind == ParseErrorKind.MALFORMED

    @pytest.mark.parametrize("text", ["", "19", "abcd", "Y17000", "..", "+2019"])
    def test_no_match(self, text):
        assert self.production.parse(text) is None
