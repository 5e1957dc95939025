"""Tests for the parse/render entry points and the orchestrated grammar."""

import logging

import pytest
from edtf_parsing.config import ParserConfig
from edtf_parsing.edtf_parser import EdtfParser, parse, parse_date, parse_level0, render
from edtf_parsing.errors import EdtfParseError, ParseErrorKind
from edtf_parsing.model import (
    Certainty,
    Date,
    DateTime,
    DayMasked,
    Interval,
    IntervalFrom,
    IntervalTo,
    MonthMasked,
    Season,
    Terminal,
    YearMonth,
    YearSeason,
    YYear,
)

ACCEPTED = [
    "2019",
    "0000",
    "-0043",
    "2019-07",
    "2019-07-09",
    "2020-02-29",
    "2019-21",
    "2019-24?",
    "201X",
    "20XX~",
    "XXXX",
    "-19XX",
    "2019-XX",
    "2004-07-XX",
    "2019-XX-XX%",
    "2019-01-XX?",
    "Y17000",
    "Y-17000",
    "Y-170000002",
    "1985-04-12T23:20:30",
    "1985-04-12T23:20:30Z",
    "1985-04-12T23:20:30-04",
    "2019-07-15T01:56:00+04:30",
    "2016-12-31T23:59:60Z",
    "2019-01/2020-01",
    "2019-01/..",
    "2019-01/",
    "../2019-01",
    "/2019-01",
    "201X~/2019-22?",
    "-0043-03-15/0014-08-19",
    "2020/2019",
]


class TestRoundTrip:
    """render(parse(s)) reproduces s exactly."""

    @pytest.mark.parametrize("text", ACCEPTED)
    def test_lossless(self, text):
        assert render(parse(text)) == text

    @pytest.mark.parametrize("text", ACCEPTED)
    def test_str_matches_render(self, text):
        assert str(parse(text)) == text

    @pytest.mark.parametrize("text", ACCEPTED)
    def test_reparse_is_equal(self, text):
        value = parse(text)
        assert parse(render(value)) == value

    @pytest.mark.parametrize("text", ACCEPTED)
    def test_idempotent_classification(self, text):
        assert parse(text) == parse(text)


class TestClassification:
    """Test cases for what each shape parses into."""

    def test_letter_prefixed_year_value(self):
        assert parse("Y17000") == YYear(17000)
        assert parse("Y-17000") == YYear(-17000)

    def test_calendar_validity(self):
        assert parse("2020-02-29") == Date.from_ymd(2020, 2, 29)
        assert parse("2004-07-XX") == Date(DayMasked(2004, 7))
        assert parse("2004-XX") == Date(MonthMasked(2004))

    def test_season_vs_month(self):
        assert parse("2021-22") == Date(YearSeason(2021, Season.SUMMER))
        assert parse("2021-02") == Date(YearMonth(2021, 2))

    def test_interval_terminals(self):
        assert parse("2019-01/..") == IntervalFrom(Date.from_ym(2019, 1), Terminal.OPEN)
        assert parse("/2019-01") == IntervalTo(Terminal.UNKNOWN, Date.from_ym(2019, 1))
        assert isinstance(parse("2019-01/2020-01"), Interval)

    def test_qualifier_placement(self):
        assert parse("2019-01-XX?").certainty == Certainty.UNCERTAIN

    def test_datetime(self):
        assert isinstance(parse("1985-04-12T23:20:30Z"), DateTime)

    def test_interval_order_not_checked_by_default(self):
        assert isinstance(parse("2020/2019"), Interval)


class TestRejection:
    """Test cases for rejected input and error detail."""

    @pytest.mark.parametrize("text,kind,position", [
        ("", ParseErrorKind.MALFORMED, 0),
        ("Y1234", ParseErrorKind.OUT_OF_RANGE, 0),
        ("2021-02-29", ParseErrorKind.OUT_OF_RANGE, 8),
        ("2021-25", ParseErrorKind.OUT_OF_RANGE, 5),
        ("../..", ParseErrorKind.STRUCTURAL, 0),
        ("//", ParseErrorKind.STRUCTURAL, 1),
        ("2019-01?-XX", ParseErrorKind.MALFORMED, 8),
        ("Y17000?", ParseErrorKind.STRUCTURAL, 6),
        ("2019-07T10:00:00", ParseErrorKind.STRUCTURAL, 0),
        ("2019-07-15T23:60:00", ParseErrorKind.OUT_OF_RANGE, 14),
        ("2019-07-15T10:00:00+4", ParseErrorKind.MALFORMED, 19),
        ("2019 ", ParseErrorKind.MALFORMED, 4),
        (" 2019", ParseErrorKind.MALFORMED, 0),
        ("17000", ParseErrorKind.MALFORMED, 0),
        ("-0000", ParseErrorKind.MALFORMED, 0),
        ("2X1X", ParseErrorKind.MALFORMED, 0),
        ("2019-1X", ParseErrorKind.STRUCTURAL, 5),
        ("Tuesday", ParseErrorKind.MALFORMED, 0),
    ])
    def test_error_kind_and_position(self, text, kind, position):
        with pytest.raises(EdtfParseError) as exc_info:
            parse(text)
        assert exc_info.value.kind == kind
        assert exc_info.value.position == position
        assert exc_info.value.text == text

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("2019-13")

    def test_error_fragment_and_message(self):
        with pytest.raises(EdtfParseError) as exc_info:
            parse("2019/2021-02-29")
        error = exc_info.value
        assert error.fragment == "29"
        assert str(error).startswith("out-of-range:")
        assert "position 13" in str(error)

    def test_non_string_input(self):
        with pytest.raises(TypeError):
            parse(2019)

    def test_rejection_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="edtf_parsing"):
            with pytest.raises(EdtfParseError):
                parse("2019-13")
        assert "Rejected EDTF '2019-13'" in caplog.text


class TestParseDate:
    """Test cases for parse_date."""

    def test_date(self):
        assert parse_date("2019-07") == Date.from_ym(2019, 7)

    @pytest.mark.parametrize("text", ["2019/2020", "Y17000", "1985-04-12T23:20:30"])
    def test_non_date_is_structural(self, text):
        with pytest.raises(EdtfParseError) as exc_info:
            parse_date(text)
        assert exc_info.value.kind == ParseErrorKind.STRUCTURAL


class TestEdtfParser:
    """Test cases for EdtfParser configuration."""

    def test_default_config_is_level_1(self):
        parser = EdtfParser()
        assert parser.config == ParserConfig()
        assert parser.parse("2019?") == Date.from_year(2019).with_certainty(Certainty.UNCERTAIN)

    def test_level_0_config(self):
        parser = EdtfParser(ParserConfig(level=0))
        with pytest.raises(EdtfParseError):
            parser.parse("2019?")

    def test_chronological_intervals_required(self):
        parser = EdtfParser(ParserConfig(require_chronological_intervals=True))
        assert isinstance(parser.parse("2019/2020"), Interval)
        assert isinstance(parser.parse("2019-06/2019"), Interval)
        with pytest.raises(EdtfParseError) as exc_info:
            parser.parse("2020/2019")
        assert exc_info.value.kind == ParseErrorKind.STRUCTURAL
        assert exc_info.value.position == 5


class TestParseLevel0:
    """Test cases for parse_level0."""

    @pytest.mark.parametrize("text", [
        "2019",
        "0000",
        "2019-07",
        "2019-07-09",
        "1985-04-12T23:20:30Z",
        "1985-04-12T23:20:30",
        "2019/2020-06",
    ])
    def test_level0_accepted(self, text):
        assert render(parse_level0(text)) == text

    @pytest.mark.parametrize("text,feature", [
        ("2019?", "qualifier"),
        ("201X", "unspecified digits"),
        ("2019-XX", "unspecified digits"),
        ("2019-22", "season"),
        ("Y17000", "letter-prefixed year"),
        ("2019/..", "open interval end"),
        ("/2019", "unknown interval start"),
        ("-0043", "negative year"),
        ("2019/2020~", "qualifier"),
    ])
    def test_level1_features_rejected(self, text, feature):
        with pytest.raises(EdtfParseError) as exc_info:
            parse_level0(text)
        assert exc_info.value.kind == ParseErrorKind.STRUCTURAL
        assert feature in exc_info.value.message

    def test_level0_still_reports_grammar_errors(self):
        with pytest.raises(EdtfParseError) as exc_info:
            parse_level0("2021-02-29")
        assert exc_info.value.kind == ParseErrorKind.OUT_OF_RANGE
