"""Unit tests for the query layer."""

import pytest
from edtf_parsing.edtf_parser import parse
from edtf_parsing.model import Certainty, DayMasked, Season, YearSeason
from edtf_parsing.query import (
    PrecisionLevel,
    classify,
    conformance_level,
    day,
    is_masked,
    level1_features,
    month,
    precision_level,
    season,
    year,
)


class TestPrecision:
    """Test cases for precision_level and masking."""

    @pytest.mark.parametrize("text,level", [
        ("2019", PrecisionLevel.YEAR),
        ("2019-07", PrecisionLevel.MONTH),
        ("2004-XX", PrecisionLevel.MONTH),
        ("2019-07-09", PrecisionLevel.DAY),
        ("2004-07-XX", PrecisionLevel.DAY),
        ("2004-XX-XX", PrecisionLevel.DAY),
        ("2019-23", PrecisionLevel.SEASON),
    ])
    def test_month_and_day_masks_keep_their_position(self, text, level):
        assert precision_level(parse(text)) == level

    @pytest.mark.parametrize("text,level", [
        ("201X", PrecisionLevel.DECADE),
        ("-201X", PrecisionLevel.DECADE),
        ("19XX", PrecisionLevel.CENTURY),
        ("2XXX", PrecisionLevel.MILLENNIUM),
        ("XXXX", PrecisionLevel.YEAR),
        ("201X~", PrecisionLevel.DECADE),
    ])
    def test_masked_year_precision_follows_specified_digits(self, text, level):
        assert precision_level(parse(text)) == level
        assert level.is_year_scale

    @pytest.mark.parametrize("level", [PrecisionLevel.SEASON, PrecisionLevel.MONTH, PrecisionLevel.DAY])
    def test_finer_levels_not_year_scale(self, level):
        assert not level.is_year_scale

    @pytest.mark.parametrize("text,masked", [
        ("2019-07-09", False),
        ("2019-22", False),
        ("201X", True),
        ("2019-XX", True),
        ("2019-07-XX", True),
    ])
    def test_is_masked(self, text, masked):
        assert is_masked(parse(text)) is masked

    def test_classify(self):
        assert classify(parse("2004-07-XX?")) == (DayMasked(2004, 7), Certainty.UNCERTAIN)


class TestFieldExtraction:
    """Only the fields a precision specifies are available as numbers."""

    @pytest.mark.parametrize("text,expected", [
        ("2019-07-09", (2019, 7, 9, None)),
        ("2004-07-XX", (2004, 7, None, None)),
        ("2004-XX", (2004, None, None, None)),
        ("2004-XX-XX", (2004, None, None, None)),
        ("-0043", (-43, None, None, None)),
        ("201X", (None, None, None, None)),
        ("2021-22", (2021, None, None, Season.SUMMER)),
    ])
    def test_fields(self, text, expected):
        date = parse(text)
        assert (year(date), month(date), day(date), season(date)) == expected

    def test_season_is_not_a_month(self):
        date = parse("2021-22")
        assert isinstance(date.precision, YearSeason)
        assert month(date) is None


class TestConformance:
    """Test cases for level1_features and conformance_level."""

    @pytest.mark.parametrize("text", [
        "2019",
        "2019-07-09",
        "1985-04-12T23:20:30+04:30",
        "2019/2020",
        "0000",
    ])
    def test_level0(self, text):
        value = parse(text)
        assert level1_features(value) == []
        assert conformance_level(value) == 0

    @pytest.mark.parametrize("text,features", [
        ("2019?", ["qualifier"]),
        ("201X~", ["qualifier", "unspecified digits"]),
        ("-19XX", ["unspecified digits", "negative year"]),
        ("2019-21", ["season"]),
        ("Y17000", ["letter-prefixed year"]),
        ("2019/..", ["open interval end"]),
        ("/2019", ["unknown interval start"]),
        ("2019?/2020?", ["qualifier"]),
    ])
    def test_level1(self, text, features):
        value = parse(text)
        assert level1_features(value) == features
        assert conformance_level(value) == 1

    def test_unknown_type_raises(self):
        with pytest.raises(TypeError):
            level1_features("2019")
