"""EDTF parsing module for Extended Date/Time Format (Level 0 and Level 1) strings.

This module parses EDTF text into immutable values, validates them against
the proleptic Gregorian calendar, and renders them back to exactly the text
they were parsed from. Dates of year, month, season or day precision, masked
digits, uncertainty qualifiers, date-times, letter-prefixed years and
closed or open-ended intervals are supported.
"""

from edtf_parsing.config import ParserConfig, load_parser_config
from edtf_parsing.edtf_parser import EdtfParser, parse, parse_date, parse_level0, render
from edtf_parsing.errors import EdtfParseError, ParseErrorKind
from edtf_parsing.model import (
    Certainty,
    Date,
    DateComplete,
    DatePrecision,
    DateTime,
    DayMasked,
    Edtf,
    Fixed,
    Interval,
    IntervalFrom,
    IntervalTo,
    MonthDayMasked,
    MonthMasked,
    Season,
    Terminal,
    Time,
    TzOffset,
    Year,
    YearMasked,
    YearMonth,
    YearMonthDay,
    YearSeason,
    YYear,
)
from edtf_parsing.iteration import iter_days, iter_months, iter_smallest, iter_years, smallest_step
from edtf_parsing.query import PrecisionLevel, conformance_level, precision_level
from edtf_parsing.sorting import is_chronological, sort_key, validate_interval_order

__all__ = [
    "Certainty",
    "Date",
    "DateComplete",
    "DatePrecision",
    "DateTime",
    "DayMasked",
    "Edtf",
    "EdtfParseError",
    "EdtfParser",
    "Fixed",
    "Interval",
    "IntervalFrom",
    "IntervalTo",
    "MonthDayMasked",
    "MonthMasked",
    "ParseErrorKind",
    "ParserConfig",
    "PrecisionLevel",
    "Season",
    "Terminal",
    "Time",
    "TzOffset",
    "Year",
    "YearMasked",
    "YearMonth",
    "YearMonthDay",
    "YearSeason",
    "YYear",
    "conformance_level",
    "is_chronological",
    "iter_days",
    "iter_months",
    "iter_smallest",
    "iter_years",
    "load_parser_config",
    "parse",
    "parse_date",
    "parse_level0",
    "precision_level",
    "render",
    "smallest_step",
    "sort_key",
    "validate_interval_order",
]
