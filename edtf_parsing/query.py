"""Read-only derived views over parsed EDTF values."""

from __future__ import annotations

from enum import Enum

from edtf_parsing.model import (
    Certainty,
    Date,
    DatePrecision,
    DateTime,
    DayMasked,
    Edtf,
    Interval,
    IntervalFrom,
    IntervalTo,
    MonthDayMasked,
    MonthMasked,
    Season,
    Year,
    YearMasked,
    YearMonth,
    YearMonthDay,
    YearSeason,
    YYear,
)


class PrecisionLevel(Enum):
    """The granularity a date specifies.

    A masked month or day keeps the precision of its position, so
    ``2004-07-XX`` is DAY precision. A masked year is as precise as its
    specified digits: ``201X`` is a DECADE, ``19XX`` a CENTURY and ``2XXX``
    a MILLENNIUM. ``XXXX`` pins down nothing beyond "some year" and stays YEAR.
    """
    MILLENNIUM = "millennium"
    CENTURY = "century"
    DECADE = "decade"
    YEAR = "year"
    SEASON = "season"
    MONTH = "month"
    DAY = "day"

    @property
    def is_year_scale(self) -> bool:
        """True for YEAR and the coarser levels a masked year can have."""
        return self in (
            PrecisionLevel.MILLENNIUM,
            PrecisionLevel.CENTURY,
            PrecisionLevel.DECADE,
            PrecisionLevel.YEAR,
        )


_LEVELS = {
    Year: PrecisionLevel.YEAR,
    YearSeason: PrecisionLevel.SEASON,
    YearMonth: PrecisionLevel.MONTH,
    MonthMasked: PrecisionLevel.MONTH,
    YearMonthDay: PrecisionLevel.DAY,
    DayMasked: PrecisionLevel.DAY,
    MonthDayMasked: PrecisionLevel.DAY,
}

# Keyed by the number of trailing X in a masked year
_MASKED_YEAR_LEVELS = {
    1: PrecisionLevel.DECADE,
    2: PrecisionLevel.CENTURY,
    3: PrecisionLevel.MILLENNIUM,
    4: PrecisionLevel.YEAR,
}

_MASKED = (YearMasked, MonthMasked, DayMasked, MonthDayMasked)


def precision_level(date: Date) -> PrecisionLevel:
    if isinstance(date.precision, YearMasked):
        return _MASKED_YEAR_LEVELS[date.precision.masked_digits]
    return _LEVELS[type(date.precision)]


def classify(date: Date) -> tuple[DatePrecision, Certainty]:
    """The precision variant and the certainty of a date, for matching on both at once."""
    return date.precision, date.certainty


def is_masked(date: Date) -> bool:
    """True if any digit of the date is unspecified (``X``)."""
    return isinstance(date.precision, _MASKED)


def year(date: Date) -> int | None:
    """The year, unless some of its digits are unspecified."""
    if isinstance(date.precision, YearMasked):
        return None
    return date.precision.year


def month(date: Date) -> int | None:
    """The month number 1-12, if the date names a concrete month."""
    if isinstance(date.precision, (YearMonth, YearMonthDay, DayMasked)):
        return date.precision.month
    return None


def day(date: Date) -> int | None:
    if isinstance(date.precision, YearMonthDay):
        return date.precision.day
    return None


def season(date: Date) -> Season | None:
    if isinstance(date.precision, YearSeason):
        return date.precision.season
    return None


def _date_features(date: Date) -> list[str]:
    features = []
    if date.certainty != Certainty.CERTAIN:
        features.append("qualifier")
    if is_masked(date):
        features.append("unspecified digits")
    if isinstance(date.precision, YearSeason):
        features.append("season")
    if (year(date) or 0) < 0 or (isinstance(date.precision, YearMasked) and date.precision.base < 0):
        features.append("negative year")
    return features


def level1_features(value: Edtf) -> list[str]:
    """Names of the Level 1 features used by ``value``; empty for Level 0 values."""
    features: list[str] = []
    if isinstance(value, Date):
        features.extend(_date_features(value))
    elif isinstance(value, YYear):
        features.append("letter-prefixed year")
    elif isinstance(value, Interval):
        features.extend(_date_features(value.start))
        features.extend(_date_features(value.end))
    elif isinstance(value, IntervalFrom):
        features.extend(_date_features(value.start))
        features.append(f"{value.end.name.lower()} interval end")
    elif isinstance(value, IntervalTo):
        features.append(f"{value.start.name.lower()} interval start")
        features.extend(_date_features(value.end))
    elif not isinstance(value, DateTime):
        raise TypeError(f"Not an EDTF value: {type(value).__name__}")
    # Preserve first-seen order without duplicates
    return list(dict.fromkeys(features))


def conformance_level(value: Edtf) -> int:
    """0 if ``value`` only uses Level 0 features, otherwise 1."""
    return 1 if level1_features(value) else 0
