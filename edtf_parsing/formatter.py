"""Render parsed EDTF values back to their exact textual form."""

from __future__ import annotations

from edtf_parsing.model import (
    Date,
    DateComplete,
    DatePrecision,
    DateTime,
    DayMasked,
    Fixed,
    Interval,
    IntervalFrom,
    IntervalTo,
    MonthDayMasked,
    MonthMasked,
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


def format_year(year: int) -> str:
    """Four digits, zero padded, with a leading '-' for negative years."""
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}"


def format_precision(precision: DatePrecision) -> str:
    if isinstance(precision, Year):
        return format_year(precision.year)
    elif isinstance(precision, YearMonth):
        return f"{format_year(precision.year)}-{precision.month:02d}"
    elif isinstance(precision, YearMonthDay):
        return f"{format_year(precision.year)}-{precision.month:02d}-{precision.day:02d}"
    elif isinstance(precision, YearSeason):
        return f"{format_year(precision.year)}-{int(precision.season):02d}"
    elif isinstance(precision, YearMasked):
        sign = "-" if precision.base < 0 else ""
        width = 4 - precision.masked_digits
        prefix = str(abs(precision.base) // 10 ** precision.masked_digits).zfill(width) if width else ""
        return f"{sign}{prefix}{'X' * precision.masked_digits}"
    elif isinstance(precision, MonthMasked):
        return f"{format_year(precision.year)}-XX"
    elif isinstance(precision, DayMasked):
        return f"{format_year(precision.year)}-{precision.month:02d}-XX"
    elif isinstance(precision, MonthDayMasked):
        return f"{format_year(precision.year)}-XX-XX"
    else:
        raise TypeError(f"Unknown precision: {precision!r}")


def format_date(date: Date) -> str:
    return format_precision(date.precision) + date.certainty.value


def format_date_complete(date: DateComplete) -> str:
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


def format_tz(tz: TzOffset | None) -> str:
    if tz is None:
        return ""
    if tz.utc:
        return "Z"
    sign = "+" if tz.positive else "-"
    if tz.minutes is None:
        return f"{sign}{tz.hours:02d}"
    return f"{sign}{tz.hours:02d}:{tz.minutes:02d}"


def format_time(time: Time) -> str:
    return f"{time.hour:02d}:{time.minute:02d}:{time.second:02d}{format_tz(time.tz)}"


def format_terminal(side: Fixed | Terminal) -> str:
    if isinstance(side, Fixed):
        return format_date(side.date)
    return side.value


def render(value) -> str:
    """Render any parsed value (or sub-value) as EDTF text.

    For every string ``s`` the parser accepts, ``render(parse(s)) == s``.

    Args:
        value: An Edtf, or one of its parts (DatePrecision, DateComplete, Time,
            TzOffset, Terminal, Fixed)

    Returns:
        The EDTF string

    Raises:
        TypeError: If value is not an EDTF value
    """
    if isinstance(value, Date):
        return format_date(value)
    elif isinstance(value, DateTime):
        return f"{format_date_complete(value.date)}T{format_time(value.time)}"
    elif isinstance(value, YYear):
        return f"Y{value.value}"
    elif isinstance(value, Interval):
        return f"{format_date(value.start)}/{format_date(value.end)}"
    elif isinstance(value, IntervalFrom):
        return f"{format_date(value.start)}/{format_terminal(value.end)}"
    elif isinstance(value, IntervalTo):
        return f"{format_terminal(value.start)}/{format_date(value.end)}"
    elif isinstance(value, DatePrecision):
        return format_precision(value)
    elif isinstance(value, DateComplete):
        return format_date_complete(value)
    elif isinstance(value, Time):
        return format_time(value)
    elif isinstance(value, TzOffset):
        return format_tz(value)
    elif isinstance(value, (Fixed, Terminal)):
        return format_terminal(value)
    else:
        raise TypeError(f"Cannot render {type(value).__name__} as EDTF")
