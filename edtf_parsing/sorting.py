"""Timeline ordering of EDTF values and the explicit interval-order check.

Sort keys compare with ``<`` like plain tuples. Each key is
``(rank, point)`` where rank 0 is the open/unknown start of time, rank 2 the
open/unknown end of time, and rank 1 a finite ``(year, month, day, second)``
point. Fields a date does not specify count as 0, so ``2010`` sorts before
``2010-01`` which sorts before ``2010-01-01``. Season codes (21-24) sit in the
month position and therefore sort after every month of their year.
"""

from __future__ import annotations

from edtf_parsing import calendar
from edtf_parsing.errors import EdtfParseError, ParseErrorKind
from edtf_parsing.model import (
    Date,
    DateTime,
    DayMasked,
    Edtf,
    Interval,
    IntervalFrom,
    IntervalTo,
    MonthDayMasked,
    MonthMasked,
    Year,
    YearMasked,
    YearMonth,
    YearMonthDay,
    YearSeason,
    YYear,
)

SortKey = tuple

NEGATIVE_INFINITY: SortKey = (0, ())
POSITIVE_INFINITY: SortKey = (2, ())


def _point(year: int, month: int = 0, day: int = 0, second: int = 0) -> SortKey:
    return (1, (year, month, day, second))


def date_sort_key(date: Date) -> SortKey:
    p = date.precision
    if isinstance(p, YearMasked):
        return _point(p.base)
    if isinstance(p, (Year, MonthMasked, MonthDayMasked)):
        return _point(p.year)
    if isinstance(p, (YearMonth, DayMasked)):
        return _point(p.year, p.month)
    if isinstance(p, YearMonthDay):
        return _point(p.year, p.month, p.day)
    if isinstance(p, YearSeason):
        return _point(p.year, int(p.season))
    raise TypeError(f"Unknown precision: {p!r}")


def datetime_sort_key(value: DateTime) -> SortKey:
    """The instant in UTC; a date-time without an offset is read as UTC."""
    d, t = value.date, value.time
    offset = t.tz.total_minutes if t.tz is not None else 0
    # A leap second lands on 00:00:00 of the following day
    seconds = (t.hour * 60 + t.minute - offset) * 60 + t.second
    ordinal = calendar.day_ordinal(d.year, d.month, d.day) + seconds // 86400
    year, month, day = calendar.date_from_ordinal(ordinal)
    return _point(year, month, day, seconds % 86400)


def sort_key_start(value: Edtf) -> SortKey:
    """Where ``value`` starts on the timeline."""
    if isinstance(value, Date):
        return date_sort_key(value)
    elif isinstance(value, DateTime):
        return datetime_sort_key(value)
    elif isinstance(value, YYear):
        return _point(value.value)
    elif isinstance(value, (Interval, IntervalFrom)):
        return date_sort_key(value.start)
    elif isinstance(value, IntervalTo):
        return NEGATIVE_INFINITY
    raise TypeError(f"Not an EDTF value: {type(value).__name__}")


def sort_key_end(value: Edtf) -> SortKey:
    """Where ``value`` ends on the timeline. Single points end where they start."""
    if isinstance(value, (Interval, IntervalTo)):
        return date_sort_key(value.end)
    elif isinstance(value, IntervalFrom):
        return POSITIVE_INFINITY
    return sort_key_start(value)


def sort_key(value: Edtf) -> tuple[SortKey, SortKey]:
    """Order by start, breaking ties by end. Use as ``sorted(values, key=sort_key)``."""
    return sort_key_start(value), sort_key_end(value)


def day_bounds(date: Date) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    """The first and last calendar day a date can refer to."""
    p = date.precision
    if isinstance(p, YearMonthDay):
        return (p.year, p.month, p.day), (p.year, p.month, p.day)
    if isinstance(p, (YearMonth, DayMasked)):
        return (p.year, p.month, 1), (p.year, p.month, calendar.days_in_month(p.year, p.month))
    if isinstance(p, YearMasked):
        span = 10 ** p.masked_digits - 1
        first, last = (p.base, p.base + span) if p.base >= 0 else (p.base - span, p.base)
        return (first, 1, 1), (last, 12, 31)
    # Year, seasons and masked months all cover their whole year
    return (p.year, 1, 1), (p.year, 12, 31)


def is_chronological(value: Edtf) -> bool:
    """False only for a closed interval whose end lies wholly before its start.

    ``2019-06/2019`` is chronological because 2019 extends past June;
    ``2020/2019`` is not. Half-open intervals and single values always are.
    """
    if not isinstance(value, Interval):
        return True
    start_first, _ = day_bounds(value.start)
    _, end_last = day_bounds(value.end)
    return start_first <= end_last


def validate_interval_order(value: Edtf) -> Edtf:
    """Reject a closed interval that ends before it starts.

    Args:
        value: Any parsed value

    Returns:
        ``value`` unchanged

    Raises:
        EdtfParseError: STRUCTURAL, positioned at the end side of the interval
    """
    if is_chronological(value):
        return value
    text = str(value)
    raise EdtfParseError(
        ParseErrorKind.STRUCTURAL,
        "interval ends before it starts",
        text,
        text.index("/") + 1,
    )
