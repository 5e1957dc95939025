"""Stepping through the days, months or years an EDTF value covers.

Every iterator is lazy. Year-scale steps come back as ``range`` objects, so
they can also be reversed and measured. Month steps yield ``Date`` values of
month precision and day steps yield ``Date`` values of day precision. Steps
are inclusive: every step that overlaps the value is produced, so
``1905/1939`` covers the decades 1900 through 1930.

An open or unknown interval end runs to the edge of the four-digit calendar,
-9999-01-01 or 9999-12-31. Values that cannot be stepped at the requested
size give ``None`` rather than an empty iterator: a side without a month
cannot be walked month by month, and date-times and letter-prefixed years
are not walked at all.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Tuple

from edtf_parsing import calendar
from edtf_parsing.model import (
    MAX_FOUR_DIGIT_YEAR,
    Date,
    DayMasked,
    Edtf,
    Interval,
    IntervalFrom,
    IntervalTo,
    MonthDayMasked,
    MonthMasked,
    YearMonth,
    YearMonthDay,
    YearSeason,
)
from edtf_parsing.query import PrecisionLevel, precision_level
from edtf_parsing.sorting import day_bounds

logger = logging.getLogger(__name__)

Day = Tuple[int, int, int]

FIRST_DAY: Day = (-MAX_FOUR_DIGIT_YEAR, 1, 1)
LAST_DAY: Day = (MAX_FOUR_DIGIT_YEAR, 12, 31)

# Finest first
_STEPS = [
    PrecisionLevel.DAY,
    PrecisionLevel.MONTH,
    PrecisionLevel.YEAR,
    PrecisionLevel.DECADE,
    PrecisionLevel.CENTURY,
    PrecisionLevel.MILLENNIUM,
]

_YEAR_STEP_SIZES = {
    PrecisionLevel.YEAR: 1,
    PrecisionLevel.DECADE: 10,
    PrecisionLevel.CENTURY: 100,
    PrecisionLevel.MILLENNIUM: 1000,
}

_DAY_CAPABLE = (YearMonthDay, DayMasked, MonthDayMasked)
_MONTH_CAPABLE = _DAY_CAPABLE + (YearMonth, MonthMasked)


def _stepped_years(first: int, last: int, size: int) -> range:
    # Floor to the step boundary, so -1905 belongs to the -2000 century
    return range(first - first % size, last - last % size + 1, size)


def year_range(first: int, last: int = MAX_FOUR_DIGIT_YEAR) -> range:
    return _stepped_years(first, last, 1)


def decade_range(first: int, last: int = MAX_FOUR_DIGIT_YEAR) -> range:
    """Decades touched by the years ``first..last``, like ``1905..1939 => 1900, 1910, 1920, 1930``."""
    return _stepped_years(first, last, 10)


def century_range(first: int, last: int = MAX_FOUR_DIGIT_YEAR) -> range:
    """Centuries touched by the years ``first..last``, like ``1905..2005 => 1900, 2000``."""
    return _stepped_years(first, last, 100)


def month_range(first: Tuple[int, int], last: Tuple[int, int] = LAST_DAY[:2]) -> Iterator[Date]:
    """Every (year, month) from ``first`` to ``last`` inclusive, as month-precision dates."""
    year, month = first
    while (year, month) <= last:
        yield Date.from_ym(year, month)
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)


def day_range(first: Day, last: Day = LAST_DAY) -> Iterator[Date]:
    """Every calendar day from ``first`` to ``last`` inclusive.

    Args:
        first: ``(year, month, day)`` of the first day
        last: ``(year, month, day)`` of the last day; defaults to the end of the calendar

    Yields:
        Day-precision ``Date`` values, crossing month ends and leap days in order
    """
    for ordinal in range(calendar.day_ordinal(*first), calendar.day_ordinal(*last) + 1):
        yield Date.from_ymd(*calendar.date_from_ordinal(ordinal))


def _supports(date: Date, level: PrecisionLevel) -> bool:
    if level == PrecisionLevel.DAY:
        return isinstance(date.precision, _DAY_CAPABLE)
    if level == PrecisionLevel.MONTH:
        return isinstance(date.precision, _MONTH_CAPABLE)
    return level in _YEAR_STEP_SIZES


def _ends(value: Edtf) -> Optional[Tuple[Optional[Date], Optional[Date]]]:
    """The two sides of ``value``; ``None`` stands for an open or unknown end."""
    if isinstance(value, Date):
        return value, value
    elif isinstance(value, Interval):
        return value.start, value.end
    elif isinstance(value, IntervalFrom):
        return value.start, None
    elif isinstance(value, IntervalTo):
        return None, value.end
    return None


def iter_at(value: Edtf, level: PrecisionLevel) -> Optional[Iterable]:
    """
    Step through ``value`` at a fixed size.

    Args:
        value: A date or an interval
        level: DAY, MONTH, YEAR, DECADE, CENTURY or MILLENNIUM

    Returns:
        A lazy iterable of the steps, or None if a side of ``value`` is not
        precise enough for ``level`` (or ``value`` cannot be stepped at all)
    """
    ends = _ends(value)
    if ends is None or level not in _STEPS:
        logger.debug(f"Cannot step {value!r} by {level.value}")
        return None
    start, end = ends
    if not all(_supports(side, level) for side in ends if side is not None):
        logger.debug(f"'{value}' is not precise enough to step by {level.value}")
        return None

    first = day_bounds(start)[0] if start is not None else FIRST_DAY
    last = day_bounds(end)[1] if end is not None else LAST_DAY
    if level == PrecisionLevel.DAY:
        return day_range(first, last)
    if level == PrecisionLevel.MONTH:
        return month_range(first[:2], last[:2])
    return _stepped_years(first[0], last[0], _YEAR_STEP_SIZES[level])


def _step_level(date: Date) -> PrecisionLevel:
    # Seasons do not line up with months in both hemispheres
    if isinstance(date.precision, YearSeason):
        return PrecisionLevel.YEAR
    return precision_level(date)


def smallest_step(value: Edtf) -> Optional[PrecisionLevel]:
    """The finest step every side of ``value`` supports, e.g. DECADE for ``201X/2030``."""
    ends = _ends(value)
    if ends is None:
        return None
    levels = [_step_level(side) for side in ends if side is not None]
    return max(levels, key=_STEPS.index)


def iter_smallest(value: Edtf) -> Optional[Iterable]:
    level = smallest_step(value)
    if level is None:
        return None
    return iter_at(value, level)


def iter_days(value: Edtf) -> Optional[Iterator[Date]]:
    """Every day ``value`` can refer to; ``2020-08-XX`` gives all 31 days of August."""
    return iter_at(value, PrecisionLevel.DAY)


def iter_months(value: Edtf) -> Optional[Iterator[Date]]:
    """Every month ``value`` touches.

    ``2019-11-30/2020-01`` gives 2019-11, 2019-12 and 2020-01. ``2020-11/2021``
    gives None because 2021 does not say which month it ends in.
    """
    return iter_at(value, PrecisionLevel.MONTH)


def iter_years(value: Edtf) -> Optional[range]:
    return iter_at(value, PrecisionLevel.YEAR)


def iter_decades(value: Edtf) -> Optional[range]:
    return iter_at(value, PrecisionLevel.DECADE)


def iter_centuries(value: Edtf) -> Optional[range]:
    return iter_at(value, PrecisionLevel.CENTURY)
