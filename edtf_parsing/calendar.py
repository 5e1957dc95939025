"""Proleptic Gregorian calendar checks.

All functions are total: they answer with a bool or a number and never raise
for out-of-range input. Callers decide whether ``False`` rejects a parse.
"""

_MONTH_DAYCOUNT = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule, extended backwards through year 0 and negative years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_valid_month(month: int) -> bool:
    return 1 <= month <= 12


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year``.

    Args:
        year: Any proleptic Gregorian year (0 and negatives allowed)
        month: Month number 1-12

    Returns:
        28, 29, 30 or 31

    Raises:
        ValueError: If month is outside 1-12
    """
    if not is_valid_month(month):
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYCOUNT[month - 1]


def is_valid_day(year: int, month: int, day: int) -> bool:
    if not is_valid_month(month):
        return False
    return 1 <= day <= days_in_month(year, month)


def day_ordinal(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date (negative before it).

    Works for any integer year, unlike ``datetime.date.toordinal``.
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = (month + 9) % 12
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def date_from_ordinal(ordinal: int) -> tuple[int, int, int]:
    """Inverse of :func:`day_ordinal`."""
    z = ordinal + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day
