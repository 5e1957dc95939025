"""Conversions between concrete EDTF values and the standard ``datetime`` types.

Only fully concrete values convert. ``datetime`` covers years 1-9999 and has
no leap seconds, so year 0 and ``23:59:60`` come back as None rather than
being shifted to a neighbouring value.
"""

from __future__ import annotations

import datetime as dt
import logging

from edtf_parsing.model import Date, DateComplete, DateTime, Time, TzOffset

logger = logging.getLogger(__name__)


def to_date(value: DateComplete | Date) -> dt.date | None:
    """The ``datetime.date`` for a complete date, or None if there is no such date."""
    if isinstance(value, Date):
        complete = value.complete()
        if complete is None:
            logger.debug(f"{value} is not a complete calendar date")
            return None
        value = complete
    if not dt.MINYEAR <= value.year <= dt.MAXYEAR:
        logger.debug(f"Year {value.year} is outside the datetime range")
        return None
    return dt.date(value.year, value.month, value.day)


def to_tzinfo(tz: TzOffset | None) -> dt.tzinfo | None:
    if tz is None:
        return None
    if tz.utc:
        return dt.timezone.utc
    return dt.timezone(dt.timedelta(minutes=tz.total_minutes))


def to_datetime(value: DateTime) -> dt.datetime | None:
    """A ``datetime.datetime``, aware if the value has an offset and naive otherwise."""
    date = to_date(value.date)
    if date is None:
        return None
    t = value.time
    if t.second == 60:
        logger.debug(f"Leap second in {value} cannot be represented")
        return None
    return dt.datetime(
        date.year, date.month, date.day,
        t.hour, t.minute, t.second,
        tzinfo=to_tzinfo(t.tz),
    )


def from_date(value: dt.date) -> DateComplete:
    return DateComplete(value.year, value.month, value.day)


def from_tzinfo(value: dt.datetime) -> TzOffset | None:
    """The offset of an aware datetime as ``Z`` or ``±HH:MM``.

    Raises:
        ValueError: If the offset has a seconds component
    """
    offset = value.utcoffset()
    if offset is None:
        return None
    if offset == dt.timedelta(0):
        return TzOffset.z()
    total_seconds = int(offset.total_seconds())
    if total_seconds % 60:
        raise ValueError(f"Offset {offset} has seconds, which EDTF cannot express")
    magnitude = abs(total_seconds) // 60
    return TzOffset(
        positive=total_seconds > 0,
        hours=magnitude // 60,
        minutes=magnitude % 60,
    )


def from_datetime(value: dt.datetime) -> DateTime:
    """A DateTime at whole-second precision; microseconds are dropped."""
    if value.microsecond:
        logger.debug(f"Dropping {value.microsecond} microseconds from {value.isoformat()}")
    return DateTime(
        from_date(value.date()),
        Time(value.hour, value.minute, value.second, from_tzinfo(value)),
    )
