"""Immutable value types produced by the EDTF parser.

Every class validates itself in ``__post_init__`` and raises ``ValueError``
when a field is out of range, so a calendar-invalid value cannot exist no
matter how it was built. The parser checks the same rules before it commits
a production so that callers get an ``EdtfParseError`` instead.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum

from edtf_parsing import calendar

MAX_FOUR_DIGIT_YEAR = 9999


class Certainty(Enum):
    """Qualifier attached to a whole date; the value is its textual marker."""
    CERTAIN = ""
    UNCERTAIN = "?"
    APPROXIMATE = "~"
    APPROXIMATE_UNCERTAIN = "%"

    @property
    def is_uncertain(self) -> bool:
        return self in (Certainty.UNCERTAIN, Certainty.APPROXIMATE_UNCERTAIN)

    @property
    def is_approximate(self) -> bool:
        return self in (Certainty.APPROXIMATE, Certainty.APPROXIMATE_UNCERTAIN)


class Season(IntEnum):
    """Season codes used in the month position."""
    SPRING = 21
    SUMMER = 22
    AUTUMN = 23
    WINTER = 24


class Terminal(Enum):
    """A non-date end of an interval."""
    OPEN = ".."     # 2019/.. or ../2019
    UNKNOWN = ""    # 2019/ or /2019


def _check_year(year: int, field_name: str = "year") -> None:
    if not isinstance(year, int) or isinstance(year, bool):
        raise ValueError(f"Field '{field_name}' must be int, got {type(year).__name__}")
    if abs(year) > MAX_FOUR_DIGIT_YEAR:
        raise ValueError(f"Field '{field_name}' must fit in four digits, got {year}")


def _check_month(month: int) -> None:
    if not isinstance(month, int) or isinstance(month, bool):
        raise ValueError(f"Field 'month' must be int, got {type(month).__name__}")
    if not calendar.is_valid_month(month):
        raise ValueError(f"Field 'month' must be between 1 and 12, got {month}")


# ---------------------------------------------------------------------------
# Precision variants
# ---------------------------------------------------------------------------

class DatePrecision:
    """Base class of the closed set of precision variants a Date can hold."""

    __slots__ = ()


@dataclass(frozen=True)
class Year(DatePrecision):
    """``2019``"""
    year: int

    def __post_init__(self) -> None:
        _check_year(self.year)


@dataclass(frozen=True)
class YearMonth(DatePrecision):
    """``2019-07``"""
    year: int
    month: int

    def __post_init__(self) -> None:
        _check_year(self.year)
        _check_month(self.month)


@dataclass(frozen=True)
class YearMonthDay(DatePrecision):
    """``2019-07-09``"""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_year(self.year)
        _check_month(self.month)
        if not isinstance(self.day, int) or isinstance(self.day, bool):
            raise ValueError(f"Field 'day' must be int, got {type(self.day).__name__}")
        if not calendar.is_valid_day(self.year, self.month, self.day):
            raise ValueError(
                f"Day {self.day} does not exist in {self.year:04d}-{self.month:02d}"
            )


@dataclass(frozen=True)
class YearSeason(DatePrecision):
    """``2019-22`` (summer 2019)"""
    year: int
    season: Season

    def __post_init__(self) -> None:
        _check_year(self.year)
        if not isinstance(self.season, Season):
            try:
                object.__setattr__(self, "season", Season(self.season))
            except ValueError:
                raise ValueError(f"Field 'season' must be 21-24, got {self.season}") from None


@dataclass(frozen=True)
class YearMasked(DatePrecision):
    """``201X``, ``19XX``: the rightmost ``masked_digits`` of the year are unspecified.

    ``base`` is the year with the unspecified digits set to zero, so ``201X``
    has base 2010 and ``-19XX`` has base -1900.
    """
    base: int
    masked_digits: int

    def __post_init__(self) -> None:
        _check_year(self.base, "base")
        if self.masked_digits not in (1, 2, 3, 4):
            raise ValueError(f"Field 'masked_digits' must be 1-4, got {self.masked_digits}")
        if self.base % (10 ** self.masked_digits) != 0:
            raise ValueError(
                f"Base {self.base} has non-zero digits in its {self.masked_digits} masked positions"
            )


@dataclass(frozen=True)
class MonthMasked(DatePrecision):
    """``2019-XX``"""
    year: int

    def __post_init__(self) -> None:
        _check_year(self.year)


@dataclass(frozen=True)
class DayMasked(DatePrecision):
    """``2019-07-XX``"""
    year: int
    month: int

    def __post_init__(self) -> None:
        _check_year(self.year)
        _check_month(self.month)


@dataclass(frozen=True)
class MonthDayMasked(DatePrecision):
    """``2019-XX-XX``"""
    year: int

    def __post_init__(self) -> None:
        _check_year(self.year)


# ---------------------------------------------------------------------------
# Top-level values
# ---------------------------------------------------------------------------

class Edtf:
    """Base class of every top-level parse result.

    Subclasses: Date, DateTime, YYear, Interval, IntervalFrom, IntervalTo.
    """

    __slots__ = ()

    def as_date(self) -> Date | None:
        return self if isinstance(self, Date) else None

    def as_datetime(self) -> DateTime | None:
        return self if isinstance(self, DateTime) else None

    def as_yyear(self) -> YYear | None:
        return self if isinstance(self, YYear) else None

    def as_interval(self) -> tuple[Fixed | Terminal, Fixed | Terminal] | None:
        """Both ends of an interval as ``Fixed`` dates or ``Terminal`` markers.

        Returns None for anything that is not an interval. At least one side
        of the returned pair is always ``Fixed``.
        """
        if isinstance(self, Interval):
            return Fixed(self.start), Fixed(self.end)
        if isinstance(self, IntervalFrom):
            return Fixed(self.start), self.end
        if isinstance(self, IntervalTo):
            return self.start, Fixed(self.end)
        return None

    def __str__(self) -> str:
        # Lazy import to avoid circular dependency
        from edtf_parsing.formatter import render
        return render(self)


@dataclass(frozen=True)
class Date(Edtf):
    """A calendar date of some precision plus a whole-date qualifier."""
    precision: DatePrecision
    certainty: Certainty = Certainty.CERTAIN

    def __post_init__(self) -> None:
        if not isinstance(self.precision, DatePrecision):
            raise ValueError(
                f"Field 'precision' must be a DatePrecision, got {type(self.precision).__name__}"
            )
        if not isinstance(self.certainty, Certainty):
            raise ValueError(
                f"Field 'certainty' must be a Certainty, got {type(self.certainty).__name__}"
            )

    @classmethod
    def from_year(cls, year: int) -> Date:
        return cls(Year(year))

    @classmethod
    def from_ym(cls, year: int, month: int) -> Date:
        return cls(YearMonth(year, month))

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> Date:
        return cls(YearMonthDay(year, month, day))

    @classmethod
    def from_season(cls, year: int, season: Season | int) -> Date:
        return cls(YearSeason(year, season))

    def with_certainty(self, certainty: Certainty) -> Date:
        return replace(self, certainty=certainty)

    def complete(self) -> DateComplete | None:
        """The fully specified calendar day, if this date names one."""
        if isinstance(self.precision, YearMonthDay) and self.precision.year >= 0:
            p = self.precision
            return DateComplete(p.year, p.month, p.day)
        return None


@dataclass(frozen=True)
class YYear(Edtf):
    """A letter-prefixed year outside four digits: ``Y170000002``, ``Y-17000``."""
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError(f"Field 'value' must be int, got {type(self.value).__name__}")
        if abs(self.value) <= MAX_FOUR_DIGIT_YEAR:
            raise ValueError(f"YYear must have more than four digits, got {self.value}")

    @classmethod
    def or_date(cls, value: int) -> YYear | Date:
        """A YYear, or a year-precision Date when ``value`` fits in four digits."""
        if abs(value) <= MAX_FOUR_DIGIT_YEAR:
            return Date.from_year(value)
        return cls(value)


@dataclass(frozen=True)
class Fixed:
    """A concrete date at one end of an interval."""
    date: Date

    def __post_init__(self) -> None:
        if not isinstance(self.date, Date):
            raise ValueError(f"Field 'date' must be Date, got {type(self.date).__name__}")


@dataclass(frozen=True)
class DateComplete:
    """A fully concrete four-digit ``YYYY-MM-DD`` date, as used in date-times."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        # Reuse the day-precision checks
        YearMonthDay(self.year, self.month, self.day)
        if self.year < 0:
            raise ValueError(f"Field 'year' must be 0-9999 in a complete date, got {self.year}")

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> DateComplete:
        return cls(year, month, day)

    def to_edtf_date(self) -> Date:
        return Date.from_ymd(self.year, self.month, self.day)


@dataclass(frozen=True)
class TzOffset:
    """Time zone designator of a date-time.

    ``utc=True`` is the ``Z`` form. Otherwise ``positive``/``hours`` hold the
    sign and hour of ``+HH``; ``minutes`` is None for the ``±HH`` form and an
    int for ``±HH:MM``.
    """
    utc: bool = False
    positive: bool = True
    hours: int = 0
    minutes: int | None = None

    def __post_init__(self) -> None:
        if self.utc:
            if self.hours or self.minutes is not None or not self.positive:
                raise ValueError("A Z offset carries no hours or minutes")
            return
        if not 0 <= self.hours <= 23:
            raise ValueError(f"Offset hours must be 00-23, got {self.hours}")
        if self.minutes is not None and not 0 <= self.minutes <= 59:
            raise ValueError(f"Offset minutes must be 00-59, got {self.minutes}")

    @classmethod
    def z(cls) -> TzOffset:
        return cls(utc=True)

    @property
    def total_minutes(self) -> int:
        """Signed offset east of UTC in minutes."""
        if self.utc:
            return 0
        magnitude = self.hours * 60 + (self.minutes or 0)
        return magnitude if self.positive else -magnitude


@dataclass(frozen=True)
class Time:
    """``HH:MM:SS`` with an optional offset."""
    hour: int
    minute: int
    second: int
    tz: TzOffset | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"Hour must be 00-23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"Minute must be 00-59, got {self.minute}")
        if not 0 <= self.second <= 60:
            raise ValueError(f"Second must be 00-60, got {self.second}")
        # Leap seconds are only ever inserted at 23:59:60
        if self.second == 60 and (self.hour, self.minute) != (23, 59):
            raise ValueError("A leap second is only valid at 23:59:60")
        if self.tz is not None and not isinstance(self.tz, TzOffset):
            raise ValueError(f"Field 'tz' must be TzOffset or None, got {type(self.tz).__name__}")


@dataclass(frozen=True)
class DateTime(Edtf):
    """``2019-07-15T01:56:00Z``"""
    date: DateComplete
    time: Time

    def __post_init__(self) -> None:
        if not isinstance(self.date, DateComplete):
            raise ValueError(f"Field 'date' must be DateComplete, got {type(self.date).__name__}")
        if not isinstance(self.time, Time):
            raise ValueError(f"Field 'time' must be Time, got {type(self.time).__name__}")


@dataclass(frozen=True)
class Interval(Edtf):
    """``2018/2019-07``. No ordering between the ends is implied."""
    start: Date
    end: Date

    def __post_init__(self) -> None:
        for field_name in ("start", "end"):
            value = getattr(self, field_name)
            if not isinstance(value, Date):
                raise ValueError(f"Field '{field_name}' must be Date, got {type(value).__name__}")


@dataclass(frozen=True)
class IntervalFrom(Edtf):
    """``2019/..`` or ``2019/``"""
    start: Date
    end: Terminal

    def __post_init__(self) -> None:
        if not isinstance(self.start, Date):
            raise ValueError(f"Field 'start' must be Date, got {type(self.start).__name__}")
        if not isinstance(self.end, Terminal):
            raise ValueError(f"Field 'end' must be Terminal, got {type(self.end).__name__}")


@dataclass(frozen=True)
class IntervalTo(Edtf):
    """``../2019`` or ``/2019``"""
    start: Terminal
    end: Date

    def __post_init__(self) -> None:
        if not isinstance(self.start, Terminal):
            raise ValueError(f"Field 'start' must be Terminal, got {type(self.start).__name__}")
        if not isinstance(self.end, Date):
            raise ValueError(f"Field 'end' must be Date, got {type(self.end).__name__}")

